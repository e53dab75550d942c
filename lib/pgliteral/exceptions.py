##
# .exceptions - Exception hierarchy for literal decoding and encoding.
##
"""
Exceptions and warnings raised by the ARRAY and bytea codecs, with associated
state codes.

Codes follow PostgreSQL's SQL state codes where the server reports the same
condition for the same input (``22P02`` for a malformed ARRAY literal,
``22004`` for a NULL where none is allowed). Conditions that only exist on
the client side use codes starting with ``--``.

The primary entry points of this module is the `ErrorLookup` function and the
`WarningLookup` function. Given a state code, they give back the most
appropriate Error or Warning subclass.

This module is executable via -m: python -m pgliteral.exceptions.
It provides a convenient way to look up the exception object mapped to by the
given error code::

	$ python -m pgliteral.exceptions 22P02
	pgliteral.exceptions.TextRepresentationError [22P02]

If the exact error code is not found, it will try to find the error class's
exception(The first two characters of the error code make up the class
identity)::

	$ python -m pgliteral.exceptions 22999
	pgliteral.exceptions.DataError [22000]

If that fails, it will return `pgliteral.exceptions.Error`
"""
import sys
import os
from functools import partial
from operator import attrgetter
from .message import Message
from . import sys as pg_sys

PythonWarning = Warning

class Exception(Exception):
	'Base pgliteral exception class'
	pass

class Warning(Message, PythonWarning):
	code = '01000'
	_e_label = property(attrgetter('__class__.__name__'))

	def __str__(self):
		return self.message

class DriverWarning(Warning):
	code = '01-00'
class TypeConversionWarning(DriverWarning):
	'Report a potential issue with a conversion.'
	code = '01-TP'

class Error(Message, Exception):
	'A codec Error'
	_e_label = 'ERROR'
	code = ''

	def __str__(self):
		'Call .sys.errformat(self)'
		return pg_sys.errformat(self)

class DriverError(Error):
	"Errors originating in the client's handling of a value."
	code = '--000'

class TypeIOError(DriverError):
	"""
	Failed to pack or unpack a value.
	"""
	code = '--TIO'
class ConversionError(TypeIOError):
	"""
	The given object cannot be handed to the decoder at all; for instance, an
	`int` given where a literal was expected.
	"""
	code = '--CNV'
class ArrayShapeError(TypeIOError):
	"""
	The literal described an ARRAY with more dimensions than the target
	container supports.
	"""
	code = '--ASH'

class DataError(Error):
	code = '22000'

class ArrayElementError(DataError):
	code = '2202E'
class ArrayDimensionError(ArrayElementError):
	"""
	The sub-arrays of a multidimensional ARRAY literal do not have matching
	lengths.
	"""

class NullValueNotAllowedError(DataError):
	code = '22004'

class TextRepresentationError(DataError):
	code = '22P02'
class ArrayLiteralError(TextRepresentationError):
	"""
	The ARRAY literal is malformed. The `details` carry the ``offset`` at which
	the scanner was positioned and, when there is one, the offending ``byte``.
	"""
class BinaryRepresentationError(DataError):
	"""
	The bytea literal is malformed: invalid hex, invalid octal digits, or a
	truncated escape sequence.
	"""
	code = '22P03'

# Setup mapping to provide code based exception lookup.
code_to_error = {}
code_to_warning = {}
def map_errors_and_warnings(
	objs : "A iterable of `Warning`s and `Error`'s",
	error_container : "apply the code to error association to this object" = code_to_error,
	warning_container : "apply the code to warning association to this object" = code_to_warning,
):
	"""
	Construct the code-to-error and code-to-warning associations.
	"""
	for obj in objs:
		if not isinstance(obj, type):
			# It's not object of interest.
			continue
		code = getattr(obj, 'code', None)
		if code is None:
			continue

		if issubclass(obj, Error):
			container = error_container
		elif issubclass(obj, Warning):
			container = warning_container
		else:
			continue

		cur_obj = container.get(code)
		if cur_obj is None or issubclass(cur_obj, obj):
			# There is no object yet, or the object at the code
			# is not the most general class.
			# The latter condition comes into play when
			# sub-classes share the code of their parent. (See ArrayLiteralError)
			container[code] = obj

def code_lookup(
	default : "The object to return when no code or class is found",
	container : "where to look for the object associated with the code",
	code : "the code to find the exception for"
):
	obj = container.get(code)
	if obj is None:
		obj = container.get(code[:2] + "000", default)
	return obj

map_errors_and_warnings(sys.modules[__name__].__dict__.values())
ErrorLookup = partial(code_lookup, Error, code_to_error)
WarningLookup = partial(code_lookup, Warning, code_to_warning)

if __name__ == '__main__':
	for x in sys.argv[1:]:
		if x.startswith('01'):
			e = WarningLookup(x)
		else:
			e = ErrorLookup(x)
		sys.stdout.write('pgliteral.exceptions.%s [%s]%s%s' %(
				e.__name__, e.code, os.linesep, (
					e.__doc__ is not None and os.linesep.join([
						'  ' + x for x in (e.__doc__).split('\n')
					]) + os.linesep or ''
				)
			)
		)
