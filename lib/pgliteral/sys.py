##
# .sys
##
"""
pgliteral system functions.

Overridable Functions
---------------------

 errformat
  Information that makes up an exception's displayed "body".
  Effectively, the implementation of `pgliteral.exceptions.Error.__str__`

 msghook
  Display a message.
"""
import sys
import os
import traceback
from .python.element import format_element
from .python.string import indent

def point_at(literal, offset):
	"""
	Render the literal on one line followed by a line with a caret under the
	byte at `offset`. The caret line is aligned for a ``"  LITERAL: "`` lead.
	"""
	if literal.__class__ is not str:
		literal = bytes(literal).decode('latin-1')
	# repr() expands control characters; measure the expanded prefix.
	lead = len(repr(literal[:offset])) - 2
	return repr(literal)[1:-1] + os.linesep + ' ' * (len('  LITERAL: ') + lead) + '^'

def default_errformat(val):
	"""
	Built-in error formatter. DON'T TOUCH!

	When the error's details carry the parsed ``literal`` and the ``offset``
	of the failure, the literal is displayed with a caret under the offending
	byte.
	"""
	it = val._e_metas()
	if val.creator is not None:
		# Protect against element traceback failures.
		try:
			after = os.linesep + format_element(val.creator)
		except Exception:
			after = 'Element Traceback of %r caused exception:%s' %(
				type(val.creator).__name__,
				os.linesep
			)
			after += indent(traceback.format_exc())
			after = os.linesep + indent(after).rstrip()
	else:
		after = ''

	details = val.details or {}
	if details.get('literal') is not None and details.get('offset') is not None:
		pointer = os.linesep + '  LITERAL: ' + point_at(details['literal'], details['offset'])
	else:
		pointer = ''

	return next(it)[1] \
		+ os.linesep + '  ' \
		+ (os.linesep + '  ').join(
			k + ': ' + v for k, v in it
		) + pointer + after

def default_msghook(msg, format_message = format_element):
	"""
	Built-in message hook. DON'T TOUCH!
	"""
	if sys.stderr and not sys.stderr.closed:
		try:
			sys.stderr.write(format_message(msg) + os.linesep)
		except Exception:
			try:
				sys.excepthook(*sys.exc_info())
			except Exception:
				# gasp.
				pass

def errformat(*args, **kw):
	"""
	Raised Error formatter pointing to default_errformat.

	Override if you like. All pgliteral.exceptions.Error's are formatted using
	this function.
	"""
	return default_errformat(*args, **kw)

def msghook(*args, **kw):
	"""
	Message hook pointing to default_msghook.

	Override if you like. Messages emitted without a trapping creator come
	here to be printed to stderr.
	"""
	return default_msghook(*args, **kw)

def reset_errformat(with_func = errformat):
	'restore the original errformat function'
	global errformat
	errformat = with_func

def reset_msghook(with_func = msghook):
	'restore the original msghook function'
	global msghook
	msghook = with_func
