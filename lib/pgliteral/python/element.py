##
# .python.element
##
import os
from abc import ABCMeta, abstractmethod
from .string import indent

class RecursiveFactor(Exception):
	'Raised when a factor is ultimately composed of itself'
	pass

class Element(object, metaclass = ABCMeta):
	"""
	The purpose of an element is to provide a general mechanism for specifying
	the factors that composed an object. Factors are designated using an
	ordered set of strings referencing those significant attributes on the
	object.

	Errors raised while decoding a literal are given the container that asked
	for the decoding as their ``creator``. When the error is formatted, the
	container's metadata is displayed after the message::

		Traceback:
		 ...
		pgliteral.exceptions.NullValueNotAllowedError: parsing array element index 1: cannot convert NULL to str
		  CODE: 22004
		  LOCATION: CLIENT
		  INDEX: 1
		ARRAY: StringArray
		  DELIMITER: ','
		  ENCODING: utf-8
	"""

	@property
	@abstractmethod
	def _e_label(self) -> str:
		"""
		Single-word string describing the kind of element.

		Usually, this is set directly on the class itself.
		"""

	@property
	@abstractmethod
	def _e_factors(self) -> ():
		"""
		The attribute names of the objects that contributed to the creation of
		this object.

		The ordering is significant. The first factor is the prime factor.
		"""

	@abstractmethod
	def _e_metas(self) -> [(str, object)]:
		"""
		Return an iterable to key-value pairs that provide useful descriptive
		information about an attribute.

		If there are no metas, the str() of the object will be used to represent
		it.
		"""

def prime_factor(obj):
	'get the primary factor on the `obj`, returns None if none.'
	f = getattr(obj, '_e_factors', None)
	if f:
		return f[0], getattr(obj, f[0], None)

def _field(key, sval, width = 70):
	# long or multi-line values start on their own line
	if len(sval) > width or os.linesep in sval:
		return key + ':' + os.linesep + indent(sval).rstrip()
	return key + ': ' + sval

def format_element(obj, coverage = ()):
	"""
	Format the given element with its metadata and factors into a readable
	string. The element's label leads; metas with a `None` key are placed on
	the label's line; the prime factor follows the element, unindented.
	"""
	if obj in coverage:
		raise RecursiveFactor(coverage)
	coverage = coverage + (obj,)

	if not isinstance(obj, Element):
		return 'None' if obj is None else str(obj)

	inline = []
	lines = []
	for key, val in obj._e_metas():
		sval = 'None' if val is None else str(val).rstrip()
		if key is None:
			inline.append(sval)
		else:
			lines.append(_field(key, sval))
	for att in obj._e_factors[1:]:
		lines.append(_field(att, format_element(getattr(obj, att), coverage = coverage)))

	s = obj._e_label + ':'
	if inline:
		s += ' ' + ' '.join(inline)
	if lines:
		s += os.linesep + indent(os.linesep.join(lines)).rstrip()

	pf = prime_factor(obj)
	if pf is not None:
		factor_name, prime = pf
		factor = format_element(prime, coverage = coverage)
		if getattr(prime, '_e_label', None) is not None:
			# the label identifies the factor
			s += os.linesep + factor
		else:
			s += os.linesep + _field(factor_name, factor)
	return s
