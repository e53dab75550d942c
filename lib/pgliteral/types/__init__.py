##
# types. - Package for I/O and PostgreSQL specific types.
##
"""
ARRAY containers.

Each container holds a flat list of Python objects of one type and converts
between that list and the one-dimensional ARRAY literal of the corresponding
PostgreSQL type:

	>>> a = StringArray()
	>>> a.scan(b'{foo,"bar baz"}')
	pgliteral.types.StringArray(['foo', 'bar baz'])
	>>> a.value()
	'{"foo","bar baz"}'

Multidimensional ARRAY literals are recognized so that they can be rejected;
the containers never hold nested lists.
"""
from ..python.element import Element
from ..exceptions import \
	Error, \
	ConversionError, \
	NullValueNotAllowedError, \
	TextRepresentationError
from .io import lib
from .io import builtins

class TypedArray(Element):
	"""
	Base class of the ARRAY containers.

	Subclasses define `element_type`, the Python type of the elements, and
	the `element_unpack` and `element_pack` methods that convert a single
	element from and to its text form.

	The `elements` attribute is the list of elements, or `None` when the
	container has not been given a value or was given SQL NULL.

	Containers are configured with class attributes that can be overridden
	per instance with keyword arguments:

	 ``delimiter``
	  The string separating elements in the literal. ``','`` for all the
	  types here; PostgreSQL's ``box`` type is the lone exception in the
	  standard catalog.

	 ``encoding``
	  The encoding used to convert between `str` and `bytes`.

	 ``nullable``
	  Whether NULL elements are permitted. When `False`, scanning a literal
	  with a ``NULL`` element raises `NullValueNotAllowedError`; when `True`,
	  NULL elements become `None`.
	"""
	_e_label = 'ARRAY'
	_e_factors = ()

	element_type = None
	delimiter = ','
	encoding = 'utf-8'
	nullable = False

	def _e_metas(self):
		yield (None, type(self).__name__)
		yield ('DELIMITER', repr(self.delimiter))
		yield ('ENCODING', self.encoding)
		if self.nullable:
			yield ('NULLABLE', 'yes')

	def __init__(self, elements = None,
		delimiter = None,
		encoding = None,
		nullable = None,
	):
		if delimiter is not None:
			self.delimiter = delimiter
		if encoding is not None:
			self.encoding = encoding
		if nullable is not None:
			self.nullable = nullable
		self.elements = None if elements is None else list(elements)

	@classmethod
	def from_literal(typ, src, **kw):
		"""
		Create a container holding the elements of the given literal.
		"""
		return typ(**kw).scan(src)

	def element_unpack(self, data):
		raise NotImplementedError("element_unpack")

	def element_pack(self, ob):
		raise NotImplementedError("element_pack")

	def scan(self, src):
		"""
		Replace the contents of the container with the elements of the given
		ARRAY literal, `src`, and return the container.

		`src` may be `bytes`, `bytearray`, `memoryview`, or `str`. `None` is
		SQL NULL and leaves the container without a value (`elements` is `None`).
		Any other type raises `ConversionError` before any parsing is done.

		When the literal is the empty ARRAY and the container already holds a
		list, the list is emptied in place.

		Nothing is changed if an exception is raised.
		"""
		if src is None:
			self.elements = None
			return self

		typname = type(self).__name__
		if isinstance(src, str):
			src = self._encode(src)
		elif isinstance(src, (bytes, bytearray, memoryview)):
			src = bytes(src)
		else:
			raise ConversionError(
				"cannot convert %s to %s" %(type(src).__name__, typname),
				creator = self,
			)

		try:
			elements = lib.scan_linear_array(
				src, self._encode(self.delimiter), typname
			)
		except Error as err:
			if err.creator is None:
				err.creator = self
			raise

		if self.elements is not None and not elements:
			del self.elements[:]
		else:
			self.elements = [
				self._unpack(i, x) for i, x in enumerate(elements)
			]
		return self

	def _encode(self, s):
		try:
			return s.encode(self.encoding)
		except UnicodeEncodeError as err:
			raise ConversionError(
				"cannot encode character %r at offset %d to %s" %(
					err.object[err.start], err.start, self.encoding,
				),
				details = {'offset': err.start, 'encoding': self.encoding},
				creator = self,
			) from err

	def _unpack(self, index, data):
		if data is None:
			if self.nullable:
				return None
			raise NullValueNotAllowedError(
				"parsing array element index %d: cannot convert NULL to %s" %(
					index, self.element_type.__name__
				),
				details = {'index': index},
				creator = self,
			)
		try:
			return self.element_unpack(data)
		except Error as err:
			# element codecs raise without knowing the position
			err.details = dict(err.details, index = index)
			if err.creator is None:
				err.creator = self
			raise
		except (ValueError, KeyError) as err:
			raise TextRepresentationError(
				"parsing array element index %d: invalid %s %r" %(
					index, self.element_type.__name__, data,
				),
				details = {'index': index},
				creator = self,
			) from err

	def value(self):
		"""
		Return the one-dimensional ARRAY literal of the elements as a `str`.
		An unset or empty container gives ``'{}'``.
		"""
		if not self.elements:
			return '{}'
		return lib.array_pack(
			[
				'NULL' if x is None else self._pack(i, x)
				for i, x in enumerate(self.elements)
			],
			delimiter = self.delimiter,
		)

	def _pack(self, index, ob):
		try:
			return self.element_pack(ob)
		except (TypeError, ValueError) as err:
			raise ConversionError(
				"packing array element index %d: cannot convert %s to %s" %(
					index, type(ob).__name__, self.element_type.__name__,
				),
				details = {'index': index},
				creator = self,
			) from err

	def __repr__(self):
		return '%s.%s(%r)' %(
			type(self).__module__,
			type(self).__name__,
			self.elements
		)

	def __len__(self):
		return 0 if self.elements is None else len(self.elements)

	def __iter__(self):
		return iter(self.elements or ())

	def __getitem__(self, item):
		if self.elements is None:
			raise IndexError("array has no value")
		return self.elements[item]

	def __eq__(self, ob):
		if isinstance(ob, TypedArray):
			ob = ob.elements
		return self.elements == ob

	def __ne__(self, ob):
		return not self.__eq__(ob)

	__hash__ = None

class StringArray(TypedArray):
	"""
	``text[]``, ``varchar[]``, and the other string ARRAYs.

	Elements are always quoted when packed.
	"""
	element_type = str

	def element_unpack(self, data):
		return builtins.text_unpack(data, encoding = self.encoding)

	def element_pack(self, ob):
		return builtins.text_pack(ob)

class BytesArray(TypedArray):
	'``bytea[]``; elements are given in either bytea text form and packed in hex.'
	element_type = bytes

	def element_unpack(self, data):
		return builtins.bytea_unpack(data)

	def element_pack(self, ob):
		return builtins.bytea_pack(ob)

class IntegerArray(TypedArray):
	'``int2[]``, ``int4[]``, and ``int8[]``'
	element_type = int

	def element_unpack(self, data):
		return builtins.int_unpack(data)

	def element_pack(self, ob):
		return builtins.int_pack(ob)

class FloatArray(TypedArray):
	'``float4[]`` and ``float8[]``'
	element_type = float

	def element_unpack(self, data):
		return builtins.float_unpack(data)

	def element_pack(self, ob):
		return builtins.float_pack(ob)

class BooleanArray(TypedArray):
	'``bool[]``'
	element_type = bool

	def element_unpack(self, data):
		return builtins.bool_unpack(data)

	def element_pack(self, ob):
		return builtins.bool_pack(bool(ob))
