"""
Text form ARRAY I/O.

`parse_array` reads an ARRAY literal into its dimensions and its flat
sequence of elements; `scan_linear_array` restricts that to one-dimensional
ARRAYs; `array_pack` writes a one-dimensional literal.
"""
from ...python.string import byte_repr
from ...exceptions import \
	ArrayLiteralError, \
	ArrayDimensionError, \
	ArrayShapeError

lbrace, rbrace, dquote, backslash = b'{}"\\'
null_token = b'NULL'

# parse_array phases
OPEN = 'open'
ELEMENT = 'element'
DELIMIT = 'delimit'
CLOSE = 'close'

def unexpected(src, offset, byte_repr = byte_repr):
	c = byte_repr(src[offset])
	return ArrayLiteralError(
		"unable to parse array; unexpected %s at offset %d" %(c, offset),
		details = {'literal': src, 'offset': offset, 'byte': c},
	)

def expected(src, offset, c):
	return ArrayLiteralError(
		"unable to parse array; expected %r at offset %d" %(c, offset),
		details = {'literal': src, 'offset': offset},
	)

def parse_array(src, delimiter = b',',
	len = len,
	lbrace = lbrace, rbrace = rbrace,
	dquote = dquote, backslash = backslash,
	null_token = null_token,
):
	"""
	Given the text form of an ARRAY as `bytes`, return the pair:

		(dimensions, elements)

	`dimensions` is the list of element counts at each nesting level, and
	`elements` is the flat list of elements in physical order. An element is
	either `bytes` or `None` for the unquoted ``NULL`` token. Quoted elements
	have their quotes removed and their backslash escapes resolved; unquoted
	elements are given as they appear.

	>>> parse_array(b'{{a,"b\\\\"c"},{NULL,d}}')
	([2, 2], [b'a', b'b"c', None, b'd'])

	Sibling counts are only checked for consistency with the total number of
	elements; the nested structure is not reconstructed.

	`ArrayLiteralError` is raised when the literal is malformed; its details
	carry the offset that the scanner was at.
	"""
	if not src or src[0] != lbrace:
		raise expected(src, 0, '{')

	dims = []
	elements = []
	depth = 0
	dlen = len(delimiter)
	end = len(src)
	i = 0
	phase = OPEN

	while i < end:
		c = src[i]
		if phase is OPEN:
			if c == lbrace:
				depth += 1
				i += 1
			elif c == rbrace:
				# empty ARRAY; only closing braces may follow
				phase = CLOSE
			else:
				dims = [0] * i
				phase = ELEMENT
		elif phase is ELEMENT:
			if c == lbrace:
				if depth == len(dims):
					# too deep; rejected by DELIMIT
					phase = DELIMIT
				else:
					depth += 1
					dims[depth-1] = 0
					i += 1
			elif c == dquote:
				element = bytearray()
				escape = False
				i += 1
				while i < end:
					c = src[i]
					i += 1
					if escape:
						element.append(c)
						escape = False
					elif c == backslash:
						escape = True
					elif c == dquote:
						elements.append(bytes(element))
						phase = DELIMIT
						break
					else:
						element.append(c)
			else:
				start = i
				while i < end:
					if src[i] == rbrace or src.startswith(delimiter, i):
						if i == start:
							raise unexpected(src, i)
						element = src[start:i]
						elements.append(None if element == null_token else element)
						phase = DELIMIT
						break
					i += 1
		elif phase is DELIMIT:
			if depth > 0 and src.startswith(delimiter, i):
				dims[depth-1] += 1
				i += dlen
				phase = ELEMENT
			elif c == rbrace and depth > 0:
				dims[depth-1] += 1
				depth -= 1
				i += 1
			else:
				raise unexpected(src, i)
		else:
			if c == rbrace and depth > 0:
				depth -= 1
				i += 1
			else:
				raise unexpected(src, i)

	if depth > 0:
		raise expected(src, i, '}')

	nelements = len(elements)
	for d in dims:
		if nelements % d != 0:
			raise ArrayDimensionError(
				"multidimensional arrays must have elements with matching dimensions",
				details = {'dimensions': dims},
			)
	return dims, elements

def scan_linear_array(src, delimiter, typname):
	"""
	Parse the ARRAY literal in `src` and return its elements. `ArrayShapeError`
	is raised when the literal has more than one dimension.

	`typname` is the name of the type the elements are destined for; it is
	only used in the error message.
	"""
	dims, elements = parse_array(src, delimiter)
	if len(dims) > 1:
		raise ArrayShapeError(
			"cannot convert ARRAY%s to %s" %(
				''.join(['[%d]' %(d,) for d in dims]), typname,
			),
			details = {'dimensions': dims},
		)
	return elements

def array_pack(elements, delimiter = ','):
	"""
	Given an iterable of already serialized elements, make a one-dimensional
	ARRAY literal. The elements must already be quoted where needed.

	>>> array_pack(['"a"', 'NULL'])
	'{"a",NULL}'
	"""
	return '{' + delimiter.join(elements) + '}'
