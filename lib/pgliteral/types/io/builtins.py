"""
Text form I/O of the scalar types that can be contained by the ARRAY
containers in `pgliteral.types`.

The unpack functions take the `bytes` of one element, as produced by
`pgliteral.types.io.lib.parse_array`, and the pack functions produce the
`str` that is placed in an ARRAY literal.
"""
import operator
from ...encodings import bytea
from ...string import quote_element

bool_pack = {True:'t', False:'f'}.__getitem__
bool_unpack = {
	b't':True, b'f':False,
	b'true':True, b'false':False,
}.__getitem__

def int_pack(x, index = operator.index):
	# floats are refused rather than truncated
	return '%d' %(index(x),)

int_unpack = int

def float_pack(x):
	return repr(float(x))

float_unpack = float

def bytea_pack(data, quote_element = quote_element):
	# the hex form contains a backslash, so it is always quoted
	return quote_element(bytea.pack(data))

bytea_unpack = bytea.unpack

def text_unpack(data, encoding = 'utf-8'):
	return data.decode(encoding)

text_pack = quote_element
