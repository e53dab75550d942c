##
# .string
##
"""
Quoting of ARRAY elements.

Inside a double-quoted ARRAY element, only the double quote and the backslash
are significant to the parser, so those are the only characters escaped.
The delimiter, braces, whitespace, control characters, and non-ASCII
characters are all safe once the element is quoted.
"""

def escape_element(text):
	r"""
	Prefix every instance of '"' and '\' with a '\'.

	>>> escape_element('a"b\\c')
	'a\\"b\\\\c'
	"""
	# backslashes first so the escapes added for quotes are not doubled
	return text.replace('\\', '\\\\').replace('"', '\\"')

def quote_element(text):
	"Escape the element *and* place '\"' on each end"
	return '"' + escape_element(text) + '"'
