##
# pgliteral root package
##
"""
pgliteral decodes and encodes the text forms of PostgreSQL ARRAY and bytea
values.

The ARRAY containers are in `pgliteral.types`, the bytea codec is
`pgliteral.encodings.bytea`, and the exceptions raised by both are in
`pgliteral.exceptions`::

	>>> from pgliteral.types import StringArray
	>>> StringArray.from_literal('{a,"b,c"}').elements
	['a', 'b,c']
	>>> StringArray(['a', 'b"c']).value()
	'{"a","b\\\\"c"}'
"""
__all__ = [
	'__version__',
	'version',
	'version_info',
]

from .project import version_info, version
__version__ = version
