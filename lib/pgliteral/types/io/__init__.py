##
# .types.io - I/O routines for packing and unpacking data
##
"""
Type I/O routines--packing and unpacking functions.

`lib` holds the ARRAY literal parser and writer; `builtins` holds the text
form routines of the element types.
"""
