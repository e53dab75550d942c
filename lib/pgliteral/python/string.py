##
# .python.string
##
import os

def indent(s, level = 2, char = ' '):
	ind = char * level
	r = ""
	for x in s.splitlines():
		r += ((ind + x).rstrip() + os.linesep)
	return r

def byte_repr(c):
	"""
	Represent a single byte, given as an integer, the way the array parser
	reports it in error messages: a quoted character.

	>>> byte_repr(0x7d)
	"'}'"
	"""
	return repr(chr(c))
