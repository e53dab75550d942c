##
# .bin.pg_literal - display decoded ARRAY and bytea literals
##
"""
Decode the ARRAY literals, or bytea literals, given as arguments and display
the result as a table::

	$ pg_literal '{a,"b,c",NULL}' --nullable
	+-------+---------+
	| index | element |
	+-------+---------+
	|   0   |   'a'   |
	|   1   |  'b,c'  |
	|   2   |   None  |
	+-------+---------+

Literals that fail to decode are reported on standard error, and the exit
status is 1.
"""
import os
import sys
import optparse
from prettytable import PrettyTable
from .. import project
from .. import types as pg_types
from .. import exceptions as pg_exc
from ..encodings import bytea

__all__ = ['command']

array_types = {
	'text' : pg_types.StringArray,
	'bytea' : pg_types.BytesArray,
	'int' : pg_types.IntegerArray,
	'float' : pg_types.FloatArray,
	'bool' : pg_types.BooleanArray,
}

def array_table(literal, typ, delimiter, nullable):
	a = typ.from_literal(literal, delimiter = delimiter, nullable = nullable)
	table = PrettyTable(['index', 'element'])
	for i, x in enumerate(a):
		table.add_row([i, repr(x)])
	return table

def bytea_table(literal, width = 16):
	data = bytea.unpack(literal)
	table = PrettyTable(['offset', 'hex', 'text'])
	table.align['hex'] = 'l'
	table.align['text'] = 'l'
	for offset in range(0, len(data), width):
		row = data[offset:offset+width]
		table.add_row([
			offset,
			' '.join(['%02x' %(x,) for x in row]),
			''.join([chr(x) if 32 <= x < 127 else '.' for x in row]),
		])
	return table

def command(argv = sys.argv):
	"""
	pg_literal script entry point.
	"""
	op = optparse.OptionParser(
		"%prog [--type name] [-d delimiter] [--nullable] [--bytea] literal ...",
		version = project.version
	)
	op.add_option(
		'-t', '--type',
		dest = 'type',
		help = 'element type of the ARRAY literals: ' + ', '.join(sorted(array_types)),
		choices = sorted(array_types),
		default = 'text',
	)
	op.add_option(
		'-d', '--delimiter',
		dest = 'delimiter',
		help = 'element delimiter of the ARRAY literals',
		default = ',',
	)
	op.add_option(
		'--nullable',
		dest = 'nullable',
		help = 'display NULL elements instead of rejecting them',
		action = 'store_true',
		default = False,
	)
	op.add_option(
		'--bytea',
		dest = 'bytea',
		help = 'the literals are bytea values instead of ARRAYs',
		action = 'store_true',
		default = False,
	)
	co, ca = op.parse_args(list(argv[1:]))

	rv = 0
	for literal in ca:
		try:
			if co.bytea:
				table = bytea_table(literal)
			else:
				table = array_table(
					literal, array_types[co.type], co.delimiter, co.nullable
				)
		except pg_exc.Error as err:
			sys.stderr.write(
				"ERROR: %s: %s%s" %(type(err).__name__, err, os.linesep)
			)
			rv = 1
			continue
		sys.stdout.write(table.get_string() + os.linesep)
	return rv

def main():
	sys.exit(command(sys.argv))

if __name__ == '__main__':
	main()
