##
# .test.test_types - test the ARRAY containers
##
import unittest
from .. import exceptions as pg_exc
from ..types import \
	StringArray, BytesArray, \
	IntegerArray, FloatArray, BooleanArray

string_samples = [
	[],
	[''],
	['foo'],
	['foo', 'bar'],
	['NULL', 'null'],
	['a,b', '{c}', '"', '\\', '\\"'],
	[' leading', 'trailing ', ' both '],
	['a"b', 'c\\d'],
	['schemå', '☃', 'tab\tand\nnewline'],
	['{', '}', '{}', ',', ';'],
]

# container type, literal, elements, packed
expectation_samples = [
	(IntegerArray, '{1,-2,30000000000}', [1, -2, 30000000000], '{1,-2,30000000000}'),
	(FloatArray, '{1.5,-2,0}', [1.5, -2.0, 0.0], '{1.5,-2.0,0.0}'),
	(BooleanArray, '{t,f,true,false}', [True, False, True, False], '{t,f,t,f}'),
	(BytesArray, '{"\\\\x4142","\\\\101",\\x}', [b'AB', b'A', b''], '{"\\\\x4142","\\\\x41","\\\\x"}'),
	(StringArray, '{a,"b c"}', ['a', 'b c'], '{"a","b c"}'),
]

class test_StringArray(unittest.TestCase):
	def testEmpty(self):
		self.assertEqual(StringArray([]).value(), '{}')
		self.assertEqual(StringArray().value(), '{}')
		self.assertEqual(StringArray().scan(b'{}').elements, [])
		self.assertEqual(StringArray().scan('{}').elements, [])

	def testEmptyReusesList(self):
		a = StringArray(['x', 'y'])
		l = a.elements
		a.scan(b'{}')
		self.assertIs(a.elements, l)
		self.assertEqual(l, [])

	def testReplaces(self):
		a = StringArray(['x', 'y'])
		l = a.elements
		a.scan(b'{z}')
		self.assertEqual(a.elements, ['z'])
		# the previous list is left alone
		self.assertEqual(l, ['x', 'y'])

	def testNull(self):
		a = StringArray(['kept'])
		a.scan(None)
		self.assertIsNone(a.elements)
		self.assertEqual(len(a), 0)
		self.assertEqual(list(a), [])
		self.assertEqual(a.value(), '{}')

	def testValue(self):
		self.assertEqual(
			StringArray(['a"b', 'c\\d']).value(),
			'{"a\\"b","c\\\\d"}'
		)
		self.assertEqual(StringArray(['a', 'b']).value(), '{"a","b"}')
		self.assertEqual(
			StringArray.from_literal('{"a\\"b","c\\\\d"}').elements,
			['a"b', 'c\\d']
		)

	def testConsistency(self):
		for x in string_samples:
			literal = StringArray(x).value()
			self.assertEqual(StringArray.from_literal(literal).elements, x)
			self.assertEqual(
				StringArray.from_literal(literal.encode('utf-8')).elements, x
			)

	def testSources(self):
		expect = ['a', 'b']
		self.assertEqual(StringArray.from_literal(b'{a,b}'), expect)
		self.assertEqual(StringArray.from_literal('{a,b}'), expect)
		self.assertEqual(StringArray.from_literal(bytearray(b'{a,b}')), expect)
		self.assertEqual(StringArray.from_literal(memoryview(b'{a,b}')), expect)

	def testConversionError(self):
		a = StringArray(['kept'])
		for x in (1, 1.5, ['{a}'], object()):
			with self.assertRaises(pg_exc.ConversionError) as cm:
				a.scan(x)
			self.assertEqual(
				cm.exception.message,
				"cannot convert %s to StringArray" %(type(x).__name__,)
			)
			self.assertIs(cm.exception.creator, a)
		self.assertEqual(a.elements, ['kept'])

	def testUnencodable(self):
		a = StringArray(['kept'], encoding = 'latin-1')
		with self.assertRaises(pg_exc.ConversionError) as cm:
			a.scan('{€}')
		self.assertEqual(cm.exception.details['offset'], 1)
		self.assertIs(cm.exception.creator, a)
		self.assertEqual(a.elements, ['kept'])

		# undecodable command line bytes arrive as lone surrogates
		a = StringArray()
		with self.assertRaises(pg_exc.ConversionError) as cm:
			a.scan('{a\udcff}')
		self.assertEqual(cm.exception.details['offset'], 2)
		self.assertIn('\\udcff', cm.exception.message)
		self.assertIsNone(a.elements)

		with self.assertRaises(pg_exc.ConversionError):
			StringArray(encoding = 'ascii', delimiter = '§').scan('{a}')

	def testNullElements(self):
		with self.assertRaises(pg_exc.NullValueNotAllowedError) as cm:
			StringArray.from_literal(b'{NULL}')
		self.assertEqual(cm.exception.details['index'], 0)
		self.assertEqual(
			cm.exception.message,
			"parsing array element index 0: cannot convert NULL to str"
		)

		a = StringArray(['kept'])
		with self.assertRaises(pg_exc.NullValueNotAllowedError) as cm:
			a.scan(b'{a,NULL,b}')
		self.assertEqual(cm.exception.details['index'], 1)
		self.assertIs(cm.exception.creator, a)
		self.assertEqual(a.elements, ['kept'])

		# quoted NULL is a string
		self.assertEqual(StringArray.from_literal(b'{"NULL"}'), ['NULL'])

	def testNullable(self):
		a = StringArray.from_literal(b'{a,NULL}', nullable = True)
		self.assertEqual(a.elements, ['a', None])
		self.assertEqual(a.value(), '{"a",NULL}')
		self.assertEqual(StringArray([None, 'NULL'], nullable = True).value(), '{NULL,"NULL"}')

	def testMultidimensional(self):
		a = StringArray(['kept'])
		with self.assertRaises(pg_exc.ArrayShapeError) as cm:
			a.scan(b'{{1,2},{3,4}}')
		self.assertEqual(cm.exception.details['dimensions'], [2, 2])
		self.assertEqual(
			cm.exception.message, "cannot convert ARRAY[2][2] to StringArray"
		)
		self.assertIs(cm.exception.creator, a)
		self.assertEqual(a.elements, ['kept'])

		self.assertRaises(
			pg_exc.ArrayDimensionError,
			StringArray.from_literal, b'{{1,2,3},{4,5}}'
		)

	def testMalformed(self):
		with self.assertRaises(pg_exc.ArrayLiteralError) as cm:
			StringArray.from_literal(b'{1,2')
		self.assertEqual(cm.exception.details['offset'], 4)
		self.assertIsInstance(cm.exception.creator, StringArray)

		with self.assertRaises(pg_exc.ArrayLiteralError) as cm:
			StringArray.from_literal('1,2}')
		self.assertEqual(cm.exception.details['offset'], 0)

	def testEncoding(self):
		self.assertEqual(StringArray.from_literal('{é,"☃"}'), ['é', '☃'])
		self.assertEqual(
			StringArray.from_literal(b'{\xe9}', encoding = 'latin-1'), ['é']
		)
		with self.assertRaises(pg_exc.TextRepresentationError) as cm:
			StringArray.from_literal(b'{ok,\xff}')
		self.assertEqual(cm.exception.details['index'], 1)

	def testDelimiter(self):
		a = StringArray.from_literal('{a,b;c}', delimiter = ';')
		self.assertEqual(a.elements, ['a,b', 'c'])
		self.assertEqual(a.value(), '{"a,b";"c"}')

	def testSequence(self):
		a = StringArray(['a', 'b', 'c'])
		self.assertEqual(len(a), 3)
		self.assertEqual(a[0], 'a')
		self.assertEqual(a[-1], 'c')
		self.assertEqual(a[1:], ['b', 'c'])
		self.assertEqual(list(a), ['a', 'b', 'c'])
		self.assertEqual(a, ['a', 'b', 'c'])
		self.assertEqual(a, StringArray(('a', 'b', 'c')))
		self.assertNotEqual(a, ['a'])
		self.assertEqual(repr(a), "pgliteral.types.StringArray(['a', 'b', 'c'])")
		self.assertRaises(IndexError, StringArray().__getitem__, 0)

class test_typed_arrays(unittest.TestCase):
	def testExpectations(self):
		for typ, literal, elements, packed in expectation_samples:
			a = typ.from_literal(literal)
			self.assertEqual(a.elements, elements)
			self.assertEqual(typ(elements).value(), packed)
			self.assertEqual(typ.from_literal(packed).elements, elements)

	def testFloatSpecial(self):
		a = FloatArray.from_literal('{Infinity,-Infinity}')
		self.assertEqual(a.elements, [float('inf'), float('-inf')])
		self.assertEqual(FloatArray([2]).value(), '{2.0}')

	def testInvalidElements(self):
		for typ, literal, index, typname in (
			(IntegerArray, '{1,x}', 1, 'int'),
			(IntegerArray, '{1.5}', 0, 'int'),
			(FloatArray, '{1,2,abc}', 2, 'float'),
			(BooleanArray, '{t,yes}', 1, 'bool'),
		):
			with self.assertRaises(pg_exc.TextRepresentationError) as cm:
				typ.from_literal(literal)
			self.assertEqual(cm.exception.details['index'], index)
			self.assertTrue(
				cm.exception.message.startswith(
					"parsing array element index %d: invalid %s" %(index, typname)
				)
			)

	def testNullElements(self):
		for typ, typname in (
			(IntegerArray, 'int'),
			(FloatArray, 'float'),
			(BooleanArray, 'bool'),
			(BytesArray, 'bytes'),
		):
			with self.assertRaises(pg_exc.NullValueNotAllowedError) as cm:
				typ.from_literal('{NULL}')
			self.assertEqual(
				cm.exception.message,
				"parsing array element index 0: cannot convert NULL to " + typname
			)
		self.assertEqual(IntegerArray.from_literal('{1,NULL}', nullable = True), [1, None])
		self.assertEqual(IntegerArray([1, None], nullable = True).value(), '{1,NULL}')

	def testInvalidBytea(self):
		a = BytesArray()
		with self.assertRaises(pg_exc.BinaryRepresentationError) as cm:
			a.scan(b'{"\\\\x41","\\\\xzz"}')
		self.assertEqual(cm.exception.details['index'], 1)
		self.assertIs(cm.exception.creator, a)
		self.assertIsNone(a.elements)

	def testByteaTruncation(self):
		with self.assertWarns(pg_exc.TypeConversionWarning):
			a = BytesArray.from_literal(b'{"\\\\777"}')
		self.assertEqual(a.elements, [b'\xff'])

	def testIntegerPackRefusesFloats(self):
		self.assertEqual(IntegerArray([True, 7]).value(), '{1,7}')
		a = IntegerArray([1, 1.5])
		with self.assertRaises(pg_exc.ConversionError) as cm:
			a.value()
		self.assertEqual(cm.exception.details['index'], 1)
		self.assertEqual(
			cm.exception.message,
			"packing array element index 1: cannot convert float to int"
		)
		self.assertIs(cm.exception.creator, a)

	def testBooleanPack(self):
		self.assertEqual(BooleanArray([1, 0, 'x', '']).value(), '{t,f,t,f}')

class test_error_format(unittest.TestCase):
	def testNullFormat(self):
		with self.assertRaises(pg_exc.NullValueNotAllowedError) as cm:
			StringArray().scan(b'{a,NULL}')
		s = str(cm.exception)
		lines = s.splitlines()
		self.assertEqual(
			lines[0], "parsing array element index 1: cannot convert NULL to str"
		)
		self.assertIn('  CODE: 22004', lines)
		self.assertIn('  LOCATION: CLIENT', lines)
		self.assertIn('  INDEX: 1', lines)
		self.assertIn('ARRAY: StringArray', lines)
		self.assertIn("  DELIMITER: ','", lines)
		self.assertIn('  ENCODING: utf-8', lines)

	def testLiteralPointer(self):
		with self.assertRaises(pg_exc.ArrayLiteralError) as cm:
			StringArray().scan(b'{1,}')
		s = str(cm.exception)
		lines = s.splitlines()
		self.assertIn('  OFFSET: 3', lines)
		i = lines.index('  LITERAL: {1,}')
		self.assertEqual(lines[i+1], ' ' * 14 + '^')

if __name__ == '__main__':
	unittest.main()
