##
# .encodings.bytea
##
"""
PostgreSQL bytea encoding and decoding functions.

The server sends bytea in one of two text forms, selected by the
``bytea_output`` setting:

 hex
  ``\\x`` followed by two hexadecimal digits per byte.

 escape
  Raw bytes, with a backslash written as ``\\\\`` and any other byte
  optionally written as a backslash followed by three octal digits.

`unpack` reads either form; `pack` writes either form.
"""
import binascii
import codecs
import warnings
from ..exceptions import BinaryRepresentationError, TypeConversionWarning

hex_prefix = b'\\x'
backslash = ord('\\')
octal_digits = frozenset(b'01234567')

ord_to_seq = {
	i : \
		"\\" + oct(i)[2:].rjust(3, '0') \
		if not (32 < i < 126) else r'\\' \
		if i == 92 else chr(i)
	for i in range(256)
}

def pack(data, hex = True):
	r"""
	Render the bytes as bytea text.

	>>> pack(b'Hi')
	'\\x4869'
	>>> pack(b'H\x00', hex = False)
	'H\\000'
	"""
	if hex:
		return '\\x' + binascii.hexlify(data).decode('ascii')
	return ''.join(map(ord_to_seq.__getitem__, data))

def unpack(data,
	hex_prefix = hex_prefix,
	backslash = backslash,
	octal_digits = octal_digits,
):
	r"""
	Given bytea text, as `bytes` or `str`, return the bytes it represents.

	>>> unpack(b'\\x48656c6c6f')
	b'Hello'
	>>> unpack(b'\\141\\\\')
	b'a\\'

	Three digit octal escapes above ``\377`` are accepted and truncated to their
	low eight bits; a `TypeConversionWarning` is issued when that happens.
	"""
	if data.__class__ is str:
		try:
			data = data.encode('latin-1')
		except UnicodeEncodeError as err:
			raise BinaryRepresentationError(
				"could not parse bytea value: character %r is not a byte" %(
					err.object[err.start],
				),
				details = {'offset': err.start},
			) from err
	else:
		data = bytes(data)

	if data[:2] == hex_prefix:
		try:
			return binascii.unhexlify(data[2:])
		except binascii.Error as err:
			raise BinaryRepresentationError(
				"could not parse bytea value: " + str(err),
				details = {'sequence': data[2:]},
			) from err

	output = bytearray()
	offset = 0
	end = len(data)
	while offset < end:
		if data[offset] == backslash:
			if data[offset+1:offset+2] == b'\\':
				output.append(backslash)
				offset += 2
				continue

			seq = data[offset:offset+4]
			if len(seq) < 4:
				raise BinaryRepresentationError(
					"invalid bytea sequence %r" %(seq,),
					details = {'literal': data, 'offset': offset},
				)
			if not octal_digits.issuperset(seq[1:]):
				raise BinaryRepresentationError(
					"could not parse bytea value: invalid octal sequence %r" %(seq,),
					details = {'literal': data, 'offset': offset},
				)
			x = int(seq[1:], 8)
			if x > 0xFF:
				warnings.warn(TypeConversionWarning(
					"bytea octal sequence %r exceeds a byte; truncated to %d" %(
						seq, x & 0xFF,
					),
					details = {'offset': offset},
				))
			output.append(x & 0xFF)
			offset += 4
		else:
			# A run of raw bytes; copy up to the next backslash.
			nextesc = data.find(b'\\', offset)
			if nextesc == -1:
				output += data[offset:]
				break
			output += data[offset:nextesc]
			offset = nextesc
	return bytes(output)

decode_bytea = unpack

class Codec(codecs.Codec):
	'bytea codec; text is "encoded" into bytes'
	def encode(data, errors = 'strict'):
		return (unpack(data), len(data))
	encode = staticmethod(encode)

	def decode(data, errors = 'strict'):
		return (pack(data, hex = False), len(data))
	decode = staticmethod(decode)

class StreamWriter(Codec, codecs.StreamWriter): pass
class StreamReader(Codec, codecs.StreamReader): pass

bytea_codec = codecs.CodecInfo(
	Codec.encode, Codec.decode,
	streamreader = StreamReader,
	streamwriter = StreamWriter,
	name = 'bytea',
)
codecs.register(lambda x: x == 'bytea' and bytea_codec or None)
