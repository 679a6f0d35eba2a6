import math
from collections import Counter

from bitpack import pack_codes, unpack_codes
from lzw import DICT_SIZE, DecodeError, LZW_decoding, LZW_encoding, code_width, to_symbol

HEADER_SIZE = 4


def text_to_bytes(text):
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    return text.encode('utf-8')


def bytes_to_text(data, errors='strict'):
    return data.decode('utf-8', errors=errors)


def compress(text, dict_size=DICT_SIZE):
    """
    Compress text into a headerless byte artifact.

    Codes are packed MSB-first at the fixed code width and any trailing bits
    that do not fill a whole byte are dropped, so the last code of some
    inputs cannot be recovered.
    """
    codes = LZW_encoding(text_to_bytes(text), dict_size)
    return pack_codes(codes, code_width(dict_size), discard_incomplete=True)


def decompress(data, dict_size=DICT_SIZE, errors='replace'):
    """
    Decompress a headerless artifact.

    The tail dropped by compress() can leave a partial UTF-8 sequence, which is
    replaced rather than raised unless `errors` says otherwise.
    """
    values = unpack_codes(data, code_width(dict_size), discard_incomplete=False)
    decoded, _ = LZW_decoding([to_symbol(v) for v in values], dict_size)
    return bytes_to_text(decoded, errors)


def compress_framed(text, dict_size=DICT_SIZE):
    """
    Compress text into a self-describing artifact.

    Layout: [code count (4 bytes, big endian)][codes packed MSB-first, last
    byte zero padded]. Unlike compress() this loses nothing.
    """
    codes = LZW_encoding(text_to_bytes(text), dict_size)

    result = bytearray()
    result.extend(len(codes).to_bytes(HEADER_SIZE, 'big'))
    result.extend(pack_codes(codes, code_width(dict_size), discard_incomplete=False))

    return bytes(result)


def decompress_framed(data, dict_size=DICT_SIZE, errors='strict'):
    if len(data) < HEADER_SIZE:
        raise DecodeError("badly compressed: frame is shorter than its header")

    num_codes = int.from_bytes(data[:HEADER_SIZE], 'big')
    values = unpack_codes(data[HEADER_SIZE:], code_width(dict_size), discard_incomplete=True)
    if len(values) < num_codes:
        raise DecodeError(f"badly compressed: expected {num_codes} codes, found {len(values)}")

    decoded, _ = LZW_decoding([to_symbol(v) for v in values[:num_codes]], dict_size)
    return bytes_to_text(decoded, errors)


def calculate_entropy(data):
    """Calculate Shannon entropy in bits per symbol"""
    if not data:
        return 0

    freq = Counter(data)
    entropy = 0
    total = len(data)

    for count in freq.values():
        probability = count / total
        entropy -= probability * math.log2(probability)

    return entropy


def compression_stats(original_size, compressed_size):
    ratio = original_size / compressed_size if compressed_size > 0 else 0
    rate = compressed_size / original_size * 100 if original_size > 0 else 0
    savings = (original_size - compressed_size) / original_size * 100 if original_size > 0 else 0

    return {
        'original_size': original_size,
        'compressed_size': compressed_size,
        'ratio': ratio,
        'rate': rate,
        'space_saved': savings,
    }
