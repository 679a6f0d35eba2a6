import math

DICT_SIZE = 512


class Literal(int):
    """A single byte value (0-255) standing for itself."""

    def __repr__(self):
        return f"Literal({int(self)})"


class Index(int):
    """A learned dictionary index (>= 256)."""

    def __repr__(self):
        return f"Index({int(self)})"


class DecodeError(ValueError):
    pass


def _check_dict_size(dict_size):
    if dict_size <= 256:
        raise ValueError(f"dictionary size must be larger than 256, got {dict_size}")


def code_width(dict_size=DICT_SIZE):
    """Number of bits needed to write any code of a `dict_size` dictionary"""
    _check_dict_size(dict_size)
    return math.ceil(math.log2(dict_size))


BITS_PER_CODE = code_width(DICT_SIZE)


def to_symbol(value):
    """Map a raw unpacked integer back to its symbol type."""
    return Literal(value) if value <= 255 else Index(value)


def _initial_phrases():
    return {bytes([i]): Literal(i) for i in range(256)}


def _initial_entries():
    return {i: bytes([i]) for i in range(256)}


def LZW_encoding(data, dict_size=DICT_SIZE, history=None):
    _check_dict_size(dict_size)
    if isinstance(data, str):
        data = data.encode('utf-8')

    # Initialize dictionary with the 256 single-byte phrases
    dictionary = _initial_phrases()
    current = b""
    next_code = 256
    result = []

    for byte in data:
        next_c = bytes([byte])
        combine = current + next_c
        if combine in dictionary:
            current = combine
        else:
            result.append(dictionary[current])
            dictionary[combine] = Index(next_code)
            next_code += 1
            current = next_c

            # Hard reset once the dictionary is full
            if next_code >= dict_size:
                dictionary = _initial_phrases()
                next_code = 256

            if history is not None:
                history.append(next_code)

    if len(current) > 0:
        result.append(dictionary[current])

    return result


def _lookup_key(symbol):
    if not isinstance(symbol, (Literal, Index)):
        symbol = to_symbol(symbol)

    if isinstance(symbol, Literal):
        if not 0 <= symbol <= 255:
            raise DecodeError(f"badly compressed: literal {int(symbol)} is not a byte")
    elif symbol < 256:
        raise DecodeError(f"badly compressed: index {int(symbol)} is below 256")

    return int(symbol)


def LZW_decoding(codeword, dict_size=DICT_SIZE, history=None):
    """
    Rebuild the byte sequence behind a list of LZW codes.

    The dictionary is grown and reset exactly as LZW_encoding does, so a code
    that is neither known nor the next index to be assigned means the stream
    is corrupt and DecodeError is raised.

    Returns (data, dictionary) where dictionary maps codes to phrases as it
    stood after the last code.
    """
    _check_dict_size(dict_size)

    # Initialize dictionary with single bytes (code -> phrase)
    dictionary = _initial_entries()
    if len(codeword) == 0:
        return b"", dictionary

    first = _lookup_key(codeword[0])
    if first not in dictionary:
        raise DecodeError(f"badly compressed: first code {first} is not a single byte")

    previous = dictionary[first]
    output = [previous]
    next_code = 256

    for symbol in codeword[1:]:
        current_code = _lookup_key(symbol)

        if current_code in dictionary:
            current_string = dictionary[current_code]
        elif current_code == next_code:
            # Code emitted right after it was learned: previous + its own first byte
            current_string = previous + previous[:1]
        else:
            raise DecodeError(f"badly compressed: unknown code {current_code} (next is {next_code})")

        output.append(current_string)

        # New entry: previous phrase + first byte of current phrase
        dictionary[next_code] = previous + current_string[:1]
        next_code += 1
        previous = current_string

        if next_code >= dict_size:
            dictionary = _initial_entries()
            next_code = 256

        if history is not None:
            history.append(next_code)

    return b"".join(output), dictionary
