import random

import pytest

from lzw import (
    BITS_PER_CODE,
    DICT_SIZE,
    DecodeError,
    Index,
    Literal,
    LZW_decoding,
    LZW_encoding,
    code_width,
    to_symbol,
)


def random_bytes(n, seed=1234):
    rng = random.Random(seed)
    return bytes(rng.randrange(256) for _ in range(n))


def test_repeated_character_builds_runs():
    codes = LZW_encoding(b"fffffffffffff")
    assert codes == [102, 256, 257, 258, 257]
    assert len(codes) < 13
    assert isinstance(codes[0], Literal)
    assert all(isinstance(code, Index) for code in codes[1:])

    data, dictionary = LZW_decoding(codes)
    assert data == b"fffffffffffff"
    assert dictionary[256] == b"ff"
    assert dictionary[258] == b"ffff"


def test_classic_example():
    codes = LZW_encoding("TOBEORNOTTOBEORTOBEORNOT")
    assert codes == [84, 79, 66, 69, 79, 82, 78, 79, 84, 256, 258, 260, 265, 259, 261, 263]
    assert LZW_decoding(codes)[0] == b"TOBEORNOTTOBEORTOBEORNOT"


def test_text_is_encoded_as_utf8():
    text = "naïve café ✓"
    assert LZW_decoding(LZW_encoding(text))[0] == text.encode('utf-8')


def test_empty_input():
    assert LZW_encoding(b"") == []
    data, dictionary = LZW_decoding([])
    assert data == b""
    assert len(dictionary) == 256


def test_single_byte():
    assert LZW_encoding(b"\x00") == [0]
    assert LZW_decoding([0])[0] == b"\x00"


def test_self_referential_code():
    assert LZW_decoding([97, 256])[0] == b"aaa"


def test_round_trip_with_many_resets():
    data = random_bytes(4000)
    history = []
    codes = LZW_encoding(data, history=history)

    assert history.count(256) >= 2
    assert max(codes) < DICT_SIZE
    assert LZW_decoding(codes)[0] == data


def test_round_trip_of_growing_phrases():
    data = b"".join(bytes([i % 256]) * (i % 7 + 1) for i in range(3000))
    codes = LZW_encoding(data)
    assert LZW_decoding(codes)[0] == data


def test_reset_on_small_dictionary():
    history = []
    codes = LZW_encoding(b"aaaaaa", dict_size=258, history=history)
    assert codes == [97, 256, 97, 256]
    assert history == [257, 256, 257]

    decode_history = []
    data, _ = LZW_decoding(codes, dict_size=258, history=decode_history)
    assert data == b"aaaaaa"
    assert decode_history == history


def test_dictionaries_move_in_lockstep():
    data = random_bytes(2000, seed=7) + b"abcabcabcabc" * 100
    encode_history = []
    decode_history = []

    codes = LZW_encoding(data, history=encode_history)
    LZW_decoding(codes, history=decode_history)

    assert len(encode_history) == len(codes) - 1
    assert decode_history == encode_history


def test_unknown_index_is_rejected():
    with pytest.raises(DecodeError, match="badly compressed"):
        LZW_decoding([97, 300])
    with pytest.raises(DecodeError):
        LZW_decoding([97, 257])


def test_first_code_must_be_a_byte():
    with pytest.raises(DecodeError):
        LZW_decoding([256])


def test_malformed_symbols_are_rejected():
    with pytest.raises(DecodeError):
        LZW_decoding([Literal(300)])
    with pytest.raises(DecodeError):
        LZW_decoding([97, Index(5)])
    with pytest.raises(DecodeError):
        LZW_decoding([-1])


def test_learned_codes_are_forgotten_after_reset():
    codes = LZW_encoding(b"aaaaaa", dict_size=258)
    # 256 fills the dictionary again; 257 is then unknown after the reset
    with pytest.raises(DecodeError):
        LZW_decoding(codes + [256, 257], dict_size=258)


def test_to_symbol():
    assert isinstance(to_symbol(255), Literal)
    assert isinstance(to_symbol(256), Index)
    assert to_symbol(300) == 300


def test_code_width():
    assert BITS_PER_CODE == 9
    assert code_width(512) == 9
    assert code_width(1000) == 10
    assert code_width(4096) == 12
    with pytest.raises(ValueError):
        code_width(256)
    with pytest.raises(ValueError):
        LZW_encoding(b"abc", dict_size=100)
    with pytest.raises(ValueError):
        LZW_decoding([97], dict_size=256)
