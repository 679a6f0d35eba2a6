import pytest

from bitpack import convert_unit_width, pack_codes, unpack_codes


def test_short_tail_is_discarded():
    # 6 bits cannot fill a byte
    assert convert_unit_width([0b101, 0b011], 3, 8, discard_incomplete=True) == []


def test_short_tail_is_zero_padded():
    assert convert_unit_width([0b101, 0b011], 3, 8) == [0b10101100]


def test_three_bit_codes_fill_three_bytes():
    codes = list(range(8))
    packed = convert_unit_width(codes, 3, 8, discard_incomplete=True)
    assert packed == [0b00000101, 0b00111001, 0b01110111]
    assert convert_unit_width(packed, 8, 3, discard_incomplete=False) == codes


def test_values_are_left_padded_to_their_width():
    assert convert_unit_width([1, 1], 4, 8) == [0b00010001]
    assert convert_unit_width([0b00010001], 8, 2) == [0, 1, 0, 1]


def test_empty_input():
    assert convert_unit_width([], 9, 8, discard_incomplete=True) == []
    assert convert_unit_width([], 8, 9) == []


def test_pack_nine_bit_codes_drops_trailing_bits():
    # 5 codes * 9 bits = 45 bits -> 5 whole bytes, 5 bits dropped
    packed = pack_codes([102, 256, 257, 258, 257], 9)
    assert packed == bytes([51, 64, 32, 48, 40])
    assert unpack_codes(packed, 9) == [102, 256, 257, 258, 256]


def test_unpack_can_discard_padding():
    packed = pack_codes([102, 256, 257, 258, 257], 9, discard_incomplete=False)
    assert len(packed) == 6
    assert unpack_codes(packed, 9, discard_incomplete=True) == [102, 256, 257, 258, 257]


def test_value_too_wide_is_rejected():
    with pytest.raises(ValueError):
        convert_unit_width([8], 3, 8)
    with pytest.raises(ValueError):
        convert_unit_width([-1], 3, 8)


def test_width_must_be_positive():
    with pytest.raises(ValueError):
        convert_unit_width([1], 0, 8)
    with pytest.raises(ValueError):
        convert_unit_width([1], 8, 0)
