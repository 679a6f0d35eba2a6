def _to_bits(value, width):
    if value < 0 or value >= 2**width:
        raise ValueError(f"value {value} does not fit in {width} bits")
    return format(value, f'0{width}b')


def convert_unit_width(values, from_width, to_width, discard_incomplete=False):
    """
    Re-slice a stream of fixed-width units into units of another width.

    Every value is written as exactly `from_width` bits (MSB-first), the bits
    are concatenated, then read back `to_width` bits at a time. A trailing
    group shorter than `to_width` is dropped when `discard_incomplete` is set,
    otherwise it is emitted padded with zeros on the right.
    """
    if from_width <= 0 or to_width <= 0:
        raise ValueError("unit widths must be positive")

    bit_string = ''.join(_to_bits(int(value), from_width) for value in values)

    output = []
    for i in range(0, len(bit_string), to_width):
        group = bit_string[i:i + to_width]
        if len(group) < to_width:
            if discard_incomplete:
                break
            group = group.ljust(to_width, '0')
        output.append(int(group, 2))

    return output


def pack_codes(codes, width, discard_incomplete=True):
    """Pack `width`-bit codes into bytes."""
    return bytes(convert_unit_width(codes, width, 8, discard_incomplete))


def unpack_codes(data, width, discard_incomplete=False):
    """Unpack bytes into `width`-bit codes."""
    return convert_unit_width(data, 8, width, discard_incomplete)
