import argparse
import sys

from codec import (
    compress,
    compress_framed,
    compression_stats,
    decompress,
    decompress_framed,
    text_to_bytes,
)
from lzw import DICT_SIZE, DecodeError

DEMO_TEXT = "fffffffffffff"


def run_demo(text, dict_size=DICT_SIZE):
    print("--------------------------------------")
    print("original text:\t", text)
    print("--------------------------------------")

    compressed = compress(text, dict_size)
    stats = compression_stats(len(text_to_bytes(text)), len(compressed))
    print("compressed:", list(compressed))
    print("pre-compression: ", stats['original_size'])
    print("post-compression: ", stats['compressed_size'])
    print(f"compression rate:  {stats['rate']:.2f} %")

    print("--------------------------------------")
    print("decompressed:\t", decompress(compressed, dict_size))
    print("--------------------------------------")


def main(argv=None):
    parser = argparse.ArgumentParser(description='LZW text compression (fixed-size dictionary with reset)')
    sub = parser.add_subparsers(dest='mode', required=True)

    demo = sub.add_parser('demo', help='compress and decompress a sample text')
    demo.add_argument('--text', default=DEMO_TEXT)
    demo.add_argument('--dict-size', type=int, default=DICT_SIZE)

    for mode in ('compress', 'decompress'):
        p = sub.add_parser(mode)
        p.add_argument('input')
        p.add_argument('output')
        p.add_argument('--dict-size', type=int, default=DICT_SIZE)
        p.add_argument('--framed', action='store_true',
                       help='use the length-prefixed format (no trailing loss)')

    args = parser.parse_args(argv)

    try:
        if args.mode == 'demo':
            run_demo(args.text, args.dict_size)
            return 0

        with open(args.input, 'rb') as f:
            data = f.read()

        if args.mode == 'compress':
            text = data.decode('utf-8')
            encoded = compress_framed(text, args.dict_size) if args.framed else compress(text, args.dict_size)
            with open(args.output, 'wb') as f:
                f.write(encoded)

            stats = compression_stats(len(data), len(encoded))
            print(f"[compress] wrote {args.output}")
            print(f"[compress] {stats['original_size']} -> {stats['compressed_size']} bytes, "
                  f"rate={stats['rate']:.2f}%")
        else:
            decoded = decompress_framed(data, args.dict_size) if args.framed else decompress(data, args.dict_size)
            with open(args.output, 'wb') as f:
                f.write(text_to_bytes(decoded))

            print(f"[decompress] wrote {args.output}")
            print(f"[decompress] {len(data)} -> {len(text_to_bytes(decoded))} bytes")
    except (OSError, ValueError) as e:
        # DecodeError and UnicodeDecodeError are both ValueErrors
        kind = "decode error" if isinstance(e, DecodeError) else "error"
        print(f"[{args.mode}] {kind}: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
