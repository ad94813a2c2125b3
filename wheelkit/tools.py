"""Small command-line tools: float inspectors, sort and uniq."""

import math
import struct
import sys

from .floats import decode_f32_bits, decode_f64_bits
from .sorting import qsort
from .text import Str


def _parse_hex(text, bits):
    value = int(text, 16)
    if not 0 <= value < (1 << bits):
        raise ValueError(f"expected a {bits}-bit hex value, found: {text}")
    return value


def _format_number(number):
    if math.isnan(number) and math.copysign(1.0, number) < 0:
        return "-nan"
    return f"{number:f}"


def _inspect(argv, bits, decode, unpack_format, pack_format, hex_format):
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return 1
    for text in argv:
        try:
            pattern = _parse_hex(text, bits)
        except ValueError as exc:
            print(f"invalid hex value {text!r}: {exc}", file=sys.stderr)
            return 1
        (number,) = struct.unpack(unpack_format, struct.pack(pack_format, pattern))
        f = decode(pattern)
        print(
            f"{pattern:{hex_format}}: {f.sign} x {f.m:f} x 2^{f.exponent}"
            f" = {_format_number(number)}"
        )
    return 0


def hex2float_main(argv=None):
    """Inspect 32-bit hex patterns as binary32 numbers."""
    return _inspect(argv, 32, decode_f32_bits, "<f", "<I", "X")


def hex2double_main(argv=None):
    """Inspect 64-bit hex patterns as binary64 numbers."""
    return _inspect(argv, 64, decode_f64_bits, "<d", "<Q", "x")


def _read_lines(stream):
    line = Str()
    while True:
        line.readline(stream)
        if not len(line):
            return
        yield str(line)


def sort_main(argv=None):
    """Print the lines of standard input in sorted order."""
    lines = [line[:-1] if line.endswith("\n") else line for line in _read_lines(sys.stdin)]
    qsort(lines)
    for line in lines:
        print(line)
    return 0


def uniq_main(argv=None):
    """Print standard input, dropping lines equal to the one before."""
    last = ""
    for line in _read_lines(sys.stdin):
        if line != last:
            sys.stdout.write(line)
            last = line
    return 0