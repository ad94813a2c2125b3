"""Decode IEEE 754 binary32 and binary64 numbers into sign, mantissa and exponent."""

import struct
from dataclasses import dataclass

# binary32: sign 1, exponent 8, mantissa 23
F32_M_MASK = (1 << 23) - 1
F32_E_MASK = (1 << 31) - 1 - F32_M_MASK

# binary64: sign 1, exponent 11, mantissa 52
F64_M_MASK = (1 << 52) - 1
F64_E_MASK = (1 << 63) - 1 - F64_M_MASK


@dataclass(frozen=True)
class DecodedFloat:
    """A number as ``sign * m * 2 ** exponent``."""

    m: float
    exponent: int
    sign: int


def _decode(bits, width, mantissa_bits, exponent_mask, bias):
    if not 0 <= bits < (1 << width):
        raise ValueError(f"expected a {width}-bit pattern, found: {bits:#x}")
    mantissa_mask = (1 << mantissa_bits) - 1
    m = (bits & mantissa_mask) / (1 << mantissa_bits)
    exponent = (bits & exponent_mask) >> mantissa_bits
    if exponent:
        m += 1
    sign = -1 if bits >> (width - 1) else 1
    return DecodedFloat(m=m, exponent=exponent - bias, sign=sign)


def decode_f32_bits(bits):
    """Decode a 32-bit pattern as a binary32 number."""
    return _decode(bits, 32, 23, F32_E_MASK, 127)


def decode_f64_bits(bits):
    """Decode a 64-bit pattern as a binary64 number."""
    return _decode(bits, 64, 52, F64_E_MASK, 1023)


def decode_f32(number):
    """Decode ``number`` after rounding it to binary32."""
    (bits,) = struct.unpack("<I", struct.pack("<f", number))
    return decode_f32_bits(bits)


def decode_f64(number):
    """Decode ``number`` as binary64."""
    (bits,) = struct.unpack("<Q", struct.pack("<d", number))
    return decode_f64_bits(bits)