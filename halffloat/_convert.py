"""
Bit-level conversion between binary16 and the wider IEEE binary formats.

Every routine here works on plain integers holding the raw encodings, so the
same code serves binary32 and binary64; the layout of the wide side is passed
in as a ``Format``.
"""

from collections import namedtuple

import numpy as np


class Format(namedtuple("Format", ["exponent", "mantissa"])):
    """An IEEE binary interchange layout.

    ``exponent`` is the width of the biased exponent field and ``mantissa``
    the number of stored (fraction) bits, excluding the implicit leading one.
    """

    __slots__ = ()

    @property
    def bias(self):
        return (1 << (self.exponent - 1)) - 1

    @property
    def total(self):
        return 1 + self.exponent + self.mantissa

    @property
    def sign_shift(self):
        return self.exponent + self.mantissa

    @property
    def exponent_mask(self):
        return ((1 << self.exponent) - 1) << self.mantissa

    @property
    def mantissa_mask(self):
        return (1 << self.mantissa) - 1

    @property
    def max_exponent(self):
        return (1 << self.exponent) - 1


# Parameters match IEEE 754 standard formats
FP16 = Format(5, 10)  # Half precision
FP32 = Format(8, 23)  # Single precision
FP64 = Format(11, 52)  # Double precision

SIGN_MASK = 0x8000
EXP_MASK = 0x7C00
MAN_MASK = 0x03FF
QUIET_BIT = 0x0200


def widen(bits, fmt):
    """Convert a binary16 pattern into the ``fmt`` encoding.

    Exact for every input. NaN payloads, including the quiet bit, are shifted
    into the top of the wide mantissa unchanged.
    """
    sign = (bits & SIGN_MASK) >> 15 << fmt.sign_shift
    h_exp = (bits & EXP_MASK) >> 10
    h_man = bits & MAN_MASK
    shift = fmt.mantissa - FP16.mantissa

    if h_exp == 0:
        if h_man == 0:
            return sign
        # Subnormal: shift until the leading one reaches the implicit bit
        h_man <<= 1
        while (h_man & 0x0400) == 0:
            h_man <<= 1
            h_exp += 1
        exp = fmt.bias - FP16.bias - h_exp
        return sign | (exp << fmt.mantissa) | ((h_man & MAN_MASK) << shift)

    if h_exp == FP16.max_exponent:
        # Inf or NaN
        return sign | fmt.exponent_mask | (h_man << shift)

    exp = h_exp - FP16.bias + fmt.bias
    return sign | (exp << fmt.mantissa) | (h_man << shift)


def narrow(bits, fmt):
    """Convert a pattern in the ``fmt`` encoding into binary16.

    Rounds to nearest, ties to even. Overflow saturates to a signed infinity,
    underflow goes through the subnormals to a signed zero, and a NaN stays a
    NaN with its sign bit.
    """
    sign = (bits >> fmt.sign_shift) & 1
    h_sign = sign << 15
    exp = (bits & fmt.exponent_mask) >> fmt.mantissa
    man = bits & fmt.mantissa_mask
    # Number of source mantissa bits that do not fit in binary16
    drop = fmt.mantissa - FP16.mantissa

    if exp == fmt.max_exponent:
        if man == 0:
            return h_sign | EXP_MASK
        # Keep the top of the payload and force the quiet bit so the result
        # cannot collapse into infinity.
        return h_sign | EXP_MASK | QUIET_BIT | (man >> drop)

    h_exp = exp - fmt.bias + FP16.bias

    if h_exp >= FP16.max_exponent:
        return h_sign | EXP_MASK

    if h_exp <= 0:
        # Source zeros and subnormals land here as well: their exponent is far
        # below anything binary16 can hold.
        shift = drop + 1 - h_exp
        if shift > fmt.mantissa + 1:
            return h_sign
        man |= 1 << fmt.mantissa
        h_man = man >> shift
        round_bit = 1 << (shift - 1)
        # Round bit set and either a sticky bit or an odd retained lsb
        if (man & round_bit) != 0 and (man & (3 * round_bit - 1)) != 0:
            h_man += 1
        # A carry out of the subnormal mantissa becomes exponent 1, which is
        # exactly the smallest normal.
        return h_sign | h_man

    h_man = man >> drop
    round_bit = 1 << (drop - 1)
    result = h_sign | (h_exp << 10) | h_man
    if (man & round_bit) != 0 and (man & (3 * round_bit - 1)) != 0:
        # The carry may ripple into the exponent, and from 0x7BFF into
        # infinity.
        result += 1
    return result


def f16_bits_to_f32_bits(bits):
    return widen(bits, FP32)


def f16_bits_to_f64_bits(bits):
    return widen(bits, FP64)


def f32_bits_to_f16_bits(bits):
    return narrow(bits, FP32)


def f64_bits_to_f16_bits(bits):
    return narrow(bits, FP64)


def _check_number(value):
    # numpy would parse text; that belongs to Half.parse
    if isinstance(value, (str, bytes, bytearray)):
        raise TypeError("expected a number, got %s" % type(value).__name__)


def f32_to_bits(value):
    """Raw binary32 encoding of ``value``.

    Anything that is not already a ``numpy.float32`` is cast to one first;
    magnitudes beyond the binary32 range become infinities.
    """
    _check_number(value)
    with np.errstate(over="ignore", invalid="ignore"):
        arr = np.asarray(value, dtype=np.float32)
    return arr.reshape(()).view(np.uint32).item()


def bits_to_f32(bits):
    arr = np.asarray(bits & 0xFFFFFFFF, dtype=np.uint32).reshape(())
    return arr.view(np.float32)[()]


def f64_to_bits(value):
    _check_number(value)
    arr = np.asarray(value, dtype=np.float64)
    return arr.reshape(()).view(np.uint64).item()


def bits_to_f64(bits):
    arr = np.asarray(bits & 0xFFFFFFFFFFFFFFFF, dtype=np.uint64).reshape(())
    return arr.view(np.float64).item()
