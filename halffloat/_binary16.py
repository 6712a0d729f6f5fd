"""
The binary16 value type.

``Half`` only stores values: it converts to and from the wider float types
and compares like an IEEE float, but it has no arithmetic. Widen with
``to_f32``/``to_f64`` to compute.
"""

import enum
import logging
import operator

import numpy as np

from ._convert import (
    EXP_MASK,
    MAN_MASK,
    SIGN_MASK,
    bits_to_f32,
    bits_to_f64,
    f16_bits_to_f32_bits,
    f16_bits_to_f64_bits,
    f32_bits_to_f16_bits,
    f32_to_bits,
    f64_bits_to_f16_bits,
    f64_to_bits,
)

logger = logging.getLogger(__name__)

MAGNITUDE_MASK = 0x7FFF


class FpCategory(enum.Enum):
    ZERO = "Zero"
    SUBNORMAL = "Subnormal"
    NORMAL = "Normal"
    INFINITE = "Infinite"
    NAN = "Nan"


class Ordering(enum.IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def _is_nan(bits):
    return (bits & MAGNITUDE_MASK) > EXP_MASK


def _both_zero(a, b):
    return (a | b) & MAGNITUDE_MASK == 0


class Half:
    """A 16-bit IEEE 754 binary16 floating point value.

    The only state is the raw bit pattern. Construct one with ``from_bits`` or
    by narrowing a wider float:

        >>> Half.from_f32(1.0)
        Half.from_bits(0x3C00)
        >>> Half.from_bits(0x3C00).to_f64()
        1.0
        >>> Half.from_f64(0.0) == Half.from_f64(-0.0)
        True
        >>> Half.NAN == Half.NAN
        False
    """

    __slots__ = ("_bits",)

    # Approximate number of significant decimal digits
    DIGITS = 3
    # Significand bits including the implicit leading one
    MANTISSA_DIGITS = 11
    MAX_EXP = 16
    MIN_EXP = -13
    MAX_10_EXP = 4
    MIN_10_EXP = -4
    RADIX = 2

    def __init__(self, bits=0):
        bits = operator.index(bits)
        if not 0 <= bits <= 0xFFFF:
            raise ValueError("binary16 bit pattern out of range: %r" % bits)
        self._bits = bits

    @classmethod
    def from_bits(cls, bits):
        """Wrap a raw 16-bit pattern. Every pattern is a valid value."""
        return cls(bits)

    @classmethod
    def from_f32(cls, value):
        """Narrow a binary32 value.

        Values too large for binary16 become +/-infinity, values too small
        become subnormals or +/-0, NaNs stay NaN with their sign. Everything
        else is rounded to the nearest representable value, ties to even.
        A Python ``float`` is rounded to binary32 first.
        """
        return cls(f32_bits_to_f16_bits(f32_to_bits(value)))

    @classmethod
    def from_f64(cls, value):
        """Narrow a binary64 value with the same rules as ``from_f32``."""
        return cls(f64_bits_to_f16_bits(f64_to_bits(value)))

    @classmethod
    def from_int(cls, value):
        value = operator.index(value)
        # Beyond this the result is infinite whatever the rounding, and
        # float() could overflow.
        if abs(value) >= 1 << 17:
            return cls.NEG_INFINITY if value < 0 else cls.INFINITY
        return cls.from_f64(float(value))

    @classmethod
    def from_numpy(cls, value):
        """Take the bits of a ``numpy.float16`` as is."""
        arr = np.asarray(value)
        if arr.dtype != np.float16:
            raise TypeError("expected a numpy.float16, got %s" % arr.dtype)
        return cls(arr.reshape(()).view(np.uint16).item())

    @classmethod
    def parse(cls, text):
        """Parse decimal text, narrowing through binary32.

        Raises the float parser's ``ValueError`` for malformed input.
        """
        try:
            value = float(text)
        except ValueError:
            logger.debug("could not parse %r as a binary16 value", text)
            raise
        return cls.from_f32(value)

    def to_bits(self):
        return self._bits

    @property
    def bits(self):
        return self._bits

    def to_f32(self):
        """Widen to a ``numpy.float32``. Exact, NaN payloads included."""
        return bits_to_f32(f16_bits_to_f32_bits(self._bits))

    def to_f64(self):
        """Widen to a Python ``float``. Exact, NaN payloads included."""
        return bits_to_f64(f16_bits_to_f64_bits(self._bits))

    def to_numpy(self):
        arr = np.asarray(self._bits, dtype=np.uint16).reshape(())
        return arr.view(np.float16)[()]

    def __float__(self):
        return self.to_f64()

    def is_nan(self):
        return _is_nan(self._bits)

    def is_infinite(self):
        return self._bits & MAGNITUDE_MASK == EXP_MASK

    def is_finite(self):
        return self._bits & EXP_MASK != EXP_MASK

    def is_normal(self):
        exp = self._bits & EXP_MASK
        return exp != EXP_MASK and exp != 0

    def classify(self):
        exp = self._bits & EXP_MASK
        man = self._bits & MAN_MASK
        if exp == 0:
            return FpCategory.ZERO if man == 0 else FpCategory.SUBNORMAL
        if exp == EXP_MASK:
            return FpCategory.INFINITE if man == 0 else FpCategory.NAN
        return FpCategory.NORMAL

    def is_sign_positive(self):
        """True for +0, +inf, positive values and NaNs with a clear sign bit."""
        return self._bits & SIGN_MASK == 0

    def is_sign_negative(self):
        return self._bits & SIGN_MASK != 0

    def signum(self):
        """``1.0`` for a clear sign bit, ``-1.0`` for a set one, NaN unchanged."""
        if self.is_nan():
            return self
        if self._bits & SIGN_MASK:
            return Half.NEG_ONE
        return Half.ONE

    def copysign(self, sign):
        """This magnitude with the sign bit of ``sign`` (another ``Half``)."""
        if not isinstance(sign, Half):
            raise TypeError("copysign expects a Half, got %s" % type(sign).__name__)
        return Half((self._bits & MAGNITUDE_MASK) | (sign._bits & SIGN_MASK))

    def __neg__(self):
        return Half(self._bits ^ SIGN_MASK)

    def __pos__(self):
        return self

    def __abs__(self):
        return Half(self._bits & MAGNITUDE_MASK)

    # Comparisons work on the raw patterns. A clear sign bit means the
    # unsigned order of the patterns is the numeric order; for two negative
    # values it is reversed.

    def __eq__(self, other):
        if not isinstance(other, Half):
            return NotImplemented
        a, b = self._bits, other._bits
        if _is_nan(a) or _is_nan(b):
            return False
        return a == b or _both_zero(a, b)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def partial_cmp(self, other):
        """Three-way comparison; ``None`` when either side is NaN."""
        if not isinstance(other, Half):
            raise TypeError("cannot compare Half with %s" % type(other).__name__)
        a, b = self._bits, other._bits
        if _is_nan(a) or _is_nan(b):
            return None
        neg = a & SIGN_MASK != 0
        other_neg = b & SIGN_MASK != 0
        if not neg and not other_neg:
            return Ordering((a > b) - (a < b))
        if not neg and other_neg:
            return Ordering.EQUAL if _both_zero(a, b) else Ordering.GREATER
        if neg and not other_neg:
            return Ordering.EQUAL if _both_zero(a, b) else Ordering.LESS
        return Ordering((b > a) - (b < a))

    def __lt__(self, other):
        if not isinstance(other, Half):
            return NotImplemented
        a, b = self._bits, other._bits
        if _is_nan(a) or _is_nan(b):
            return False
        neg = a & SIGN_MASK != 0
        other_neg = b & SIGN_MASK != 0
        if not neg and not other_neg:
            return a < b
        if not neg and other_neg:
            return False
        if neg and not other_neg:
            return not _both_zero(a, b)
        return a > b

    def __le__(self, other):
        if not isinstance(other, Half):
            return NotImplemented
        a, b = self._bits, other._bits
        if _is_nan(a) or _is_nan(b):
            return False
        neg = a & SIGN_MASK != 0
        other_neg = b & SIGN_MASK != 0
        if not neg and not other_neg:
            return a <= b
        if not neg and other_neg:
            return _both_zero(a, b)
        if neg and not other_neg:
            return True
        return a >= b

    def __gt__(self, other):
        if not isinstance(other, Half):
            return NotImplemented
        a, b = self._bits, other._bits
        if _is_nan(a) or _is_nan(b):
            return False
        neg = a & SIGN_MASK != 0
        other_neg = b & SIGN_MASK != 0
        if not neg and not other_neg:
            return a > b
        if not neg and other_neg:
            return not _both_zero(a, b)
        if neg and not other_neg:
            return False
        return a < b

    def __ge__(self, other):
        if not isinstance(other, Half):
            return NotImplemented
        a, b = self._bits, other._bits
        if _is_nan(a) or _is_nan(b):
            return False
        neg = a & SIGN_MASK != 0
        other_neg = b & SIGN_MASK != 0
        if not neg and not other_neg:
            return a >= b
        if not neg and other_neg:
            return True
        if neg and not other_neg:
            return _both_zero(a, b)
        return a <= b

    def __hash__(self):
        if self.is_nan():
            return hash(self._bits)
        # Equal values widen to equal floats, and hash(0.0) == hash(-0.0)
        return hash(self.to_f64())

    def __reduce__(self):
        return (Half.from_bits, (self._bits,))

    def __repr__(self):
        return "Half.from_bits(0x%04X)" % self._bits

    def __str__(self):
        return str(self.to_f32())

    def __format__(self, format_spec):
        if not format_spec:
            return str(self)
        return format(float(self.to_f32()), format_spec)


Half.ZERO = Half(0x0000)
Half.NEG_ZERO = Half(0x8000)
Half.ONE = Half(0x3C00)
Half.NEG_ONE = Half(0xBC00)
Half.INFINITY = Half(0x7C00)
Half.NEG_INFINITY = Half(0xFC00)
Half.NAN = Half(0x7E00)
Half.MAX = Half(0x7BFF)  # 65504
Half.MIN = Half(0xFBFF)  # -65504
Half.MIN_POSITIVE = Half(0x0400)  # 2**-14, smallest normal
Half.MIN_POSITIVE_SUBNORMAL = Half(0x0001)  # 2**-24
Half.MAX_SUBNORMAL = Half(0x03FF)
Half.EPSILON = Half(0x1400)  # 2**-10

Half.E = Half(0x4170)
Half.PI = Half(0x4248)
Half.FRAC_1_PI = Half(0x3518)
Half.FRAC_1_SQRT_2 = Half(0x39A8)
Half.FRAC_2_PI = Half(0x3918)
Half.FRAC_2_SQRT_PI = Half(0x3C83)
Half.FRAC_PI_2 = Half(0x3E48)
Half.FRAC_PI_3 = Half(0x3C30)
Half.FRAC_PI_4 = Half(0x3A48)
Half.FRAC_PI_6 = Half(0x3830)
Half.FRAC_PI_8 = Half(0x3648)
Half.LN_10 = Half(0x409B)
Half.LN_2 = Half(0x398C)
Half.LOG10_E = Half(0x36F3)
Half.LOG10_2 = Half(0x34D1)
Half.LOG2_E = Half(0x3DC5)
Half.LOG2_10 = Half(0x42A5)
Half.SQRT_2 = Half(0x3DA8)
