#!/usr/bin/env python3
"""
halffloat: IEEE 754 binary16 storage type

This library provides a 16-bit "half precision" floating point value for
compact storage, with correctly rounded conversion to and from 32-bit and
64-bit floats and IEEE comparison semantics. It does not do arithmetic on
half values: widen them, compute, and narrow the result.

Examples:
    >>> from halffloat import Half
    >>> x = Half.from_f32(2001.5)
    >>> x
    Half.from_bits(0x67D2)
    >>> x.to_f32()
    np.float32(2002.0)

    >>> Half.from_bits(0x7C00).classify()
    <FpCategory.INFINITE: 'Infinite'>
    >>> Half.from_bits(0xFC01) == Half.from_bits(0xFC01)
    False
    >>> Half.ZERO == Half.NEG_ZERO
    True

    >>> serde.to_bytes(Half.ONE)
    b'\\x00<'

Constants:
    FP16, FP32, FP64: Bit layouts of the IEEE binary formats
    Half.ZERO, Half.ONE, Half.INFINITY, Half.NAN, Half.MAX, Half.PI, ...: Named values
    Half, FpCategory, Ordering: The value type and its query results
    widen, narrow: The bit-level conversion routines, generic over a Format
"""

from ._binary16 import FpCategory, Half, Ordering
from ._convert import (
    FP16,
    FP32,
    FP64,
    Format,
    f16_bits_to_f32_bits,
    f16_bits_to_f64_bits,
    f32_bits_to_f16_bits,
    f64_bits_to_f16_bits,
    narrow,
    widen,
)
from . import serde

__all__ = [
    "FP16",
    "FP32",
    "FP64",
    "Format",
    "FpCategory",
    "Half",
    "Ordering",
    "f16_bits_to_f32_bits",
    "f16_bits_to_f64_bits",
    "f32_bits_to_f16_bits",
    "f64_bits_to_f16_bits",
    "narrow",
    "serde",
    "widen",
]

version = "0.1.0"
