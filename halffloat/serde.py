"""
Raw binary16 serialization.

Values are written as their 16-bit pattern and nothing else, so the output
can be read by any other binary16 producer or consumer (image formats, ML
tensors, GPU buffers).
"""

import logging
import struct

import numpy as np

from ._binary16 import Half

logger = logging.getLogger(__name__)

_BYTEORDER = {"little": "<", "big": ">"}


def _prefix(byteorder):
    try:
        return _BYTEORDER[byteorder]
    except KeyError:
        raise ValueError("byteorder must be 'little' or 'big', not %r" % (byteorder,)) from None


def to_raw(value):
    return value.to_bits()


def from_raw(value):
    return Half.from_bits(value)


def to_bytes(value, byteorder="little"):
    return struct.pack(_prefix(byteorder) + "H", value.to_bits())


def from_bytes(data, byteorder="little"):
    prefix = _prefix(byteorder)
    if len(data) != 2:
        raise ValueError("a binary16 value is 2 bytes, got %d" % len(data))
    return Half.from_bits(struct.unpack(prefix + "H", data)[0])


def pack(values, byteorder="little"):
    """Concatenate the patterns of ``values`` into one buffer."""
    bits = [v.to_bits() for v in values]
    return struct.pack("%s%dH" % (_prefix(byteorder), len(bits)), *bits)


def unpack(data, byteorder="little"):
    prefix = _prefix(byteorder)
    if len(data) % 2:
        raise ValueError("buffer length %d is not a multiple of 2" % len(data))
    count = len(data) // 2
    return [Half.from_bits(b) for b in struct.unpack("%s%dH" % (prefix, count), data)]


def to_ndarray(values):
    """Build a ``numpy.float16`` array holding exactly these bit patterns."""
    bits = np.array([v.to_bits() for v in values], dtype=np.uint16)
    return bits.view(np.float16)


def from_ndarray(array):
    """Read a numpy array as a flat list of ``Half``.

    ``float16`` arrays are taken bit for bit. Other float dtypes are narrowed
    element by element through binary64 (binary32 for ``float32``).
    """
    array = np.asarray(array)
    if array.dtype == np.float16:
        return [Half.from_bits(b) for b in array.reshape(-1).view(np.uint16).tolist()]
    if array.dtype == np.float32:
        narrow = Half.from_f32
    elif np.issubdtype(array.dtype, np.floating):
        narrow = Half.from_f64
    else:
        raise TypeError("expected a floating point array, got %s" % array.dtype)
    logger.debug("narrowing %d %s values to binary16", array.size, array.dtype)
    return [narrow(x) for x in array.reshape(-1)]
