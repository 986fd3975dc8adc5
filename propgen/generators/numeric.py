"""
Built-in arbitraries for primitive numeric types.
"""

import math
import struct
import sys
from random import Random

from .sampled import SampledArbitrary

INT_MIN = -2**31
INT_MAX = 2**31 - 1
LONG_MIN = -2**63
LONG_MAX = 2**63 - 1

# Single-precision limits, read back from their bit patterns
FLOAT_MIN_POSITIVE = struct.unpack('<f', struct.pack('<I', 0x00000001))[0]
FLOAT_MAX = struct.unpack('<f', struct.pack('<I', 0x7f7fffff))[0]

DOUBLE_MIN_POSITIVE = 5e-324
DOUBLE_MAX = sys.float_info.max


def _draw_int(rnd: Random) -> int:
    return rnd.randint(INT_MIN, INT_MAX)


def _draw_long(rnd: Random) -> int:
    return rnd.randint(LONG_MIN, LONG_MAX)


def _draw_float(rnd: Random) -> float:
    """Reinterpret random 32-bit patterns as single-precision values until one is finite."""
    while True:
        value = struct.unpack('<f', struct.pack('<I', rnd.getrandbits(32)))[0]
        if math.isfinite(value):
            return value


def _draw_double(rnd: Random) -> float:
    """Reinterpret random 64-bit patterns as doubles until one is finite."""
    while True:
        value = struct.unpack('<d', struct.pack('<Q', rnd.getrandbits(64)))[0]
        if math.isfinite(value):
            return value


class IntArbitrary(SampledArbitrary):
    """32-bit signed integers."""

    EDGECASES = (0, 1, -1, INT_MAX, INT_MIN)

    def __init__(self, iterations: int):
        super().__init__(_draw_int, self.EDGECASES, iterations)


class LongArbitrary(SampledArbitrary):
    """64-bit signed integers."""

    EDGECASES = (0, 1, -1, LONG_MAX, LONG_MIN)

    def __init__(self, iterations: int):
        super().__init__(_draw_long, self.EDGECASES, iterations)


class FloatArbitrary(SampledArbitrary):
    """
    Single-precision floating point values.

    Python floats are doubles; every value produced here is exactly
    representable in 32 bits.
    """

    EDGECASES = (0.0, 1.0, -1.0, FLOAT_MIN_POSITIVE, FLOAT_MAX, -FLOAT_MAX,
                 -math.inf, math.inf, math.nan)

    def __init__(self, iterations: int):
        super().__init__(_draw_float, self.EDGECASES, iterations)


class DoubleArbitrary(SampledArbitrary):
    """Double-precision floating point values."""

    EDGECASES = (0.0, 1.0, -1.0, DOUBLE_MIN_POSITIVE, DOUBLE_MAX, -DOUBLE_MAX,
                 -math.inf, math.inf, math.nan)

    def __init__(self, iterations: int):
        super().__init__(_draw_double, self.EDGECASES, iterations)
