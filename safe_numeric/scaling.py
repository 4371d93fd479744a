import math
import struct

from .structures import ScaledLiteral

# Nearest doubles to 10**-1 .. 10**-12
INVERSE_POWERS_OF_TEN = (
    0.1,
    0.01,
    0.001,
    0.0001,
    0.00001,
    0.000001,
    0.0000001,
    0.00000001,
    0.000000001,
    0.0000000001,
    0.00000000001,
    0.000000000001,
)


def to_float32(value: float) -> float:
    "Round value to the nearest single-precision float."
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def times_power_of_ten(value: float, exponent: int) -> float:
    if exponent == 0 or value == 0.0:
        return value
    if -len(INVERSE_POWERS_OF_TEN) <= exponent < 0:
        return value * INVERSE_POWERS_OF_TEN[-exponent - 1]
    try:
        return value * 10.0 ** exponent
    except OverflowError:
        # exponents too large for a double, or for a float conversion of the int
        return math.copysign(math.inf if exponent > 0 else 0.0, value)


def scaled_to_float(literal: ScaledLiteral) -> float:
    """
    Reconstruct the single-precision value of a ScaledLiteral.

    Whole powers of ten are applied first; the invariant that twos and fives differ by at most one leaves a single
    residual factor of 2 or 5 to apply afterwards. The sign is applied last.
    """
    value = times_power_of_ten(float(literal.mantissa), min(literal.twos, literal.fives))
    if literal.fives > literal.twos:
        value *= 5
    elif literal.twos > literal.fives:
        value *= 2
    value = to_float32(value)
    return -value if literal.is_negative else value
