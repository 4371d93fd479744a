import collections

# value == mantissa * 2**twos * 5**fives, negated if is_negative
ScaledLiteral = collections.namedtuple(
    "ScaledLiteral", "mantissa twos fives is_negative had_decimal_point had_exponent"
)
