from string import ascii_letters, digits
from typing import Tuple

from .characters import discard_blanks, nextchr
from .scaling import times_power_of_ten, to_float32

ULONG_MAX = 0xFFFFFFFF

DIGITS = set(digits)
ALNUM = set(digits + ascii_letters)
HEX_MARKERS = set("xX")
EXPONENT_MARKERS = set("eE")
PERIOD = "."
PLUS = "+"
MINUS = "-"


def _digit_value(c: str) -> int:
    "Value of c as a base-36 digit, or 36 if it is not one."
    if c in ALNUM:
        return int(c, 36)
    return 36


def _valid_base(base: int) -> bool:
    return base == 0 or 2 <= base <= 36


def safe_strtod(text: str, start: int = 0) -> Tuple[int, float]:
    """
    Parse a real literal at text[start:] by accumulating the digits either side of the point separately.

    Returns (end, value) where end is the index just past the literal, or start if there was no literal.
    """
    i = discard_blanks(text, start)
    negative = nextchr(text, i) == MINUS
    if negative or nextchr(text, i) == PLUS:
        i += 1

    had_digit = False
    value_before_point = 0.0
    while nextchr(text, i) in DIGITS:
        value_before_point = value_before_point * 10 + int(text[i])
        had_digit = True
        i += 1

    value_after_point = 0
    digits_after_point = 0
    if nextchr(text, i) == PERIOD:
        j = i + 1
        overflowed = False
        while nextchr(text, j) in DIGITS:
            if not overflowed:
                digit = int(text[j])
                if value_after_point <= (ULONG_MAX - digit) // 10:
                    value_after_point = value_after_point * 10 + digit
                    digits_after_point += 1
                else:
                    overflowed = True
                    if digit >= 5 and value_after_point != ULONG_MAX:
                        value_after_point += 1
            had_digit = True
            j += 1
        if had_digit:
            i = j

    if not had_digit:
        return start, 0.0

    exponent = 0
    if nextchr(text, i) in EXPONENT_MARKERS:
        j = i + 1
        exp_negative = nextchr(text, j) == MINUS
        if exp_negative or nextchr(text, j) == PLUS:
            j += 1
        if nextchr(text, j) in DIGITS:
            while nextchr(text, j) in DIGITS:
                exponent = exponent * 10 + int(text[j])
                j += 1
            if exp_negative:
                exponent = -exponent
            i = j

    if value_after_point != 0:
        if value_before_point == 0.0:
            value = times_power_of_ten(float(value_after_point), exponent - digits_after_point)
        else:
            fraction = times_power_of_ten(float(value_after_point), -digits_after_point)
            value = times_power_of_ten(fraction + value_before_point, exponent)
    else:
        value = times_power_of_ten(value_before_point, exponent)
    return i, -value if negative else value


def safe_strtof(text: str, start: int = 0) -> Tuple[int, float]:
    end, value = safe_strtod(text, start)
    return end, to_float32(value)


def parse_unsigned(text: str, start: int = 0, base: int = 10) -> Tuple[int, int]:
    """
    Parse an unsigned integer in the given base the way C strtoul does.

    Base 0 selects hex for a 0x prefix, octal for a leading 0 and decimal otherwise. A leading minus sign negates
    the result modulo 2**32. Values beyond ULONG_MAX saturate. Returns (end, value), with end == start if no digits
    were found or base is not 0 or 2..36.
    """
    if not _valid_base(base):
        return start, 0
    i = discard_blanks(text, start)
    negative = nextchr(text, i) == MINUS
    if negative or nextchr(text, i) == PLUS:
        i += 1

    if (
        base in (0, 16)
        and nextchr(text, i) == "0"
        and nextchr(text, i + 1) in HEX_MARKERS
        and _digit_value(nextchr(text, i + 2)) < 16
    ):
        base = 16
        i += 2
    elif base == 0:
        base = 8 if nextchr(text, i) == "0" else 10

    value = 0
    overflowed = False
    j = i
    while True:
        digit = _digit_value(nextchr(text, j))
        if digit >= base:
            break
        if not overflowed:
            value = value * base + digit
            overflowed = value > ULONG_MAX
        j += 1

    if j == i:
        return start, 0
    if overflowed:
        return j, ULONG_MAX
    return j, (-value if negative else value) & ULONG_MAX


def safe_strtoul(text: str, start: int = 0, base: int = 10) -> Tuple[int, int]:
    "Like parse_unsigned, but a leading minus sign is rejected. Returns (index of the sign, 0) in that case."
    if not _valid_base(base):
        return start, 0
    i = discard_blanks(text, start)
    if nextchr(text, i) == MINUS:
        return i, 0
    return parse_unsigned(text, i, base)
