import logging
from string import digits

from .characters import BLANKS, CharSource
from .scaling import scaled_to_float
from .structures import ScaledLiteral

logger = logging.getLogger(__name__)

UINT32_MAX = 0xFFFFFFFF
INT32_MAX = 0x7FFFFFFF

DIGITS = set(digits)
ZERO = ord("0")
PERIOD = "."
PLUS = "+"
MINUS = "-"
EXPONENT_MARKERS = set("eE")


def _wrap_int32(value: int) -> int:
    return ((value + INT32_MAX + 1) & UINT32_MAX) - INT32_MAX - 1


class NumericConverter:
    """
    Reads an integer or real literal one character at a time and holds it as mantissa * 2**twos * 5**fives.

    The mantissa never leaves the unsigned 32-bit range. Digits that no longer fit are folded into the two scale
    exponents instead. Every field is reset by accumulate(), so one instance can be reused for any number of
    literals.
    """

    blank_chars = BLANKS

    def __init__(self) -> None:
        self.mantissa = 0
        self.twos = 0
        self.fives = 0
        self.is_negative = False
        self.had_decimal_point = False
        self.had_exponent = False

    def accumulate(self, c: str, accept_negative: bool, accept_reals: bool, next_char: CharSource) -> bool:
        """
        Read a literal whose first character is c, calling next_char for each further character.

        Returns False if no valid literal was found. Characters already read are not given back in that case.
        On success the last character read is the one that ended the literal.
        """
        self.mantissa = self.twos = self.fives = 0
        self.is_negative = self.had_decimal_point = self.had_exponent = False
        had_digit = False

        while c in self.blank_chars:
            c = next_char()

        if c == PLUS:
            c = next_char()
        elif c == MINUS:
            if not accept_negative:
                logger.debug("Leading minus sign not accepted")
                return False
            self.is_negative = True
            c = next_char()

        # Leading zeros only affect the scale once past the decimal point
        while True:
            if c == "0":
                had_digit = True
                if self.had_decimal_point:
                    self.twos -= 1
                    self.fives -= 1
            elif c == PERIOD and accept_reals and not self.had_decimal_point:
                self.had_decimal_point = True
            else:
                break
            c = next_char()

        overflowed = False
        while True:
            if c in DIGITS:
                had_digit = True
                if not overflowed:
                    overflowed = not self._add_digit(ord(c) - ZERO)
                elif not self.had_decimal_point:
                    self.twos += 1
                    self.fives += 1
            elif c == PERIOD and accept_reals and not self.had_decimal_point:
                self.had_decimal_point = True
            else:
                break
            c = next_char()

        if not had_digit:
            logger.debug("Numeric literal has no digits")
            return False

        if accept_reals and c in EXPONENT_MARKERS:
            c = next_char()
            exp_negative = c == MINUS
            if exp_negative or c == PLUS:
                c = next_char()
            if c not in DIGITS:
                logger.debug("Exponent marker not followed by digits")
                return False
            self.had_exponent = True
            exponent = 0
            while c in DIGITS:
                exponent = (exponent * 10 + ord(c) - ZERO) & UINT32_MAX
                c = next_char()
            if exp_negative:
                exponent = -exponent
            self.twos += exponent
            self.fives += exponent

        return True

    def _add_digit(self, digit: int) -> bool:
        "Append a digit to the mantissa. Returns False if it had to be folded into the scale."
        if self.mantissa <= (UINT32_MAX - digit) // 10:
            self.mantissa = self.mantissa * 10 + digit
            if self.had_decimal_point:
                self.twos -= 1
                self.fives -= 1
            return True

        logger.debug("Mantissa overflow after %d, folding further digits into the scale", self.mantissa)
        fives_digit = (digit + 1) // 2
        twos_digit = (digit + 4) // 5
        if self.mantissa <= (UINT32_MAX - fives_digit) // 5:
            # times 5 instead of 10, the missing factor of 2 goes into the scale
            self.mantissa = self.mantissa * 5 + fives_digit
            if self.had_decimal_point:
                self.fives -= 1
            else:
                self.twos += 1
        elif self.mantissa <= (UINT32_MAX - twos_digit) // 2:
            self.mantissa = self.mantissa * 2 + twos_digit
            if self.had_decimal_point:
                self.twos -= 1
            else:
                self.fives += 1
        elif not self.had_decimal_point:
            self.twos += 1
            self.fives += 1
        return False

    @property
    def literal(self) -> ScaledLiteral:
        return ScaledLiteral(
            mantissa=self.mantissa,
            twos=self.twos,
            fives=self.fives,
            is_negative=self.is_negative,
            had_decimal_point=self.had_decimal_point,
            had_exponent=self.had_exponent,
        )

    # The most negative int32 is deliberately not accepted
    def fits_in_int32(self) -> bool:
        return (
            not self.had_decimal_point
            and not self.had_exponent
            and self.twos == 0
            and self.fives == 0
            and self.mantissa <= INT32_MAX
        )

    def fits_in_uint32(self) -> bool:
        return (
            not self.had_decimal_point
            and not self.had_exponent
            and (not self.is_negative or self.mantissa == 0)
            and self.twos == 0
            and self.fives == 0
            and self.mantissa <= UINT32_MAX
        )

    def get_int32(self) -> int:
        return _wrap_int32(-self.mantissa if self.is_negative else self.mantissa)

    def get_uint32(self) -> int:
        return self.mantissa & UINT32_MAX

    def get_float(self) -> float:
        return scaled_to_float(self.literal)

    def get_digits_after_point(self) -> int:
        "Number of decimal places worth displaying. Callers must limit it to what their float type can hold."
        places = min(self.twos, self.fives)
        return -places if places < 0 else 0
