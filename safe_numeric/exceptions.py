class SafeNumericException(Exception):
    "Base class for exceptions raised by safe_numeric"


class MalformedLiteral(SafeNumericException, ValueError):
    "Class for exceptions raised when text does not hold a well-formed numeric literal"


class LiteralOutOfRange(SafeNumericException, ValueError):
    "Class for exceptions raised when a numeric literal does not fit the requested integer type"
