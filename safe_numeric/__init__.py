from .characters import CharSource, StringSource, stream_source  # noqa:F401
from .converter import NumericConverter  # noqa:F401
from .exceptions import LiteralOutOfRange, MalformedLiteral, SafeNumericException  # noqa:F401
from .readers import parse_float, parse_int32, parse_uint32, read_literal  # noqa:F401
from .scaling import scaled_to_float, times_power_of_ten, to_float32  # noqa:F401
from .strtod import parse_unsigned, safe_strtod, safe_strtof, safe_strtoul  # noqa:F401
from .structures import ScaledLiteral  # noqa:F401
