import logging

from .characters import StringSource, discard_blanks
from .converter import NumericConverter
from .exceptions import LiteralOutOfRange, MalformedLiteral
from .structures import ScaledLiteral

logger = logging.getLogger(__name__)


def _accumulate(text: str, *, accept_negative: bool = True, accept_reals: bool = True) -> NumericConverter:
    converter = NumericConverter()
    source = StringSource(text)
    if not converter.accumulate(source(), accept_negative, accept_reals, source):
        logger.debug("Rejected numeric literal %r", text)
        raise MalformedLiteral(f'Malformed numeric literal "{text}"')
    source.unread()
    end = discard_blanks(text, source.position)
    if text[end:]:
        logger.debug("Trailing text at offset %d in %r", end, text)
        raise MalformedLiteral(f'Trailing text after numeric literal in "{text}"')
    return converter


def read_literal(text: str, *, accept_negative: bool = True, accept_reals: bool = True) -> ScaledLiteral:
    return _accumulate(text, accept_negative=accept_negative, accept_reals=accept_reals).literal


def parse_float(text: str) -> float:
    return _accumulate(text).get_float()


def parse_int32(text: str) -> int:
    converter = _accumulate(text)
    if not converter.fits_in_int32():
        raise LiteralOutOfRange(f'"{text}" is not a 32-bit signed integer')
    return converter.get_int32()


def parse_uint32(text: str) -> int:
    converter = _accumulate(text)
    if not converter.fits_in_uint32():
        raise LiteralOutOfRange(f'"{text}" is not a 32-bit unsigned integer')
    return converter.get_uint32()
