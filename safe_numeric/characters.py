import functools
from typing import TextIO

from typing_extensions import Protocol

END = ""
BLANKS = frozenset(" \t")


class CharSource(Protocol):
    def __call__(self) -> str:
        ...


def nextchr(text: str, i: int) -> str:
    if i < len(text):
        return text[i]
    return END


def discard_blanks(text: str, start: int = 0) -> int:
    "Return the index of the first character at or after start that is not a space or HTAB."
    i = start
    ln = len(text)
    while True:
        if i >= ln or text[i] not in BLANKS:
            return i
        i += 1


class StringSource:
    """
    Character source over an in-memory string.

    Each call returns the next character, then END forever once the text is exhausted. ``position`` is the index
    of the character the next call will return.
    """

    def __init__(self, text: str, start: int = 0) -> None:
        self.text = text
        self.position = start

    def __call__(self) -> str:
        c = nextchr(self.text, self.position)
        self.position += 1
        return c

    def unread(self) -> None:
        # A literal always ends by reading one character that is not part of it
        self.position -= 1


def stream_source(stream: TextIO) -> CharSource:
    return functools.partial(stream.read, 1)
