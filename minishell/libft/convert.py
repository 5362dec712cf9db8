"""Number conversion and whole-string building helpers."""

from typing import Callable, List, MutableSequence, Optional

from minishell.libft.chars import isdigit

_SPACES = frozenset("\t\n\v\f\r ")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted. Parsing
    stops at the first non-digit; no digits at all gives 0.
    """
    position = 0
    while position < len(text) and text[position] in _SPACES:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    number = 0
    for char in text[position:]:
        if not isdigit(char):
            break
        number = number * 10 + ord(char) - ord("0")
    return sign * number


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    return str(int(n))


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenation of two strings."""
    return first + second


def strtrim(text: str, charset: Optional[str]) -> str:
    """``text`` with characters from ``charset`` removed from both ends.

    With no charset the text is returned unchanged.
    """
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, separator: str) -> List[str]:
    """The non-empty pieces of ``text`` between ``separator`` characters."""
    if len(separator) != 1:
        raise ValueError(f"expected a single separator character, got {separator!r}")
    return [piece for piece in text.split(separator) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` for each character, in place.

    A returned character replaces the one at that index; None leaves it.
    """
    for index, char in enumerate(chars):
        result = func(index, char)
        if result is not None:
            chars[index] = result