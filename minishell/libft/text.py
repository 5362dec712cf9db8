"""String searching, comparison, bounded copying and tokenising.

Positions are returned as indices into the searched string, or ``None``
when nothing is found. Searching for the NUL character finds the end of
the string, as a terminated string would.
"""

from itertools import islice
from typing import Iterator, Optional, Tuple, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return chr(c)


def _codes(text: str) -> Iterator[int]:
    """Character codes of ``text`` followed by a terminating zero."""
    yield from map(ord, text)
    yield 0


def _compare(first: str, second: str, limit: Optional[int]) -> int:
    pairs = zip(_codes(first), _codes(second))
    if limit is not None:
        pairs = islice(pairs, limit)
    for a, b in pairs:
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``text``, or None."""
    char = _char(c)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``text``, or None."""
    char = _char(c)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; the sign tells the ordering."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return _compare(first, second, count)


def strcmp(first: str, second: str) -> int:
    """Compare two strings; the sign tells the ordering."""
    return _compare(first, second, None)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` in the first ``length`` characters of ``big``, or None."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copy that fits and the full length of ``src``; a result
    length not below ``size`` means the copy was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length it tried to create.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strtok(text: str, delimiters: str) -> Iterator[str]:
    """Yield the non-empty runs of ``text`` between delimiter characters."""
    token: list = []
    for char in text:
        if char in delimiters:
            if token:
                yield "".join(token)
                token = []
        else:
            token.append(char)
    if token:
        yield "".join(token)


def path_join(directory: str, filename: str) -> str:
    """Join a directory and a file name with a single slash."""
    return f"{directory}/{filename}"