"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The case converters return a value of the same kind as they were given.
"""

from typing import Union

CharLike = Union[int, str]

_LOWER_A = ord("a")
_LOWER_Z = ord("z")
_UPPER_A = ord("A")
_UPPER_Z = ord("Z")
_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _LOWER_A <= code <= _LOWER_Z or _UPPER_A <= code <= _UPPER_Z


def isdigit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return _DIGIT_0 <= _code(c) <= _DIGIT_9


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged."""
    code = _code(c)
    if _LOWER_A <= code <= _LOWER_Z:
        code -= _CASE_OFFSET
    return _same_kind(c, code)


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged."""
    code = _code(c)
    if _UPPER_A <= code <= _UPPER_Z:
        code += _CASE_OFFSET
    return _same_kind(c, code)