"""Quote removal and ``$`` expansion of command-line tokens."""

import os
from typing import List, Tuple

from minishell.environment import ShellState
from minishell.libft.chars import isalnum, isalpha
from minishell.libft.convert import split
from minishell.tokens import Token, replace_token_with_multiple


def _is_name_start(char: str) -> bool:
    return isalpha(char) or char == "_"


def _is_name_char(char: str) -> bool:
    return isalnum(char) or char == "_"


def _dollar(text: str, position: int, state: ShellState) -> Tuple[str, int]:
    """Expand the ``$`` at ``position``; return the value and the next position."""
    position += 1
    if position < len(text) and text[position] == "?":
        return str(state.last_status), position + 1
    if position >= len(text) or not _is_name_start(text[position]):
        return "", position
    start = position
    while position < len(text) and _is_name_char(text[position]):
        position += 1
    return os.environ.get(text[start:position], ""), position


def _double_quoted(text: str, position: int, state: ShellState) -> Tuple[str, int]:
    position += 1
    pieces: List[str] = []
    while position < len(text) and text[position] != '"':
        if text[position] == "$":
            piece, position = _dollar(text, position, state)
        else:
            piece, position = text[position], position + 1
        pieces.append(piece)
    if position < len(text):
        position += 1
    return "".join(pieces), position


def _single_quoted(text: str, position: int) -> Tuple[str, int]:
    position += 1
    end = text.find("'", position)
    if end < 0:
        return text[position:], len(text)
    return text[position:end], end + 1


def expand_token_value(text: str, state: ShellState) -> str:
    """Remove quotes from ``text`` and expand ``$NAME`` and ``$?`` outside single quotes."""
    pieces: List[str] = []
    position = 0
    while position < len(text):
        char = text[position]
        if char == "'":
            piece, position = _single_quoted(text, position)
        elif char == '"':
            piece, position = _double_quoted(text, position, state)
        elif char == "$":
            piece, position = _dollar(text, position, state)
        else:
            piece, position = char, position + 1
        pieces.append(piece)
    return "".join(pieces)


def is_quoted(text: str) -> bool:
    """True when ``text`` begins and ends with the same kind of quote."""
    return len(text) >= 2 and text[0] == text[-1] and text[0] in "'\""


def expand(tokens: List[Token], state: ShellState) -> List[Token]:
    """Expand every token value and return the resulting token list.

    An unquoted token whose expansion holds a space is split into several
    tokens; expansion stops there and a new list is returned. Otherwise the
    tokens are updated in place and the same list is returned.
    """
    for index, token in enumerate(tokens):
        expanded = expand_token_value(token.value, state)
        if " " in expanded and not is_quoted(token.value):
            return replace_token_with_multiple(tokens, index, split(expanded, " "))
        token.value = expanded
    return tokens