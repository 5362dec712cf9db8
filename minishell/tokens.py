"""Token kinds and token-list manipulation for the shell's command line."""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Iterable, List


class TokenType(Enum):
    """The kind of a token on the command line."""

    WORD = auto()
    COMMAND = auto()
    PIPE = auto()
    REDIR_IN = auto()
    REDIR_OUT = auto()
    APPEND = auto()
    HEREDOC = auto()
    UNKNOWN = auto()


@dataclass
class Token:
    """A piece of the command line and its kind."""

    value: str
    type: TokenType = TokenType.UNKNOWN


def replace_token_with_multiple(
    tokens: List[Token], index: int, parts: Iterable[str]
) -> List[Token]:
    """Return a new token list with the token at ``index`` replaced by ``parts``.

    Each part becomes an UNKNOWN token; the other tokens are copied.
    """
    if not 0 <= index < len(tokens):
        raise IndexError(f"token index {index} out of range")
    inserted = [Token(part, TokenType.UNKNOWN) for part in parts]
    before = [replace(token) for token in tokens[:index]]
    after = [replace(token) for token in tokens[index + 1:]]
    return before + inserted + after