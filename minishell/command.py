"""Turning tokens into commands, applying redirections and running built-ins."""

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, TextIO

from minishell.builtins import is_builtin, run_builtin
from minishell.environment import ShellState
from minishell.tokens import Token, TokenType

STDIN_FILENO = 0
STDOUT_FILENO = 1

_ARGUMENT_TYPES = frozenset({TokenType.COMMAND, TokenType.WORD})
_FILE_MODE = 0o644
_OUTPUT_FLAGS = {
    TokenType.REDIR_OUT: os.O_CREAT | os.O_WRONLY | os.O_TRUNC,
    TokenType.APPEND: os.O_CREAT | os.O_WRONLY | os.O_APPEND,
}


@dataclass
class Command:
    """Arguments of one command and the descriptors it reads from and writes to."""

    argv: List[str] = field(default_factory=list)
    infile: int = STDIN_FILENO
    outfile: int = STDOUT_FILENO

    def close(self) -> None:
        """Close any redirected descriptors and fall back to the standard ones."""
        if self.infile != STDIN_FILENO:
            os.close(self.infile)
            self.infile = STDIN_FILENO
        if self.outfile != STDOUT_FILENO:
            os.close(self.outfile)
            self.outfile = STDOUT_FILENO

    def __enter__(self) -> "Command":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def tokens_to_argv(tokens: Iterable[Token]) -> List[str]:
    """Values of the leading run of command and word tokens."""
    argv = []
    for token in tokens:
        if token.type not in _ARGUMENT_TYPES:
            break
        argv.append(token.value)
    return argv


def _replace_fd(current: int, standard: int, replacement: int) -> int:
    if current != standard:
        os.close(current)
    return replacement


def parse_tokens_to_command(tokens: Iterable[Token]) -> Command:
    """Build a Command from the tokens up to the first pipe.

    Output, append and input redirections open their target files; an
    OSError from opening one propagates after any files already opened
    are closed.
    """
    command = Command()
    stream = iter(tokens)
    try:
        for token in stream:
            if token.type is TokenType.PIPE:
                break
            if token.type in _OUTPUT_FLAGS or token.type is TokenType.REDIR_IN:
                target = next(stream, None)
                if target is None:
                    break
                if token.type is TokenType.REDIR_IN:
                    fd = os.open(target.value, os.O_RDONLY)
                    command.infile = _replace_fd(command.infile, STDIN_FILENO, fd)
                else:
                    fd = os.open(target.value, _OUTPUT_FLAGS[token.type], _FILE_MODE)
                    command.outfile = _replace_fd(command.outfile, STDOUT_FILENO, fd)
            elif token.type in _ARGUMENT_TYPES:
                command.argv.append(token.value)
    except BaseException:
        command.close()
        raise
    return command


def execute_command(
    tokens: Iterable[Token], state: ShellState, out: Optional[TextIO] = None
) -> None:
    """Run the command formed by the leading words when it is a built-in."""
    argv = tokens_to_argv(tokens)
    if argv and is_builtin(argv[0]):
        run_builtin(argv, state, out)


@contextmanager
def _swapped(fd: int, replacement: int) -> Iterator[None]:
    """Point ``fd`` at ``replacement`` for the duration of the block."""
    if replacement == fd:
        yield
    else:
        saved = os.dup(fd)
        try:
            os.dup2(replacement, fd)
            yield
        finally:
            os.dup2(saved, fd)
            os.close(saved)


def execute_redirection(command: Command, state: ShellState) -> None:
    """Run a built-in with the command's redirections in place, then close them."""
    try:
        if not command.argv or not is_builtin(command.argv[0]):
            return
        sys.stdout.flush()
        with _swapped(STDIN_FILENO, command.infile), _swapped(
            STDOUT_FILENO, command.outfile
        ):
            if command.outfile == STDOUT_FILENO:
                run_builtin(command.argv, state, sys.stdout)
                sys.stdout.flush()
            else:
                with open(command.outfile, "w", closefd=False) as out:
                    run_builtin(command.argv, state, out)
    finally:
        command.close()