"""Environment setup and prompt reading for the interactive shell."""

import sys
from collections.abc import Mapping
from typing import Callable, Iterable, Optional, Union

from minishell.builtins import ShellExit
from minishell.environment import Environment, ShellState

PROMPT = "$ "

Reader = Callable[[str], Optional[str]]


def copy_env(envp: Union[Mapping, Iterable[str]]) -> Environment:
    """A fresh Environment from ``NAME=value`` strings or a name-to-value mapping."""
    if isinstance(envp, Mapping):
        return Environment(f"{name}={value}" for name, value in envp.items())
    return Environment(envp)


def _read_line(prompt: str) -> Optional[str]:
    if sys.stdin.isatty():
        try:
            import readline  # noqa: F401  enables line editing and history for input()
        except ImportError:
            pass
    try:
        return input(prompt)
    except EOFError:
        return None


def get_input(state: ShellState, reader: Optional[Reader] = None) -> str:
    """Read one line at the prompt.

    ``reader`` is called with the prompt and returns the line, or None at
    end of input. At end of input ``exit`` is printed and ShellExit is
    raised with the last status.
    """
    line = (reader or _read_line)(PROMPT)
    if line is None:
        sys.stdout.write("exit\n")
        sys.stdout.flush()
        raise ShellExit(state.last_status)
    return line