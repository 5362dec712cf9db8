"""The shell's built-in commands."""

import os
import sys
from typing import Callable, Dict, List, Optional, TextIO

from minishell.environment import ShellState, valid_identifier
from minishell.libft.chars import isdigit
from minishell.libft.convert import atoi


class ShellExit(Exception):
    """Raised by the exit builtin; ``status`` is the shell's exit status."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def _report(prefix: str, error: OSError) -> None:
    reason = os.strerror(error.errno) if error.errno else str(error)
    sys.stderr.write(f"{prefix}: {reason}\n")


def is_numeric(text: Optional[str]) -> bool:
    """True for an optional sign followed only by digits."""
    if text is None:
        return False
    body = text[1:] if text[:1] in ("-", "+") else text
    return all(isdigit(char) for char in body)


def handle_echo(argv: List[str], out: Optional[TextIO] = None) -> None:
    """Print the arguments separated by spaces; leading ``-n`` drops the newline."""
    stream = _stream(out)
    args = argv[1:]
    newline = True
    while args and args[0] == "-n":
        newline = False
        args = args[1:]
    stream.write(" ".join(args))
    if newline:
        stream.write("\n")


def handle_cd(argv: List[str], state: ShellState, out: Optional[TextIO] = None) -> None:
    """Change directory to the argument, or to $HOME without one."""
    stream = _stream(out)
    if len(argv) < 2:
        home = os.environ.get("HOME")
        if home is None:
            stream.write("cd: HOME not set\n")
            state.last_status = 1
            return
        target = home
    else:
        target = argv[1]
    try:
        os.chdir(target)
    except OSError as error:
        _report("cd", error)
        state.last_status = 1
        return
    state.last_status = 0


def handle_pwd(out: Optional[TextIO] = None) -> None:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as error:
        _report("pwd", error)
        return
    _stream(out).write(f"{cwd}\n")


def _export_with_equal(arg: str, state: ShellState, stream: TextIO) -> bool:
    name, _, value = arg.partition("=")
    if not valid_identifier(name):
        stream.write(f"export: {arg}: not a valid identifier")
        return False
    if state.env.exists(name):
        state.env.update(name, value)
    else:
        state.env.add(arg)
    return True


def _export_without_equal(arg: str, state: ShellState, stream: TextIO) -> bool:
    if not valid_identifier(arg):
        stream.write(f"export: {arg}: not a valid identifier")
        return False
    if not state.env.exists(arg):
        state.env.add(arg)
    return True


def handle_export(argv: List[str], state: ShellState, out: Optional[TextIO] = None) -> None:
    """Set or declare variables; with no arguments list them."""
    stream = _stream(out)
    args = argv[1:]
    if not args:
        for line in state.env.exported_lines():
            stream.write(f"{line}\n")
    ok = True
    for arg in args:
        handler = _export_with_equal if "=" in arg else _export_without_equal
        if not handler(arg, state, stream):
            ok = False
    state.last_status = 0 if ok else 1


def handle_unset(argv: List[str], state: ShellState, out: Optional[TextIO] = None) -> None:
    """Remove variables; the status reflects the last argument."""
    stream = _stream(out)
    args = argv[1:]
    if not args:
        state.last_status = 0
        return
    for arg in args:
        if not valid_identifier(arg):
            stream.write(f"unset: {arg}: not a valid identifier\n")
            state.last_status = 1
        else:
            state.env.remove(arg)
            state.last_status = 0


def handle_env(argv: List[str], state: ShellState, out: Optional[TextIO] = None) -> None:
    """Print every variable that has a value."""
    stream = _stream(out)
    if len(argv) > 1:
        stream.write("env: too many arguments\n")
        state.last_status = 2
        return
    for line in state.env.visible_lines():
        stream.write(f"{line}\n")
    state.last_status = 0


def handle_exit(argv: List[str], state: ShellState, out: Optional[TextIO] = None) -> None:
    """Leave the shell by raising ShellExit, unless given too many arguments."""
    stream = _stream(out)
    stream.write("exit\n")
    if len(argv) < 2:
        raise ShellExit(state.last_status)
    if not is_numeric(argv[1]):
        stream.write(f"exit: {argv[1]}: numeric argument required\n")
        raise ShellExit(255)
    if len(argv) > 2:
        stream.write("exit: too many arguments\n")
        state.last_status = 1
        return
    raise ShellExit(atoi(argv[1]) % 256)


_BUILTINS: Dict[str, Callable[[List[str], ShellState, TextIO], None]] = {
    "echo": lambda argv, state, out: handle_echo(argv, out),
    "cd": handle_cd,
    "pwd": lambda argv, state, out: handle_pwd(out),
    "export": handle_export,
    "unset": handle_unset,
    "env": handle_env,
    "exit": handle_exit,
}


def is_builtin(name: Optional[str]) -> bool:
    """True when ``name`` is one of the shell's built-in commands."""
    return name is not None and name in _BUILTINS


def run_builtin(argv: List[str], state: ShellState, out: Optional[TextIO] = None) -> None:
    """Run the built-in named by ``argv[0]``; anything else is ignored."""
    if not argv or not argv[0]:
        return
    handler = _BUILTINS.get(argv[0])
    if handler is not None:
        handler(argv, state, _stream(out))