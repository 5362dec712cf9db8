import io
import os

import pytest

from minishell.builtins import (
    ShellExit,
    handle_cd,
    handle_echo,
    handle_env,
    handle_exit,
    handle_export,
    handle_pwd,
    handle_unset,
    is_builtin,
    is_numeric,
    run_builtin,
)
from minishell.environment import Environment, ShellState


@pytest.fixture
def state():
    return ShellState(env=Environment(["PATH=/bin", "BARE"]), last_status=0)


@pytest.fixture
def out():
    return io.StringIO()


def test_echo_joins_arguments(out):
    handle_echo(["echo", "a", "b"], out)
    assert out.getvalue() == "a b\n"


def test_echo_repeated_n_flag(out):
    handle_echo(["echo", "-n", "-n", "x"], out)
    assert out.getvalue() == "x"


def test_echo_flag_must_be_exact(out):
    handle_echo(["echo", "-nn", "x"], out)
    assert out.getvalue() == "-nn x\n"


def test_echo_no_arguments(out):
    handle_echo(["echo"], out)
    assert out.getvalue() == "\n"


def test_cd_changes_directory(state, out, tmp_path, monkeypatch):
    monkeypatch.chdir(os.getcwd())
    state.last_status = 5
    handle_cd(["cd", str(tmp_path)], state, out)
    assert os.path.samefile(os.getcwd(), tmp_path)
    assert state.last_status == 0


def test_cd_home(state, out, tmp_path, monkeypatch):
    monkeypatch.chdir(os.getcwd())
    monkeypatch.setenv("HOME", str(tmp_path))
    state.last_status = 4
    handle_cd(["cd"], state, out)
    assert os.path.samefile(os.getcwd(), tmp_path)
    assert state.last_status == 0
    assert out.getvalue() == ""


def test_cd_without_home(state, out, monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    handle_cd(["cd"], state, out)
    assert out.getvalue() == "cd: HOME not set\n"
    assert state.last_status == 1


def test_cd_missing_directory(state, out, tmp_path, capsys):
    before = os.getcwd()
    handle_cd(["cd", str(tmp_path / "missing")], state, out)
    assert state.last_status == 1
    assert os.getcwd() == before
    assert capsys.readouterr().err.startswith("cd: ")


def test_pwd(out, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    handle_pwd(out)
    assert out.getvalue() == os.getcwd() + "\n"


def test_export_adds_variable(state, out):
    handle_export(["export", "A=1"], state, out)
    assert "A=1" in state.env.entries
    assert state.last_status == 0


def test_export_updates_existing(state, out):
    handle_export(["export", "PATH=/usr/bin"], state, out)
    assert state.env.entries.count("PATH=/usr/bin") == 1
    assert "PATH=/bin" not in state.env.entries


def test_export_invalid_identifier(state, out):
    handle_export(["export", "1A=x"], state, out)
    assert out.getvalue() == "export: 1A=x: not a valid identifier"
    assert state.last_status == 1


def test_export_empty_name(state, out):
    handle_export(["export", "=x"], state, out)
    assert state.last_status == 1
    assert len(state.env) == 2


def test_export_bare_name(state, out):
    handle_export(["export", "NEWVAR"], state, out)
    assert state.env.entries[-1] == "NEWVAR"
    assert state.last_status == 0


def test_export_lists(state, out):
    handle_export(["export"], state, out)
    assert out.getvalue() == 'declare -x PATH="/bin"\ndeclare -x BARE\n'


def test_unset_removes(state, out):
    handle_unset(["unset", "PATH", "BARE"], state, out)
    assert state.env.entries == []
    assert state.last_status == 0


def test_unset_invalid(state, out):
    handle_unset(["unset", "1X"], state, out)
    assert out.getvalue() == "unset: 1X: not a valid identifier\n"
    assert state.last_status == 1


def test_unset_no_arguments(state, out):
    state.last_status = 3
    handle_unset(["unset"], state, out)
    assert state.last_status == 0


def test_env_prints_valued_entries(state, out):
    handle_env(["env"], state, out)
    assert out.getvalue() == "PATH=/bin\n"
    assert state.last_status == 0


def test_env_too_many_arguments(state, out):
    handle_env(["env", "x"], state, out)
    assert out.getvalue() == "env: too many arguments\n"
    assert state.last_status == 2


def test_exit_uses_last_status(state, out):
    state.last_status = 3
    with pytest.raises(ShellExit) as info:
        handle_exit(["exit"], state, out)
    assert info.value.status == 3
    assert out.getvalue() == "exit\n"


def test_exit_with_number(state, out):
    with pytest.raises(ShellExit) as info:
        handle_exit(["exit", "7"], state, out)
    assert info.value.status == 7


def test_exit_wraps_status(state, out):
    with pytest.raises(ShellExit) as info:
        handle_exit(["exit", "-1"], state, out)
    assert 0 <= info.value.status < 256


def test_exit_non_numeric(state, out):
    with pytest.raises(ShellExit) as info:
        handle_exit(["exit", "abc"], state, out)
    assert info.value.status == 255
    assert "exit: abc: numeric argument required\n" in out.getvalue()


def test_exit_too_many(state, out):
    handle_exit(["exit", "1", "2"], state, out)
    assert state.last_status == 1
    assert out.getvalue() == "exit\nexit: too many arguments\n"


@pytest.mark.parametrize(
    "text, expected",
    [("42", True), ("-42", True), ("+1", True), ("4a", False), ("a", False), (None, False)],
)
def test_is_numeric(text, expected):
    assert is_numeric(text) is expected


@pytest.mark.parametrize(
    "name, expected",
    [("echo", True), ("cd", True), ("exit", True), ("ls", False), (None, False)],
)
def test_is_builtin(name, expected):
    assert is_builtin(name) is expected


def test_run_builtin_dispatches(state, out):
    run_builtin(["echo", "hi"], state, out)
    assert out.getvalue() == "hi\n"


def test_run_builtin_ignores_unknown(state, out):
    run_builtin(["ls"], state, out)
    assert out.getvalue() == ""
    assert state.last_status == 0


def test_run_builtin_export(state, out):
    run_builtin(["export", "B=2"], state, out)
    assert state.env.exists("B")