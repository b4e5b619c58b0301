import io
import os
from unittest import mock

import pytest

from minishell.builtins import (
    ShellExit,
    builtin_env,
    builtin_exit,
    builtin_export,
    builtin_pwd,
    builtin_unset,
    is_long,
    is_valid_key,
)
from minishell.env import Environment


@pytest.mark.parametrize(
    "text",
    ["0", "123", "+5", "-42", "9223372036854775807", "-9223372036854775808"],
)
def test_is_long_accepts(text):
    assert is_long(text) is True


@pytest.mark.parametrize(
    "text", ["12a", "abc", "9223372036854775808", "-9223372036854775809", "1 2"]
)
def test_is_long_rejects(text):
    assert is_long(text) is False


@pytest.mark.parametrize("text", ["A=1", "_x=2", "abc_9=", "PATH"])
def test_valid_keys(text):
    assert is_valid_key(text) is True


@pytest.mark.parametrize("text", ["1A=x", "a-b=1", "=", "a.b"])
def test_invalid_keys(text):
    assert is_valid_key(text) is False


def test_export_without_arguments():
    env = Environment()
    out = io.StringIO()
    assert builtin_export(env, ["export"], out, io.StringIO()) == 1
    assert out.getvalue() == "export: not enough arguments\n"


def test_export_sets_variable():
    env = Environment()
    assert builtin_export(env, ["export", "A=1", "B=x=y"], io.StringIO(), io.StringIO()) == 0
    assert env.find("A") == "1"
    assert env.find("B") == "x=y"


def test_export_invalid_identifier():
    env = Environment()
    err = io.StringIO()
    status = builtin_export(env, ["export", "1A=x", "OK=v"], io.StringIO(), err)
    assert status == 1
    assert err.getvalue() == "minishell: export: `1A=x': not a valid identifier\n"
    assert env.find("OK") == "v"
    assert len(env) == 1


def test_export_without_equals_does_nothing():
    env = Environment()
    assert builtin_export(env, ["export", "B"], io.StringIO(), io.StringIO()) == 0
    assert env.find("B") is None


def test_unset_removes():
    env = Environment(["A=1", "B=2"])
    assert builtin_unset(env, ["unset", "A", "MISSING"]) == 0
    assert env.find("A") is None
    assert env.to_list() == ["B=2"]


def test_exit_without_arguments_uses_last_status():
    env = Environment()
    env.exit_status = 3
    with pytest.raises(ShellExit) as info:
        builtin_exit(env, ["exit"], io.StringIO())
    assert info.value.status == 3


def test_exit_with_number():
    with pytest.raises(ShellExit) as info:
        builtin_exit(Environment(), ["exit", "42"], io.StringIO())
    assert info.value.status == 42


def test_exit_non_numeric():
    err = io.StringIO()
    with pytest.raises(ShellExit) as info:
        builtin_exit(Environment(), ["exit", "abc"], err)
    assert info.value.status == 255
    assert err.getvalue() == "minishell: exit: abc: numeric argument required\n"


def test_exit_too_many_arguments():
    err = io.StringIO()
    assert builtin_exit(Environment(), ["exit", "1", "2"], err) == 1
    assert err.getvalue() == "minishell: exit: too many arguments\n"


def test_pwd_prints_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    assert builtin_pwd(out, io.StringIO()) == 0
    assert out.getvalue() == os.getcwd() + "\n"


def test_pwd_error():
    err = io.StringIO()
    out = io.StringIO()
    with mock.patch("os.getcwd", side_effect=FileNotFoundError(2, "No such file or directory")):
        assert builtin_pwd(out, err) == 0
    assert err.getvalue() == "minishell: pwd: No such file or directory\n"
    assert out.getvalue() == ""


def test_env_prints_in_order():
    env = Environment(["B=2", "A=1"])
    out = io.StringIO()
    assert builtin_env(env, ["env"], out, io.StringIO()) == 0
    assert out.getvalue() == "B=2\nA=1\n"


def test_env_extra_arguments_still_prints():
    env = Environment(["A=1"])
    out = io.StringIO()
    err = io.StringIO()
    assert builtin_env(env, ["env", "x"], out, err) == 0
    assert err.getvalue() == "env: too many arguments\n"
    assert out.getvalue() == "A=1\n"