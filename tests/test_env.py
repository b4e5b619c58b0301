import pytest

from minishell.env import Environment, parse_entry


def test_parse_entry_splits_at_first_equals():
    assert parse_entry("PATH=/bin:/usr/bin") == ("PATH", "/bin:/usr/bin")
    assert parse_entry("A=b=c") == ("A", "b=c")


def test_parse_entry_empty_value():
    assert parse_entry("EMPTY=") == ("EMPTY", "")


@pytest.mark.parametrize("text", ["=value", "novalue", "", None])
def test_parse_entry_rejects(text):
    assert parse_entry(text) is None


def test_environment_keeps_order():
    env = Environment(["A=1", "B=2", "C=3"])
    assert env.to_list() == ["A=1", "B=2", "C=3"]
    assert len(env) == 3
    assert list(env) == [("A", "1"), ("B", "2"), ("C", "3")]


def test_environment_skips_invalid_entries():
    env = Environment(["A=1", "broken", "=x"])
    assert env.to_list() == ["A=1"]


def test_default_exit_status_is_zero():
    assert Environment().exit_status == 0


def test_find():
    env = Environment(["HOME=/home/user"])
    assert env.find("HOME") == "/home/user"
    assert env.find("MISSING") is None


def test_add_new_appends():
    env = Environment(["A=1"])
    assert env.add("B=2") == ("B", "2")
    assert env.to_list() == ["A=1", "B=2"]


def test_add_existing_replaces_in_place():
    env = Environment(["A=1", "B=2"])
    assert env.add("A=9") == ("A", "9")
    assert env.to_list() == ["A=9", "B=2"]
    assert len(env) == 2


def test_add_invalid_returns_none_and_changes_nothing():
    env = Environment(["A=1"])
    assert env.add("NOEQUALS") is None
    assert env.to_list() == ["A=1"]


def test_delete_first_middle_last():
    env = Environment(["A=1", "B=2", "C=3", "D=4"])
    env.delete("A")
    assert env.to_list() == ["B=2", "C=3", "D=4"]
    env.delete("C")
    assert env.to_list() == ["B=2", "D=4"]
    env.delete("D")
    assert env.to_list() == ["B=2"]
    env.add("E=5")
    assert env.to_list() == ["B=2", "E=5"]


def test_delete_missing_is_noop():
    env = Environment(["A=1"])
    env.delete("Z")
    assert env.to_list() == ["A=1"]
    assert len(env) == 1


def test_to_list_round_trip():
    entries = ["X=1", "Y=a=b", "Z="]
    assert Environment(Environment(entries).to_list()).to_list() == entries