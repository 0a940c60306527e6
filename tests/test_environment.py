from minishell.environment import EnvEntry, copy_environment, parse_env_entry


def test_parse_simple_entry():
    assert parse_env_entry("HOME=/home/user") == EnvEntry("HOME", "/home/user")


def test_missing_equal_gives_empty_value():
    assert parse_env_entry("FLAG") == EnvEntry("FLAG", "")


def test_only_first_equal_splits():
    assert parse_env_entry("A=b=c") == EnvEntry("A", "b=c")


def test_empty_key_and_value():
    assert parse_env_entry("=x") == EnvEntry("", "x")
    assert parse_env_entry("") == EnvEntry("", "")


def test_copy_keeps_order():
    entries = ["B=2", "A=1", "C"]
    result = copy_environment(entries)
    assert [e.key for e in result] == ["B", "A", "C"]
    assert [e.value for e in result] == ["2", "1", ""]


def test_copy_round_trip():
    entries = ["PATH=/bin:/usr/bin", "LANG=C", "X=y=z"]
    result = copy_environment(entries)
    assert [f"{e.key}={e.value}" for e in result] == entries


def test_copy_empty():
    assert copy_environment([]) == []