import os
import pwd
from pathlib import Path

import pytest

from expanduser import InvalidTildeExpression, SystemUserDirectory, UserNotFound, expand_user

_MISSING_USER = "no_such_user_for_expanduser_tests"


def test_current_user_home_prefers_env(monkeypatch) -> None:
    monkeypatch.setenv("HOME", "/Users/kinbote")
    assert SystemUserDirectory().current_user_home() == "/Users/kinbote"
    assert expand_user("~/.bashrc") == Path("/Users/kinbote/.bashrc")


def test_current_user_home_falls_back_to_passwd(monkeypatch) -> None:
    monkeypatch.delenv("HOME", raising=False)
    try:
        expected = pwd.getpwuid(os.geteuid()).pw_dir
    except KeyError:
        expected = None
    assert SystemUserDirectory().current_user_home() == expected

    monkeypatch.setenv("HOME", "")
    assert SystemUserDirectory().current_user_home() == expected


def test_home_of_root() -> None:
    expected = pwd.getpwnam("root").pw_dir
    assert SystemUserDirectory().home_of("root") == expected
    assert expand_user("~root") == Path(expected)
    assert expand_user("~root/.bashrc") == Path(expected) / ".bashrc"


def test_home_of_missing_user() -> None:
    assert SystemUserDirectory().home_of(_MISSING_USER) is None
    with pytest.raises(UserNotFound):
        expand_user(f"~{_MISSING_USER}/x")


def test_unencodable_name_is_invalid() -> None:
    with pytest.raises(InvalidTildeExpression):
        expand_user("~\ud800")
