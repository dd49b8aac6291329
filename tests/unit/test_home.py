"""
Tests for the home-directory resolver.
"""

import os
import pwd

import pytest

from loadpath.paths import home as home_module
from loadpath.paths.home import HomeDirectory, resolve_home


@pytest.fixture
def me():
    return pwd.getpwuid(os.getuid())


def test_current_user(me):
    assert resolve_home("~") == HomeDirectory(me.pw_dir, "")


def test_current_user_with_remainder(me):
    assert resolve_home("~/lib/mods") == HomeDirectory(me.pw_dir, "lib/mods")


def test_named_user(me):
    assert resolve_home(f"~{me.pw_name}") == HomeDirectory(me.pw_dir, "")
    assert resolve_home(f"~{me.pw_name}/x") == HomeDirectory(me.pw_dir, "x")


def test_unknown_user_is_not_an_error():
    assert resolve_home("~nosuchuser_loadpath") is None
    assert resolve_home("~nosuchuser_loadpath/lib") is None


def test_input_without_tilde():
    assert resolve_home("/home/me") is None


def test_result_is_an_owned_copy(me):
    first = resolve_home("~")
    second = resolve_home("~/other")
    assert first.directory == second.directory
    assert first.remainder == ""


def test_platform_without_account_database(monkeypatch):
    monkeypatch.setattr(home_module, "pwd", None)
    assert resolve_home("~") is None
