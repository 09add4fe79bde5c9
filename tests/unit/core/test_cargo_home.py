"""Tests for cargo home discovery."""

from pathlib import Path

import pytest
from tests.fakes.environment import FakeEnvironment

from cargo_index.core.cargo_home import cargo_home
from cargo_index.core.errors import CargoIndexError, HomeDirUnavailableError


def test_defaults_to_dot_cargo_in_home() -> None:
    env = FakeEnvironment(home=Path("/home/ferris"))

    assert cargo_home(env) == Path("/home/ferris/.cargo")


def test_cargo_home_env_var_wins() -> None:
    env = FakeEnvironment(env_vars={"CARGO_HOME": "/opt/cargo"}, home=Path("/home/ferris"))

    assert cargo_home(env) == Path("/opt/cargo")


def test_cargo_home_env_var_without_user_home() -> None:
    env = FakeEnvironment(env_vars={"CARGO_HOME": "/opt/cargo"}, home=None)

    assert cargo_home(env) == Path("/opt/cargo")


def test_empty_cargo_home_falls_back() -> None:
    env = FakeEnvironment(env_vars={"CARGO_HOME": ""}, home=Path("/home/ferris"))

    assert cargo_home(env) == Path("/home/ferris/.cargo")


def test_no_home_fails() -> None:
    with pytest.raises(HomeDirUnavailableError) as exc_info:
        cargo_home(FakeEnvironment())

    assert isinstance(exc_info.value, CargoIndexError)
    assert "CARGO_HOME" in str(exc_info.value)
