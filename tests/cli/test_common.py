import pytest

from secrets_api_client.cli.common import (
    CLIParameters,
    Controller,
    get_options,
    has_options,
    set_options,
)
from secrets_api_client.cli.decorators import command


@pytest.fixture
def func():
    def func():
        pass

    return func


@pytest.mark.parametrize("options", [{}, {"some": "option"}])
def test_set_options(func, options):
    assert not has_options(func, "key")
    set_options(func, "key", options)
    assert has_options(func, "key")


def test_set_options_empty(func):
    assert not has_options(func, "key")
    set_options(func, "key", {})
    assert has_options(func, "key")


def test_get_options(func):
    set_options(func, "key", {"some": "option"})
    assert get_options(func, "key") == {"some": "option"}


def test_multiple_options(func):
    set_options(func, "key", {})
    assert not has_options(func, "other")
    set_options(func, "other", {"other": "options"})
    assert has_options(func, "other")
    assert has_options(func, "key")
    assert get_options(func, "key") != get_options(func, "other")


def test_merges_options(func):
    set_options(func, "key", {"some": "option"})
    set_options(func, "key", {"other": "option"})
    assert get_options(func, "key") == {"some": "option", "other": "option"}


def test_overwrite_existing_options(func):
    set_options(func, "key", {"some": "option"})
    set_options(func, "key", {"some": "other"})
    assert get_options(func, "key") == {"some": "other"}


def test_overwrite_options(func):
    set_options(func, "key", {"some": "option"})
    set_options(func, "key", {"other": "option"})


def test_controller_collects_commands():
    class MyController(Controller):
        name = "things"

        @command
        def get(self):
            pass

        @command(default=True)
        def list(self):
            pass

        def helper(self):
            pass

    assert MyController.__commands__ == {"get", "list"}


def test_cli_parameters_default_to_false():
    assert CLIParameters() == CLIParameters(json=False, silent=False, yes=False)
