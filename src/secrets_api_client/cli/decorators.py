import functools
import typing as t

import gimme

from secrets_api_client.api import HTTPError, InvalidResponse
from secrets_api_client.cli.config import ResolvedConfig
from secrets_api_client.cli.cqrs import Event, Mediator

from .common import OPTIONS_COMMAND, CLIParameters, get_options, has_options, set_options
from .exceptions import CLIError, ConnectionFailed, NoToken, UnexpectedResponse
from .ui import render
from .utils import echo, handle_cli_error


def catch_exceptions(func):
    """Decorator for catching (cli) exceptions, and handling them properly"""

    @functools.wraps(func)
    def _decorated(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except CLIError as e:
            handle_cli_error(e)
        except HTTPError as e:
            handle_cli_error(ConnectionFailed(f"{type(e).__name__}({e!s})"))
        except InvalidResponse as e:
            handle_cli_error(UnexpectedResponse(str(e)))

    return _decorated


def requires_token(func):
    @functools.wraps(func)
    def _decorated(*args, **kwargs):
        if not gimme.that(ResolvedConfig).token:
            raise NoToken()
        return func(*args, **kwargs)

    return _decorated


def command(func=None, /, name=None, default=False):
    """Mark a function or controller method as a cli command. A controller can have a single
    ``default`` command, which runs when its group is invoked without a subcommand
    """
    if func is None:
        return functools.partial(command, name=name, default=default)
    set_options(func, OPTIONS_COMMAND, {"name": name, "default": default})
    return func


def argument(*args, **kwargs):
    def wrapper(func):
        if not has_options(func, OPTIONS_COMMAND):
            set_options(func, OPTIONS_COMMAND, {})
        opts = get_options(func, OPTIONS_COMMAND)
        opts["arguments"] = [(args, kwargs), *opts.get("arguments", [])]

        return func

    return wrapper


def option(*args, **kwargs):
    def wrapper(func):
        if not has_options(func, OPTIONS_COMMAND):
            set_options(func, OPTIONS_COMMAND, {})
        opts = get_options(func, OPTIONS_COMMAND)

        opts.setdefault("options", []).append((args, kwargs))

        return func

    return wrapper


def format_output(func=None, /, fields=None):
    """Echo the return value of the decorated function as a table, or as json when ``--json``
    was given. Nothing is echoed in ``--silent`` mode or when the function returns ``None``
    """
    if func is None:
        return functools.partial(format_output, fields=fields)

    @functools.wraps(func)
    def decorated(*args, **kwargs):
        params = gimme.that(CLIParameters)
        result = func(*args, **kwargs)
        if params.silent or result is None:
            return
        echo(render(result, fields, as_json=params.json))

    return decorated


def handle_event(func):
    @functools.wraps(func)
    def _wrapper(*args, **kwargs):
        event = func(*args, **kwargs)
        if not isinstance(event, Event):
            raise TypeError("A function decorated with 'handle_event' must return an Event")

        return gimme.that(Mediator).send(event)

    return _wrapper


def combine_decorators(decorators: t.Iterable[callable]):
    def decorator(func):
        return functools.reduce(
            lambda f, decorator: decorator(f),
            decorators,
            func,
        )

    return decorator


_CLI_OPTIONS = {
    "json": option("--json", "json", is_flag=True, help="Output json"),
    "silent": option("--silent", is_flag=True, help="Don't output the response"),
    "yes": option("-y", "--yes", is_flag=True, help="Do not ask for confirmation"),
}


def cli_options(*options: str):
    """Add the given shared flags to a command. Their values are not passed to the command, but
    are stored in the ``CLIParameters`` for the current invocation
    """
    click_options = combine_decorators(_CLI_OPTIONS[option] for option in options)

    def decorator(func):
        @click_options
        @functools.wraps(func)
        def wrapped(*args, **kwargs):
            params = gimme.that(CLIParameters)

            for option in options:
                if option not in kwargs:
                    continue
                setattr(params, option, kwargs.pop(option))
            return func(*args, **kwargs)

        return wrapped

    return decorator
