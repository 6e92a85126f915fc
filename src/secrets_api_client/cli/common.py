from __future__ import annotations

import dataclasses
import typing as t

import gimme

from secrets_api_client.cli.cqrs import Mediator

__SECRETS_CLI_OPTIONS__ = "__secrets_cli_options__"

OPTIONS_COMMAND = "command"


def set_options(obj, key: str, options: dict):
    opts = getattr(obj, __SECRETS_CLI_OPTIONS__, {})
    opts[key] = {**opts.get(key, {}), **options}
    setattr(obj, __SECRETS_CLI_OPTIONS__, opts)


def get_options(obj, key: str) -> t.Optional[dict]:
    return getattr(obj, __SECRETS_CLI_OPTIONS__, {}).get(key, None)


def has_options(obj, key: str) -> bool:
    return key in getattr(obj, __SECRETS_CLI_OPTIONS__, {})


@dataclasses.dataclass
class CLIParameters:
    """Typed values of the flags that are shared between commands"""

    json: bool = False
    silent: bool = False
    yes: bool = False


class Controller:
    name: str
    decorators: t.Iterable[callable] = ()
    __commands__: t.Set[str]

    mediator: Mediator = gimme.attribute(Mediator)

    def __init_subclass__(cls) -> None:
        __commands__ = set()
        for key in dir(cls):
            val = getattr(cls, key)
            if get_options(val, OPTIONS_COMMAND):
                __commands__.add(key)
        cls.__commands__ = __commands__
