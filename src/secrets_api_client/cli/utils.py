import typing as t

import questionary
from click import confirm, echo, prompt
from click.exceptions import Exit

from secrets_api_client.cli.common import OPTIONS_COMMAND, Controller, get_options
from secrets_api_client.cli.config import Config, ResolvedConfig
from secrets_api_client.cli.exceptions import CLIError, NoConfig, NoCurrentContext, NoProject

# Show static analysis tools that we're using these imports with the intent to export, proxy and
# possibly adapt them
confirm = confirm
prompt = prompt
echo = echo


def assert_context(config: Config):
    if config is None:
        raise NoConfig()
    if (rv := config.current_context) is None:
        raise NoCurrentContext()
    return rv


def resolve_identifier(positional: t.Optional[str], settings: ResolvedConfig) -> str:
    """An explicitly given identifier always wins over the configured default project"""
    if positional:
        return positional
    if settings.project:
        return settings.project
    raise NoProject()


def handle_cli_error(e: CLIError):
    echo(str(e), err=True)
    raise Exit(e.exit_code)


def iter_commands(obj: Controller):
    # look up on the class first so that injected attributes are not resolved prematurely
    for key in dir(obj):
        if get_options(getattr(type(obj), key, None), OPTIONS_COMMAND) is not None:
            yield key, getattr(obj, key)


def prompt_choices(question: str, choices: t.Sequence[str]):
    return questionary.select(
        question,
        choices=choices,
        use_shortcuts=len(choices) < 36,
        use_arrow_keys=True,
    ).unsafe_ask()


def mask_secret(value: t.Optional[str], visible=4):
    if not value:
        return value
    if len(value) <= visible:
        return "*" * len(value)
    return value[:visible] + "*" * (len(value) - visible)
