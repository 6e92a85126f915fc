import functools

import click

from secrets_api_client.cli.decorators import catch_exceptions
from secrets_api_client.cli.utils import iter_commands

from .common import OPTIONS_COMMAND, Controller, get_options


def create_click_command(func, opts=None, factory=click.command):
    if opts is None:
        opts = get_options(func, OPTIONS_COMMAND)
    command = factory(func)
    for args, kwargs in opts.get("arguments") or []:
        command = click.argument(*args, **kwargs)(command)
    for args, kwargs in opts.get("options") or []:
        command = click.option(*args, **kwargs)(command)
    return command


def create_default_group(name, func):
    """Create a group that runs ``func`` when it is invoked without a subcommand"""
    opts = get_options(func, OPTIONS_COMMAND)

    @functools.wraps(func)
    def callback(*args, **kwargs):
        if click.get_current_context().invoked_subcommand is None:
            return func(*args, **kwargs)

    return create_click_command(
        callback,
        opts,
        factory=lambda f: click.group(name, invoke_without_command=True)(f),
    )


def register_controller(group: click.Group, controller: Controller):
    commands = []
    subgroup = None
    for name, func in iter_commands(controller):
        opts = get_options(func, OPTIONS_COMMAND)
        func = functools.reduce(lambda f, dec: dec(f), controller.decorators, func)
        func = catch_exceptions(func)
        if opts.get("default"):
            if subgroup is not None:
                raise TypeError(f"Controller {controller.name} has multiple default commands")
            subgroup = create_default_group(controller.name, func)
        else:
            commands.append((opts.get("name") or name, func))

    if subgroup is None:
        subgroup = click.Group(controller.name)

    for command_name, func in commands:
        subgroup.add_command(create_click_command(func), command_name)
    add_unique_command(group, subgroup)


def add_unique_command(group: click.Group, command: click.Command, name=None):
    name = name or command.name
    if name in group.commands:
        raise TypeError(f"Command {name} is already registered")
    group.add_command(command, name)


def register_command(group: click.Group, command, name=None):
    name = name or get_options(command, OPTIONS_COMMAND).get("name")
    command = catch_exceptions(command)
    add_unique_command(group, create_click_command(command), name)


def cli_factory(main, commands=None, controller_types=None):
    main = create_click_command(catch_exceptions(main), factory=click.group)
    for cmd in commands or []:
        register_command(main, cmd)

    for ct in controller_types or []:
        register_controller(main, ct())
    return main
