import gimme

from secrets_api_client.cli.config import DEFAULT_API_URL, Config, Context, write_config
from secrets_api_client.cli.exceptions import DuplicateContext, NoContextAvailable, NoSuchContext

from ..common import Controller
from ..decorators import argument, command, format_output, option
from ..ui import format_object
from ..utils import assert_context, confirm, echo, mask_secret, prompt, prompt_choices


class ConfigController(Controller):
    name = "config"
    config: Config = gimme.attribute(Config)

    @command
    @argument("name", required=False)
    def create(self, name):
        """Create a new context"""
        config = self.config

        if name and config.get_context(name):
            raise DuplicateContext(name)

        echo("Creating a new context, please give the following information")
        name = name or prompt("Name")
        if config.get_context(name):
            raise DuplicateContext(name)
        url = prompt("API url", default=DEFAULT_API_URL)
        token = prompt("Token", default="", hide_input=True, show_default=False)
        context = Context(name, url)
        context["token"] = token
        config.add_context(context)

        activate = confirm("Do you wish to activate this context?", default=True)
        if activate:
            config.activate_context(name)
        write_config(config)
        echo("Context successfully created")

    @command
    @argument("context", required=False)
    def activate(self, context):
        """Activate a context"""
        config = self.config
        if not len(config.contexts):
            raise NoContextAvailable()
        if not context:
            context = prompt_choices("Choose a context", [c.name for c in config.contexts])
        try:
            config.activate_context(context)
        except ValueError:
            raise NoSuchContext(context=context)

        write_config(config)
        echo(f"Context {context} activated")

    @command
    @option("-a", "--all", "show_all", is_flag=True, help="show all contexts")
    @format_output
    def show(self, show_all):
        """Show the current context"""
        config = self.config
        if show_all:
            return "\n\n".join(
                render_context(context, current=context is config.current_context)
                for context in config.contexts
            )
        return render_context(assert_context(config))

    @command
    @argument("key")
    @argument("value")
    def set(self, key, value):
        """Set a value in the current context"""
        config = self.config
        context = assert_context(config)
        context[key] = value

        write_config(config)
        echo("Context successfully updated")

    @command
    @argument("keys", nargs=-1, required=True)
    def unset(self, keys):
        """Remove values from the current context"""
        config = self.config
        context = assert_context(config)

        for key in keys:
            try:
                del context[key]
            except KeyError:
                pass
            except ValueError:
                echo(f"Cannot unset read-only field '{key}'", err=True)

        write_config(config)
        echo("Context successfully updated")


def render_context(context: Context, current=False):
    values = context.as_dict()
    if values.get("token"):
        values["token"] = mask_secret(values["token"])
    rv = format_object(values, list(values))
    if current:
        rv += "\n(active)"
    return rv
