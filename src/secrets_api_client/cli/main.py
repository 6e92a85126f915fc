import logging
from json import JSONDecodeError

import gimme
import httpx

from secrets_api_client.api import Client, Response, TokenAuth
from secrets_api_client.cli.cqrs import Mediator
from secrets_api_client.cli.events.project import GetAllProjects
from secrets_api_client.cli.exceptions import InvalidResource, RequestFailed
from secrets_api_client.cli.handlers import REMOTE_HANDLERS, get_handlers_dict

from .config import TOKEN_ENV, Config, ResolvedConfig, get_config, resolve_config, write_config
from .decorators import argument, command, option, requires_token
from .utils import assert_context, echo, prompt_choices

logger = logging.getLogger("secrets_api_client")


def setup_dependencies():
    gimme.register(Config, get_config)
    gimme.register(Client, setup_client)
    gimme.register(Mediator, setup_mediator)


def setup_logging(debug=False):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def setup_client(settings: ResolvedConfig):
    return Client(
        base_url=settings.url,
        auth=TokenAuth(settings.token),
        logger=logger,
        on_error=handle_http_error,
        client=httpx.Client(timeout=httpx.Timeout(10.0, read=60.0)),
    )


def setup_mediator():
    return Mediator(get_handlers_dict(REMOTE_HANDLERS))


@option("project_override", "-p", "--project", default="", help="Override the default project")
@option("token_override", "-t", "--token", envvar=TOKEN_ENV, default="", help="API token")
@option("url_override", "--api-host", default="", help="Override the API url")
@option("-d", "--debug", is_flag=True, help="Enable debug logging")
def main(project_override, token_override, url_override, debug):
    """Manage projects of the secrets service"""
    setup_logging(debug)
    setup_dependencies()

    settings = resolve_config(
        gimme.that(Config),
        url=url_override,
        token=token_override,
        project=project_override,
    )
    logger.debug("Using api %s", settings.url)
    gimme.add(settings)


def handle_http_error(resp: Response):
    try:
        body = resp.json()
    except JSONDecodeError:
        msg = resp.text or resp.reason_phrase
    else:
        messages = body.get("messages") if isinstance(body, dict) else None
        if isinstance(messages, list):
            msg = " ".join(str(m) for m in messages)
        else:
            msg = messages or body

    raise RequestFailed(resp.status_code, msg)


@command
@argument("project", default="")
@requires_token
def setup(project):
    """Set the default project for the current context"""
    config = gimme.that(Config)
    context = assert_context(config)

    projects = [p["id"] for p in gimme.that(Mediator).send(GetAllProjects())]
    if not project:
        project = prompt_choices("Choose a project", projects)
    if project not in projects:
        raise InvalidResource("project", project)

    context["project"] = project
    write_config(config)
    echo(f"Project {project} successfully set as default")
