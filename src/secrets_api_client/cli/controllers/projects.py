import gimme

from secrets_api_client.cli.config import ResolvedConfig
from secrets_api_client.cli.events.project import (
    CreateProject,
    DeleteProject,
    GetAllProjects,
    GetSingleProject,
    UpdateProject,
)

from ..common import CLIParameters, Controller
from ..decorators import (
    argument,
    cli_options,
    command,
    format_output,
    handle_event,
    option,
    requires_token,
)
from ..exceptions import InvalidUsage
from ..utils import resolve_identifier

PROJECT_FIELDS = ("id", "name", "description", "setup_at", "created_at")


class ProjectController(Controller):
    name = "projects"
    decorators = (requires_token,)

    @command(default=True)
    @cli_options("json")
    @format_output(fields=PROJECT_FIELDS)
    @handle_event
    def list(self):
        """List projects"""
        return GetAllProjects()

    @command
    @argument("project_id", required=False)
    @option("--project", "project_flag", help="project to use when no project_id is given")
    @cli_options("json")
    @format_output(fields=PROJECT_FIELDS)
    @handle_event
    def get(self, project_id, project_flag):
        """Get info for a project"""
        settings = gimme.that(ResolvedConfig).with_project(project_flag)
        return GetSingleProject(resolve_identifier(project_id, settings))

    @command
    @argument("name", required=False)
    @option("--name", "name_flag", help="project name")
    @option("--description", default="", help="project description")
    @cli_options("json", "silent")
    @format_output(fields=PROJECT_FIELDS)
    @handle_event
    def create(self, name, name_flag, description):
        """Create a project"""
        name = name or name_flag
        if not name:
            raise InvalidUsage("a project name is required, either as argument or with --name")
        return CreateProject(name=name, description=description)

    @command
    @argument("project_id", required=False)
    @option("--name", required=True, help="project name")
    @option("--description", required=True, help="project description")
    @cli_options("json", "silent")
    @format_output(fields=PROJECT_FIELDS)
    @handle_event
    def update(self, project_id, name, description):
        """Update a project"""
        project = resolve_identifier(project_id, gimme.that(ResolvedConfig))
        return UpdateProject(project, name=name, description=description)

    @command
    @argument("project_id", required=False)
    @cli_options("json", "silent", "yes")
    @format_output(fields=PROJECT_FIELDS)
    def delete(self, project_id):
        """Delete a project and show the remaining projects"""
        project = resolve_identifier(project_id, gimme.that(ResolvedConfig))
        self.mediator.send(DeleteProject(project))
        if gimme.that(CLIParameters).silent:
            return None
        return self.mediator.send(GetAllProjects())
