from secrets_api_client.api import requests as req
from secrets_api_client.api.client import Client

from ..common import CLIParameters
from ..cqrs import EventHandler, Mediator
from ..events.project import (
    CreateProject,
    DeleteProject,
    GetAllProjects,
    GetSingleProject,
    UpdateProject,
)
from ..utils import confirm


class RemoteEventHandler(EventHandler):
    def __init__(self, client: Client, params: CLIParameters) -> None:
        self.client = client
        self.params = params


class RemoteGetAllProjectsHandler(RemoteEventHandler):
    __event__ = GetAllProjects

    def handle(self, event: GetAllProjects, mediator: Mediator):
        return self.client.request(req.GetProjects())


class RemoteGetSingleProjectHandler(RemoteEventHandler):
    __event__ = GetSingleProject

    def handle(self, event: GetSingleProject, mediator: Mediator):
        return self.client.request(req.GetSingleProject(event.project))


class RemoteCreateProjectHandler(RemoteEventHandler):
    __event__ = CreateProject

    def handle(self, event: CreateProject, mediator: Mediator):
        return self.client.request(
            req.CreateProject(name=event.name, description=event.description)
        )


class RemoteUpdateProjectHandler(RemoteEventHandler):
    __event__ = UpdateProject

    def handle(self, event: UpdateProject, mediator: Mediator):
        return self.client.request(
            req.UpdateProject(event.project, name=event.name, description=event.description)
        )


class RemoteDeleteProjectHandler(RemoteEventHandler):
    __event__ = DeleteProject

    def handle(self, event: DeleteProject, mediator: Mediator):
        if not self.params.yes:
            confirm(f"Are you sure you wish to delete project '{event.project}'?", abort=True)
        return self.client.request(req.DeleteProject(event.project))


ALL_HANDLERS = [
    obj
    for obj in globals().values()
    if isinstance(obj, type)
    and issubclass(obj, EventHandler)
    and getattr(obj, "__event__", None) is not None
]
