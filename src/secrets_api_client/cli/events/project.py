import dataclasses

from ..cqrs import Event


@dataclasses.dataclass
class GetAllProjects(Event):
    pass


@dataclasses.dataclass
class GetSingleProject(Event):
    project: str


@dataclasses.dataclass
class CreateProject(Event):
    name: str
    description: str = ""


@dataclasses.dataclass
class UpdateProject(Event):
    project: str
    name: str
    description: str


@dataclasses.dataclass
class DeleteProject(Event):
    project: str
