import dataclasses

from .common import Request, pick, simple_request, unwrap_envelope


@dataclasses.dataclass
@unwrap_envelope("projects")
class GetProjects(Request):
    @simple_request
    def make_request(self):
        return "projects"


@dataclasses.dataclass
@unwrap_envelope("project")
class GetSingleProject(Request):
    project: str

    def make_request(self):
        return {
            "method": "GET",
            "url": "projects/project",
            "params": {"project": self.project},
        }


@dataclasses.dataclass
@unwrap_envelope("project")
class CreateProject(Request):
    name: str
    description: str = ""

    def make_request(self):
        return {
            "method": "POST",
            "url": "projects",
            "json": pick(self, ["name", "description"]),
        }


@dataclasses.dataclass
@unwrap_envelope("project")
class UpdateProject(Request):
    project: str
    name: str
    description: str

    def make_request(self):
        return {
            "method": "POST",
            "url": "projects/project",
            "json": pick(self, ["project", "name", "description"]),
        }


@dataclasses.dataclass
class DeleteProject(Request):
    project: str

    def make_request(self):
        return {
            "method": "DELETE",
            "url": "projects/project",
            "json": {"project": self.project},
        }

    def make_response(self, resp):
        return None
