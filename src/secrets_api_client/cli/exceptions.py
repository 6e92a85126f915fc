import dataclasses
import pathlib
import typing as t


@dataclasses.dataclass
class CLIError(Exception):
    template: t.ClassVar[t.Optional[str]] = None
    exit_code: t.ClassVar[int] = 1

    def __str__(self) -> str:
        if self.template is None:
            return type(self).__name__
        return self.template.format(**dataclasses.asdict(self))


@dataclasses.dataclass
class CustomError(CLIError):
    msg: str
    template = "{msg}"


@dataclasses.dataclass
class InvalidUsage(CLIError):
    msg: str
    template = "Invalid usage: {msg}"
    exit_code = 2


class ConfigResolutionError(CLIError):
    exit_code = 3


@dataclasses.dataclass
class InvalidFile(ConfigResolutionError):
    msg: str
    file: t.Optional[pathlib.Path] = None

    template = "Invalid file [{msg}]: {file!s}"


class InvalidConfigFile(InvalidFile):
    template = "Invalid config file [{msg}]: {file!s}"


class NoConfig(ConfigResolutionError):
    template = "No config found"


class NoCurrentContext(ConfigResolutionError):
    template = (
        "No context is activated, please activate a context using `secrets-cli config activate`"
    )


class NoContextAvailable(ConfigResolutionError):
    template = (
        "There are no contexts available. Please create a context using "
        "`secrets-cli config create`"
    )


@dataclasses.dataclass
class DuplicateContext(ConfigResolutionError, ValueError):
    name: str
    template = "Context {name} already exists"


@dataclasses.dataclass
class NoSuchContext(ConfigResolutionError):
    context: str
    template = "Context {context} not found"


class NoToken(ConfigResolutionError):
    template = (
        "No token configured, please pass --token, set SECRETS_CLI_TOKEN or use "
        "`secrets-cli config set token <token>`"
    )


class NoProject(ConfigResolutionError):
    template = "No project given and no default project configured"


class ClientError(CLIError):
    exit_code = 4


@dataclasses.dataclass
class RequestFailed(ClientError):
    status_code: int
    msg: str
    template = "HTTP Error {status_code}: {msg}"


@dataclasses.dataclass
class ConnectionFailed(ClientError):
    msg: str
    template = "Could not reach the API: {msg}"


@dataclasses.dataclass
class UnexpectedResponse(ClientError):
    msg: str
    template = "Unexpected response from the API: {msg}"


@dataclasses.dataclass
class InvalidResource(ClientError):
    resource_type: str
    name: str
    template = "Invalid {resource_type}: {name}"


@dataclasses.dataclass
class SerializationError(CLIError):
    msg: str
    template = "Could not serialize output to json: {msg}"
    exit_code = 5
