import typing as t

from .common import Auth


class TokenAuth(Auth):
    """Adds the service token as a bearer ``Authorization`` header"""

    token: t.Optional[str]

    def __init__(self, token: t.Optional[str]):
        self.token = token

    def __call__(self, config: dict) -> dict:
        if self.token is None:
            return config
        if "headers" not in config:
            config["headers"] = {}
        config["headers"]["Authorization"] = f"Bearer {self.token}"
        return config
