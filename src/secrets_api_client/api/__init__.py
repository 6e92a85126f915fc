from .auth import TokenAuth
from .client import Client, HTTPError, Response
from .common import InvalidResponse, ISyncClient, Request

__all__ = [
    "Client",
    "HTTPError",
    "InvalidResponse",
    "ISyncClient",
    "Request",
    "Response",
    "TokenAuth",
]
