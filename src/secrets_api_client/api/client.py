from __future__ import annotations

import logging
import typing as t

import httpx
from httpx import HTTPError, Response, Timeout  # noqa

from .common import Auth, BaseClient, BaseRequest, ErrorCallback, ISyncClient

T = t.TypeVar("T")

DEFAULT_TIMEOUT_CONFIG = Timeout(timeout=5.0)


class Client(BaseClient, ISyncClient):
    def __init__(
        self,
        base_url: str,
        auth: t.Union[Auth, None, False] = None,
        client: t.Optional[httpx.Client] = None,
        logger: t.Optional[logging.Logger] = None,
        on_error: t.Optional[ErrorCallback] = None,
    ):
        super().__init__(base_url, auth, logger, on_error)
        self.client = client or httpx.Client(timeout=DEFAULT_TIMEOUT_CONFIG)
        self.timeout = self.client.timeout

    def request(
        self, req: BaseRequest[T], on_error: t.Optional[ErrorCallback] = None
    ) -> t.Optional[T]:
        self._assert_auth(req)
        conf = self._prepare_request_config(req)
        resp = self.client.request(**conf)
        self._handle_failure(resp, on_error)
        return req.make_response(resp)

    def close(self):
        self.client.close()
