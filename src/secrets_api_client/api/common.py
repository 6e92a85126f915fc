from __future__ import annotations

import functools
import logging
import typing as t
from functools import reduce
from urllib.parse import urljoin as urljoin_

from httpx import Response

API_PREFIX = "v3/"


class Auth:
    def __call__(self, config: dict) -> dict:
        raise NotImplementedError


ErrorCallback = t.Callable[[Response], bool]


class InvalidResponse(ValueError):
    """A successful response whose body cannot be read as the expected resource"""


class ISyncClient:
    def request(
        self, req: BaseRequest[T], on_error: t.Optional[ErrorCallback] = None
    ) -> t.Optional[T]:
        raise NotImplementedError


class BaseClient:
    auth: t.Optional[Auth]

    def __init__(
        self,
        base_url: str,
        auth: t.Union[Auth, None, False] = None,
        logger: t.Optional[logging.Logger] = None,
        on_error: t.Optional[ErrorCallback] = None,
    ):
        self.base_url = base_url
        self.auth = auth
        self.logger = logger
        self.on_error = on_error

    def _handle_failure(self, resp: Response, on_error: t.Optional[ErrorCallback] = None):
        if resp.status_code >= 400:
            run_global_error_callback = True
            if on_error:
                # a "local" error callback can return False to indicate that all error handling
                # has been completed and the global error handling should not take place. We need
                # to specifcally look for False and not just Falsy (ie: None)
                run_global_error_callback = on_error(resp) is not False
            if not run_global_error_callback:
                return
            if self.on_error:
                self.on_error(resp)
            else:
                resp.raise_for_status()

    def _assert_auth(self, request: BaseRequest[T]):
        if request.auth and not self.auth:
            raise ValueError("request is authenticated, but no authentication provider configured")

    def _prepare_request_config(self, req: BaseRequest[T]):
        conf = req.generate_config(self)

        if self.auth and req.auth:
            conf = self.auth(conf)
        if self.logger:
            self.logger.debug("%s %s", conf["method"], conf["url"])
        return conf


T = t.TypeVar("T")


class BaseRequest(t.Generic[T]):
    auth = False

    def generate_config(self, api: BaseClient):
        return self.make_request()

    def make_request(self):
        raise NotImplementedError

    def make_response(self, resp: Response) -> T:
        return decode_json(resp)


class Request(BaseRequest):
    auth = True
    prefix: str = API_PREFIX

    def generate_config(self, api: BaseClient):
        request = self.make_request()
        base_url = urljoin(api.base_url, self.prefix)
        return {
            **request,
            "url": urljoin(base_url, request["url"]),
        }


def simple_request(func):
    @functools.wraps(func)
    def wrapped(*args, **kwargs):
        return {"method": "GET", "url": func(*args, **kwargs)}

    return wrapped


def unwrap_envelope(envelope):
    def decorator(cls: Request):
        def make_response(self, resp: Response):
            body = decode_json(resp)
            try:
                return body[envelope]
            except (KeyError, TypeError):
                raise InvalidResponse(f"missing field '{envelope}'")

        cls.make_response = make_response
        return cls

    return decorator


def decode_json(resp: Response):
    try:
        return resp.json()
    except ValueError:
        raise InvalidResponse("body is not valid json")


def urljoin(*parts):
    return reduce(urljoin_, (str(part).rstrip("/") + "/" for part in parts)).rstrip("/")


def pick(obj, attrs: t.List[str], default=None):
    return {key: getattr(obj, key, default) for key in attrs}
