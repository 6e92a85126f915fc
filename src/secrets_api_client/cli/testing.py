import dataclasses
import typing as t
from collections import deque
from unittest.mock import Mock

from secrets_api_client.api.client import Client


class FakeClient(Client):
    """A ``Client`` that returns queued responses instead of making http requests. Every request
    is recorded by the ``request`` mock
    """

    mock_cls = Mock

    def __init__(self, *args, on_error=None, **kwargs) -> None:
        self.responses = deque()
        self.on_error = on_error
        self.request = self.mock_cls(side_effect=self._request)

    def _request(self, req, on_error=None):
        response = self.next_response()

        if response is None:
            return
        if response.status_code >= 400:
            self._handle_failure(response, on_error)
        return response.data

    def set_response(self, response_data=None, status_code=200):
        self.responses = deque([FakeResponse(response_data, status_code)])

    def add_response(self, response_data=None, status_code=200):
        self.responses.append(FakeResponse(response_data, status_code))

    def next_response(self):
        try:
            return self.responses.popleft()
        except IndexError:
            return None


@dataclasses.dataclass
class FakeResponse:
    data: t.Any = None
    status_code: int = 200

    def json(self):
        return self.data
