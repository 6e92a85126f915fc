import json
import logging

import httpx
import pytest

from secrets_api_client.api import InvalidResponse, requests
from secrets_api_client.api.auth import TokenAuth
from secrets_api_client.api.client import Client


class Recorder:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.body = body if body is not None else {}
        self.content = None
        self.requests = []

    def __call__(self, request: httpx.Request):
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def recorder():
    return Recorder(body={"projects": [{"id": "backend"}]})


@pytest.fixture
def make_client(recorder):
    def make_client(**kwargs):
        kwargs.setdefault("auth", TokenAuth("some-token"))
        return Client(
            base_url="https://api.example.org",
            client=httpx.Client(transport=httpx.MockTransport(recorder)),
            **kwargs,
        )

    return make_client


def test_request_sends_to_resolved_url(make_client, recorder):
    result = make_client().request(requests.GetProjects())
    assert str(recorder.requests[0].url) == "https://api.example.org/v3/projects"
    assert result == [{"id": "backend"}]


def test_request_adds_authorization_header(make_client, recorder):
    make_client().request(requests.GetProjects())
    assert recorder.requests[0].headers["Authorization"] == "Bearer some-token"


def test_request_sends_json_body(make_client, recorder):
    recorder.body = {"project": {"id": "backend"}}
    make_client().request(requests.CreateProject(name="backend", description="desc"))
    sent = recorder.requests[0]
    assert sent.method == "POST"
    assert json.loads(sent.content) == {"name": "backend", "description": "desc"}


def test_authenticated_request_requires_auth(make_client):
    with pytest.raises(ValueError):
        make_client(auth=None).request(requests.GetProjects())


def test_raises_on_error_without_callback(make_client, recorder):
    recorder.status_code = 404
    with pytest.raises(httpx.HTTPStatusError):
        make_client().request(requests.GetProjects())


def test_calls_global_error_callback(make_client, recorder):
    recorder.status_code = 401
    recorder.body = {"messages": ["Invalid token"]}
    calls = []

    def on_error(resp):
        calls.append(resp.status_code)
        raise RuntimeError()

    with pytest.raises(RuntimeError):
        make_client(on_error=on_error).request(requests.GetProjects())
    assert calls == [401]


def test_local_error_callback_can_skip_global_handling(make_client, recorder):
    recorder.status_code = 404
    recorder.body = {"messages": ["Not found"]}
    global_calls = []

    client = make_client(on_error=global_calls.append)
    client.request(requests.DeleteProject("backend"), on_error=lambda resp: False)
    assert global_calls == []


def test_logs_requests_without_headers(make_client, caplog):
    with caplog.at_level(logging.DEBUG, logger="test-client"):
        make_client(logger=logging.getLogger("test-client")).request(requests.GetProjects())
    assert "GET https://api.example.org/v3/projects" in caplog.text
    assert "some-token" not in caplog.text


def test_raises_on_response_that_is_not_json(make_client, recorder):
    recorder.content = b"<html>maintenance</html>"
    with pytest.raises(InvalidResponse, match="not valid json"):
        make_client().request(requests.GetProjects())


@pytest.mark.parametrize("body", [{"success": True}, ["backend"]])
def test_raises_on_missing_envelope(make_client, recorder, body):
    recorder.body = body
    with pytest.raises(InvalidResponse, match="projects"):
        make_client().request(requests.GetProjects())
