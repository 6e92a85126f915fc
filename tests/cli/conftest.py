import json
import os

import gimme
import pytest

from secrets_api_client.cli.config import CONFIG_LOCATION_ENV, TOKEN_ENV
from secrets_api_client.cli.cqrs import Mediator
from secrets_api_client.cli.handlers import REMOTE_HANDLERS, get_handlers_dict
from secrets_api_client.cli.main import handle_http_error
from secrets_api_client.cli.testing import FakeClient


@pytest.fixture(autouse=True)
def gimme_repo():
    with gimme.context() as ctx:
        yield ctx


@pytest.fixture(autouse=True)
def client(gimme_repo):
    client = FakeClient(on_error=handle_http_error)
    gimme_repo.add(client)
    return client


@pytest.fixture(autouse=True)
def mediator(gimme_repo):
    mediator = Mediator(get_handlers_dict(REMOTE_HANDLERS))
    gimme_repo.add(mediator)
    return mediator


@pytest.fixture(autouse=True)
def clean_token_env(monkeypatch):
    monkeypatch.delenv(TOKEN_ENV, raising=False)


@pytest.fixture(autouse=True)
def config_path(tmp_path, monkeypatch):
    file = tmp_path / ".secrets-cli.conf"
    monkeypatch.setenv(CONFIG_LOCATION_ENV, str(file))
    file.write_text(
        json.dumps(
            {
                "version": 1,
                "current_context": "test_context",
                "contexts": [
                    {
                        "name": "test_context",
                        "url": "https://example.org",
                        "token": "some-token",
                        "project": "proj-y",
                    }
                ],
            }
        )
    )

    return file
