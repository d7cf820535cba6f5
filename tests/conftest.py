import json

import pytest

from slackhook import Client


class RecordingTransport:
    """Stands in for HttpTransport; records every POST instead of sending it."""

    def __init__(self, error=None):
        self.requests = []
        self.error = error
        self.closed = False

    def post(self, url, body):
        self.requests.append((url, body))
        if self.error is not None:
            raise self.error

    def close(self):
        self.closed = True

    def decoded(self, index=-1):
        return json.loads(self.requests[index][1].decode("utf-8"))


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client(transport):
    return Client("https://hooks.example.test/services/T000/B000/XXX", transport=transport)
