import pytest
import requests

_NO_JSON = object()

class FakeResponse:
    def __init__(self, payload=_NO_JSON, status_code=200):
        self._payload = payload
        self.status_code = status_code

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._payload is _NO_JSON:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"HTTP {self.status_code}")

class Scripted:
    """Callable standing in for http_get / http_post; replays a script of responses or exceptions."""

    def __init__(self, *steps):
        self.steps = list(steps)
        self.calls = []

    def __call__(self, url, *args, **kwargs):
        self.calls.append((url, args, kwargs))
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

@pytest.fixture
def respond():
    return FakeResponse

@pytest.fixture
def not_json():
    return lambda status_code=200: FakeResponse(status_code=status_code)

@pytest.fixture
def scripted():
    return Scripted
