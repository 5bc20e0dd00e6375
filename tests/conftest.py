# Shared fakes and sample arrays for the test suite.

import pytest
import requests

from codeai.settings import Settings

NUMBERED = (
    "private let verses = [\n"
    "    /* 1 */ \"In the beginning\",\n"
    "    \"the word\",\n"
    "\n"
    "    /* 2 */ \"was light\"\n"
    "]"
)

RENUMBERED = (
    "```swift\n"
    "private let verses = [\n"
    "    /* 1 */ \"In the beginning\",\n"
    "    /* 2 */ \"the word\",\n"
    "\n"
    "    /* 3 */ \"was light\"\n"
    "]\n"
    "```"
)

CLEANED = (
    "```swift\n"
    "private let verses = [\n"
    "    \"In the beginning\",\n"
    "    \"the word\",\n"
    "\n"
    "    \"was light\"\n"
    "]\n"
    "```"
)


def make_settings(**overrides) -> Settings:
    values = dict(
        ENV="test",
        AI_PROVIDER="openai",
        OPENAI_API_KEY=None,
        MISTRAL_API_KEY=None,
        OLLAMA_API_KEY=None,
        DEFAULT_MODEL="gpt-4o-mini",
        DEFAULT_SWIFT_MODEL="gpt-4o-mini",
        DEFAULT_MAX_TOKENS=4096,
        DEFAULT_SWIFT_MAX_TOKENS=4096,
        DEFAULT_TEMPERATURE=0.0,
        GENERATOR_CONFIG=None,
        PUBLIC_DIR="__no_public_dir__",
    )
    values.update(overrides)
    return Settings(**values)


class ScriptedClient:
    """Model client returning a fixed reply or raising a fixed error."""
    provider = "scripted"
    available = True

    def __init__(self, reply="", error=None):
        self.model = "scripted-model"
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, messages, params):
        self.calls.append((messages, params))
        if self.error is not None:
            raise self.error
        return self.reply, {"engine": "scripted", "model": params.model}


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None, bad_json=False):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else repr(payload)
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("not json")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.posts = []

    def post(self, url, **kwargs):
        self.posts.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def unreachable_session():
    return FakeSession(error=requests.ConnectionError("connection refused"))
