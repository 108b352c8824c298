import time
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from shorts_generator.config import settings
from shorts_generator.generation import gemini_client
from shorts_generator.utils.credentials import CredentialStore


class FakeResponse:
    def __init__(self, text):
        self._text = text

    @property
    def text(self):
        if isinstance(self._text, Exception):
            raise self._text
        return self._text


class FakeGemini:
    """Stands in for google.generativeai; records every call."""

    def __init__(self):
        self.reply = ""
        self.error = None
        self.delay = 0.0
        self.current_key = None
        self.api_keys = []
        self.calls = []

    def configure(self, api_key=None):
        self.current_key = api_key
        self.api_keys.append(api_key)

    def GenerativeModel(self, model_name):
        backend = self

        class _Model:
            def generate_content(self, contents, generation_config=None):
                # the key that goes out is whatever is configured when the request is sent
                time.sleep(backend.delay)
                backend.calls.append(
                    {
                        "model": model_name,
                        "contents": contents,
                        "generation_config": generation_config,
                        "sent_key": backend.current_key,
                    }
                )
                if backend.error is not None:
                    raise backend.error
                return FakeResponse(backend.reply)

        return _Model()


@pytest.fixture
def fake_gemini(monkeypatch):
    fake = FakeGemini()
    monkeypatch.setattr(
        gemini_client,
        "genai",
        SimpleNamespace(configure=fake.configure, GenerativeModel=fake.GenerativeModel),
    )
    return fake


@pytest.fixture
def credential_file(tmp_path):
    return str(tmp_path / "creds" / "credentials.json")


@pytest.fixture
def client(monkeypatch, fake_gemini, credential_file):
    from shorts_generator import main

    monkeypatch.setattr(main, "credential_store", CredentialStore(credential_file))
    monkeypatch.setattr(settings, "GOOGLE_API_KEY", None)
    with TestClient(main.app) as c:
        yield c
