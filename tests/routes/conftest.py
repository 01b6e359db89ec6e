"""Fixtures for API route tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy import Engine
from sqlmodel import Session

from voicecollect.app import dependencies
from voicecollect.app.main import app
from voicecollect.domain.models import Language
from voicecollect.phrases import StaticPhraseGenerator
from voicecollect.storages import LocalStorage

ADMIN_AUTH = ("admin", "test-admin-pw")


@pytest.fixture(name="client")
def client_fixture(
    engine: Engine,
    storage: LocalStorage,
    monkeypatch: pytest.MonkeyPatch,
):
    """Test client with database, storage and phrase generator overridden."""

    def get_db_override():
        with Session(engine) as session:
            yield session

    def get_phrase_generator_override():
        return StaticPhraseGenerator(
            {
                Language.SINHALA: ["අද හොඳ දවසක්."],
                Language.TAMIL: ["இன்று நல்ல நாள்."],
            }
        )

    monkeypatch.setattr(dependencies.settings, "admin_username", ADMIN_AUTH[0])
    monkeypatch.setattr(
        dependencies.settings, "admin_password", SecretStr(ADMIN_AUTH[1])
    )

    app.dependency_overrides[dependencies.get_db] = get_db_override
    app.dependency_overrides[dependencies.get_engine] = lambda: engine
    app.dependency_overrides[dependencies.get_storage] = lambda: storage
    app.dependency_overrides[dependencies.get_phrase_generator] = (
        get_phrase_generator_override
    )
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="registered_speaker")
def registered_speaker_fixture(client: TestClient) -> dict:
    """Register a speaker through the API."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "full_name": "Nimal Perera",
            "email": "nimal@example.com",
            "password": "secret1",
            "whatsapp_number": "0771234567",
            "language": "Sinhala",
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture(name="admin_auth")
def admin_auth_fixture() -> tuple[str, str]:
    return ADMIN_AUTH


@pytest.fixture(name="upload")
def upload_fixture(client: TestClient):
    """Return a helper posting a multipart recording upload."""

    def _upload(speaker_id: str = "id90000", audio: bytes = b"fake-audio", **fields):
        data = {
            "speaker_id": speaker_id,
            "recorded_language": "Sinhala",
            "phrase_index": "0",
            "phrase_text": "අද හොඳ දවසක්.",
        }
        data.update(fields)
        return client.post(
            "/api/v1/recordings",
            data=data,
            files={"audio": ("recording.webm", audio, "audio/webm")},
        )

    return _upload
