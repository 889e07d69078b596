"""Tests for the HTTP API."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.main import app
from app.services.dictionary.source import FileWordSource
from app.services.xor.cipher import encrypt_word


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as client:
        yield client


@pytest.fixture
def api_prefix():
    return get_settings().api_v1_prefix


class TestAttackEndpoint:
    """Test suite for /attack."""

    def test_recovers_key(self, client, api_prefix, encrypt_set):
        response = client.post(
            f"{api_prefix}/attack",
            json={
                "ciphertexts": encrypt_set(["TEST", "WORD", "PLAN"], "KEYS"),
                "words": ["test", "word", "plan", "keys"],
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["run_id"] is not None
        assert body["length_matches"] == 4
        assert body["solutions"] == [
            {"secret": "KEYS", "plain_texts": ["TEST", "WORD", "PLAN"]}
        ]
        assert [c["position"] for c in body["constraints"]] == [0, 1, 2, 3]
        assert body["pattern"].startswith("^[")

    def test_no_solutions_is_not_an_error(self, client, api_prefix):
        response = client.post(
            f"{api_prefix}/attack",
            json={"ciphertexts": [[9, 0, 4, 10]], "words": ["a", "longer"]},
        )

        assert response.status_code == 200
        assert response.json()["solutions"] == []

    def test_invalid_ciphertext_width(self, client, api_prefix):
        response = client.post(
            f"{api_prefix}/attack",
            json={"ciphertexts": [[1, 2, 3]], "words": ["test"]},
        )

        assert response.status_code == 400

    def test_missing_dictionary(self, client, api_prefix):
        app.dependency_overrides[get_settings] = lambda: Settings(
            dictionary_path="/nonexistent/xorbreak/words"
        )
        try:
            response = client.post(f"{api_prefix}/attack", json={})
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 503

    def test_dictionary_file_loaded_once_off_the_event_loop(
        self, client, api_prefix, tmp_path, monkeypatch, encrypt_set
    ):
        path = tmp_path / "words"
        path.write_text("test\nword\nplan\nkeys\n")

        loads = []
        original_load = FileWordSource._load

        def tracking_load(source):
            try:
                asyncio.get_running_loop()
                loads.append("event loop")
            except RuntimeError:
                loads.append("worker")
            return original_load(source)

        monkeypatch.setattr(FileWordSource, "_load", tracking_load)
        app.dependency_overrides[get_settings] = lambda: Settings(dictionary_path=str(path))
        try:
            payload = {"ciphertexts": encrypt_set(["TEST", "WORD", "PLAN"], "KEYS")}
            first = client.post(f"{api_prefix}/attack", json=payload)
            second = client.post(f"{api_prefix}/attack", json=payload)
        finally:
            app.dependency_overrides.clear()

        assert first.status_code == second.status_code == 200
        assert loads == ["worker"]
        assert second.json()["solutions"] == [
            {"secret": "KEYS", "plain_texts": ["TEST", "WORD", "PLAN"]}
        ]


class TestEncryptEndpoint:
    def test_encrypt(self, client, api_prefix):
        response = client.post(
            f"{api_prefix}/encrypt",
            json={"words": ["test", "WORD"], "key": "keys"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["key_used"] == "KEYS"
        assert body["ciphertexts"] == [
            list(encrypt_word("TEST", "KEYS")),
            list(encrypt_word("WORD", "KEYS")),
        ]

    def test_invalid_key(self, client, api_prefix):
        response = client.post(
            f"{api_prefix}/encrypt",
            json={"words": ["test"], "key": "KEY"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "InvalidKeyError"
        assert body["details"] == {"key": "KEY", "key_length": 4}


class TestTableEndpoint:
    def test_table(self, client, api_prefix):
        response = client.get(f"{api_prefix}/table")

        assert response.status_code == 200
        body = response.json()
        assert len(body["matrix"]) == 26
        assert body["matrix"][0][1] == 3
        assert body["rendered"].splitlines()[1].startswith(" A  0")


class TestHistoryEndpoint:
    def test_stored_run(self, client, api_prefix, encrypt_set):
        created = client.post(
            f"{api_prefix}/attack",
            json={
                "ciphertexts": encrypt_set(["TEST"], "KEYS"),
                "words": ["test", "keys"],
                "options": {"strict": True},
            },
        ).json()

        response = client.get(f"{api_prefix}/history/{created['run_id']}")

        assert response.status_code == 200
        detail = response.json()
        assert detail["pattern"] == created["pattern"]
        assert detail["parameters_used"]["strict"] is True
        assert detail["ciphertexts"] == encrypt_set(["TEST"], "KEYS")

        listing = client.get(f"{api_prefix}/history").json()
        assert listing["total"] >= 1
        assert listing["items"][0]["id"] == created["run_id"]

    def test_unknown_run(self, client, api_prefix):
        response = client.get(f"{api_prefix}/history/999999")

        assert response.status_code == 404
