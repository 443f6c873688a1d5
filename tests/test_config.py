"""Tests for configuration parsing."""

from pathlib import Path

import pytest

from shoot_tracker.config import Settings, parse_allowed_origins


@pytest.mark.parametrize("raw", [None, "", " * "])
def test_parse_allowed_origins_defaults_to_all(raw: str | None) -> None:
    assert parse_allowed_origins(raw) == ["*"]


def test_parse_allowed_origins_splits_list() -> None:
    raw = "http://localhost:8081, https://shoots.example.com,,"

    assert parse_allowed_origins(raw) == [
        "http://localhost:8081",
        "https://shoots.example.com",
    ]


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STORAGE_BACKEND", "supabase")
    monkeypatch.setenv("DATA_FILE", "/tmp/shoots.json")
    monkeypatch.setenv("SUPABASE_TABLE", "bookings")

    settings = Settings(_env_file=None)

    assert settings.storage_backend == "supabase"
    assert settings.data_file == Path("/tmp/shoots.json")
    assert settings.supabase_table == "bookings"
    assert settings.supabase_document_id == "default"
