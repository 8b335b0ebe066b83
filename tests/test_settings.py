import pytest

from textfile_engine.buffer import ByteDocument
from textfile_engine.files import BufferedFileReader, StagingBuffer
from textfile_engine.runtime import EngineSettings, reload_settings


@pytest.fixture
def fresh_settings(monkeypatch):
    yield reload_settings
    monkeypatch.undo()
    reload_settings()


def test_defaults(monkeypatch, fresh_settings) -> None:
    for name in ("CHUNK_SIZE", "ALLOCATION_SLACK", "MAX_DOCUMENT_SIZE", "LOG_LEVEL"):
        monkeypatch.delenv(f"TEXTFILE_ENGINE_{name}", raising=False)

    settings = fresh_settings()

    assert settings.chunk_size == 128 * 1024
    assert settings.allocation_slack == 1000
    assert settings.max_document_size == 0
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch, fresh_settings) -> None:
    monkeypatch.setenv("TEXTFILE_ENGINE_CHUNK_SIZE", "5000")
    monkeypatch.setenv("TEXTFILE_ENGINE_ALLOCATION_SLACK", "0")
    monkeypatch.setenv("TEXTFILE_ENGINE_MAX_DOCUMENT_SIZE", "2048")
    monkeypatch.setenv("TEXTFILE_ENGINE_LOG_LEVEL", "debug")
    monkeypatch.setenv("TEXTFILE_ENGINE_LOG_JSON", "yes")

    settings = fresh_settings()

    assert settings.chunk_size == 8192
    assert settings.allocation_slack == 0
    assert settings.max_document_size == 2048
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True
    assert StagingBuffer().size == 8192
    assert ByteDocument().max_capacity == 2048
    assert BufferedFileReader().allocation_slack == 0


def test_invalid_numbers_fall_back(monkeypatch, fresh_settings) -> None:
    monkeypatch.setenv("TEXTFILE_ENGINE_CHUNK_SIZE", "lots")
    monkeypatch.setenv("TEXTFILE_ENGINE_ALLOCATION_SLACK", "-5")

    settings = fresh_settings()

    assert settings.chunk_size == 128 * 1024
    assert settings.allocation_slack == 0


def test_settings_are_immutable() -> None:
    settings = EngineSettings()
    with pytest.raises(AttributeError):
        settings.chunk_size = 1  # type: ignore[misc]
