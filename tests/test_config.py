from __future__ import annotations

from pathlib import Path

from spicerack.config import get_settings


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("SPICERACK_CATALOG_PATH", str(tmp_path / "list.md"))
    monkeypatch.setenv("SPICERACK_LOG_FORMAT", "json")
    monkeypatch.setenv("SPICERACK_LOG_REQUESTS", "off")
    monkeypatch.setenv("SPICERACK_DEFAULT_SHELF_COUNT", "0")
    monkeypatch.setenv("SPICERACK_SEARCH_LIMIT", "many")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.catalog_path == tmp_path / "list.md"
    assert settings.database_path.name == "test_spicerack.db"
    assert settings.log_format == "json"
    assert settings.log_requests is False
    assert settings.default_shelf_count == 1
    assert settings.search_limit == 10


def test_env_file_fallback(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SPICERACK_LOG_LEVEL", raising=False)
    Path(".env").write_text("# local\nSPICERACK_LOG_LEVEL=DEBUG\n", encoding="utf-8")
    get_settings.cache_clear()

    assert get_settings().log_level == "DEBUG"


def test_settings_are_cached():
    assert get_settings() is get_settings()
