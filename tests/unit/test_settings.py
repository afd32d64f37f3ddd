"""Tests for application settings."""

from pathlib import Path

from stockbook.config import Settings, StorageSettings, get_settings, reset_settings


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self, monkeypatch):
        for name in ("STORAGE_DATA_DIR", "STORAGE_BACKEND", "LOCALE_LANGUAGE", "LOCALE_CURRENCY_SYMBOL"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()

        assert settings.app_name == "Stockbook"
        assert settings.storage.backend == "sqlite"
        assert settings.storage.db_path == Path("data") / "stockbook.db"
        assert settings.locale.language == "en"

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("STORAGE_DB_NAME", "shop.db")
        monkeypatch.setenv("LOCALE_LANGUAGE", "fa")
        monkeypatch.setenv("LOCALE_CURRENCY_SYMBOL", "ریال")

        settings = Settings()

        assert settings.storage.db_path == tmp_path / "shop.db"
        assert settings.locale.language == "fa"
        assert settings.locale.currency_symbol == "ریال"

    def test_explicit_sqlite_storage_creates_data_dir(self, tmp_path):
        data_dir = tmp_path / "nested" / "data"
        Settings(storage={"backend": "sqlite", "data_dir": data_dir})
        assert data_dir.is_dir()

    def test_memory_storage_skips_data_dir(self, tmp_path):
        data_dir = tmp_path / "unused"
        settings = Settings(storage=StorageSettings(backend="memory", data_dir=data_dir))
        assert settings.storage.backend == "memory"
        assert not data_dir.exists()

    def test_get_settings_is_cached(self):
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first
