"""Tests for settings and the database connection manager."""
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError


def _settings(**overrides):
    from app.config import Settings

    values = {"mongodb_url": "mongodb://localhost:27017", "jwt_secret": "test-secret"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Test defaults for the optional settings."""
        settings = _settings()

        assert settings.mongodb_db_name == "daily_journey"
        assert settings.mongodb_timeout_ms == 5000
        assert settings.log_level == "INFO"

    def test_log_level_case_insensitive(self):
        """Test level names are normalized to upper case."""
        assert _settings(log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        """Test an unknown level fails at load time."""
        with pytest.raises(ValidationError, match="log_level must be one of"):
            _settings(log_level="chatty")

    def test_cors_origins_list_skips_empty_entries(self):
        """Test stray commas and spaces do not produce empty origins."""
        settings = _settings(cors_origins="http://a.test, ,http://b.test,")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


@pytest.mark.asyncio
class TestDatabaseConnect:
    """Tests for Database.connect."""

    async def test_connect_uses_configured_timeout_and_ttl_index(self, monkeypatch):
        """Test the client gets the timeout and revoked tokens get a TTL index."""
        import app.database as database_module

        revoked_tokens = MagicMock()
        revoked_tokens.create_index = AsyncMock()
        db = MagicMock()
        db.__getitem__.return_value = revoked_tokens
        client = MagicMock()
        client.__getitem__.return_value = db
        client_factory = MagicMock(return_value=client)
        monkeypatch.setattr(database_module, "AsyncIOMotorClient", client_factory)

        manager = database_module.Database()
        await manager.connect()

        client_factory.assert_called_once_with(
            database_module.settings.mongodb_url,
            serverSelectionTimeoutMS=database_module.settings.mongodb_timeout_ms,
        )
        client.__getitem__.assert_called_once_with(database_module.settings.mongodb_db_name)
        db.__getitem__.assert_called_once_with("revoked_tokens")
        revoked_tokens.create_index.assert_awaited_once_with("expires_at", expireAfterSeconds=0)
        assert manager.db is db

    async def test_get_database_before_connect(self, monkeypatch):
        """Test the dependency refuses to hand out a missing connection."""
        import app.database as database_module

        monkeypatch.setattr(database_module, "database", database_module.Database())

        with pytest.raises(RuntimeError, match="Database not connected"):
            await database_module.get_database()
