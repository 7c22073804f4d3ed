"""Tests for settings loading."""

from schemaconv_cli.config import Settings


class TestSettings:
    """Test SCHEMACONV_* environment variables."""

    def test_defaults(self, monkeypatch):
        """Test default values when nothing is set."""
        for name in ("DATABASE_URL", "DEFAULT_SCHEMA", "CONNECT_TIMEOUT", "LOG_LEVEL"):
            monkeypatch.delenv(f"SCHEMACONV_{name}", raising=False)

        s = Settings(_env_file=None)

        assert s.database_url is None
        assert s.default_schema == "public"
        assert s.connect_timeout is None
        assert s.log_level == "WARNING"

    def test_environment(self, monkeypatch):
        """Test reading prefixed environment variables."""
        monkeypatch.setenv("SCHEMACONV_DATABASE_URL", "postgres://localhost/app")
        monkeypatch.setenv("SCHEMACONV_DEFAULT_SCHEMA", "reporting")
        monkeypatch.setenv("SCHEMACONV_CONNECT_TIMEOUT", "10")

        s = Settings(_env_file=None)

        assert s.database_url == "postgres://localhost/app"
        assert s.default_schema == "reporting"
        assert s.connect_timeout == 10

    def test_env_file(self, tmp_path, monkeypatch):
        """Test reading a .env file."""
        monkeypatch.delenv("SCHEMACONV_DEFAULT_SCHEMA", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("SCHEMACONV_DEFAULT_SCHEMA=warehouse\n", encoding="utf-8")

        s = Settings(_env_file=str(env_file))

        assert s.default_schema == "warehouse"
