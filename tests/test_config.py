from feedback_desk import config
from feedback_desk.config import Settings, load_env_file_fallback


def test_env_file_does_not_override_environment(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text('ADMIN_USERNAME="ops"\nADMIN_PASSWORD=from-file\n# comment\n')
    monkeypatch.setattr(config, "ENV_FILE_PATHS", [tmp_path / "missing.env", env_file])
    # recorded first so the value loaded from the file is undone after the test
    monkeypatch.setenv("ADMIN_USERNAME", "placeholder")
    monkeypatch.delenv("ADMIN_USERNAME")
    monkeypatch.setenv("ADMIN_PASSWORD", "from-env")

    assert load_env_file_fallback() == env_file
    settings = Settings.from_env()
    assert settings.admin_username == "ops"
    assert settings.admin_password == "from-env"


def test_no_env_file(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "ENV_FILE_PATHS", [tmp_path / ".env"])
    assert load_env_file_fallback() is None


def test_settings_defaults(monkeypatch):
    for name in ("DATABASE_URL", "APP_DEBUG", "ADMIN_USERNAME", "ADMIN_PASSWORD", "ADMIN_STRICT_TOKENS", "ADMIN_TOKEN_TTL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.database_url == "sqlite+aiosqlite:///./feedback.db"
    assert settings.admin_username == "admin"
    assert settings.admin_password == "admin123"
    assert settings.strict_tokens is False
    assert settings.token_ttl == 86400
