from messageboard.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.database_url.startswith("postgresql")
    assert settings.users_prefix == "/users"
    assert settings.create_tables is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MESSAGEBOARD_DATABASE_URL", "sqlite:///demo.db")
    monkeypatch.setenv("MESSAGEBOARD_CREATE_TABLES", "true")
    monkeypatch.setenv("messageboard_log_level", "debug")

    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite:///demo.db"
    assert settings.create_tables is True
    assert settings.log_level == "debug"
