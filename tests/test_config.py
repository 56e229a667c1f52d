from videotube.config import PROJECT_ROOT, Settings

ENV_VARS = (
    "SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL", "SUPABASE_SERVICE_KEY", "SUPABASE_ANON_KEY",
    "NEXT_PUBLIC_SUPABASE_ANON_KEY", "VIDEO_PUBLISH_BY_DEFAULT", "CORS_ORIGINS",
    "GOOGLE_APPLICATION_CREDENTIALS", "MEDIA_BUCKET", "LOG_LEVEL",
)


def clear_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    clear_env(monkeypatch)

    settings = Settings.from_env()

    assert settings.supabase_url is None
    assert settings.videos_table == "videos"
    assert settings.publish_by_default is True
    assert settings.cors_origins == ("http://localhost:3000", "http://127.0.0.1:3000")
    assert settings.credentials_path == str(PROJECT_ROOT / "key.json")
    assert settings.log_level == "INFO"


def test_supabase_fallback_names(monkeypatch):
    clear_env(monkeypatch)
    monkeypatch.setenv("NEXT_PUBLIC_SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("NEXT_PUBLIC_SUPABASE_ANON_KEY", "anon")

    settings = Settings.from_env()

    assert settings.supabase_url == "https://example.supabase.co"
    assert settings.supabase_key == "anon"


def test_publish_default_can_be_disabled(monkeypatch):
    clear_env(monkeypatch)
    monkeypatch.setenv("VIDEO_PUBLISH_BY_DEFAULT", "false")

    assert Settings.from_env().publish_by_default is False


def test_absolute_credentials_path_is_kept(monkeypatch):
    clear_env(monkeypatch)
    monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", "/etc/keys/sa.json")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.credentials_path == "/etc/keys/sa.json"
    assert settings.log_level == "DEBUG"
