from app.settings import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("RATE_LIMIT_ENABLED", raising=False)
    s = Settings(_env_file=None)
    assert s.app_name == "Unit Converter API"
    assert s.rate_limit_enabled is True
    assert s.rate_limit_default == "100/minute"
    assert "http://localhost:5173" in s.cors_origins


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["https://convert.example.com"]')
    monkeypatch.setenv("RATE_LIMIT_DEFAULT", "10/second")
    monkeypatch.setenv("DOCS_ENABLED", "false")
    s = Settings(_env_file=None)
    assert s.cors_origins == ["https://convert.example.com"]
    assert s.rate_limit_default == "10/second"
    assert s.docs_enabled is False
