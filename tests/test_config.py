from showmatch.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DEFAULT_MATCH_LIMIT", raising=False)
    monkeypatch.delenv("INTERESTED_MIN_SCORE", raising=False)
    settings = Settings()
    assert settings.default_match_limit == 5
    assert settings.interested_min_score == 50
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DEFAULT_MATCH_LIMIT", "10")
    monkeypatch.setenv("interested_min_score", "65")
    settings = Settings()
    assert settings.default_match_limit == 10
    assert settings.interested_min_score == 65


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
