from backend.config import DEFAULT_CORS_ORIGINS, load_settings


def test_defaults_when_environment_is_empty():
    settings = load_settings({})

    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.log_level == "INFO"
    assert settings.testing is False


def test_origins_and_log_level_from_environment():
    settings = load_settings(
        {"INVEST_CORS_ORIGINS": "https://app.example.com, http://localhost:8080,", "LOG_LEVEL": "debug"}
    )

    assert settings.cors_origins == ["https://app.example.com", "http://localhost:8080"]
    assert settings.log_level == "DEBUG"
