from openai_mcp.config.settings import Settings, get_settings


def test_api_key_falls_back_to_openai_env(monkeypatch) -> None:
    monkeypatch.delenv("OPENAI_MCP_OPENAI_API_KEY", raising=False)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")

    assert Settings().resolved_openai_api_key() == "sk-from-env"


def test_prefixed_settings_take_precedence(monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")
    monkeypatch.setenv("OPENAI_MCP_OPENAI_API_KEY", "sk-prefixed")
    monkeypatch.setenv("OPENAI_MCP_REQUEST_TIMEOUT_S", "15")
    monkeypatch.setenv("OPENAI_MCP_OPENAI_BASE_URL", "https://proxy.test/v1")

    settings = Settings()

    assert settings.resolved_openai_api_key() == "sk-prefixed"
    assert settings.request_timeout_s == 15.0
    assert settings.openai_base_url == "https://proxy.test/v1"


def test_defaults_match_server_identity() -> None:
    settings = get_settings()

    assert settings.server_name == "openai"
    assert settings.server_version == "0.1.0"
    assert get_settings() is settings
