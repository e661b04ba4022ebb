"""Tests for agentstring.config module."""

import pytest
from pydantic import ValidationError

from agentstring import Agent, __version__
from agentstring.config import (
    INCLUDE_LIBRARY_AGENT_ENV,
    LIBRARY_AGENT_NAME,
    NODE_ID_ENV,
    SERVICE_NAME_ENV,
    SERVICE_VERSION_ENV,
    Settings,
    build_user_agent,
    get_settings,
    get_user_agent,
)


def test_defaults(clean_env: dict[str, str | None]) -> None:
    """Defaults apply when no environment variables are set."""
    settings = Settings()

    assert settings.service_name == "unknown"
    assert settings.service_version == "0.0.0"
    assert settings.node_id is None
    assert settings.include_library_agent is True


def test_values_from_environment(service_env: dict[str, str]) -> None:
    """Environment variables populate the settings."""
    settings = Settings()

    assert settings.service_name == "my-service"
    assert settings.service_version == "1.2.3"
    assert settings.node_id == "host-1"


@pytest.mark.parametrize(
    "env_name,value",
    [
        (SERVICE_NAME_ENV, "my service"),
        (SERVICE_NAME_ENV, "my_service"),
        (SERVICE_VERSION_ENV, ""),
        (NODE_ID_ENV, ".host"),
        (NODE_ID_ENV, "host_1"),
    ],
)
def test_invalid_values_rejected(
    env_name: str, value: str, clean_env: dict[str, str | None], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Invalid identity values fail validation."""
    monkeypatch.setenv(env_name, value)

    with pytest.raises(ValidationError):
        Settings()


def test_empty_node_id_is_unset(
    clean_env: dict[str, str | None], monkeypatch: pytest.MonkeyPatch
) -> None:
    """An empty node id is treated as absent."""
    monkeypatch.setenv(NODE_ID_ENV, "")

    assert Settings().node_id is None


class TestBuildUserAgent:
    """Tests for build_user_agent."""

    def test_includes_library_agent(self, service_env: dict[str, str]) -> None:
        """The library is appended as an informational agent by default."""
        user_agent = build_user_agent(Settings())

        assert user_agent.primary == Agent.of("my-service", "1.2.3")
        assert user_agent.node_id == "host-1"
        assert user_agent.informational == (Agent.of(LIBRARY_AGENT_NAME, __version__),)

    def test_without_library_agent(
        self, service_env: dict[str, str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The library agent can be disabled."""
        monkeypatch.setenv(INCLUDE_LIBRARY_AGENT_ENV, "false")

        user_agent = build_user_agent(Settings())

        assert user_agent.informational == ()

    def test_programmatic_settings(self, clean_env: dict[str, str | None]) -> None:
        """Settings can be created without environment variables."""
        settings = Settings(
            AGENTSTRING_SERVICE_NAME="svc",
            AGENTSTRING_SERVICE_VERSION="2.0.0",
            AGENTSTRING_INCLUDE_LIBRARY_AGENT=False,
        )

        assert str(build_user_agent(settings)) == "svc/2.0.0"


class TestGetUserAgent:
    """Tests for get_settings and get_user_agent."""

    def test_get_settings_is_cached(self, service_env: dict[str, str]) -> None:
        """Repeated calls return the same settings instance."""
        assert get_settings() is get_settings()

    def test_get_user_agent(self, service_env: dict[str, str]) -> None:
        """The header value combines the configured identity and the library."""
        assert get_user_agent() == (
            f"my-service/1.2.3 (nodeId:host-1) {LIBRARY_AGENT_NAME}/{__version__}"
        )

    def test_get_settings_raises_on_invalid_config(
        self, clean_env: dict[str, str | None], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Invalid configuration propagates the validation error."""
        monkeypatch.setenv(SERVICE_NAME_ENV, "bad name")

        with pytest.raises(ValidationError):
            get_settings()
