"""Configuration of the local service identity using Pydantic Settings.

The settings describe the user agent this process sends with outbound
requests. Values are read from environment variables prefixed with
``AGENTSTRING_``.
"""

import logging
from functools import lru_cache
from typing import ClassVar, Final

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from agentstring import __version__
from agentstring.agent import Agent
from agentstring.grammar import DEFAULT_VERSION, is_valid_name, is_valid_node_id
from agentstring.parser import format_user_agent
from agentstring.user_agent import UserAgent

logger = logging.getLogger(__name__)

ENV_PREFIX_NAME: Final[str] = "AGENTSTRING"
ENV_PREFIX_DELIMITER: Final[str] = "_"
ENV_PREFIX: Final[str] = f"{ENV_PREFIX_NAME}{ENV_PREFIX_DELIMITER}"

SERVICE_NAME_ENV: Final[str] = f"{ENV_PREFIX}SERVICE_NAME"
SERVICE_VERSION_ENV: Final[str] = f"{ENV_PREFIX}SERVICE_VERSION"
NODE_ID_ENV: Final[str] = f"{ENV_PREFIX}NODE_ID"
INCLUDE_LIBRARY_AGENT_ENV: Final[str] = f"{ENV_PREFIX}INCLUDE_LIBRARY_AGENT"

LIBRARY_AGENT_NAME: Final[str] = "agentstring"


class Settings(BaseSettings):
    """Service identity loaded from environment variables."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    service_name: str = Field(
        default="unknown",
        description="Name of this service, sent as the primary agent name",
        validation_alias=SERVICE_NAME_ENV,
    )
    service_version: str = Field(
        default=DEFAULT_VERSION,
        description="Version of this service, sent as the primary agent version",
        validation_alias=SERVICE_VERSION_ENV,
    )
    node_id: str | None = Field(
        default=None,
        description="Identifier of this process or host",
        validation_alias=NODE_ID_ENV,
    )
    include_library_agent: bool = Field(
        default=True,
        description="Append this library as an informational agent",
        validation_alias=INCLUDE_LIBRARY_AGENT_ENV,
    )

    @field_validator("service_name")
    @classmethod
    def validate_service_name(cls, v: str) -> str:
        """Validate that the service name is a legal agent name."""
        if not is_valid_name(v):
            raise ValueError("Service name may only contain letters, digits, '.' and '-'")
        return v

    @field_validator("service_version")
    @classmethod
    def validate_service_version(cls, v: str) -> str:
        """Validate that the service version is not empty."""
        if not v:
            raise ValueError("Service version cannot be empty")
        return v

    @field_validator("node_id")
    @classmethod
    def validate_node_id(cls, v: str | None) -> str | None:
        """Validate the node id, treating an empty value as unset."""
        if not v:
            return None
        if not is_valid_node_id(v):
            raise ValueError(
                "Node id must start with a letter or digit and contain only "
                "letters, digits, '.' and '-'"
            )
        return v

    def model_post_init(self, __context: object, /) -> None:
        """Log configuration after initialization."""
        logger.debug(
            "Service identity configured",
            extra={
                "service_name": self.service_name,
                "service_version": self.service_version,
                "node_id": self.node_id,
            },
        )


def build_user_agent(settings: Settings) -> UserAgent:
    """Build the user agent described by *settings*.

    Args:
        settings: The service identity.

    Returns:
        A user agent whose primary agent is the configured service, followed by
        this library when ``include_library_agent`` is set.
    """
    user_agent = UserAgent.of(
        Agent.of(settings.service_name, settings.service_version), settings.node_id
    )
    if settings.include_library_agent:
        user_agent = user_agent.add_agent(Agent.of(LIBRARY_AGENT_NAME, __version__))
    return user_agent


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: The service identity settings

    Raises:
        ValidationError: If a configured value is invalid
    """
    try:
        return Settings()
    except Exception:
        logger.critical("Failed to load user agent configuration", exc_info=True)
        raise


def get_user_agent() -> str:
    """Return the ``User-Agent`` header value for this process."""
    user_agent = format_user_agent(build_user_agent(get_settings()))
    logger.debug("Built User-Agent string", extra={"user_agent": user_agent})
    return user_agent
