"""Pytest configuration and shared fixtures for the agentstring test suite."""

import logging
import os
from collections.abc import Generator

import pytest

from agentstring.config import (
    INCLUDE_LIBRARY_AGENT_ENV,
    NODE_ID_ENV,
    SERVICE_NAME_ENV,
    SERVICE_VERSION_ENV,
    get_settings,
)

CONFIG_ENV_VARS = (
    SERVICE_NAME_ENV,
    SERVICE_VERSION_ENV,
    NODE_ID_ENV,
    INCLUDE_LIBRARY_AGENT_ENV,
)


@pytest.fixture(scope="session")
def test_logging() -> Generator[None, None, None]:
    """Configure logging for test sessions."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,  # Override any existing configuration
    )

    yield

    # Clean up logging handlers
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)


@pytest.fixture
def clean_env() -> Generator[dict[str, str | None], None, None]:
    """Provide a clean environment for testing, restoring state afterwards.

    Yields:
        Dict containing the original environment state
    """
    original_env = {}
    for var in CONFIG_ENV_VARS:
        original_env[var] = os.environ.get(var)
        if var in os.environ:
            del os.environ[var]
    get_settings.cache_clear()

    yield original_env

    for var, value in original_env.items():
        if value is not None:
            os.environ[var] = value
        elif var in os.environ:
            del os.environ[var]
    get_settings.cache_clear()


@pytest.fixture
def service_env(clean_env: dict[str, str | None]) -> dict[str, str]:
    """Provide a complete service identity through the environment.

    Returns:
        Dict containing the configured values
    """
    env = {
        SERVICE_NAME_ENV: "my-service",
        SERVICE_VERSION_ENV: "1.2.3",
        NODE_ID_ENV: "host-1",
    }
    os.environ.update(env)
    return env
