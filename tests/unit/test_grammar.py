"""Tests for the agent name, node id and version grammars."""

import pytest

from agentstring.grammar import (
    DEFAULT_VERSION,
    is_valid_name,
    is_valid_node_id,
    is_valid_version,
    normalize_version,
)


class TestAgentNameGrammar:
    """Tests for is_valid_name."""

    @pytest.mark.parametrize(
        "name", ["service", "valid-service", "serviceName", "my.service", "Mozilla", "svc2"]
    )
    def test_valid_names(self, name: str) -> None:
        """Test that letters, digits, dots and dashes are accepted."""
        assert is_valid_name(name)

    @pytest.mark.parametrize(
        "name", ["", "invalid service name", "my_service", "svc$", "a|b", "a/b", "svc\n"]
    )
    def test_invalid_names(self, name: str) -> None:
        """Test that spaces, underscores and other punctuation are rejected."""
        assert not is_valid_name(name)


class TestNodeIdGrammar:
    """Tests for is_valid_node_id."""

    @pytest.mark.parametrize(
        "node_id",
        ["nodeId", "NODEID", "node-id", "node.id", "nodeId.", "192.168.0.1", "my.server.foo.local"],
    )
    def test_valid_node_ids(self, node_id: str) -> None:
        """Test node ids accepted by the grammar."""
        assert is_valid_node_id(node_id)

    @pytest.mark.parametrize(
        "node_id", ["", ".nodeId", "-node", "node$", "node_id", "invalid node id"]
    )
    def test_invalid_node_ids(self, node_id: str) -> None:
        """Test node ids rejected by the grammar."""
        assert not is_valid_node_id(node_id)


class TestVersionGrammar:
    """Tests for is_valid_version and normalize_version."""

    @pytest.mark.parametrize(
        "version",
        [
            "1.2",
            "1.2.3",
            "10.20.30",
            "61.0.3163.100",
            "1.2.3-2-g4658d8a",
            "1.2.3-rc1-2-g4658d8a",
            "1.0.0+build.5",
        ],
    )
    def test_valid_versions(self, version: str) -> None:
        """Test versions with at least two numeric components and optional qualifiers."""
        assert is_valid_version(version)

    @pytest.mark.parametrize(
        "version", ["", "1", "1.", "1.2-", "foo-1.2.3", "1 0 0", "v1.2.3", "1.2.3)"]
    )
    def test_invalid_versions(self, version: str) -> None:
        """Test malformed versions."""
        assert not is_valid_version(version)

    def test_normalize_keeps_valid_version(self) -> None:
        """Test that a valid version is returned unchanged."""
        assert normalize_version("1.2.3-rc1") == "1.2.3-rc1"

    def test_normalize_defaults_invalid_version(self) -> None:
        """Test that an invalid version becomes the default version."""
        assert normalize_version("foo-1.2.3") == DEFAULT_VERSION == "0.0.0"
