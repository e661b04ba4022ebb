"""Exceptions for user agent construction and parsing."""


class UserAgentError(Exception):
    """Base exception for all user agent errors."""

    def __init__(self, message: str, details: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: The main error message.
            details: Optional additional details about the error.
        """
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.details:
            return f"{self.message}. Details: {self.details}"
        return self.message


class InvalidNameError(UserAgentError):
    """Raised when an agent name does not match the agent name grammar."""

    def __init__(self, name: str) -> None:
        """Initialize the error.

        Args:
            name: The rejected agent name.
        """
        self.name = name
        super().__init__("Illegal agent name format", f"name={name!r}")


class InvalidVersionError(UserAgentError):
    """Raised when an agent is constructed with an empty version."""

    def __init__(self, version: str) -> None:
        """Initialize the error.

        Args:
            version: The rejected agent version.
        """
        self.version = version
        super().__init__("Illegal agent version format", f"version={version!r}")


class InvalidNodeIdError(UserAgentError):
    """Raised when a node id does not match the node id grammar."""

    def __init__(self, node_id: str) -> None:
        """Initialize the error.

        Args:
            node_id: The rejected node id.
        """
        self.node_id = node_id
        super().__init__("Illegal node id format", f"nodeId={node_id!r}")


class ParseError(UserAgentError):
    """Raised by strict parsing when no primary agent can be found."""

    def __init__(self, user_agent: str) -> None:
        """Initialize the error.

        Args:
            user_agent: The unparseable user agent string.
        """
        self.user_agent = user_agent
        super().__init__("Failed to parse user agent string", f"userAgent={user_agent!r}")
