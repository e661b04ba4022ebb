"""The Agent value: a single name/version pair of a user agent string."""

from pydantic import BaseModel, ConfigDict, field_validator
from typing_extensions import Self

from agentstring.exceptions import InvalidNameError, InvalidVersionError
from agentstring.grammar import is_valid_name


class Agent(BaseModel):
    """An immutable ``name/version`` pair.

    The name is validated on construction. The version is stored verbatim;
    whether it is well formed only matters when a containing user agent is
    formatted or parsed.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    version: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate the agent name against the agent name grammar."""
        if not is_valid_name(v):
            raise ValueError(f"Illegal agent name format: {v!r}")
        return v

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Reject empty versions."""
        if not v:
            raise ValueError("Agent version cannot be empty")
        return v

    @classmethod
    def of(cls, name: str, version: str) -> Self:
        """Create an agent, raising package exceptions on invalid input.

        Args:
            name: Agent name, e.g. ``"my-service"``.
            version: Agent version, e.g. ``"1.2.3"``.

        Returns:
            The new agent.

        Raises:
            InvalidNameError: If ``name`` does not match the agent name grammar.
            InvalidVersionError: If ``version`` is empty.
        """
        if not is_valid_name(name):
            raise InvalidNameError(name)
        if not version:
            raise InvalidVersionError(version)
        return cls(name=name, version=version)

    def __str__(self) -> str:
        """Render the agent as ``name/version`` without normalization."""
        return f"{self.name}/{self.version}"
