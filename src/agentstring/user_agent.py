"""The UserAgent value: a primary agent, informational agents and a node id.

A user agent describes which software components produced a request, in the
order they handled it. The primary agent is the subject of the request; the
informational agents describe intermediaries such as client libraries. The
optional node id identifies the process or host that issued the request.
"""

from pydantic import BaseModel, ConfigDict, field_validator
from typing_extensions import Self

from agentstring.agent import Agent
from agentstring.exceptions import InvalidNodeIdError
from agentstring.grammar import is_valid_node_id


class UserAgent(BaseModel):
    """An immutable user agent.

    Values are never mutated; :meth:`add_agent` returns a new instance.
    """

    model_config = ConfigDict(frozen=True)

    primary: Agent
    informational: tuple[Agent, ...] = ()
    node_id: str | None = None

    @field_validator("node_id")
    @classmethod
    def validate_node_id(cls, v: str | None) -> str | None:
        """Validate the node id against the node id grammar."""
        if v is not None and not is_valid_node_id(v):
            raise ValueError(f"Illegal node id format: {v!r}")
        return v

    @classmethod
    def of(cls, primary: Agent, node_id: str | None = None) -> Self:
        """Create a user agent with no informational agents.

        Args:
            primary: The primary agent.
            node_id: Optional identifier of the originating node.

        Returns:
            The new user agent.

        Raises:
            InvalidNodeIdError: If ``node_id`` is given and does not match the
                node id grammar.
        """
        if node_id is not None and not is_valid_node_id(node_id):
            raise InvalidNodeIdError(node_id)
        return cls(primary=primary, node_id=node_id)

    def add_agent(self, agent: Agent) -> Self:
        """Return a copy of this user agent with *agent* appended."""
        return self.model_copy(update={"informational": (*self.informational, agent)})

    def __str__(self) -> str:
        """Render the canonical header value."""
        from agentstring.parser import format_user_agent

        return format_user_agent(self)
