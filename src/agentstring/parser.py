"""Parsing and formatting of user agent strings.

The canonical wire format is::

    primary/1.2.3 (nodeId:my-node) informational/4.5.6 other/7.8

Parsing is tolerant. Input is split into whitespace, comment, agent and junk
tokens in a single left-to-right pass, and a small state machine assembles
the user agent from them:

- ``SEEKING_PRIMARY``: everything before the first ``name/version`` token is
  discarded. The primary keeps its name; a malformed version becomes
  ``0.0.0``.
- ``AFTER_PRIMARY``: a comment directly after the primary may carry
  ``nodeId:<id>``. Any other comment is ignored.
- ``SEEKING_INFORMATIONAL``: every later ``name/version`` token with a well
  formed version is an informational agent. Everything else is skipped.

Comments are skipped as a whole, so their content is never mistaken for an
agent. Scanning is linear in the length of the input.
"""

import logging
import re
from collections.abc import Callable, Iterator
from enum import Enum, auto
from typing import Final, NamedTuple, NoReturn, Protocol

from agentstring.agent import Agent
from agentstring.exceptions import ParseError
from agentstring.grammar import (
    DEFAULT_VERSION,
    is_valid_node_id,
    is_valid_version,
    normalize_version,
)
from agentstring.user_agent import UserAgent

logger = logging.getLogger(__name__)

USER_AGENT_HEADER: Final[str] = "User-Agent"
NODE_ID_KEY: Final[str] = "nodeId"

UNKNOWN_USER_AGENT: Final[UserAgent] = UserAgent.of(Agent.of("unknown", DEFAULT_VERSION))

_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s+")
_AGENT: Final[re.Pattern[str]] = re.compile(r"(?P<name>[A-Za-z0-9.\-]+)/(?P<version>[^\s(]+)")
_NAME_RUN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9.\-]+")
_OTHER_RUN: Final[re.Pattern[str]] = re.compile(r"[^A-Za-z0-9.\-\s(]+")
_NODE_ID_COMMENT: Final[re.Pattern[str]] = re.compile(rf"{NODE_ID_KEY}:(?P<node_id>\S+)")


class InboundRequest(Protocol):
    """A received request whose headers can be read."""

    def first_header(self, name: str) -> str | None:
        """Return the first value of header *name*, or None if absent."""
        ...


class _TokenKind(Enum):
    WHITESPACE = auto()
    COMMENT = auto()
    AGENT = auto()
    JUNK = auto()


class _Token(NamedTuple):
    kind: _TokenKind
    text: str
    name: str = ""
    version: str = ""


class _State(Enum):
    SEEKING_PRIMARY = auto()
    AFTER_PRIMARY = auto()
    SEEKING_INFORMATIONAL = auto()


def _tokenize(text: str) -> Iterator[_Token]:
    """Split *text* into tokens, consuming every character exactly once."""
    pos = 0
    end = len(text)
    while pos < end:
        if text[pos] == "(":
            close = text.find(")", pos + 1)
            if close == -1:
                # Unterminated comment swallows the rest of the input.
                yield _Token(_TokenKind.COMMENT, text[pos + 1 :])
                return
            yield _Token(_TokenKind.COMMENT, text[pos + 1 : close])
            pos = close + 1
            continue

        match = _WHITESPACE.match(text, pos)
        if match:
            yield _Token(_TokenKind.WHITESPACE, match.group())
            pos = match.end()
            continue

        match = _AGENT.match(text, pos)
        if match:
            yield _Token(
                _TokenKind.AGENT, match.group(), match.group("name"), match.group("version")
            )
            pos = match.end()
            continue

        # A name run not followed by "/<version>" cannot contain an agent either,
        # so it is consumed whole.
        match = _NAME_RUN.match(text, pos) or _OTHER_RUN.match(text, pos)
        if match is None:  # pragma: no cover - the patterns cover every character
            raise AssertionError(f"untokenizable input at offset {pos}")
        yield _Token(_TokenKind.JUNK, match.group())
        pos = match.end()


def _node_id_from_comment(comment: str) -> str | None:
    """Extract a valid node id from a ``nodeId:<id>`` comment."""
    match = _NODE_ID_COMMENT.fullmatch(comment.strip())
    if match is None:
        logger.debug("Ignoring user agent comment", extra={"comment": comment})
        return None
    node_id = match.group("node_id")
    if not is_valid_node_id(node_id):
        logger.debug("Ignoring invalid node id in user agent", extra={"node_id": node_id})
        return None
    return node_id


def _scan(text: str) -> UserAgent | None:
    """Assemble a user agent from *text*, or return None if it has no primary agent."""
    state = _State.SEEKING_PRIMARY
    primary: Agent | None = None
    node_id: str | None = None
    informational: list[Agent] = []

    for token in _tokenize(text):
        if token.kind is _TokenKind.WHITESPACE:
            continue

        if state is _State.SEEKING_PRIMARY:
            if token.kind is _TokenKind.AGENT:
                primary = Agent(name=token.name, version=normalize_version(token.version))
                state = _State.AFTER_PRIMARY
            continue

        if state is _State.AFTER_PRIMARY:
            state = _State.SEEKING_INFORMATIONAL
            if token.kind is _TokenKind.COMMENT:
                node_id = _node_id_from_comment(token.text)
                continue

        if token.kind is _TokenKind.AGENT:
            if is_valid_version(token.version):
                informational.append(Agent(name=token.name, version=token.version))
            else:
                logger.debug(
                    "Skipping informational agent with malformed version",
                    extra={"agent": token.text},
                )

    if primary is None:
        return None
    return UserAgent(primary=primary, informational=tuple(informational), node_id=node_id)


def _parse(text: str, on_missing_primary: Callable[[str], UserAgent]) -> UserAgent:
    user_agent = _scan(text)
    if user_agent is None:
        return on_missing_primary(text)
    return user_agent


def _raise_parse_error(text: str) -> NoReturn:
    raise ParseError(text)


def _unknown(text: str) -> UserAgent:
    logger.debug("Falling back to unknown user agent", extra={"user_agent": text})
    return UNKNOWN_USER_AGENT


def format_user_agent(user_agent: UserAgent) -> str:
    """Render *user_agent* in the canonical wire format.

    Versions that do not satisfy the version grammar are rendered as
    ``0.0.0`` so that the result can always be parsed back.

    Args:
        user_agent: The user agent to render.

    Returns:
        The header value, e.g. ``"service/1.0.0 (nodeId:myNode) conjure/2.0.0"``.
    """
    parts = [f"{user_agent.primary.name}/{normalize_version(user_agent.primary.version)}"]
    if user_agent.node_id is not None:
        parts.append(f"({NODE_ID_KEY}:{user_agent.node_id})")
    parts.extend(
        f"{agent.name}/{normalize_version(agent.version)}" for agent in user_agent.informational
    )
    return " ".join(parts)


def parse(text: str) -> UserAgent:
    """Parse a user agent string, failing if it has no primary agent.

    Args:
        text: Raw header value.

    Returns:
        The parsed user agent.

    Raises:
        ParseError: If no ``name/version`` token can be found in ``text``.
    """
    return _parse(text, _raise_parse_error)


def try_parse(text: str | None) -> UserAgent:
    """Parse a user agent string on a best-effort basis.

    Never raises. Empty or absent input, or input without any
    ``name/version`` token, yields ``unknown/0.0.0``. This is the function to
    use for header values controlled by third parties.
    """
    if not text:
        return _unknown("")
    return _parse(text, _unknown)


def try_parse_request(request: InboundRequest) -> UserAgent:
    """Best-effort parse of the ``User-Agent`` header of *request*."""
    return try_parse(request.first_header(USER_AGENT_HEADER))
