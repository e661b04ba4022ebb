"""HTTP integration for user agents.

Adapts header containers to the :class:`~agentstring.parser.InboundRequest`
protocol and builds ``httpx`` clients that send a canonical ``User-Agent``
header with every request.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from agentstring.parser import USER_AGENT_HEADER, format_user_agent, try_parse_request
from agentstring.user_agent import UserAgent

logger = logging.getLogger(__name__)


class HeadersRequest:
    """An inbound request backed by a header mapping.

    Accepts anything ``httpx.Headers`` accepts: a ``dict``, a list of pairs,
    ``httpx.Headers`` itself, or Starlette's ``Headers``. Lookups are
    case-insensitive.
    """

    def __init__(self, headers: Mapping[str, str] | httpx.Headers) -> None:
        """Initialize the adapter.

        Args:
            headers: Header names and values of the received request.
        """
        self._headers = httpx.Headers(headers)

    def first_header(self, name: str) -> str | None:
        """Return the first value of header *name*, or None if absent."""
        values = self._headers.get_list(name)
        if not values:
            return None
        return values[0]


def user_agent_from_headers(headers: Mapping[str, str] | httpx.Headers) -> UserAgent:
    """Best-effort parse of the ``User-Agent`` header in *headers*."""
    return try_parse_request(HeadersRequest(headers))


def user_agent_headers(user_agent: UserAgent) -> dict[str, str]:
    """Return the request headers that carry *user_agent*."""
    return {USER_AGENT_HEADER: format_user_agent(user_agent)}


def create_client(
    user_agent: UserAgent, timeout: float = 30.0, **kwargs: Any
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` that identifies itself with *user_agent*.

    Args:
        user_agent: Identity sent as the ``User-Agent`` header.
        timeout: Request timeout in seconds.
        **kwargs: Passed through to ``httpx.AsyncClient``. Extra ``headers``
            are merged; the ``User-Agent`` header always wins.

    Returns:
        A new client. The caller owns it and must close it.
    """
    headers = httpx.Headers(kwargs.pop("headers", None))
    headers.update(user_agent_headers(user_agent))
    logger.debug("Creating HTTP client", extra={"user_agent": headers[USER_AGENT_HEADER]})
    return httpx.AsyncClient(headers=headers, timeout=httpx.Timeout(timeout), **kwargs)
