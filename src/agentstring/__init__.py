"""agentstring: parse and format composite service user agent strings.

A user agent names the primary service that issued a request, the
informational agents (client libraries, proxies) that relayed it, and
optionally the node the request came from::

    my-service/1.2.3 (nodeId:host-1) http-client/4.5.6
"""

__version__ = "0.1.0"

from agentstring.agent import Agent  # noqa: E402
from agentstring.exceptions import (  # noqa: E402
    InvalidNameError,
    InvalidNodeIdError,
    InvalidVersionError,
    ParseError,
    UserAgentError,
)
from agentstring.parser import (  # noqa: E402
    UNKNOWN_USER_AGENT,
    USER_AGENT_HEADER,
    InboundRequest,
    format_user_agent,
    parse,
    try_parse,
    try_parse_request,
)
from agentstring.user_agent import UserAgent  # noqa: E402

__all__ = [
    "UNKNOWN_USER_AGENT",
    "USER_AGENT_HEADER",
    "Agent",
    "InboundRequest",
    "InvalidNameError",
    "InvalidNodeIdError",
    "InvalidVersionError",
    "ParseError",
    "UserAgent",
    "UserAgentError",
    "format_user_agent",
    "parse",
    "try_parse",
    "try_parse_request",
]
