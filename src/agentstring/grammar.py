"""Grammars for the components of a user agent string.

All patterns are anchored and compiled once at import time. The predicates
are pure functions and safe to call from any thread.
"""

import re
from typing import Final

DEFAULT_VERSION: Final[str] = "0.0.0"

NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9.\-]+$")
NODE_ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9][A-Za-z0-9.\-]*$")
# At least two numeric components, then an optional pre-release or build qualifier.
VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[0-9]+(?:\.[0-9]+)+(?:[-+][A-Za-z0-9][A-Za-z0-9.+\-]*)?$"
)


def is_valid_name(name: str) -> bool:
    """Return whether *name* is a valid agent name."""
    return NAME_PATTERN.fullmatch(name) is not None


def is_valid_node_id(node_id: str) -> bool:
    """Return whether *node_id* is a valid node id."""
    return NODE_ID_PATTERN.fullmatch(node_id) is not None


def is_valid_version(version: str) -> bool:
    """Return whether *version* satisfies the version grammar.

    Examples:
        >>> is_valid_version("1.2.3-rc1-2-g4658d8a")
        True
        >>> is_valid_version("foo-1.2.3")
        False
    """
    return VERSION_PATTERN.fullmatch(version) is not None


def normalize_version(version: str) -> str:
    """Return *version* unchanged if valid, otherwise the default version."""
    return version if is_valid_version(version) else DEFAULT_VERSION
