"""Command-line interface for agentstring.

This module implements the CLI using Click, providing commands to parse user
agent strings, format new ones from their parts, and show the user agent
configured for the current environment.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import NoReturn

import click
from pydantic import ValidationError

from agentstring.agent import Agent
from agentstring.config import ENV_PREFIX, build_user_agent, get_settings
from agentstring.exceptions import UserAgentError
from agentstring.parser import format_user_agent, parse, try_parse
from agentstring.type_defs import JsonDict
from agentstring.user_agent import UserAgent

# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    """Configure global logging.

    Args:
        verbose: If *True* enable more detailed *DEBUG* level logging, otherwise use
        *WARNING* so that command output stays clean.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level)


def _fail(message: str) -> NoReturn:
    """Print *message* to stderr and exit with status 1."""
    click.echo(f"✗ {message}", err=True)
    sys.exit(1)


def _to_json(user_agent: UserAgent) -> JsonDict:
    """Return a JSON-serializable view of *user_agent*."""
    return {
        "primary": {"name": user_agent.primary.name, "version": user_agent.primary.version},
        "informational": [
            {"name": agent.name, "version": agent.version} for agent in user_agent.informational
        ],
        "node_id": user_agent.node_id,
        "formatted": format_user_agent(user_agent),
    }


def _parse_agent_option(value: str) -> Agent:
    """Parse a ``NAME/VERSION`` command-line value into an agent."""
    name, sep, version = value.partition("/")
    if not sep:
        raise click.BadParameter(f"expected NAME/VERSION, got {value!r}")
    return Agent.of(name, version)


def _echo_user_agent(user_agent: UserAgent, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(_to_json(user_agent), indent=2))
    else:
        click.echo(format_user_agent(user_agent))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
def main(verbose: bool) -> None:
    """Parse and format service user agent strings."""
    _setup_logging(verbose)


@main.command("parse")
@click.argument("text")
@click.option(
    "--best-effort",
    is_flag=True,
    help="Never fail; fall back to unknown/0.0.0 when no agent is found",
)
@click.option("--json", "as_json", is_flag=True, help="Print the parsed parts as JSON")
def parse_command(text: str, best_effort: bool, as_json: bool) -> None:
    """Parse TEXT and print its canonical form."""
    if best_effort:
        user_agent = try_parse(text)
    else:
        try:
            user_agent = parse(text)
        except UserAgentError as exc:
            _fail(str(exc))
    _echo_user_agent(user_agent, as_json)


@main.command("format")
@click.argument("name")
@click.argument("version")
@click.option("--node-id", default=None, help="Identifier of the originating node")
@click.option(
    "--agent",
    "agents",
    multiple=True,
    help="Informational agent as NAME/VERSION (repeatable, in order)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the parts as JSON")
def format_command(
    name: str, version: str, node_id: str | None, agents: tuple[str, ...], as_json: bool
) -> None:
    """Build a user agent from NAME and VERSION and print it."""
    try:
        user_agent = UserAgent.of(Agent.of(name, version), node_id)
        for value in agents:
            user_agent = user_agent.add_agent(_parse_agent_option(value))
    except UserAgentError as exc:
        _fail(str(exc))
    _echo_user_agent(user_agent, as_json)


@main.command("show")
@click.option("--json", "as_json", is_flag=True, help="Print the parts as JSON")
def show_command(as_json: bool) -> None:
    """Print the user agent configured through the environment."""
    get_settings.cache_clear()
    try:
        settings = get_settings()
    except ValidationError as exc:
        click.echo(f"✗ Configuration error: {exc}", err=True)
        click.echo("\nSupported environment variables:", err=True)
        click.echo(f"  {ENV_PREFIX}SERVICE_NAME", err=True)
        click.echo(f"  {ENV_PREFIX}SERVICE_VERSION", err=True)
        click.echo(f"  {ENV_PREFIX}NODE_ID", err=True)
        click.echo(f"  {ENV_PREFIX}INCLUDE_LIBRARY_AGENT", err=True)
        sys.exit(1)
    _echo_user_agent(build_user_agent(settings), as_json)


if __name__ == "__main__":
    main()
