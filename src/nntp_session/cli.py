"""nntp-session CLI.

Talks to a server one exchange at a time, mostly for poking at servers
and checking connectivity.

Usage:
    nntp-session --host news.example.com greet          # Show the greeting
    nntp-session --host news.example.com --ssl greet    # Same, over TLS
    nntp-session send "GROUP alt.test"                   # Single-line command
    nntp-session fetch LIST                              # Multi-line command
    nntp-session fetch "LIST NEWSGROUPS" -s 215 -f json  # JSON output
    nntp-session config                                  # Show configuration

Connection settings come from --config FILE (YAML) or NNTP_* environment
variables; --host/--port/--ssl override both.
"""

from __future__ import annotations

import contextlib
import json
import logging
import sys
from collections.abc import Iterator

import click

from .config import ConnectionConfig
from .connection import NntpConnection, create_connection
from .errors import NntpError
from .observers import LoggingObserver
from .protocol.parsers import MultiLineResponseParser
from .protocol.response import Response

# Output format options
FORMAT_TABLE = "table"
FORMAT_JSON = "json"


@click.group()
@click.option("--host", default=None, help="Server host (default: NNTP_HOST or localhost)")
@click.option("--port", type=int, default=None, help="Server port (default: 119, 563 with --ssl)")
@click.option("--ssl/--no-ssl", "use_ssl", default=None, help="Use TLS")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with connection settings",
)
@click.option("--verbose", "-v", is_flag=True, help="Log every exchange to stderr")
@click.pass_context
def main(
    ctx: click.Context,
    host: str | None,
    port: int | None,
    use_ssl: bool | None,
    config_path: str | None,
    verbose: bool,
) -> None:
    """nntp-session - run NNTP exchanges from the command line."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        base = ConnectionConfig.from_yaml(config_path) if config_path else ConnectionConfig.from_env()
        config = base.merged(host=host, port=port, use_ssl=use_ssl)
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    ctx.obj = config


@contextlib.contextmanager
def _session(config: ConnectionConfig) -> Iterator[tuple[NntpConnection, Response]]:
    """Connect, read the greeting, and QUIT on the way out.

    Session errors and rejected commands are reported on stderr and exit
    with status 1.
    """
    try:
        with create_connection(config, observer=LoggingObserver()) as conn:
            greeting = conn.read_response()
            yield conn, greeting
            conn.command("QUIT")
    except (NntpError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command("greet")
@click.pass_obj
def greet(config: ConnectionConfig) -> None:
    """Connect and show the server greeting.

    Examples:

        nntp-session --host news.example.com greet
    """
    with _session(config) as (_, greeting):
        click.echo(str(greeting))


@main.command("send")
@click.argument("text")
@click.pass_obj
def send(config: ConnectionConfig, text: str) -> None:
    """Send a single-line command and show the status line.

    Examples:

        nntp-session send "GROUP alt.test"
        nntp-session send DATE
    """
    with _session(config) as (conn, _):
        response = conn.command(text)
        click.echo(str(response))


@main.command("fetch")
@click.argument("text")
@click.option(
    "--success-code",
    "-s",
    "success_codes",
    type=int,
    multiple=True,
    help="Code that is followed by a data block (repeatable, default: any 2xx)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice([FORMAT_TABLE, FORMAT_JSON]),
    default=FORMAT_TABLE,
    help="Output format",
)
@click.pass_obj
def fetch(
    config: ConnectionConfig,
    text: str,
    success_codes: tuple[int, ...],
    output_format: str,
) -> None:
    """Send a multi-line command and show the status line and data block.

    Examples:

        nntp-session fetch LIST
        nntp-session fetch "HEAD 1" -s 221 --format json
    """
    with _session(config) as (conn, _):
        response = conn.multi_line_command(text, MultiLineResponseParser(success_codes))

    if output_format == FORMAT_JSON:
        click.echo(json.dumps(response.model_dump(), indent=2, ensure_ascii=False))
        return

    click.echo(f"{response.code} {response.message}".rstrip())
    for line in response.lines:
        click.echo(line)
    click.echo(f"\nTotal: {len(response.lines)} line(s)")


@main.command("config")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def show_config(config: ConnectionConfig, output_json: bool) -> None:
    """Show the effective connection configuration.

    Examples:

        nntp-session config
        nntp-session --config news.yaml config --json
    """
    if output_json:
        click.echo(json.dumps(config.to_dict(), indent=2))
        return

    click.echo("NNTP Session Configuration")
    click.echo("-" * 40)
    click.echo(f"Host:             {config.host}")
    click.echo(f"Port:             {config.port}")
    click.echo(f"TLS:              {'yes' if config.use_ssl else 'no'}")
    click.echo(f"Encoding:         {config.encoding}")
    click.echo(f"Connect timeout:  {config.connect_timeout or 'none'}")


if __name__ == "__main__":
    main()
