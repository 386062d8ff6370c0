"""Observers for connection activity.

The connection reports what it does to an observer passed in by the
caller instead of writing to a global logger. Observers only ever see
redacted command text: credentials in authentication commands are masked
before any hook is called.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

# Verbs whose arguments are credentials.
SENSITIVE_VERBS = ("AUTHINFO PASS", "AUTHINFO SASL")

REDACTED = "[omitted]"


def redact_command(text: str, sensitive_verbs: tuple[str, ...] = SENSITIVE_VERBS) -> str:
    """Mask everything after the verb of a credential-bearing command.

    Words may be separated by any run of spaces or tabs, as servers accept.

    Examples:
        redact_command("AUTHINFO PASS hunter2")    -> "AUTHINFO PASS [omitted]"
        redact_command("AUTHINFO\\tPASS hunter2")  -> "AUTHINFO PASS [omitted]"
        redact_command("GROUP alt.test")           -> "GROUP alt.test"
    """
    for verb in sensitive_verbs:
        verb_words = verb.upper().split()
        words = text.split(maxsplit=len(verb_words))
        if [w.upper() for w in words[: len(verb_words)]] == verb_words:
            return f"{' '.join(words[: len(verb_words)])} {REDACTED}"
    return text


class ExchangeObserver:
    """Base class for connection observers.

    Every hook is a no-op; override the ones you need.
    """

    def on_connect(self, host: str, port: int, use_ssl: bool) -> None:
        """Called before the transport is opened."""

    def on_connected(self, host: str, port: int) -> None:
        """Called once the transport is open."""

    def on_connect_failed(self, host: str, port: int, error: Exception) -> None:
        """Called when opening the transport failed."""

    def on_command(self, text: str) -> None:
        """Called with the redacted text of each line sent."""

    def on_response(self, line: str | None) -> None:
        """Called with each raw status line read (None if the stream closed)."""

    def on_block(self, lines: list[str]) -> None:
        """Called with each data block collected."""

    def on_close(self) -> None:
        """Called when the connection releases its resources."""


class LoggingObserver(ExchangeObserver):
    """Forwards connection activity to the logging module."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("nntp_session")

    def on_connect(self, host: str, port: int, use_ssl: bool) -> None:
        self.logger.info(f"Connecting: {host} {port} (use_ssl={use_ssl})")

    def on_connected(self, host: str, port: int) -> None:
        self.logger.info(f"Connected to {host}:{port}")

    def on_connect_failed(self, host: str, port: int, error: Exception) -> None:
        self.logger.error(f"Failed to connect to {host}:{port} - {error}")

    def on_command(self, text: str) -> None:
        self.logger.info(f"Sending command: {text}")

    def on_response(self, line: str | None) -> None:
        self.logger.info(f"Response received: {line}")

    def on_block(self, lines: list[str]) -> None:
        self.logger.debug(f"Data block received: {len(lines)} line(s)")

    def on_close(self) -> None:
        self.logger.info("Connection closed")


@dataclass
class RecordingObserver(ExchangeObserver):
    """Keeps every observed event in memory, in order.

    Each event is a (hook name, payload) tuple.
    """

    events: list[tuple[str, Any]] = field(default_factory=list)

    @property
    def commands(self) -> list[str]:
        return [payload for name, payload in self.events if name == "command"]

    def on_connect(self, host: str, port: int, use_ssl: bool) -> None:
        self.events.append(("connect", (host, port, use_ssl)))

    def on_connected(self, host: str, port: int) -> None:
        self.events.append(("connected", (host, port)))

    def on_connect_failed(self, host: str, port: int, error: Exception) -> None:
        self.events.append(("connect_failed", (host, port, error)))

    def on_command(self, text: str) -> None:
        self.events.append(("command", text))

    def on_response(self, line: str | None) -> None:
        self.events.append(("response", line))

    def on_block(self, lines: list[str]) -> None:
        self.events.append(("block", list(lines)))

    def on_close(self) -> None:
        self.events.append(("close", None))
