"""Multi-line data block collection.

A block follows a status line and ends with a line holding a single ".".
Content lines that start with "." are sent dot-stuffed ("..foo") and are
returned with the extra dot removed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..transport.channel import LineChannel

TERMINATOR = "."


def unstuff(line: str) -> str:
    """Undo dot-stuffing on a content line."""
    return line[1:] if line.startswith("..") else line


def read_block(channel: LineChannel) -> list[str]:
    """Read content lines up to the terminator.

    Stops at the terminator line (not included) or when the stream ends.
    Nothing after the terminator is consumed, so the channel stays aligned
    for the next command.

    Returns:
        The content lines in the order they were received
    """
    lines: list[str] = []
    while True:
        line = channel.read_line()
        if line is None or line == TERMINATOR:
            return lines
        lines.append(unstuff(line))
