# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ci_status

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.text import Text


@dataclass(frozen=True)
class Symbol:
    """A status glyph and the colour it is rendered in."""

    glyph: str
    color: str


SUCCESS = Symbol("✔", "green")
WARNING = Symbol("⚠", "yellow")
ERROR = Symbol("✖", "red")
INFO = Symbol("ℹ", "blue")


class StatusConsole:
    """
    Renders glyph-prefixed report lines.
    Informational lines go to stdout, warnings and errors to stderr.
    """

    def __init__(self, out: Optional[Console] = None, err: Optional[Console] = None) -> None:
        self.out = out or Console(highlight=False)
        self.err = err or Console(stderr=True, highlight=False)

    def _render(self, symbol: Optional[Symbol], message: str, colored: bool) -> Text:
        text = Text()
        if symbol:
            text.append(symbol.glyph, style=symbol.color)
            text.append(" ")
        text.append(message, style=symbol.color if symbol and colored else None)
        return text

    def line(self, symbol: Optional[Symbol], message: str, colored: bool = False, stderr: bool = False) -> None:
        """
        Prints `message` prefixed by the glyph of `symbol`.

        Args:
            symbol: Glyph to prefix the line with, or None for a bare line.
            message: Text of the line. Rendered literally, never as rich markup.
            colored: If True, the message takes the colour of the glyph as well.
            stderr: If True, print to stderr instead of stdout.
        """
        target = self.err if stderr else self.out
        target.print(self._render(symbol, message, colored), soft_wrap=True)

    def info(self, message: str) -> None:
        self.line(None, message)

    def success(self, message: str) -> None:
        self.line(SUCCESS, message, colored=True)

    def warning(self, message: str) -> None:
        self.line(WARNING, message, colored=True, stderr=True)

    def error(self, message: str) -> None:
        self.line(ERROR, message, colored=True, stderr=True)
