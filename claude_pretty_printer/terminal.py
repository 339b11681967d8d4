"""
Terminal rendering primitives: options, ANSI styling and boxes.

Rendering never reads process state on its own. Width and color come in as a
RenderOptions value; RenderOptions.detect() is the one place that looks at
the environment and the output stream.
"""

from __future__ import annotations

import shutil
import sys
from typing import TextIO

import pydantic
import typer

from claude_pretty_printer.config.base import PrinterSettings, settings as default_settings
from claude_pretty_printer.schemas.types import BaseStrictModel

DEFAULT_WIDTH = 80
RULE_CHAR = '─'


class RenderOptions(BaseStrictModel):
    """Width and color decisions for one rendering call."""

    width: int = pydantic.Field(DEFAULT_WIDTH, ge=1)
    color: bool = False

    @classmethod
    def detect(cls, stream: TextIO | None = None, settings: PrinterSettings | None = None) -> RenderOptions:
        """
        Derive options from the environment and an output stream.

        Width: PRETTY_PRINTER_WIDTH, else the terminal's columns when the
        stream is a TTY, else 80. Color: off when NO_COLOR is set, on when
        FORCE_COLOR is set, otherwise only for a TTY.
        """
        stream = stream if stream is not None else sys.stdout
        settings = settings if settings is not None else default_settings
        interactive = _is_tty(stream)

        if settings.PRETTY_PRINTER_WIDTH is not None:
            width = settings.PRETTY_PRINTER_WIDTH
        elif interactive:
            width = shutil.get_terminal_size((DEFAULT_WIDTH, 24)).columns or DEFAULT_WIDTH
        else:
            width = DEFAULT_WIDTH

        if settings.color_disabled:
            color = False
        elif settings.color_forced:
            color = True
        else:
            color = interactive

        return cls(width=width, color=color)


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


class Styler:
    """ANSI styling through typer.style; the identity when color is off."""

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def __call__(
        self,
        text: str,
        fg: str | None = None,
        *,
        bold: bool = False,
        dim: bool = False,
        italic: bool = False,
    ) -> str:
        if not self.enabled:
            return text
        return typer.style(
            text,
            fg=fg,
            bold=bold or None,
            dim=dim or None,
            italic=italic or None,
        )

    def dim(self, text: str) -> str:
        return self(text, dim=True)

    def bold(self, text: str) -> str:
        return self(text, bold=True)


def create_line(char: str, width: int) -> str:
    """Creates a horizontal line of the specified character."""
    return char * width


def create_box(header: str, content: str, options: RenderOptions) -> str:
    """Wraps content between two dim rules with a header line above it."""
    style = Styler(options.color)
    rule = style.dim(create_line(RULE_CHAR, options.width))
    return f'{rule}\n{header}\n{content}\n{rule}'
