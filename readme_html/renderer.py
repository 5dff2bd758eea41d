"""Render Markdown documents to HTML."""

from __future__ import annotations

import logging
from pathlib import Path

from .blocks import parse_lines
from .config import ConfigError, RenderConfig, validate_config
from .constants import SENTINEL
from .exceptions import LineTooLongError, RenderError, SentinelCollisionError
from .filesystem import safe_read
from .models import ParserState

logger = logging.getLogger(__name__)


def split_lines(content: str) -> list[str]:
    """Split a document into lines without terminators.

    Splits on ``\\n`` only and strips one trailing ``\\r`` per line. A final
    newline ends the last line rather than starting an empty one.

    Examples:
        split_lines("a\\r\\nb\\n")  # ["a", "b"]
        split_lines("a\\n\\n")  # ["a", ""]
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _check_sentinel(lines: list[str]) -> None:
    for line_number, line in enumerate(lines, start=1):
        if SENTINEL in line:
            raise SentinelCollisionError(line_number)


def render(content: str, config: RenderConfig | None = None) -> str:
    """Render a Markdown document to an HTML fragment.

    A fresh `ParserState` is used for every call, so concurrent renders never
    share state.

    Args:
        content: The markdown text.
        config: Rendering options. Defaults to a new `RenderConfig`.

    Returns:
        str: Concatenated HTML markup.

    Raises:
        ConfigError: If the configuration fails validation.
        SentinelCollisionError: If the document contains a NUL character.

    Examples:
        render("# Title")  # '<h1 class="...">Title</h1>'
        render("- [ ] todo\\n- [x] done\\n")
    """
    config = config or RenderConfig()
    validate_config(config)

    lines = split_lines(content)
    _check_sentinel(lines)
    logger.debug("Rendering %d lines", len(lines))

    return "".join(
        parse_lines(
            lines,
            ParserState(),
            indent_offset_px=config.indent_offset_px,
            close_unterminated_fence=config.close_unterminated_fence,
        )
    )


class RenderFileError(Exception):
    """Raised when rendering a Markdown file fails."""


def check_line_lengths(content: str, max_line_length: int) -> None:
    """Raise `LineTooLongError` for the first line longer than the limit."""
    for line_number, line in enumerate(split_lines(content), start=1):
        if len(line) > max_line_length:
            raise LineTooLongError(line_number, max_line_length)


def render_file(
    filepath: Path,
    config: RenderConfig | None = None,
    max_line_length: int | None = None,
) -> str:
    """Read a UTF-8 Markdown file and render it.

    Args:
        filepath: Path to the markdown file.
        config: Rendering options; defaults to a new `RenderConfig`.
        max_line_length: Optional override for the maximum allowed line length
            (excluding line endings).

    Returns:
        str: Rendered HTML markup.

    Raises:
        RenderFileError: If configuration is invalid, the file cannot be read
            or decoded, or its content exceeds limits.

    Examples:
        html = render_file(Path("README.md"))
    """
    config = config or RenderConfig()
    try:
        validate_config(config)
    except ConfigError as error:
        raise RenderFileError(str(error)) from error

    effective_max_line_length = (
        config.max_line_length if max_line_length is None else max_line_length
    )
    if effective_max_line_length <= 0:
        raise RenderFileError("`max_line_length` override must be a positive integer")

    try:
        with safe_read(filepath) as file:
            content = file.read()
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise RenderFileError(error_message) from error
    except IOError as error:
        raise RenderFileError(str(error)) from error

    try:
        check_line_lengths(content, effective_max_line_length)
        return render(content, config)
    except LineTooLongError as error:
        error_message = (
            f"{filepath} contains a line at line {error.line_number} "
            f"exceeding the maximum allowed length of {error.max_line_length} characters."
        )
        raise RenderFileError(error_message) from error
    except RenderError as error:
        raise RenderFileError(f"{filepath}: {error}") from error
