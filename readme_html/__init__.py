"""
readme-html: render README and notes Markdown into a styled HTML fragment.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    readme-html README.md

Library Usage:
    from pathlib import Path
    from readme_html import render

    html = render(Path("README.md").read_text())
"""

from .config import ConfigError, RenderConfig
from .escape import escape_html
from .exceptions import LineTooLongError, RenderError, SentinelCollisionError
from .inline import format_inline
from .models import ListKind, ParserState
from .renderer import RenderFileError, render, render_file
from .sources import (
    SourceError,
    decode_readme_payload,
    is_note_repo,
    render_unavailable,
    select_note_file,
)

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "render",
    "render_file",
    "format_inline",
    "escape_html",
    # Data models
    "ListKind",
    "ParserState",
    "RenderConfig",
    # Repository payloads
    "decode_readme_payload",
    "is_note_repo",
    "select_note_file",
    "render_unavailable",
    # Exceptions
    "ConfigError",
    "LineTooLongError",
    "RenderError",
    "RenderFileError",
    "SentinelCollisionError",
    "SourceError",
    # Version
    "__version__",
]
