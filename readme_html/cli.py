"""
Renders a Markdown document to an HTML fragment on stdout.
The input is a Markdown file, or a saved GitHub README API response.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .config import ConfigError, build_config
from .constants import JSON_EXTENSIONS, MARKDOWN_EXTENSIONS
from .exceptions import RenderError
from .filesystem import (
    collect_file_stat,
    enforce_file_size,
    get_max_file_size,
    get_max_line_length,
    normalize_filepath,
)
from .logging_setup import setup_logging
from .renderer import RenderFileError, check_line_lengths, render, render_file
from .sources import SourceError, read_readme_payload, render_unavailable

__all__ = ["cli"]

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(package_name="readme-html")
@click.option("--indent-offset", type=int, help="Left margin in pixels per list indent level")
@click.option(
    "--close-fence/--keep-open-fence",
    default=None,
    help="Close or keep open a code fence left unterminated at end of input",
)
@click.option(
    "--github-json",
    is_flag=True,
    help="Treat FILEPATH as a saved GitHub README API response (JSON)",
)
@click.option(
    "--fallback-type",
    type=click.Choice(["readme", "note"]),
    help="Print a 'not available' block instead of failing when content cannot be read",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging on stderr")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    indent_offset: int | None = None,
    close_fence: bool | None = None,
    github_json: bool = False,
    fallback_type: str | None = None,
    verbose: bool = False,
):
    """
    Entry point for rendering a Markdown document to HTML.

    Args:
        filepath: Path to the Markdown file (or JSON payload) to render.
        indent_offset: Override for the per-level list indent offset.
        close_fence: Override for closing an unterminated code fence.
        github_json: Whether `filepath` is a GitHub README API response.
        fallback_type: Content type named in the fallback block printed when
            the document cannot be read or decoded.
        verbose: Whether to log debug messages.

    Raises:
        click.BadParameter: If CLI parameters reference invalid paths or contain
            invalid configuration values.
        click.ClickException: If reading, decoding, or rendering fails and no
            fallback is requested, or if filesystem safety checks fail.

    Examples:
        readme-html README.md --indent-offset 16
        readme-html --github-json --fallback-type readme readme.json
    """
    setup_logging(verbose)

    base_dir = Path.cwd().resolve()
    extensions = JSON_EXTENSIONS if github_json else MARKDOWN_EXTENSIONS
    try:
        filepath = normalize_filepath(filepath, base_dir, extensions)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error
    try:
        config = build_config(
            filepath.parent,
            indent_offset_px=indent_offset,
            close_unterminated_fence=close_fence,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
        max_line_length = get_max_line_length(default=config.max_line_length)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        file_stat = collect_file_stat(filepath)
        enforce_file_size(file_stat, max_file_size, filepath)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    try:
        if github_json:
            content = read_readme_payload(filepath)
            check_line_lengths(content, max_line_length)
            markup = render(content, config)
        else:
            markup = render_file(filepath, config, max_line_length)
    except (RenderFileError, RenderError, SourceError) as error:
        if fallback_type is None:
            raise click.ClickException(str(error)) from error
        logger.warning("Falling back to placeholder content: %s", error)
        markup = render_unavailable(fallback_type)

    click.echo(markup)


if __name__ == "__main__":
    cli()
