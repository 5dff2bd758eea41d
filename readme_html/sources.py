"""Helpers for documents retrieved from GitHub repositories.

These functions take already-fetched API payloads; no network access happens
here.
"""

from __future__ import annotations

import base64
import binascii
import json
import re
from collections.abc import Collection, Iterable, Mapping
from pathlib import Path

from .constants import UNAVAILABLE_CLASS
from .filesystem import safe_read

NOTES_TOPIC = "notes"
DATE_PREFIX_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2})")


class SourceError(Exception):
    """Raised when a repository payload does not yield a document."""


def decode_readme_payload(payload: Mapping[str, object]) -> str:
    """Decode the body of a GitHub ``/repos/{repo}/readme`` response.

    Args:
        payload: Parsed JSON response; ``content`` holds base64 text, possibly
            wrapped over several lines.

    Returns:
        str: README text decoded as UTF-8.

    Raises:
        SourceError: If ``content`` is missing or is not base64-encoded UTF-8.

    Examples:
        decode_readme_payload({"content": "IyBUaXRsZQ==\\n"})  # "# Title"
    """
    content = payload.get("content")
    if not isinstance(content, str):
        raise SourceError("README payload has no `content` field")

    compact = "".join(content.split())
    try:
        raw = base64.b64decode(compact, validate=True)
    except binascii.Error as error:
        raise SourceError(f"README payload is not valid base64: {error}") from error

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as error:
        raise SourceError(f"README payload is not valid UTF-8: {error}") from error


def is_note_repo(topics: Collection[str] | None) -> bool:
    """Return True when the repository topics mark it as a notes repository."""
    return topics is not None and NOTES_TOPIC in topics


def _is_markdown_file(entry: Mapping[str, object]) -> bool:
    name = entry.get("name")
    return isinstance(name, str) and name.endswith(".md") and entry.get("type") == "file"


def select_note_file(
    repo: str, files: Iterable[Mapping[str, object]]
) -> Mapping[str, object]:
    """Pick the main Markdown file of a notes repository.

    Prefers the first ``.md`` file whose name contains the ``YYYY-MM-DD``
    prefix of the repository name, then falls back to the first ``.md`` file.

    Args:
        repo: Repository in ``owner/name`` form.
        files: Entries of a ``/repos/{repo}/contents`` listing.

    Returns:
        Mapping[str, object]: The selected listing entry.

    Raises:
        SourceError: If the listing holds no Markdown file.

    Examples:
        select_note_file("me/2024-05-01-standup", listing)
    """
    markdown_files = [entry for entry in files if _is_markdown_file(entry)]
    repo_name = repo.rsplit("/", 1)[-1]
    date_match = DATE_PREFIX_PATTERN.match(repo_name)

    if date_match:
        for entry in markdown_files:
            if date_match.group(1) in entry["name"]:
                return entry

    if not markdown_files:
        raise SourceError(f"No markdown file found in {repo}")
    return markdown_files[0]


def render_unavailable(content_type: str = "readme") -> str:
    """Return the fallback markup shown when a document cannot be fetched.

    Examples:
        render_unavailable("note")
    """
    return (
        f'<div class="{UNAVAILABLE_CLASS}">'
        f'<p class="text-gray-500">{content_type} not available</p>'
        f'<p class="text-sm text-gray-400 mt-2">'
        f"this repository may not have a {content_type} file</p>"
        f"</div>"
    )


def read_readme_payload(filepath: Path) -> str:
    """Load a saved README API response from disk and decode it.

    Raises:
        SourceError: If the file cannot be read, is not a JSON object, or
            does not decode (see `decode_readme_payload`).
    """
    try:
        with safe_read(filepath) as file:
            payload = json.load(file)
    except (IOError, UnicodeDecodeError, json.JSONDecodeError) as error:
        raise SourceError(f"Could not load README payload from {filepath}: {error}") from error

    if not isinstance(payload, dict):
        raise SourceError(f"{filepath} does not hold a README payload object")
    return decode_readme_payload(payload)
