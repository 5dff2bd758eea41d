"""Filesystem helpers for readme-html."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import TextIO

from .constants import DEFAULT_MAX_FILE_SIZE, DEFAULT_MAX_LINE_LENGTH, MARKDOWN_EXTENSIONS

MAX_FILE_SIZE_ENV_VAR = "README_HTML_MAX_FILE_SIZE"
MAX_LINE_LENGTH_ENV_VAR = "README_HTML_MAX_LINE_LENGTH"


def _positive_int_from_env(env_var: str, default: int) -> int:
    env_value = os.environ.get(env_var)
    if env_value is None:
        return default

    try:
        value = int(env_value)
    except ValueError as error:
        error_message = f"Invalid value for {env_var}: {env_value} (expected positive integer)"
        raise ValueError(error_message) from error

    if value <= 0:
        error_message = f"{env_var} must be a positive integer, got {value}."
        raise ValueError(error_message)

    return value


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Resolve the maximum allowed file size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed file size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["README_HTML_MAX_FILE_SIZE"] = "204800"
        limit = get_max_file_size(default=102400)
    """
    return _positive_int_from_env(MAX_FILE_SIZE_ENV_VAR, default)


def get_max_line_length(default: int = DEFAULT_MAX_LINE_LENGTH) -> int:
    """Resolve the maximum allowed line length.

    Args:
        default: Fallback value in characters when the environment variable is
            unset.

    Returns:
        int: Maximum allowed line length in characters.

    Raises:
        ValueError: If the environment value is not a positive integer.
    """
    return _positive_int_from_env(MAX_LINE_LENGTH_ENV_VAR, default)


def contains_symlink(path: Path) -> bool:
    """Check whether a path or any parent directory is a symlink.

    Args:
        path: Path to inspect.

    Returns:
        bool: True when a symlink is encountered, otherwise False.
    """
    for candidate in (path, *path.parents):
        try:
            if candidate.is_symlink():
                return True
        except OSError:
            continue
    return False


def normalize_filepath(
    raw_path: str, base_dir: Path, extensions: tuple[str, ...] = MARKDOWN_EXTENSIONS
) -> Path:
    """Resolve and validate an input filepath under a base directory.

    Args:
        raw_path: User-supplied path to the input file (absolute or relative).
        base_dir: Working directory that constrains allowed paths.
        extensions: Accepted file suffixes, lowercase with leading dot.

    Returns:
        Path: Absolute path to the input file.

    Raises:
        ValueError: If the path does not exist, is outside `base_dir`, uses an
            unsupported extension, or traverses a symlink.

    Examples:
        normalize_filepath("docs/README.md", Path.cwd())
        normalize_filepath("readme.json", Path.cwd(), extensions=(".json",))
    """
    path = Path(raw_path).expanduser()

    if contains_symlink(path):
        error_message = f"Symlinks are not supported for security reasons: {path}"
        raise ValueError(error_message)

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        error_message = f"{path} does not exist."
        raise ValueError(error_message) from error
    except OSError as error:
        error_message = f"Error resolving {path}: {error}"
        raise ValueError(error_message) from error

    if not resolved.is_file():
        error_message = f"{resolved} is not a regular file."
        raise ValueError(error_message)

    try:
        resolved.relative_to(base_dir)
    except ValueError as error:
        error_message = f"{resolved} is outside of the working directory {base_dir}."
        raise ValueError(error_message) from error

    if resolved.suffix.lower() not in extensions:
        error_message = f"{resolved} is not a supported input file.\n"
        error_message += f"Supported extensions are: {', '.join(extensions)}"
        raise ValueError(error_message)

    return resolved


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Return stat information for a file while disallowing symlinks.

    Args:
        filepath: Path to the file.

    Returns:
        os.stat_result: File metadata gathered without following symlinks.

    Raises:
        IOError: If the path is inaccessible, a symlink, or not a regular file.
    """
    try:
        stat_result = os.stat(filepath, follow_symlinks=False)
    except OSError as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error

    if stat.S_ISLNK(stat_result.st_mode):
        error_message = f"Symlinks are not supported: {filepath}."
        raise IOError(error_message)

    if not stat.S_ISREG(stat_result.st_mode):
        error_message = f"{filepath} is not a regular file."
        raise IOError(error_message)

    return stat_result


def enforce_file_size(stat_result: os.stat_result, max_size: int, filepath: Path):
    """Guard against files that exceed the configured maximum size.

    Raises:
        IOError: If `stat_result.st_size` exceeds `max_size`.
    """
    if stat_result.st_size > max_size:
        error_message = f"{filepath} exceeds the maximum allowed size of {max_size} bytes."
        raise IOError(error_message)


def safe_read(filepath: Path) -> TextIO:
    """Open a file for reading with consistent error handling.

    Args:
        filepath: Path to the file.

    Returns:
        TextIO: File handle opened for reading in UTF-8.

    Raises:
        IOError: If the path is missing, inaccessible, or not a file.

    Examples:
        with safe_read(Path("README.md")) as handle:
            content = handle.read()
    """
    try:
        return open(filepath, "r", encoding="UTF-8", newline="")
    except (
        FileNotFoundError,
        PermissionError,
        IsADirectoryError,
        NotADirectoryError,
    ) as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error
