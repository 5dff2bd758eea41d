"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

TOOL_NAME = "readme-html"


@dataclass
class RenderConfig:
    """Configuration for rendering Markdown documents to HTML.

    Attributes:
        indent_offset_px: Left margin, in pixels, added per list indent level.
        close_unterminated_fence: Whether a code fence still open at the end of
            the document is closed. When False the code container is left open.
        max_file_size: Maximum file size in bytes that will be processed.
        max_line_length: Maximum line length allowed when rendering files.

    Examples:
        RenderConfig(indent_offset_px=16, close_unterminated_fence=False)
    """

    # Rendering
    indent_offset_px: int = 20
    close_unterminated_fence: bool = True

    # Limits
    max_file_size: int = 10 * 1024 * 1024
    max_line_length: int = 10_000


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`indent_offset_px` must be >= 0")
    """


def load_config(search_path: Path) -> RenderConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.readme-html]`` table from `pyproject.toml` and the
    ``[readme-html]`` or ``[tool.readme-html]`` table from `.readme-html.toml`
    when present. Returns default values when no configuration is found. TOML
    files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        RenderConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", TOOL_NAME)]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / f".{TOOL_NAME}.toml",
            table_paths=[(TOOL_NAME,), ("tool", TOOL_NAME)],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return RenderConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> RenderConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> RenderConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    try:
        return RenderConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: RenderConfig) -> None:
    """Validate a `RenderConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If the indent offset is negative, the fence flag is not a
            boolean, or numeric limits are non-positive.

    Examples:
        validate_config(RenderConfig(indent_offset_px=10))
    """
    _ensure_integers(
        {
            "indent_offset_px": config.indent_offset_px,
            "max_file_size": config.max_file_size,
            "max_line_length": config.max_line_length,
        }
    )

    if config.indent_offset_px < 0:
        raise ConfigError("`indent_offset_px` must be >= 0")
    if not isinstance(config.close_unterminated_fence, bool):
        raise ConfigError("`close_unterminated_fence` must be a boolean")

    _ensure_positive(
        {
            "max_file_size": config.max_file_size,
            "max_line_length": config.max_line_length,
        }
    )


def apply_overrides(config: RenderConfig, **overrides: object) -> RenderConfig:
    """Apply override values to a `RenderConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        RenderConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `RenderConfig`.

    Examples:
        updated = apply_overrides(config, indent_offset_px=12)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> RenderConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        RenderConfig: Validated configuration ready for rendering.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), close_unterminated_fence=False)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
