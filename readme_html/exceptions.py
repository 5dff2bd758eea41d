"""Package-specific exception types."""

from __future__ import annotations


class RenderError(ValueError):
    """Base class for rendering-related errors.

    Malformed markdown never raises; these errors cover input the renderer
    refuses to process at all.
    """


class LineTooLongError(RenderError):
    """Raised when a line exceeds the configured maximum length.

    Args:
        line_number: One-based index of the offending line.
        max_line_length: Maximum allowed line length in characters.
    """

    def __init__(self, line_number: int, max_line_length: int):
        self.line_number = line_number
        self.max_line_length = max_line_length
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"Line {self.line_number} exceeds maximum allowed length "
            f"of {self.max_line_length} characters"
        )


class SentinelCollisionError(RenderError):
    """Raised when input contains the NUL character used by inline placeholders.

    Args:
        line_number: One-based index of the offending line, or None when the
            position is unknown (a single fragment was formatted).
    """

    def __init__(self, line_number: int | None = None):
        self.line_number = line_number
        if line_number is None:
            message = "Text contains a NUL character, which is not supported"
        else:
            message = f"Line {line_number} contains a NUL character, which is not supported"
        super().__init__(message)
