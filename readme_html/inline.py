"""Inline formatting: code spans, links, bold and italic."""

from __future__ import annotations

import re

from .constants import (
    BOLD_PATTERNS,
    CODE_SPAN_PATTERN,
    ITALIC_PATTERNS,
    LINK_PATTERN,
    PLACEHOLDER_PATTERN,
    SENTINEL,
)
from .exceptions import SentinelCollisionError
from .models import CodeSpan, Link


class SpanParking:
    """Park distinguished spans behind placeholders during destructive passes.

    Each parked span is replaced by ``\\x00<kind><index>\\x00``. The NUL
    sentinel never appears in accepted input, and the placeholder holds no
    ``*``, ``_``, backtick or bracket, so emphasis patterns cannot match inside
    it. Spans are restored one kind at a time, in the order the caller asks.

    Examples:
        parking = SpanParking()
        text = parking.park(CODE_SPAN_PATTERN, "use `x`", "C", lambda m: CodeSpan(m.group(1)))
        parking.restore(text, "C")  # 'use <code ...>x</code>'
    """

    def __init__(self):
        self._spans: dict[str, list[CodeSpan | Link]] = {}

    def park(self, pattern: re.Pattern[str], text: str, kind: str, build) -> str:
        """Replace every match of `pattern` with a placeholder of `kind`.

        Args:
            pattern: Pattern whose matches are extracted, left to right.
            text: Fragment to scan.
            kind: Single-letter placeholder kind.
            build: Callable turning a match into a span with ``to_html()``.

        Returns:
            str: `text` with every match replaced by a placeholder.
        """
        spans = self._spans.setdefault(kind, [])

        def _replace(match: re.Match[str]) -> str:
            spans.append(build(match))
            return f"{SENTINEL}{kind}{len(spans) - 1}{SENTINEL}"

        return pattern.sub(_replace, text)

    def restore(self, text: str, kind: str) -> str:
        """Substitute rendered spans back for placeholders of `kind`."""
        spans = self._spans.get(kind, [])

        def _replace(match: re.Match[str]) -> str:
            if match.group(1) != kind:
                return match.group(0)
            return spans[int(match.group(2))].to_html()

        return PLACEHOLDER_PATTERN.sub(_replace, text)


def _apply_patterns(patterns, text: str, tag: str) -> str:
    for pattern in patterns:
        text = pattern.sub(rf"<{tag}>\1</{tag}>", text)
    return text


def format_inline(text: str) -> str:
    """Format the inline markdown of a single line.

    Passes run in a fixed order: code spans and links are parked behind
    placeholders, bold (``**x**``, ``__x__``) and italic (``*x*``, ``_x_``) are
    applied, then links and finally code spans are restored. Code span content
    is escaped; link labels and URLs are inserted verbatim. Unbalanced
    delimiters are left as literal characters.

    Args:
        text: One line of text, without block-level markers.

    Returns:
        str: HTML fragment.

    Raises:
        SentinelCollisionError: If `text` contains a NUL character.

    Examples:
        format_inline("**a** and *b*")  # '<strong>a</strong> and <em>b</em>'
        format_inline("snake_case_name")  # 'snake_case_name'
    """
    if SENTINEL in text:
        raise SentinelCollisionError()

    parking = SpanParking()
    result = parking.park(CODE_SPAN_PATTERN, text, "C", lambda m: CodeSpan(m.group(1)))
    result = parking.park(LINK_PATTERN, result, "L", lambda m: Link(m.group(1), m.group(2)))

    result = _apply_patterns(BOLD_PATTERNS, result, "strong")
    # Bold has consumed doubled delimiters, so the lookarounds only see singles.
    result = _apply_patterns(ITALIC_PATTERNS, result, "em")

    result = parking.restore(result, "L")
    return parking.restore(result, "C")
