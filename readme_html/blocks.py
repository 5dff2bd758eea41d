"""Line classification and block-level markup."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from .constants import (
    BREAK_TAG,
    CHECKBOX_CLASS,
    CHECKED_TEXT_CLASS,
    CODE_BLOCK_CLASS,
    CODE_FENCE,
    DEFAULT_INDENT_OFFSET_PX,
    HEADING_CLASSES,
    HEADING_PATTERN,
    ORDERED_ITEM_PATTERN,
    PARAGRAPH_CLASS,
    TASK_ITEM_CLASS,
    TASK_ITEM_PATTERN,
    UNORDERED_ITEM_PATTERN,
)
from .escape import escape_html
from .inline import format_inline
from .models import (
    LIST_KINDS,
    BlankLine,
    Block,
    CodeFenceClose,
    CodeFenceOpen,
    CodeLine,
    Heading,
    ListItem,
    OrderedListItem,
    Paragraph,
    ParserState,
    TaskListItem,
    UnorderedListItem,
)

logger = logging.getLogger(__name__)


def _indent_level(indent: str) -> float:
    """Convert leading whitespace into a visual indent level, two characters per level.

    Odd widths give half levels; a tab counts as one character.
    """
    return len(indent) / 2


def match_fence(line: str) -> CodeFenceOpen | None:
    """Match a code fence line.

    The fence kind is decided by the parser state, so this only reports the
    info string; `classify_line` turns it into a close when a block is open.

    Examples:
        match_fence("```python")  # CodeFenceOpen(language="python")
    """
    if not line.startswith(CODE_FENCE):
        return None
    return CodeFenceOpen(language=line[len(CODE_FENCE) :].strip())


def match_blank(line: str) -> BlankLine | None:
    if line.strip():
        return None
    return BlankLine()


def match_heading(line: str) -> Heading | None:
    """Match ``#`` through ``####`` followed by a space.

    Examples:
        match_heading("## Setup")  # Heading(level=2, text="Setup")
        match_heading("##### Too deep")  # None
    """
    heading_match = HEADING_PATTERN.match(line)
    if not heading_match:
        return None
    return Heading(level=len(heading_match.group(1)), text=heading_match.group(2))


def match_task_item(line: str) -> TaskListItem | None:
    task_match = TASK_ITEM_PATTERN.match(line)
    if not task_match:
        return None
    return TaskListItem(
        indent_level=_indent_level(task_match.group("indent")),
        checked=task_match.group("box") in "xX",
        text=task_match.group("text"),
    )


def match_unordered_item(line: str) -> UnorderedListItem | None:
    item_match = UNORDERED_ITEM_PATTERN.match(line)
    if not item_match:
        return None
    return UnorderedListItem(
        indent_level=_indent_level(item_match.group("indent")), text=item_match.group("text")
    )


def match_ordered_item(line: str) -> OrderedListItem | None:
    item_match = ORDERED_ITEM_PATTERN.match(line)
    if not item_match:
        return None
    return OrderedListItem(
        indent_level=_indent_level(item_match.group("indent")), text=item_match.group("text")
    )


def match_paragraph(line: str) -> Paragraph:
    return Paragraph(text=line)


# The paragraph matcher accepts every line and must stay last.
LINE_MATCHERS: tuple[Callable[[str], Block | None], ...] = (
    match_blank,
    match_heading,
    match_task_item,
    match_unordered_item,
    match_ordered_item,
    match_paragraph,
)

def classify_line(state: ParserState, line: str) -> Block:
    """Classify one line given the current parser state.

    Classification looks at nothing but `state` and `line`. Fences win over
    everything, then code block content; the remaining rules are tried in
    `LINE_MATCHERS` order.

    Args:
        state: State of the document scan before this line.
        line: Raw line without its line terminator.

    Returns:
        Block: The block variant for the line.

    Examples:
        classify_line(ParserState(), "- [x] done")  # TaskListItem(0, True, "done")
        classify_line(ParserState(in_code_block=True), "# not a heading")  # CodeLine(...)
    """
    fence = match_fence(line)
    if fence is not None:
        return CodeFenceClose() if state.in_code_block else fence

    if state.in_code_block:
        return CodeLine(text=line)

    for matcher in LINE_MATCHERS[:-1]:
        block = matcher(line)
        if block is not None:
            return block

    return match_paragraph(line)


def close_open_list(state: ParserState) -> str:
    """Close the open list container, if any, and reset the state."""
    if state.open_list is None:
        return ""
    closing = state.open_list.close_tag()
    state.open_list = None
    return closing


def close_code_block(state: ParserState) -> str:
    state.in_code_block = False
    state.code_block_language = ""
    return "</code></pre>"


def _format_px(value: float) -> str:
    """Format a pixel amount, dropping the fraction for whole numbers."""
    return str(int(value)) if value == int(value) else str(value)


def _render_item(block: ListItem, indent_offset_px: int) -> str:
    margin = _format_px(block.indent_level * indent_offset_px)
    text = format_inline(block.text)
    if isinstance(block, TaskListItem):
        checked = " checked" if block.checked else ""
        text_class = CHECKED_TEXT_CLASS if block.checked else ""
        return (
            f'<li class="{TASK_ITEM_CLASS}" style="margin-left: {margin}px;">'
            f'<input type="checkbox"{checked} disabled class="{CHECKBOX_CLASS}">'
            f'<span class="{text_class}">{text}</span></li>'
        )
    return f'<li style="margin-left: {margin}px;">{text}</li>'


def emit_block(
    state: ParserState, block: Block, indent_offset_px: int = DEFAULT_INDENT_OFFSET_PX
) -> str:
    """Update `state` for `block` and return the markup it produces.

    Handles list container bookkeeping: any non-list, non-blank block closes
    the open list, and a list item of a different kind closes it and opens a
    new container. Indentation only changes the item's left margin.

    Args:
        state: Parser state, mutated in place.
        block: Block produced by `classify_line` for the current line.
        indent_offset_px: Pixels of left margin per indent level.

    Returns:
        str: Markup for this block, possibly preceded by a list closing tag.
    """
    if isinstance(block, CodeFenceOpen):
        markup = close_open_list(state)
        state.in_code_block = True
        state.code_block_language = block.language
        language = escape_html(block.language)
        return f'{markup}<pre class="{CODE_BLOCK_CLASS}"><code class="language-{language}">'

    if isinstance(block, CodeFenceClose):
        return close_code_block(state)

    if isinstance(block, CodeLine):
        return escape_html(block.text) + "\n"

    if isinstance(block, BlankLine):
        # Lists stay open across blank lines.
        if state.open_list is not None:
            return ""
        return BREAK_TAG

    kind = LIST_KINDS.get(type(block))
    if kind is None:
        markup = close_open_list(state)
    elif state.open_list is not kind:
        markup = close_open_list(state) + kind.open_tag()
        state.open_list = kind
    else:
        markup = ""

    if isinstance(block, Heading):
        level = block.level
        return (
            f'{markup}<h{level} class="{HEADING_CLASSES[level]}">'
            f"{format_inline(block.text)}</h{level}>"
        )

    if isinstance(block, Paragraph):
        text = format_inline(block.text)
        if not text.strip():
            return markup
        return f'{markup}<p class="{PARAGRAPH_CLASS}">{text}</p>'

    return markup + _render_item(block, indent_offset_px)


def parse_lines(
    lines: Iterable[str],
    state: ParserState | None = None,
    indent_offset_px: int = DEFAULT_INDENT_OFFSET_PX,
    close_unterminated_fence: bool = True,
) -> Iterator[str]:
    """Render lines into markup fragments, one state for the whole document.

    Args:
        lines: Document lines without terminators.
        state: State to thread through the scan; a fresh one when omitted.
        indent_offset_px: Pixels of left margin per list indent level.
        close_unterminated_fence: Whether to close a code block still open at
            the end of input. When False the ``<pre><code>`` is left open.

    Yields:
        str: Markup fragments in document order.

    Examples:
        "".join(parse_lines(["# Title"]))
    """
    state = state if state is not None else ParserState()

    for line in lines:
        block = classify_line(state, line)
        fragment = emit_block(state, block, indent_offset_px)
        if fragment:
            yield fragment

    if state.in_code_block:
        logger.warning(
            "Code fence still open at end of input (%s)",
            "closing it" if close_unterminated_fence else "leaving it open",
        )
        if close_unterminated_fence:
            yield close_code_block(state)

    closing = close_open_list(state)
    if closing:
        yield closing
