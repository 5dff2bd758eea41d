"""Data models for readme-html."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import CODE_SPAN_CLASS, LINK_CLASS
from .escape import escape_html


class ListKind(Enum):
    """Kinds of list container the block parser can hold open.

    Attributes:
        UNORDERED: Bulleted list.
        ORDERED: Numbered list; numbering is left to the browser.
        TASK: Checkbox list.
    """

    UNORDERED = ("ul", "list-disc ml-6 my-3")
    ORDERED = ("ol", "list-decimal ml-6 my-3")
    TASK = ("ul", "task-list my-3")

    def __init__(self, tag: str, css_class: str):
        self.tag = tag
        self.css_class = css_class

    def open_tag(self) -> str:
        return f'<{self.tag} class="{self.css_class}">'

    def close_tag(self) -> str:
        return f"</{self.tag}>"


@dataclass
class ParserState:
    """Mutable state threaded through one document render.

    Attributes:
        in_code_block: Whether a fenced code block is open.
        code_block_language: Info string of the open fence; empty otherwise.
        open_list: Kind of the list container currently open, if any. Always
            None while inside a code block.
    """

    in_code_block: bool = False
    code_block_language: str = ""
    open_list: ListKind | None = None


@dataclass(frozen=True)
class Heading:
    level: int
    text: str


@dataclass(frozen=True)
class CodeFenceOpen:
    language: str


@dataclass(frozen=True)
class CodeFenceClose:
    pass


@dataclass(frozen=True)
class CodeLine:
    text: str


@dataclass(frozen=True)
class TaskListItem:
    indent_level: float
    checked: bool
    text: str


@dataclass(frozen=True)
class UnorderedListItem:
    indent_level: float
    text: str


@dataclass(frozen=True)
class OrderedListItem:
    indent_level: float
    text: str


@dataclass(frozen=True)
class BlankLine:
    pass


@dataclass(frozen=True)
class Paragraph:
    text: str


Block = (
    Heading
    | CodeFenceOpen
    | CodeFenceClose
    | CodeLine
    | TaskListItem
    | UnorderedListItem
    | OrderedListItem
    | BlankLine
    | Paragraph
)

ListItem = TaskListItem | UnorderedListItem | OrderedListItem

LIST_KINDS: dict[type, ListKind] = {
    TaskListItem: ListKind.TASK,
    UnorderedListItem: ListKind.UNORDERED,
    OrderedListItem: ListKind.ORDERED,
}


@dataclass(frozen=True)
class CodeSpan:
    """Inline code parked while emphasis passes run.

    Attributes:
        literal: Raw text between the backticks.
    """

    literal: str

    def to_html(self) -> str:
        return f'<code class="{CODE_SPAN_CLASS}">{escape_html(self.literal)}</code>'


@dataclass(frozen=True)
class Link:
    """Inline link parked while emphasis passes run.

    The label and URL are inserted verbatim; callers rendering untrusted
    documents must vet URL schemes themselves.

    Attributes:
        label: Text between the square brackets.
        url: Target between the parentheses.
    """

    label: str
    url: str

    def to_html(self) -> str:
        return (
            f'<a href="{self.url}" class="{LINK_CLASS}" target="_blank" '
            f'rel="noopener noreferrer" referrerpolicy="no-referrer">{self.label}</a>'
        )
