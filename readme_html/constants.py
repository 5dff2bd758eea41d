"""Constants used across the readme-html package."""

from __future__ import annotations

import re

from .config import RenderConfig

DEFAULT_CONFIG = RenderConfig()

# Block patterns
CODE_FENCE = "```"
HEADING_PATTERN = re.compile(r"^(#{1,4}) (.*)$")
TASK_ITEM_PATTERN = re.compile(r"^(?P<indent>\s*)- \[(?P<box>[ xX])\]\s*(?P<text>.*)$")
UNORDERED_ITEM_PATTERN = re.compile(r"^(?P<indent>\s*)[-*+]\s+(?P<text>.*)$")
ORDERED_ITEM_PATTERN = re.compile(r"^(?P<indent>\s*)\d+\.\s+(?P<text>.*)$")

# Inline patterns, applied in this order
CODE_SPAN_PATTERN = re.compile(r"`([^`]+)`")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
BOLD_PATTERNS = (
    re.compile(r"\*\*([^*]+?)\*\*"),
    re.compile(r"__([^_]+?)__"),
)
ITALIC_PATTERNS = (
    re.compile(r"(?<![*\w])\*([^*\n]+?)\*(?!\*)", re.ASCII),
    re.compile(r"(?<![_\w])_([^_\n]+?)_(?!_)", re.ASCII),
)

# Placeholders wrap a kind letter and an index in NUL characters.
SENTINEL = "\x00"
PLACEHOLDER_PATTERN = re.compile(r"\x00([CL])(\d+)\x00")

# Emitted markup
BREAK_TAG = "<br>"
HEADING_CLASSES = {
    1: "text-3xl font-bold mt-8 mb-4",
    2: "text-2xl font-semibold mt-6 mb-3",
    3: "text-xl font-medium mt-4 mb-2",
    4: "text-lg font-medium mt-3 mb-2",
}
PARAGRAPH_CLASS = "my-2 leading-relaxed"
CODE_BLOCK_CLASS = "bg-gray-900 text-gray-100 rounded-lg p-4 my-4 overflow-x-auto"
CODE_SPAN_CLASS = "bg-gray-100 text-gray-800 px-1.5 py-0.5 rounded text-sm font-mono"
LINK_CLASS = "text-blue-600 hover:text-blue-800 underline"
TASK_ITEM_CLASS = "flex items-start"
CHECKBOX_CLASS = (
    "mt-1 mr-2 h-4 w-4 text-blue-600 bg-gray-100 border-gray-300 rounded focus:ring-blue-500"
)
CHECKED_TEXT_CLASS = "line-through text-gray-500"
UNAVAILABLE_CLASS = "text-center py-12"

# Input files
MARKDOWN_EXTENSIONS = (".md", ".markdown")
JSON_EXTENSIONS = (".json",)
DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size
DEFAULT_MAX_LINE_LENGTH = DEFAULT_CONFIG.max_line_length
DEFAULT_INDENT_OFFSET_PX = DEFAULT_CONFIG.indent_offset_px
