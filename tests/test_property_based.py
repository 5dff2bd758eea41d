from __future__ import annotations

import re
import string

from hypothesis import given
from hypothesis import strategies as st
from readme_html.config import RenderConfig
from readme_html.escape import escape_html
from readme_html.inline import format_inline
from readme_html.renderer import render

line_strategy = st.text(
    alphabet=string.ascii_letters + string.digits + " #-*+_`[]().!xX\t<>&\"'",
    max_size=40,
)
document_strategy = st.lists(line_strategy, max_size=30).map("\n".join)


def _container_counts(html: str) -> dict[str, tuple[int, int]]:
    return {
        tag: (html.count(f"<{tag} class="), html.count(f"</{tag}>"))
        for tag in ("ul", "ol", "pre")
    }


@given(document_strategy)
def test_containers_are_balanced(document: str):
    for opened, closed in _container_counts(render(document)).values():
        assert opened == closed


@given(document_strategy)
def test_open_fence_policy_only_affects_trailing_close(document: str):
    closed = render(document)
    left_open = render(document, RenderConfig(close_unterminated_fence=False))

    assert closed.startswith(left_open)
    assert closed[len(left_open) :] in ("", "</code></pre>")


@given(st.text(alphabet=string.ascii_letters + " *_#-[]()", max_size=40))
def test_fenced_content_is_never_formatted(line: str):
    html = render(f"```\n{line}\n```")

    assert html.endswith(f"{escape_html(line)}\n</code></pre>")
    assert "<strong>" not in html
    assert "<em>" not in html


@given(st.text(alphabet=string.ascii_letters + string.digits + " .,;:", max_size=40))
def test_plain_text_passes_through_inline(text: str):
    assert format_inline(text) == text


@given(st.text())
def test_escape_output_has_no_raw_specials(text: str):
    escaped = escape_html(text)

    for character in "<>\"'":
        assert character not in escaped
    assert re.sub(r"&(amp|lt|gt|quot|apos);", "", escaped).count("&") == 0


@given(st.lists(st.integers(min_value=0, max_value=6), min_size=1, max_size=10))
def test_indentation_yields_one_flat_list(indents: list[int]):
    document = "\n".join(f"{' ' * (2 * level)}- item" for level in indents)
    html = render(document)

    assert html.count("<ul") == 1
    for level in indents:
        assert f"margin-left: {level * 20}px;" in html


@given(st.lists(st.integers(min_value=0, max_value=12), min_size=1, max_size=10))
def test_any_space_indent_offsets_by_ten_pixels_per_space(widths: list[int]):
    html = render("\n".join(f"{' ' * width}- item" for width in widths))

    assert html.count("<ul") == 1
    for width in widths:
        assert f"margin-left: {width * 10}px;" in html
