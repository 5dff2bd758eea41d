import pytest

from readme_html.constants import CODE_SPAN_CLASS, CODE_SPAN_PATTERN, LINK_CLASS
from readme_html.exceptions import SentinelCollisionError
from readme_html.inline import SpanParking, format_inline
from readme_html.models import CodeSpan


def _code(content: str) -> str:
    return f'<code class="{CODE_SPAN_CLASS}">{content}</code>'


def _link(label: str, url: str) -> str:
    return (
        f'<a href="{url}" class="{LINK_CLASS}" target="_blank" '
        f'rel="noopener noreferrer" referrerpolicy="no-referrer">{label}</a>'
    )


def test_plain_text_is_unchanged():
    assert format_inline("just words") == "just words"


def test_code_span_content_is_escaped():
    assert format_inline("run `a < b`") == f"run {_code('a &lt; b')}"


def test_code_span_is_not_formatted():
    assert format_inline("`**not bold**`") == _code("**not bold**")


def test_multiple_code_spans():
    assert format_inline("`a` and `b`") == f"{_code('a')} and {_code('b')}"


def test_unclosed_backtick_stays_literal():
    assert format_inline("a `b") == "a `b"


def test_link():
    assert format_inline("[site](http://example.com)") == _link("site", "http://example.com")


def test_link_label_is_not_formatted():
    assert format_inline("[**x**](http://a)") == _link("**x**", "http://a")


def test_code_inside_link_label_is_restored():
    assert format_inline("[`cfg`](http://a)") == _link(_code("cfg"), "http://a")


def test_link_url_underscores_survive_italic_pass():
    url = "http://a/_x_/_y_"
    assert format_inline(f"[go]({url})") == _link("go", url)


def test_incomplete_link_stays_literal():
    assert format_inline("[label](missing") == "[label](missing"


def test_bold_and_italic():
    assert format_inline("**a** and *b*") == "<strong>a</strong> and <em>b</em>"


def test_underscore_forms():
    assert format_inline("__a__ and _b_") == "<strong>a</strong> and <em>b</em>"


def test_bold_is_non_greedy():
    assert format_inline("**a** **b**") == "<strong>a</strong> <strong>b</strong>"


@pytest.mark.parametrize("text", ["snake_case_name", "2*3*4", "a*b*c"])
def test_mid_word_delimiters_are_literal(text):
    assert format_inline(text) == text


def test_unbalanced_delimiters_are_literal():
    assert format_inline("**open and *half") == "**open and *half"


def test_emphasis_around_code_span():
    assert format_inline("*use `x`*") == f"<em>use {_code('x')}</em>"


def test_placeholder_does_not_break_italic():
    assert format_inline("_a `b` c_") == f"<em>a {_code('b')} c</em>"


def test_nul_character_is_rejected():
    with pytest.raises(SentinelCollisionError):
        format_inline("a\x00C0\x00b")


def test_span_parking_restores_only_requested_kind():
    parking = SpanParking()
    parked = parking.park(CODE_SPAN_PATTERN, "`a` b", "C", lambda m: CodeSpan(m.group(1)))

    assert parked == "\x00C0\x00 b"
    assert parking.restore(parked, "L") == parked
    assert parking.restore(parked, "C") == f"{_code('a')} b"
