"""HTML escaping for literal text."""

from __future__ import annotations

import html


def escape_html(text: str) -> str:
    """Escape literal text for inclusion in HTML.

    Replaces ``&``, ``<``, ``>``, ``"`` and ``'`` with the named entities
    ``&amp;``, ``&lt;``, ``&gt;``, ``&quot;`` and ``&apos;``, leaving every other
    character untouched. Apply it once, to raw text only.

    Args:
        text: Literal text, such as a code line or a code span.

    Returns:
        str: Markup-safe text.

    Examples:
        escape_html('print("hi")')  # 'print(&quot;hi&quot;)'
        escape_html("a < b && c")  # 'a &lt; b &amp;&amp; c'
    """
    return html.escape(text, quote=True).replace("&#x27;", "&apos;")
