"""Text helpers for renderers.

Example:
    >>> from blockdoc.utils.text import escape_html
    >>> escape_html('<a href="x">')
    '&lt;a href=&quot;x&quot;&gt;'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters.

    Escapes <, >, &, " but NOT single quotes, so plain text (including
    non-ASCII) passes through unchanged.

    Examples:
        >>> escape_html("Tom & Jerry")
        'Tom &amp; Jerry'
        >>> escape_html("段落")
        '段落'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False).replace('"', "&quot;")
