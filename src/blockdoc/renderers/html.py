"""HTML fragment renderer.

Example:
    >>> from blockdoc import BlockEditor, Header, Paragraph
    >>> editor = BlockEditor().add_block(Header("Title", 1)).add_block(Paragraph("Body"))
    >>> editor.accept(HtmlVisitor())
    '<h1>Title</h1>\\n<p>Body</p>'

Text and urls are escaped unless ``RenderConfig.escape_html`` is False.
"""

from blockdoc.blocks import Header, Image, Paragraph
from blockdoc.config import get_render_config
from blockdoc.renderers.base import FragmentRenderer
from blockdoc.utils.text import escape_html


def _escape(s: str) -> str:
    if get_render_config().escape_html:
        return escape_html(s)
    return s


class HtmlVisitor(FragmentRenderer):
    """Render blocks to HTML fragments."""

    def visit_header(self, block: Header) -> str:
        return f"<h{block.level}>{_escape(block.text)}</h{block.level}>"

    def visit_paragraph(self, block: Paragraph) -> str:
        return f"<p>{_escape(block.text)}</p>"

    def visit_image(self, block: Image) -> str:
        return f'<img src="{_escape(block.url)}" />'
