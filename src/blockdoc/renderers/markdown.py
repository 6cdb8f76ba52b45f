"""Markdown fragment renderer.

Example:
    >>> MarkdownVisitor().visit(Header("Title", 2))
    '## Title'
"""

from blockdoc.blocks import Header, Image, Paragraph
from blockdoc.renderers.base import FragmentRenderer


class MarkdownVisitor(FragmentRenderer):
    """Render blocks to Markdown fragments.

    Text is emitted verbatim; no Markdown escaping is applied.
    """

    def visit_header(self, block: Header) -> str:
        return "#" * block.level + " " + block.text

    def visit_paragraph(self, block: Paragraph) -> str:
        return block.text

    def visit_image(self, block: Image) -> str:
        return f"![]({block.url})"
