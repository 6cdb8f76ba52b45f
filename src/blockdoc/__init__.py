"""
blockdoc — block editor documents rendered through visitors

A document is an ordered list of typed blocks (header, paragraph, image,
audio, video). Output formats are visitors: each block calls back into the
visitor method for its kind, and the editor combines the results.

Quick Start:
    >>> from blockdoc import BlockEditor, Header, Image, Paragraph, render_html
    >>> editor = (
    ...     BlockEditor()
    ...     .add_block(Header("一级标题", 1))
    ...     .add_block(Paragraph("段落"))
    ...     .add_block(Image("https://example/img.png"))
    ... )
    >>> print(render_html(editor))
    <h1>一级标题</h1>
    <p>段落</p>
    <img src="https://example/img.png" />

Custom visitors:
    >>> from blockdoc import BlockVisitor
    >>> class TextLength(BlockVisitor[int]):
    ...     def visit_default(self, block):
    ...         return len(getattr(block, "text", ""))
    >>> sum(block.accept(TextLength()) for block in editor)
    6
"""

from collections.abc import Callable

from blockdoc.blocks import (
    MAX_HEADER_LEVEL,
    MIN_HEADER_LEVEL,
    AnyBlock,
    Audio,
    Block,
    Header,
    Image,
    Paragraph,
    Video,
)
from blockdoc.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from blockdoc.editor import BlockEditor
from blockdoc.errors import BlockdocError, InvalidBlockData, RenderError
from blockdoc.renderers import (
    DEFAULT_LABELS,
    BufferedVisitor,
    FragmentRenderer,
    HtmlVisitor,
    LoggingVisitor,
    MarkdownVisitor,
)
from blockdoc.visitor import Accumulator, BlockVisitor

__version__ = "0.1.0"


def render_html(editor: BlockEditor) -> str:
    """Render an editor to HTML, one fragment per line."""
    return editor.accept(HtmlVisitor())


def render_markdown(editor: BlockEditor) -> str:
    """Render an editor to Markdown, one fragment per line."""
    return editor.accept(MarkdownVisitor())


def log_media(editor: BlockEditor, sink: Callable[[str], None] | None = None) -> None:
    """Write a labelled entry for every media block in the editor.

    Entries go to ``sink`` when given, otherwise to the blockdoc logger.
    """
    editor.visit(LoggingVisitor(sink=sink))


__all__ = [
    "DEFAULT_LABELS",
    "MAX_HEADER_LEVEL",
    "MIN_HEADER_LEVEL",
    "Accumulator",
    "AnyBlock",
    "Audio",
    "Block",
    "BlockEditor",
    "BlockVisitor",
    "BlockdocError",
    "BufferedVisitor",
    "FragmentRenderer",
    "Header",
    "HtmlVisitor",
    "Image",
    "InvalidBlockData",
    "LoggingVisitor",
    "MarkdownVisitor",
    "Paragraph",
    "RenderConfig",
    "RenderError",
    "Video",
    "__version__",
    "get_render_config",
    "log_media",
    "render_config_context",
    "render_html",
    "render_markdown",
    "reset_render_config",
    "set_render_config",
]
