"""blockdoc visitors that produce output.

Available Visitors:
- HtmlVisitor: pure, one HTML fragment per block
- MarkdownVisitor: pure, one Markdown fragment per block
- BufferedVisitor: stateful, accumulates a wrapped renderer's fragments
- LoggingVisitor: side-effect only, labelled entries for media blocks

"""

from blockdoc.renderers.base import FragmentRenderer
from blockdoc.renderers.buffered import BufferedVisitor
from blockdoc.renderers.html import HtmlVisitor
from blockdoc.renderers.log import DEFAULT_LABELS, LoggingVisitor
from blockdoc.renderers.markdown import MarkdownVisitor

__all__ = [
    "DEFAULT_LABELS",
    "BufferedVisitor",
    "FragmentRenderer",
    "HtmlVisitor",
    "LoggingVisitor",
    "MarkdownVisitor",
]
