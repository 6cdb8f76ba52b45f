"""Buffered (accumulating) visitor.

Wraps a fragment renderer and keeps every fragment it produces in an
internal StringBuilder. Each ``visit_*`` call appends the new fragment plus
the line terminator and returns the whole buffer so far, so the latest
return value always holds the full document rendered up to that block.

Example:
    >>> buffered = BufferedVisitor(MarkdownVisitor())
    >>> buffered.visit(Header("A", 1))
    '# A\\n'
    >>> buffered.visit(Paragraph("b"))
    '# A\\nb\\n'

"""

from blockdoc.blocks import Audio, Block, Header, Image, Paragraph, Video
from blockdoc.config import get_render_config
from blockdoc.stringbuilder import StringBuilder
from blockdoc.visitor import BlockVisitor


class BufferedVisitor(BlockVisitor[str]):
    """Stateful visitor accumulating the fragments of a wrapped renderer.

    The buffer belongs to this instance. Call ``clear()`` before reusing it
    for another document. Satisfies the Accumulator protocol, so
    BlockEditor.accept returns the buffer and rolls it back on failure.

    """

    def __init__(self, inner: BlockVisitor[str]) -> None:
        self._inner = inner
        self._buffer = StringBuilder()

    @property
    def inner(self) -> BlockVisitor[str]:
        return self._inner

    def getvalue(self) -> str:
        """Return everything accumulated so far."""
        return self._buffer.build()

    def clear(self) -> None:
        self._buffer.clear()

    def truncate(self, size: int) -> None:
        """Drop everything after the first ``size`` characters."""
        kept = self._buffer.build()[:size]
        self._buffer.clear().append(kept)

    def _append(self, block: Block) -> str:
        fragment = block.accept(self._inner)
        self._buffer.append_line(fragment, get_render_config().line_terminator)
        return self._buffer.build()

    def visit_header(self, block: Header) -> str:
        return self._append(block)

    def visit_paragraph(self, block: Paragraph) -> str:
        return self._append(block)

    def visit_image(self, block: Image) -> str:
        return self._append(block)

    def visit_audio(self, block: Audio) -> str:
        return self._append(block)

    def visit_video(self, block: Video) -> str:
        return self._append(block)
