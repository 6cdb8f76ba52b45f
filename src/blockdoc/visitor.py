"""Block visitor base class.

Dispatch is double: ``block.accept(visitor)`` calls back into the
``visit_*`` method for the block's kind. Subclass ``BlockVisitor`` and
override the ``visit_*`` methods for the kinds you care about; the rest fall
through to ``visit_default``.

Example — count images:

    class ImageCounter(BlockVisitor[None]):
        def __init__(self) -> None:
            self.count = 0

        def visit_image(self, block: Image) -> None:
            self.count += 1

    counter = ImageCounter()
    editor.visit(counter)

Thread Safety:
    Visitors may accumulate mutable state (see BufferedVisitor). Create a new
    visitor per thread.

"""

from typing import Protocol, runtime_checkable

from blockdoc.blocks import Audio, Block, Header, Image, Paragraph, Video


class BlockVisitor[T]:
    """Base block visitor.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors, ``str`` for renderers).

    """

    def visit(self, block: Block) -> T:
        """Visit a single block. Same as ``block.accept(self)``."""
        return block.accept(self)

    def visit_default(self, block: Block) -> T:
        """Called for block kinds without an overridden ``visit_*`` method.

        Default returns None (suitable for ``BlockVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    def visit_header(self, block: Header) -> T:
        return self.visit_default(block)

    def visit_paragraph(self, block: Paragraph) -> T:
        return self.visit_default(block)

    def visit_image(self, block: Image) -> T:
        return self.visit_default(block)

    def visit_audio(self, block: Audio) -> T:
        return self.visit_default(block)

    def visit_video(self, block: Video) -> T:
        return self.visit_default(block)


@runtime_checkable
class Accumulator(Protocol):
    """Visitor that keeps its own output buffer.

    BlockEditor.accept returns ``getvalue()`` after traversing an accumulator
    instead of joining per-call return values. If a block fails mid-traversal
    the editor calls ``truncate(size)`` with the length ``getvalue()`` had
    before the traversal, so the buffer never holds a partial document.

    """

    def getvalue(self) -> str: ...

    def truncate(self, size: int) -> None: ...


__all__ = ["Accumulator", "BlockVisitor"]
