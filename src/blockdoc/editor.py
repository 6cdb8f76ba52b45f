"""BlockEditor — ordered container of blocks.

The editor owns an ordered list of blocks and drives visitors over it.

Traversal entry points:
- ``accept(visitor)``: render. Pure renderers return one fragment per block
  and the editor joins them with the configured line terminator. An
  Accumulator (e.g. BufferedVisitor) keeps its own buffer; the editor
  returns that buffer after the traversal and rolls it back if a block
  fails to render.
- ``visit(visitor)``: drive side effects only (e.g. LoggingVisitor); return
  values are discarded.

Removal compares block ids, so a block equal in content but built separately
is a different block.

"""

from __future__ import annotations

from collections.abc import Iterator

from blockdoc.blocks import Block
from blockdoc.config import get_render_config
from blockdoc.stringbuilder import StringBuilder
from blockdoc.utils.logger import get_logger
from blockdoc.visitor import Accumulator, BlockVisitor

logger = get_logger(__name__)


class BlockEditor:
    """Ordered, exclusively owned sequence of blocks.

    Usage:
        >>> editor = (
        ...     BlockEditor()
        ...     .add_block(Header("一级标题", 1))
        ...     .add_block(Paragraph("段落"))
        ... )
        >>> editor.accept(MarkdownVisitor())
        '# 一级标题\\n段落'

    """

    __slots__ = ("_blocks",)

    def __init__(self) -> None:
        self._blocks: list[Block] = []

    @property
    def blocks(self) -> tuple[Block, ...]:
        """Snapshot of the blocks in insertion order."""
        return tuple(self._blocks)

    def add_block(self, block: Block) -> BlockEditor:
        """Append a block.

        Returns:
            self for method chaining

        Raises:
            TypeError: If ``block`` is not a Block.
        """
        if not isinstance(block, Block):
            msg = f"expected a Block, got {type(block).__name__}"
            raise TypeError(msg)
        self._blocks.append(block)
        logger.debug("Added %s block id=%d (%d blocks)", block.kind, block.id, len(self._blocks))
        return self

    def remove_block(self, block: Block | int) -> bool:
        """Remove the first block with the same id.

        Args:
            block: The block to remove, or its id.

        Returns:
            True if a block was removed, False if no block matched (the
            sequence is left unchanged).
        """
        block_id = block.id if isinstance(block, Block) else block
        for index, candidate in enumerate(self._blocks):
            if candidate.id == block_id:
                del self._blocks[index]
                logger.debug("Removed %s block id=%d", candidate.kind, block_id)
                return True
        logger.debug("remove_block: no block with id=%r", block_id)
        return False

    def clear(self) -> None:
        self._blocks.clear()

    def accept(self, visitor: BlockVisitor[str]) -> str:
        """Render every block with ``visitor`` and return the document.

        Pure visitors: fragments joined by the configured line terminator,
        no trailing terminator. An empty editor renders to "".

        Accumulator (e.g. BufferedVisitor): the visitor's buffer after the
        traversal, i.e. every fragment followed by the terminator. If a block
        raises, the buffer is truncated back to its size before this call and
        the exception propagates.
        """
        logger.debug("Rendering %d blocks with %s", len(self._blocks), type(visitor).__name__)
        if isinstance(visitor, Accumulator):
            return self._accumulate(visitor)

        terminator = get_render_config().line_terminator
        sb = StringBuilder()
        for index, block in enumerate(self._blocks):
            if index:
                sb.append(terminator)
            sb.append(block.accept(visitor))
        return sb.build()

    def _accumulate(self, visitor: BlockVisitor[str]) -> str:
        size = len(visitor.getvalue())  # type: ignore[attr-defined]
        try:
            for block in self._blocks:
                block.accept(visitor)
        except Exception:
            visitor.truncate(size)  # type: ignore[attr-defined]
            raise
        return visitor.getvalue()  # type: ignore[attr-defined]

    def visit(self, visitor: BlockVisitor[object]) -> None:
        """Apply ``visitor`` to every block for its side effects."""
        logger.debug("Visiting %d blocks with %s", len(self._blocks), type(visitor).__name__)
        for block in self._blocks:
            block.accept(visitor)

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(tuple(self._blocks))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Block):
            item = item.id
        return any(b.id == item for b in self._blocks)

    def __repr__(self) -> str:
        return f"BlockEditor({self._blocks!r})"
