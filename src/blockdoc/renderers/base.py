"""Shared base for fragment renderers.

A fragment renderer is a pure visitor: each ``visit_*`` call returns the
rendered fragment for one block and touches no state. The editor joins the
fragments.

"""

from blockdoc.blocks import Block
from blockdoc.errors import RenderError
from blockdoc.visitor import BlockVisitor


class FragmentRenderer(BlockVisitor[str]):
    """Pure visitor returning one fragment string per block.

    Block kinds the renderer has no output for raise RenderError.

    """

    def visit_default(self, block: Block) -> str:
        raise RenderError(type(self).__name__, block.kind)
