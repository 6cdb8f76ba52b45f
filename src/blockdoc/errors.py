"""Exception classes for blockdoc.

Provides standardized exceptions for block construction and rendering.
"""

from __future__ import annotations

from typing import Any


class BlockdocError(Exception):
    """Base exception for all blockdoc errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidBlockData(BlockdocError):
    """Error when a block is constructed with invalid data.

    Raised from block constructors, e.g. a header level outside 1..6.
    """

    def __init__(self, block_kind: str, field: str, value: Any, reason: str) -> None:
        """Initialize invalid block data error.

        Args:
            block_kind: Kind of the block being built (e.g., "header")
            field: Name of the offending field
            value: The rejected value
            reason: Description of the violated constraint
        """
        self.block_kind = block_kind
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{block_kind}.{field}: {reason} (got {value!r})")


class RenderError(BlockdocError):
    """Error during rendering.

    Raised when a visitor receives a block kind it cannot render.
    """

    def __init__(self, visitor_name: str, block_kind: str) -> None:
        """Initialize render error.

        Args:
            visitor_name: Class name of the visitor
            block_kind: Kind of the unsupported block (e.g., "audio")
        """
        self.visitor_name = visitor_name
        self.block_kind = block_kind
        super().__init__(f"{visitor_name} cannot render {block_kind} blocks")
