"""Typed blocks for the blockdoc document model.

All blocks are frozen dataclasses with slots, so a block never changes after
construction and can be shared freely.

Block Hierarchy:
Block (base)
├── Header       text, level (1..6)
├── Paragraph    text
├── Image        url
├── Audio
└── Video

Every block carries an ``id`` assigned from a process-wide counter at
construction. The id is not a constructor argument: callers cannot pick one,
and ``dataclasses.replace`` gives the edited copy a fresh id. The editor
removes blocks by comparing ids, never by object identity.

Double Dispatch:
Each block class implements ``accept(visitor)`` by calling the visitor method
for its own kind, e.g. ``Header.accept`` calls ``visitor.visit_header(self)``.
The code that runs therefore depends on both the block class and the visitor
class, without either side inspecting the other's type.

"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from blockdoc.errors import InvalidBlockData

if TYPE_CHECKING:
    from blockdoc.visitor import BlockVisitor

MIN_HEADER_LEVEL = 1
MAX_HEADER_LEVEL = 6

_ids = itertools.count(1)


def next_block_id() -> int:
    """Return the next unused block id."""
    return next(_ids)


def _require_str(kind: str, name: str, value: Any) -> None:
    if not isinstance(value, str):
        raise InvalidBlockData(kind, name, value, "must be a string")


# =============================================================================
# Base Block
# =============================================================================


@dataclass(frozen=True, slots=True)
class Block:
    """Base class for all blocks.

    Subclasses set ``kind`` and implement ``accept``.

    """

    kind: ClassVar[str] = "block"

    id: int = field(default_factory=next_block_id, init=False)

    def accept[T](self, visitor: BlockVisitor[T]) -> T:
        """Forward this block to the visitor method for its kind."""
        raise NotImplementedError


# =============================================================================
# Text Blocks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Header(Block):
    """Section header.

    HTML: <h1>text</h1>
    Markdown: # text

    Raises:
        InvalidBlockData: If ``level`` is not an int in 1..6 or ``text`` is
            not a string.

    """

    kind: ClassVar[str] = "header"

    text: str
    level: int

    def __post_init__(self) -> None:
        _require_str(self.kind, "text", self.text)
        # bool is an int subclass; True must not pass as level 1
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise InvalidBlockData(self.kind, "level", self.level, "must be an integer")
        if not MIN_HEADER_LEVEL <= self.level <= MAX_HEADER_LEVEL:
            raise InvalidBlockData(
                self.kind,
                "level",
                self.level,
                f"must be between {MIN_HEADER_LEVEL} and {MAX_HEADER_LEVEL}",
            )

    def accept[T](self, visitor: BlockVisitor[T]) -> T:
        return visitor.visit_header(self)


@dataclass(frozen=True, slots=True)
class Paragraph(Block):
    """Paragraph of text.

    HTML: <p>text</p>
    Markdown: text

    """

    kind: ClassVar[str] = "paragraph"

    text: str

    def __post_init__(self) -> None:
        _require_str(self.kind, "text", self.text)

    def accept[T](self, visitor: BlockVisitor[T]) -> T:
        return visitor.visit_paragraph(self)


# =============================================================================
# Media Blocks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Image(Block):
    """Image.

    HTML: <img src="url" />
    Markdown: ![](url)

    """

    kind: ClassVar[str] = "image"

    url: str

    def __post_init__(self) -> None:
        _require_str(self.kind, "url", self.url)

    def accept[T](self, visitor: BlockVisitor[T]) -> T:
        return visitor.visit_image(self)


@dataclass(frozen=True, slots=True)
class Audio(Block):
    """Audio clip. Carries no data besides its id."""

    kind: ClassVar[str] = "audio"

    def accept[T](self, visitor: BlockVisitor[T]) -> T:
        return visitor.visit_audio(self)


@dataclass(frozen=True, slots=True)
class Video(Block):
    """Video clip. Carries no data besides its id."""

    kind: ClassVar[str] = "video"

    def accept[T](self, visitor: BlockVisitor[T]) -> T:
        return visitor.visit_video(self)


# Type alias for the concrete block kinds
type AnyBlock = Header | Paragraph | Image | Audio | Video

__all__ = [
    "MAX_HEADER_LEVEL",
    "MIN_HEADER_LEVEL",
    "AnyBlock",
    "Audio",
    "Block",
    "Header",
    "Image",
    "Paragraph",
    "Video",
    "next_block_id",
]
