"""Logging visitor for media blocks.

Writes one entry per image, audio or video block, formatted as
``"<label>: <block>"``. Header and paragraph blocks are skipped.

Example:
    >>> entries = []
    >>> editor = BlockEditor().add_block(Image("a.png")).add_block(Audio())
    >>> editor.visit(LoggingVisitor(sink=entries.append))
    >>> entries
    ["图片: Image(id=1, url='a.png')", '音频: Audio(id=2)']

"""

from collections.abc import Callable, Mapping
from types import MappingProxyType

from blockdoc.blocks import Audio, Block, Image, Video
from blockdoc.utils.logger import get_logger
from blockdoc.visitor import BlockVisitor

logger = get_logger(__name__)

DEFAULT_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "image": "图片",
        "audio": "音频",
        "video": "视频",
    }
)


class LoggingVisitor(BlockVisitor[None]):
    """Side-effect-only visitor writing labelled media entries.

    Args:
        sink: Callable receiving each formatted entry. Defaults to the
            ``blockdoc.renderers.log`` logger at INFO level.
        labels: Label per media kind; missing kinds use DEFAULT_LABELS.

    """

    def __init__(
        self,
        sink: Callable[[str], None] | None = None,
        labels: Mapping[str, str] | None = None,
    ) -> None:
        self._sink = sink
        self._labels = {**DEFAULT_LABELS, **(labels or {})}

    def _emit(self, block: Block) -> None:
        entry = f"{self._labels[block.kind]}: {block}"
        if self._sink is None:
            logger.info("%s", entry)
        else:
            self._sink(entry)

    def visit_image(self, block: Image) -> None:
        self._emit(block)

    def visit_audio(self, block: Audio) -> None:
        self._emit(block)

    def visit_video(self, block: Video) -> None:
        self._emit(block)
