"""Tests for the blockdoc exception hierarchy."""

import pytest

from blockdoc.errors import BlockdocError, InvalidBlockData, RenderError


class TestInvalidBlockData:
    def test_message_format(self) -> None:
        err = InvalidBlockData("header", "level", 7, "must be between 1 and 6")
        assert str(err) == "header.level: must be between 1 and 6 (got 7)"

    def test_attributes(self) -> None:
        err = InvalidBlockData("image", "url", None, "must be a string")
        assert err.block_kind == "image"
        assert err.field == "url"
        assert err.value is None
        assert err.reason == "must be a string"

    def test_is_blockdoc_error(self) -> None:
        assert isinstance(InvalidBlockData("a", "b", 1, "c"), BlockdocError)


class TestRenderError:
    def test_message_format(self) -> None:
        err = RenderError("MarkdownVisitor", "video")
        assert str(err) == "MarkdownVisitor cannot render video blocks"
        assert err.visitor_name == "MarkdownVisitor"
        assert err.block_kind == "video"

    def test_catchable_as_base(self) -> None:
        with pytest.raises(BlockdocError):
            raise RenderError("HtmlVisitor", "audio")
