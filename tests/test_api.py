"""Tests for the top-level blockdoc API."""

import blockdoc
from blockdoc import (
    Audio,
    BlockEditor,
    BufferedVisitor,
    Header,
    HtmlVisitor,
    Image,
    Paragraph,
    render_html,
    render_markdown,
)


def _scenario() -> BlockEditor:
    return (
        BlockEditor()
        .add_block(Header("一级标题", 1))
        .add_block(Paragraph("段落"))
        .add_block(Image("https://example/img.png"))
    )


class TestConvenienceFunctions:
    def test_render_html(self) -> None:
        assert render_html(_scenario()) == (
            "<h1>一级标题</h1>\n<p>段落</p>\n<img src=\"https://example/img.png\" />"
        )

    def test_render_markdown(self) -> None:
        assert render_markdown(_scenario()) == "# 一级标题\n段落\n![](https://example/img.png)"

    def test_empty(self) -> None:
        assert render_html(BlockEditor()) == ""
        assert render_markdown(BlockEditor()) == ""

    def test_buffered_from_top_level(self) -> None:
        assert _scenario().accept(BufferedVisitor(HtmlVisitor())) == render_html(_scenario()) + "\n"


class TestExports:
    def test_all_names_importable(self) -> None:
        for name in blockdoc.__all__:
            assert hasattr(blockdoc, name), name

    def test_version(self) -> None:
        assert isinstance(blockdoc.__version__, str)

    def test_media_block_exported(self) -> None:
        assert Audio().kind == "audio"
