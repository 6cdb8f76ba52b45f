"""Tests for block construction, validation and double dispatch."""

import dataclasses

import pytest

from blockdoc.blocks import Audio, Header, Image, Paragraph, Video, next_block_id
from blockdoc.errors import BlockdocError, InvalidBlockData
from blockdoc.visitor import BlockVisitor


class KindRecorder(BlockVisitor[str]):
    """Returns the name of the visit method that was called."""

    def visit_header(self, block: Header) -> str:
        return "visit_header"

    def visit_paragraph(self, block: Paragraph) -> str:
        return "visit_paragraph"

    def visit_image(self, block: Image) -> str:
        return "visit_image"

    def visit_audio(self, block: Audio) -> str:
        return "visit_audio"

    def visit_video(self, block: Video) -> str:
        return "visit_video"


class TestConstruction:
    """Block fields and ids."""

    def test_header_fields(self) -> None:
        header = Header("Title", 2)
        assert header.text == "Title"
        assert header.level == 2
        assert header.kind == "header"

    def test_keyword_construction(self) -> None:
        image = Image(url="https://example/img.png")
        assert image.url == "https://example/img.png"

    def test_media_blocks_have_no_data(self) -> None:
        assert [f.name for f in dataclasses.fields(Audio())] == ["id"]
        assert [f.name for f in dataclasses.fields(Video())] == ["id"]

    def test_ids_are_unique_and_increasing(self) -> None:
        first = Paragraph("a")
        second = Paragraph("a")
        assert first.id != second.id
        assert second.id > first.id

    @pytest.mark.parametrize("block_id", [42, "x", None])
    def test_id_is_not_a_constructor_argument(self, block_id: object) -> None:
        with pytest.raises(TypeError):
            Audio(id=block_id)  # type: ignore[call-arg]

    def test_id_is_an_int(self) -> None:
        assert type(Paragraph("a").id) is int

    def test_next_block_id_is_monotonic(self) -> None:
        a = next_block_id()
        b = next_block_id()
        assert b > a

    def test_str_shows_id_and_data(self) -> None:
        image = Image("a.png")
        video = Video()
        assert str(image) == f"Image(id={image.id}, url='a.png')"
        assert str(video) == f"Video(id={video.id})"


class TestImmutability:
    """Blocks are frozen after construction."""

    def test_replace_assigns_fresh_id(self) -> None:
        original = Paragraph("a")
        edited = dataclasses.replace(original, text="b")
        assert edited.text == "b"
        assert edited.id != original.id
        assert edited.id > original.id

    def test_replace_cannot_copy_id(self) -> None:
        original = Header("h", 1)
        with pytest.raises(ValueError):
            dataclasses.replace(original, id=original.id)

    def test_replace_still_validates(self) -> None:
        with pytest.raises(InvalidBlockData):
            dataclasses.replace(Header("h", 1), level=9)

    def test_cannot_set_text(self) -> None:
        para = Paragraph("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            para.text = "y"  # type: ignore[misc]

    def test_cannot_set_level(self) -> None:
        header = Header("x", 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            header.level = 2  # type: ignore[misc]


class TestHeaderLevelValidation:
    """Header level must be an int in 1..6."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_valid_levels(self, level: int) -> None:
        assert Header("h", level).level == level

    @pytest.mark.parametrize("level", [0, 7, -1, 100])
    def test_out_of_range_rejected(self, level: int) -> None:
        with pytest.raises(InvalidBlockData) as exc_info:
            Header("h", level)
        err = exc_info.value
        assert err.block_kind == "header"
        assert err.field == "level"
        assert err.value == level
        assert "between 1 and 6" in str(err)

    @pytest.mark.parametrize("level", ["1", 1.0, None, True])
    def test_non_int_rejected(self, level: object) -> None:
        with pytest.raises(InvalidBlockData, match="must be an integer"):
            Header("h", level)  # type: ignore[arg-type]

    def test_is_blockdoc_error(self) -> None:
        with pytest.raises(BlockdocError):
            Header("h", 9)


class TestStringFieldValidation:
    """Text and url fields must be strings."""

    def test_header_text(self) -> None:
        with pytest.raises(InvalidBlockData, match=r"header\.text"):
            Header(123, 1)  # type: ignore[arg-type]

    def test_paragraph_text(self) -> None:
        with pytest.raises(InvalidBlockData, match=r"paragraph\.text"):
            Paragraph(None)  # type: ignore[arg-type]

    def test_image_url(self) -> None:
        with pytest.raises(InvalidBlockData, match=r"image\.url"):
            Image(b"a.png")  # type: ignore[arg-type]

    def test_empty_strings_allowed(self) -> None:
        assert Paragraph("").text == ""
        assert Image("").url == ""


class TestDoubleDispatch:
    """accept() forwards to the visit method for the block's own kind."""

    @pytest.mark.parametrize(
        ("block", "expected"),
        [
            (Header("h", 1), "visit_header"),
            (Paragraph("p"), "visit_paragraph"),
            (Image("i.png"), "visit_image"),
            (Audio(), "visit_audio"),
            (Video(), "visit_video"),
        ],
    )
    def test_accept_dispatch(self, block, expected: str) -> None:  # type: ignore[no-untyped-def]
        assert block.accept(KindRecorder()) == expected

    def test_accept_does_not_change_block(self) -> None:
        header = Header("h", 3)
        before = (header.id, header.text, header.level)
        header.accept(KindRecorder())
        assert (header.id, header.text, header.level) == before
