"""Custom visitor — count words in text blocks, ignore media."""

from blockdoc import BlockEditor, BlockVisitor, Header, Image, Paragraph


class WordCounter(BlockVisitor[None]):
    """Sum the words of every header and paragraph."""

    def __init__(self) -> None:
        self.words = 0

    def visit_header(self, block: Header) -> None:
        self.words += len(block.text.split())

    def visit_paragraph(self, block: Paragraph) -> None:
        self.words += len(block.text.split())


editor = (
    BlockEditor()
    .add_block(Header("Visitor pattern", 1))
    .add_block(Paragraph("Each block calls back into the visitor."))
    .add_block(Image("diagram.png"))
)

counter = WordCounter()
editor.visit(counter)
print(f"{counter.words} words")
