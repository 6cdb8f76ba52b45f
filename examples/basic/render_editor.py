"""Build a small document and render it as HTML and Markdown."""

from blockdoc import BlockEditor, Header, Image, Paragraph, render_html, render_markdown

editor = (
    BlockEditor()
    .add_block(Header("一级标题", 1))
    .add_block(Paragraph("段落"))
    .add_block(Image("https://www.baidu.com/img/PCtm_d9c8750bed0b3c7d089fa7d55720d6cf.png"))
)

print(render_html(editor))
print()
print(render_markdown(editor))
