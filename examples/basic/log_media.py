"""Log every media block, then remove one by id and log again."""

import logging

from blockdoc import Audio, BlockEditor, Image, Video, log_media

logging.basicConfig(level=logging.INFO, format="%(message)s")

audio = Audio()
editor = (
    BlockEditor()
    .add_block(Image("https://example/img.png"))
    .add_block(audio)
    .add_block(Video())
)

log_media(editor)
editor.remove_block(audio.id)
log_media(editor)
