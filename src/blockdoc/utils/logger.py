"""Logger namespacing for blockdoc.

All blockdoc loggers live under ``blockdoc.``:

- ``blockdoc.editor`` logs additions, removals and traversals at DEBUG.
- ``blockdoc.renderers.log`` receives LoggingVisitor entries at INFO when no
  sink is given.

No handlers are installed; configure ``logging.getLogger("blockdoc")`` to
see the output.
"""

from __future__ import annotations

import logging

_ROOT = "blockdoc"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, prefixed with ``blockdoc.`` if needed.

    Example:
        >>> get_logger("media").name
        'blockdoc.media'
        >>> get_logger("blockdoc.editor").name
        'blockdoc.editor'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
