"""Utility modules for blockdoc.

Provides:
- text: escape_html for HTML output
- logger: get_logger for logging
"""

from blockdoc.utils.logger import get_logger
from blockdoc.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
