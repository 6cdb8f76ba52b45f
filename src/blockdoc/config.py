"""ContextVar-based render configuration for blockdoc.

Render options are read by visitors and the editor at render time rather
than being threaded through every call.

Usage:
    from blockdoc.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(line_terminator="\\r\\n")):
        html = editor.accept(HtmlVisitor())

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage.

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        line_terminator: Separator placed between rendered fragments
        escape_html: Escape text and urls in HTML output

    """

    line_terminator: str = "\n"
    escape_html: bool = True

    def __post_init__(self) -> None:
        if not self.line_terminator:
            msg = "line_terminator must be a non-empty string"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only keys that are RenderConfig fields are used; unknown keys are
        ignored.

        Example:
            >>> RenderConfig.from_dict({"escape_html": False, "theme": "dark"})
            RenderConfig(line_terminator='\\n', escape_html=False)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration active in this context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(escape_html=False)):
        ...     get_render_config().escape_html
        False

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
]
