"""Extension hooks for the render engine.

:class:`RenderConfig` is the sole customization boundary of the engine. It
holds three overridable behaviors and their defaults:

- ``render_link(default, url, attrs, inner)``: decide the final rendering of a
  link. ``default`` is a thunk producing the standard anchor; ``inner`` is
  ``None`` for autolinks (link text equal to the URL).
- ``render_code(default, attr, code)``: render a code block; the seam for
  syntax highlighting. ``default`` produces a plain ``<pre><code>`` block.
- ``render_raw(node, builder)``: render raw content. The default drops it.

Examples
--------
Open external links in a new tab:

    >>> def render_link(default, url, attrs, inner):
    ...     if url.startswith("http"):
    ...         return builder.element("span", {"class": "external"}, default())
    ...     return default()
    >>> config = RenderConfig(render_link=render_link)

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from docrender.ast.nodes import Attr, Inline, RawBlock, RawInline
from docrender.constants import HTML_RAW_FORMATS, RAW_MODES, RawKind, RawMode
from docrender.options.base import CloneFrozenMixin
from docrender.utils.html_sanitizer import sanitize_html_content

if TYPE_CHECKING:
    from docrender.renderers.base import OutputBuilder

logger = logging.getLogger(__name__)

LinkHook = Callable[[Callable[[], Any], str, dict[str, str], Optional[tuple[Inline, ...]]], Any]
CodeHook = Callable[[Callable[[], Any], Attr, str], Any]
RawHook = Callable[["RawNode", "OutputBuilder[Any]"], Any]


@dataclass(frozen=True)
class RawNode:
    """Raw content handed to the raw hook.

    Parameters
    ----------
    kind : {"block", "inline"}
        Whether the content came from a ``RawBlock`` or a ``RawInline``
    format : str
        Output format tag (e.g. "html", "latex")
    text : str
        Raw content, uninterpreted

    """

    kind: RawKind
    format: str
    text: str

    @classmethod
    def from_node(cls, node: Union[RawBlock, RawInline]) -> RawNode:
        return cls("block" if isinstance(node, RawBlock) else "inline", node.format, node.text)


def default_render_link(
    default: Callable[[], Any], url: str, attrs: dict[str, str], inner: Optional[tuple[Inline, ...]]
) -> Any:
    """Render links with the standard anchor."""
    return default()


def default_render_code(default: Callable[[], Any], attr: Attr, code: str) -> Any:
    """Render code blocks as plain, unhighlighted text."""
    return default()


def drop_raw(node: RawNode, builder: OutputBuilder[Any]) -> Any:
    """Render nothing for raw content."""
    logger.debug("Dropped raw %s content in format %r", node.kind, node.format)
    return builder.empty()


def make_raw_hook(mode: RawMode) -> RawHook:
    """Build a raw hook applying a passthrough policy.

    Parameters
    ----------
    mode : {"drop", "escape", "sanitize", "pass-through"}
        - "drop": render nothing
        - "escape": show the raw text literally, in ``<pre class="raw">`` for
          blocks and ``<code class="raw">`` for inlines
        - "sanitize": keep HTML raw content after removing dangerous elements
          and attributes
        - "pass-through": keep HTML raw content unchanged (trusted input only)

        Raw content in formats other than HTML is dropped by "sanitize" and
        "pass-through".

    Returns
    -------
    callable
        A ``render_raw`` hook

    Raises
    ------
    ValueError
        If ``mode`` is not a known raw mode

    """
    if mode not in RAW_MODES:
        raise ValueError(f"Invalid raw mode: {mode!r}. Must be one of {RAW_MODES}")

    if mode == "drop":
        return drop_raw

    if mode == "escape":

        def escape_raw(node: RawNode, builder: OutputBuilder[Any]) -> Any:
            tag = "pre" if node.kind == "block" else "code"
            return builder.element(tag, {"class": "raw", "data-format": node.format}, builder.text(node.text))

        return escape_raw

    def html_raw(node: RawNode, builder: OutputBuilder[Any]) -> Any:
        if node.format.lower() not in HTML_RAW_FORMATS:
            return drop_raw(node, builder)
        return builder.raw(sanitize_html_content(node.text, mode=mode))

    return html_raw


@dataclass(frozen=True)
class RenderConfig(CloneFrozenMixin):
    """The hook strategy used by the render engine.

    Callers override only the hooks they need; the rest keep their defaults.

    Parameters
    ----------
    render_link : callable, default :func:`default_render_link`
        Link hook
    render_code : callable, default :func:`default_render_code`
        Code block hook
    render_raw : callable, default :func:`drop_raw`
        Raw content hook
    max_depth : int or None, default None
        Maximum container nesting depth; deeper subtrees are replaced by a
        diagnostic. ``None`` renders any depth.

    """

    render_link: LinkHook = field(default=default_render_link)
    render_code: CodeHook = field(default=default_render_code)
    render_raw: RawHook = field(default=drop_raw)
    max_depth: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")


DEFAULT_CONFIG = RenderConfig()


__all__ = [
    "RawNode",
    "RenderConfig",
    "DEFAULT_CONFIG",
    "LinkHook",
    "CodeHook",
    "RawHook",
    "default_render_link",
    "default_render_code",
    "drop_raw",
    "make_raw_hook",
]
