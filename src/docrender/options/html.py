#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering.

This module defines the options for turning a document AST into HTML, either
as a fragment, a standalone page or through a Jinja2 template.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from docrender.constants import (
    DEFAULT_HTML_HIGHLIGHT,
    DEFAULT_HTML_LANGUAGE,
    DEFAULT_HTML_STANDALONE,
    DEFAULT_PYGMENTS_STYLE,
    DEFAULT_RAW_MODE,
    RAW_MODES,
    RawMode,
)
from docrender.options.base import BaseRendererOptions

if TYPE_CHECKING:
    from docrender.hooks import RenderConfig


# src/docrender/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering AST to HTML format.

    Parameters
    ----------
    standalone : bool, default False
        Generate a complete HTML document with <html>, <head> and <body> tags.
        If False, generates only the content fragment.
        Ignored when template_file is set.
    language : str, default "en"
        Document language code for the <html lang="..."> attribute.
        Can be overridden by the document's ``lang`` metadata.
    title : str or None, default None
        Page title. When None, the document's ``title`` metadata is used,
        falling back to "Document".
    template_file : str or None, default None
        Path to a Jinja2 template. The template receives ``content`` (the
        rendered HTML, marked safe), ``title``, ``language``, ``metadata``,
        ``footnote_count`` and ``stylesheet``.
    raw_mode : {"drop", "escape", "sanitize", "pass-through"}, default "drop"
        How to handle RawBlock and RawInline nodes:
        - "drop": Remove raw content entirely
        - "escape": Show raw content as literal text
        - "sanitize": Keep HTML raw content with dangerous elements/attributes removed
        - "pass-through": Keep HTML raw content unchanged (use only with trusted content)
    highlight : bool, default False
        Highlight code blocks with Pygments. Standalone output embeds the
        matching stylesheet.
    pygments_style : str, default "default"
        Pygments style used for highlighting and the embedded stylesheet.
    config : RenderConfig or None, default None
        Explicit render hooks. When set, ``raw_mode``, ``highlight`` and
        ``max_depth`` are ignored in favour of the hooks it carries.

    Examples
    --------
    Standalone page with highlighted code:
        >>> options = HtmlRendererOptions(standalone=True, highlight=True)

    Use Jinja2 template:
        >>> options = HtmlRendererOptions(template_file="article.html")

    """

    standalone: bool = field(
        default=DEFAULT_HTML_STANDALONE,
        metadata={"help": "Generate complete HTML document (vs content fragment)", "importance": "core"},
    )
    language: str = field(
        default=DEFAULT_HTML_LANGUAGE,
        metadata={"help": "Document language code for the lang attribute", "importance": "advanced"},
    )
    title: Optional[str] = field(
        default=None,
        metadata={"help": "Page title (defaults to the document's title metadata)", "importance": "core"},
    )
    template_file: Optional[str] = field(
        default=None,
        metadata={"help": "Path to a Jinja2 template file", "importance": "advanced"},
    )
    raw_mode: RawMode = field(
        default=DEFAULT_RAW_MODE,
        metadata={
            "help": "How to handle raw blocks and inlines: drop, escape, sanitize, pass-through",
            "choices": RAW_MODES,
            "importance": "security",
        },
    )
    highlight: bool = field(
        default=DEFAULT_HTML_HIGHLIGHT,
        metadata={"help": "Highlight code blocks with Pygments", "importance": "core"},
    )
    pygments_style: str = field(
        default=DEFAULT_PYGMENTS_STYLE,
        metadata={"help": "Pygments style for highlighted code", "importance": "advanced"},
    )
    config: Optional[RenderConfig] = field(
        default=None,
        metadata={"help": "Explicit render hooks (API only)", "exclude_from_cli": True},
    )

    def __post_init__(self) -> None:
        """Validate dependent field constraints.

        Raises
        ------
        ValueError
            If raw_mode is not a known mode.

        """
        super().__post_init__()

        if self.raw_mode not in RAW_MODES:
            raise ValueError(f"Invalid raw_mode: {self.raw_mode!r}. Must be one of {RAW_MODES}")
