#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for docrender renderers.

Options are frozen dataclasses. Use ``create_updated`` to derive a modified
copy instead of mutating an instance.
"""

from __future__ import annotations

from docrender.options.base import BaseRendererOptions, CloneFrozenMixin
from docrender.options.html import HtmlRendererOptions

__all__ = ["BaseRendererOptions", "CloneFrozenMixin", "HtmlRendererOptions"]
