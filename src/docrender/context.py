"""Read-only context threaded through the render pass."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from docrender.footnotes import Footnotes


@dataclass(frozen=True)
class RenderContext:
    """Immutable state visible to every render call.

    The engine passes a context explicitly down each recursive call and never
    mutates it; nested calls receive derived copies.

    Parameters
    ----------
    footnotes : Footnotes, default empty
        Numbering produced by the collection pass. Footnote bodies themselves
        are rendered under an empty numbering, so a note nested in a note
        never resolves to a numbered reference.
    depth : int, default 0
        Number of container levels above the node being rendered

    """

    footnotes: Footnotes = field(default_factory=Footnotes.empty)
    depth: int = 0

    @classmethod
    def empty(cls) -> RenderContext:
        """Return a context with no footnotes at depth zero."""
        return cls()

    def descend(self) -> RenderContext:
        """Return a copy one container level deeper."""
        return replace(self, depth=self.depth + 1)


__all__ = ["RenderContext"]
