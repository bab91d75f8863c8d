#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/renderers/base.py
"""Base classes for output construction and renderers.

The render engine decides which elements, attributes and nesting to produce;
it never materializes markup itself. That is the job of an
:class:`OutputBuilder`, which supplies the construction primitives and the
accumulation rules (an associative ``combine`` with ``empty`` as identity).
Swapping the builder retargets the same engine to a different output type.

:class:`BaseRenderer` is the file-oriented front end shared by concrete
renderers.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import IO, Generic, Optional, TypeVar, Union

from docrender.ast.nodes import Document
from docrender.exceptions import InvalidOptionsError
from docrender.options.base import BaseRendererOptions
from docrender.utils.io_utils import write_content

T = TypeVar("T")


class OutputBuilder(ABC, Generic[T]):
    """Construction primitives and accumulation rules for one output type.

    Implementations must make ``combine`` associative with ``empty()`` as its
    identity; the engine relies on that to concatenate sibling output in
    order.

    Examples
    --------
    A builder that only counts elements:

        >>> class CountingBuilder(OutputBuilder[int]):
        ...     def empty(self): return 0
        ...     def combine(self, left, right): return left + right
        ...     def text(self, content): return 0
        ...     def raw(self, markup): return 0
        ...     def element(self, tag, attrs=None, children=None): return 1 + (children or 0)

    """

    @abstractmethod
    def empty(self) -> T:
        """Return the identity output."""

    @abstractmethod
    def combine(self, left: T, right: T) -> T:
        """Return ``left`` followed by ``right``."""

    def concat(self, parts: Iterable[T]) -> T:
        """Combine ``parts`` in order."""
        result = self.empty()
        for part in parts:
            result = self.combine(result, part)
        return result

    @abstractmethod
    def text(self, content: str) -> T:
        """Return a text node; ``content`` is literal text, never markup."""

    @abstractmethod
    def raw(self, markup: str) -> T:
        """Return pre-built markup unchanged. Only hooks call this."""

    @abstractmethod
    def element(self, tag: str, attrs: Optional[Mapping[str, str]] = None, children: Optional[T] = None) -> T:
        """Return an element with the given attributes wrapping ``children``."""


class BaseRenderer(ABC):
    """Abstract base class for document renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the document and write it to ``output``.

        Parameters
        ----------
        doc : Document
            Document to render
        output : str, Path, or IO
            Output destination (file path or file-like object)

        Raises
        ------
        OutputWriteError
            If output cannot be written

        """

    def render_to_string(self, doc: Document) -> str:
        """Render the document to a string (if applicable).

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        """
        write_content(text, output)
