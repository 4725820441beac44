# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element - abstract base for article content elements, and capabilities.

Every element type knows how to:

1. validate itself against the article format (``is_valid``)
2. render itself as a markup node (``to_markup_node``)

Elements that own nested elements also implement :class:`ChildrenContainer`,
so tree passes can reach their children without knowing concrete types.
:class:`Captionable` and :class:`Audible` mark elements that may carry an
optional Caption or Audio.

An invalid element is not an error: it renders as the document's empty
placeholder, so a broken piece never aborts rendering of its siblings.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..logger import _log_debug
from ..markup import MarkupDocument

if TYPE_CHECKING:
    from typing import Self

    from ..config import RenderSettings
    from ..markup import MarkupNode
    from .audio import Audio
    from .caption import Caption


class Element(ABC):
    """Abstract base class for article elements.

    Subclasses are built through their ``create()`` factory and configured
    with fluent ``with_*`` methods:

        >>> slideshow = Slideshow.create().add_image(Image.create().with_url(url))
        >>> slideshow.to_markup()
    """

    @classmethod
    def create(cls) -> Self:
        """Factory method: a new, unconfigured element."""
        return cls()

    @abstractmethod
    def is_valid(self) -> bool:
        """True if the element satisfies the format constraints."""

    @abstractmethod
    def to_markup_node(self, document: MarkupDocument) -> MarkupNode:
        """Create the markup node for this element.

        The node is owned by document but not appended anywhere.
        Implementations return ``self.empty_element(document)`` when
        ``is_valid()`` is False.
        """

    def empty_element(self, document: MarkupDocument) -> MarkupNode:
        """Return the placeholder rendered in place of an invalid element."""
        _log_debug(f"{type(self).__name__} is not valid, rendering empty placeholder")
        return document.create_empty()

    def to_markup(
        self,
        document: MarkupDocument | None = None,
        settings: RenderSettings | None = None,
    ) -> str:
        """Render and serialize this element to markup text.

        Args:
            document: Document to render into. A new one is created if None.
            settings: Settings for the new document; ignored if document is given.
        """
        if document is None:
            document = MarkupDocument(settings)
        return document.to_markup(self.to_markup_node(document))


@runtime_checkable
class ChildrenContainer(Protocol):
    """Capability of elements that own nested elements."""

    def get_container_children(self) -> list[Element]:
        """Return the owned child elements, in document order."""
        ...


@runtime_checkable
class Captionable(Protocol):
    """Capability of elements that may carry a Caption."""

    @property
    def caption(self) -> Caption | None: ...

    def with_caption(self, caption: Caption) -> Self: ...


@runtime_checkable
class Audible(Protocol):
    """Capability of elements that may carry an Audio."""

    @property
    def audio(self) -> Audio | None: ...

    def with_audio(self, audio: Audio) -> Self: ...
