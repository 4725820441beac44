# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Caption - the figcaption shown with images, slideshows and media.

Example::

    <figcaption class="op-small op-left op-vertical-below">
        <h1>Title of the image</h1>
        <h2>Subtitle</h2>
        <cite>Credit</cite>
    </figcaption>
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..validators import enforce_instance_of, enforce_within, is_text_empty
from .base import ChildrenContainer, Element
from .cite import TEXT_ALIGNMENTS, VERTICAL_POSITIONS, Cite, css_classes

if TYPE_CHECKING:
    from typing import Self

    from ..markup import MarkupDocument, MarkupNode

SIZE_SMALL = 'op-small'
SIZE_MEDIUM = 'op-medium'
SIZE_LARGE = 'op-large'
SIZE_XLARGE = 'op-extra-large'
FONT_SIZES = (SIZE_SMALL, SIZE_MEDIUM, SIZE_LARGE, SIZE_XLARGE)


class Caption(Element, ChildrenContainer):
    """Title, subtitle and credit describing an element.

    Presentation options are checked against the allowed values when set:

        >>> Caption.create().with_title('Sunset').with_font_size(SIZE_LARGE)
        >>> Caption.create().with_font_size('huge')  # raises InvalidArgument
    """

    def __init__(self) -> None:
        self._title: str | None = None
        self._subtitle: str | None = None
        self._credit: Cite | None = None
        self._position: str | None = None
        self._text_alignment: str | None = None
        self._font_size: str | None = None

    def with_title(self, title: str) -> Self:
        """Set the caption title. It is REQUIRED."""
        enforce_instance_of(title, str)
        self._title = title
        return self

    def with_subtitle(self, subtitle: str) -> Self:
        enforce_instance_of(subtitle, str)
        self._subtitle = subtitle
        return self

    def with_credit(self, credit: Cite) -> Self:
        enforce_instance_of(credit, Cite)
        self._credit = credit
        return self

    def with_position(self, position: str) -> Self:
        enforce_within(position, VERTICAL_POSITIONS)
        self._position = position
        return self

    def with_text_alignment(self, text_alignment: str) -> Self:
        enforce_within(text_alignment, TEXT_ALIGNMENTS)
        self._text_alignment = text_alignment
        return self

    def with_font_size(self, font_size: str) -> Self:
        enforce_within(font_size, FONT_SIZES)
        self._font_size = font_size
        return self

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def subtitle(self) -> str | None:
        return self._subtitle

    @property
    def credit(self) -> Cite | None:
        return self._credit

    @property
    def position(self) -> str | None:
        return self._position

    @property
    def text_alignment(self) -> str | None:
        return self._text_alignment

    @property
    def font_size(self) -> str | None:
        return self._font_size

    def is_valid(self) -> bool:
        """True if the caption has a non-empty title."""
        return not is_text_empty(self._title)

    def to_markup_node(self, document: MarkupDocument) -> MarkupNode:
        if not self.is_valid():
            return self.empty_element(document)

        element = document.create_element(
            'figcaption',
            class_=css_classes(self._font_size, self._text_alignment, self._position),
        )

        title = element.append_child(document.create_element('h1'))
        title.append_child(document.create_text(self._title))

        if not is_text_empty(self._subtitle):
            subtitle = element.append_child(document.create_element('h2'))
            subtitle.append_child(document.create_text(self._subtitle))

        if self._credit is not None:
            element.append_child(self._credit.to_markup_node(document))

        return element

    def get_container_children(self) -> list[Element]:
        """The credit, if set."""
        return [self._credit] if self._credit is not None else []
