# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Cite - attribution text rendered in ``<cite>`` tags.

Example::

    <cite class="op-left op-vertical-below">Photo by Jane Doe</cite>
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..validators import enforce_instance_of, enforce_within, is_text_empty
from .base import Element

if TYPE_CHECKING:
    from typing import Self

    from ..markup import MarkupDocument, MarkupNode

ALIGN_LEFT = 'op-left'
ALIGN_CENTER = 'op-center'
ALIGN_RIGHT = 'op-right'
TEXT_ALIGNMENTS = (ALIGN_LEFT, ALIGN_CENTER, ALIGN_RIGHT)

POSITION_ABOVE = 'op-vertical-above'
POSITION_BELOW = 'op-vertical-below'
POSITION_CENTER = 'op-vertical-center'
VERTICAL_POSITIONS = (POSITION_ABOVE, POSITION_BELOW, POSITION_CENTER)


def css_classes(*names: str | None) -> str | None:
    """Join the given class names, skipping unset ones. None if all unset."""
    joined = ' '.join(name for name in names if name)
    return joined or None


class Cite(Element):
    """Attribution or credit text."""

    def __init__(self) -> None:
        self._text: str | None = None
        self._text_alignment: str | None = None
        self._position: str | None = None

    def with_text(self, text: str) -> Self:
        enforce_instance_of(text, str)
        self._text = text
        return self

    def with_text_alignment(self, text_alignment: str) -> Self:
        """Set the alignment, one of ALIGN_LEFT, ALIGN_CENTER, ALIGN_RIGHT."""
        enforce_within(text_alignment, TEXT_ALIGNMENTS)
        self._text_alignment = text_alignment
        return self

    def with_position(self, position: str) -> Self:
        """Set the vertical position, one of the POSITION_* constants."""
        enforce_within(position, VERTICAL_POSITIONS)
        self._position = position
        return self

    @property
    def text(self) -> str | None:
        return self._text

    @property
    def text_alignment(self) -> str | None:
        return self._text_alignment

    @property
    def position(self) -> str | None:
        return self._position

    def is_valid(self) -> bool:
        """True if the cite has some visible text."""
        return not is_text_empty(self._text)

    def to_markup_node(self, document: MarkupDocument) -> MarkupNode:
        if not self.is_valid():
            return self.empty_element(document)

        element = document.create_element(
            'cite', class_=css_classes(self._text_alignment, self._position)
        )
        element.append_child(document.create_text(self._text))
        return element
