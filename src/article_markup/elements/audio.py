# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Audio - an audio track attached to an element.

Example::

    <audio title="Song" autoplay>
        <source src="http://mydomain.com/path/to/audio.mp3"/>
    </audio>
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..validators import enforce_instance_of, is_text_empty
from .base import Element

if TYPE_CHECKING:
    from typing import Self

    from ..markup import MarkupDocument, MarkupNode


class Audio(Element):
    """Audio source with optional title, autoplay and muted flags."""

    def __init__(self) -> None:
        self._url: str | None = None
        self._title: str | None = None
        self._autoplay = False
        self._muted = False

    def with_url(self, url: str) -> Self:
        """Set the audio source URL. It is REQUIRED."""
        enforce_instance_of(url, str)
        self._url = url
        return self

    def with_title(self, title: str) -> Self:
        enforce_instance_of(title, str)
        self._title = title
        return self

    def enable_autoplay(self) -> Self:
        self._autoplay = True
        return self

    def disable_autoplay(self) -> Self:
        self._autoplay = False
        return self

    def enable_muted(self) -> Self:
        self._muted = True
        return self

    def disable_muted(self) -> Self:
        self._muted = False
        return self

    @property
    def url(self) -> str | None:
        return self._url

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def autoplay(self) -> bool:
        return self._autoplay

    @property
    def muted(self) -> bool:
        return self._muted

    def is_valid(self) -> bool:
        """True if the audio has a source URL."""
        return not is_text_empty(self._url)

    def to_markup_node(self, document: MarkupDocument) -> MarkupNode:
        if not self.is_valid():
            return self.empty_element(document)

        element = document.create_element(
            'audio', title=self._title, autoplay=self._autoplay, muted=self._muted
        )
        element.append_child(document.create_element('source', src=self._url))
        return element
