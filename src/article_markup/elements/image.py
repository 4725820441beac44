# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Image - a single picture, standalone or inside a Slideshow.

Example::

    <figure data-mode="aspect-fit" data-feedback="fb:likes,fb:comments">
        <img src="http://mydomain.com/path/to/img.jpg"/>
        <figcaption>...</figcaption>
    </figure>
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..validators import enforce_instance_of, enforce_within, is_text_empty
from .audio import Audio
from .base import Audible, Captionable, ChildrenContainer, Element
from .caption import Caption
from .geotag import GeoTag

if TYPE_CHECKING:
    from typing import Self

    from ..markup import MarkupDocument, MarkupNode

ASPECT_FIT = 'aspect-fit'
ASPECT_FIT_ONLY = 'aspect-fit-only'
FULLSCREEN = 'fullscreen'
NON_INTERACTIVE = 'non-interactive'
PRESENTATIONS = (ASPECT_FIT, ASPECT_FIT_ONLY, FULLSCREEN, NON_INTERACTIVE)


class Image(Element, ChildrenContainer, Captionable, Audible):
    """An image with optional caption, geotag, audio and feedback options."""

    def __init__(self) -> None:
        self._url: str | None = None
        self._caption: Caption | None = None
        self._presentation: str | None = None
        self._like_enabled = False
        self._comments_enabled = False
        self._geotag: GeoTag | None = None
        self._audio: Audio | None = None

    def with_url(self, url: str) -> Self:
        """Set the image URL. It is REQUIRED."""
        enforce_instance_of(url, str)
        self._url = url
        return self

    def with_caption(self, caption: Caption) -> Self:
        enforce_instance_of(caption, Caption)
        self._caption = caption
        return self

    def with_presentation(self, presentation: str) -> Self:
        """Set how the image is displayed, one of PRESENTATIONS."""
        enforce_within(presentation, PRESENTATIONS)
        self._presentation = presentation
        return self

    def enable_like(self) -> Self:
        self._like_enabled = True
        return self

    def disable_like(self) -> Self:
        self._like_enabled = False
        return self

    def enable_comments(self) -> Self:
        self._comments_enabled = True
        return self

    def disable_comments(self) -> Self:
        self._comments_enabled = False
        return self

    def with_map_geotag(self, geotag: GeoTag) -> Self:
        enforce_instance_of(geotag, GeoTag)
        self._geotag = geotag
        return self

    def with_audio(self, audio: Audio) -> Self:
        enforce_instance_of(audio, Audio)
        self._audio = audio
        return self

    @property
    def url(self) -> str | None:
        return self._url

    @property
    def caption(self) -> Caption | None:
        return self._caption

    @property
    def presentation(self) -> str | None:
        return self._presentation

    @property
    def is_like_enabled(self) -> bool:
        return self._like_enabled

    @property
    def is_comments_enabled(self) -> bool:
        return self._comments_enabled

    @property
    def geotag(self) -> GeoTag | None:
        return self._geotag

    @property
    def audio(self) -> Audio | None:
        return self._audio

    def is_valid(self) -> bool:
        """True if the image has a URL."""
        return not is_text_empty(self._url)

    def to_markup_node(self, document: MarkupDocument) -> MarkupNode:
        if not self.is_valid():
            return self.empty_element(document)

        feedback = []
        if self._like_enabled:
            feedback.append('fb:likes')
        if self._comments_enabled:
            feedback.append('fb:comments')

        element = document.create_element('figure')
        element.set_attr(
            {
                'data-mode': self._presentation,
                'data-feedback': ','.join(feedback) or None,
            }
        )
        element.append_child(document.create_element('img', src=self._url))

        if self._caption is not None:
            element.append_child(self._caption.to_markup_node(document))
        if self._geotag is not None:
            element.append_child(self._geotag.to_markup_node(document))
        if self._audio is not None:
            element.append_child(self._audio.to_markup_node(document))

        return element

    def get_container_children(self) -> list[Element]:
        """Caption and audio, when set. The geotag is not a container child."""
        children: list[Element] = []
        if self._caption is not None:
            children.append(self._caption)
        if self._audio is not None:
            children.append(self._audio)
        return children
