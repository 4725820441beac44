# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Slideshow - a sequence of images shown as one article element.

Example::

    <figure class="op-slideshow">
        <figure>
            <img src="http://mydomain.com/path/to/img1.jpg"/>
        </figure>
        <figure>
            <img src="http://mydomain.com/path/to/img2.jpg"/>
        </figure>
        <figcaption>...</figcaption>
    </figure>
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ..validators import enforce_instance_of
from .audio import Audio
from .base import Audible, Captionable, ChildrenContainer, Element
from .caption import Caption
from .geotag import GeoTag
from .image import Image

if TYPE_CHECKING:
    from typing import Self

    from ..markup import MarkupDocument, MarkupNode
    from .cite import Cite


class Slideshow(Element, ChildrenContainer, Captionable, Audible):
    """Slideshow of images with optional caption, geotag and audio.

    A slideshow is valid as soon as ONE of its images is valid. Once valid,
    every image is rendered, including the invalid ones, which collapse to
    the empty placeholder on their own.

    Usage:
        >>> slideshow = (
        ...     Slideshow.create()
        ...     .add_image(Image.create().with_url('http://mydomain.com/img1.jpg'))
        ...     .add_image(Image.create().with_url('http://mydomain.com/img2.jpg'))
        ...     .with_caption(Caption.create().with_title('Holidays'))
        ... )
        >>> slideshow.to_markup()
    """

    def __init__(self) -> None:
        self._images: list[Image] = []
        self._caption: Caption | None = None
        self._geotag: GeoTag | None = None
        self._audio: Audio | None = None
        # Declared by the format, never populated nor rendered
        self._attribution: Cite | None = None

    def with_caption(self, caption: Caption) -> Self:
        """Set the figcaption, replacing any previous one."""
        enforce_instance_of(caption, Caption)
        self._caption = caption
        return self

    def with_images(self, images: Sequence[Image]) -> Self:
        """Replace the images of the slideshow. At least one is REQUIRED.

        Args:
            images: The images, in display order.
        """
        enforce_instance_of(images, (list, tuple))
        for image in images:
            enforce_instance_of(image, Image)
        self._images = list(images)
        return self

    def add_image(self, image: Image) -> Self:
        """Append an image at the end of the slideshow."""
        enforce_instance_of(image, Image)
        self._images.append(image)
        return self

    def with_map_geotag(self, geotag: GeoTag) -> Self:
        """Set the geotag. See http://geojson.org/."""
        enforce_instance_of(geotag, GeoTag)
        self._geotag = geotag
        return self

    def with_audio(self, audio: Audio) -> Self:
        enforce_instance_of(audio, Audio)
        self._audio = audio
        return self

    @property
    def caption(self) -> Caption | None:
        return self._caption

    @property
    def images(self) -> list[Image]:
        """The images, in display order."""
        return list(self._images)

    @property
    def geotag(self) -> GeoTag | None:
        return self._geotag

    @property
    def audio(self) -> Audio | None:
        return self._audio

    @property
    def attribution(self) -> Cite | None:
        """Always None: no setter exists for it."""
        return self._attribution

    def is_valid(self) -> bool:
        """True if at least one image is valid."""
        for image in self._images:
            if image.is_valid():
                return True
        return False

    def to_markup_node(self, document: MarkupDocument) -> MarkupNode:
        """Render as ``<figure class="op-slideshow">``.

        Children are appended in a fixed order: every image, then caption,
        geotag and audio when set.
        """
        if not self.is_valid():
            return self.empty_element(document)

        element = document.create_element('figure', class_='op-slideshow')

        for image in self._images:
            element.append_child(image.to_markup_node(document))

        if self._caption is not None:
            element.append_child(self._caption.to_markup_node(document))

        if self._geotag is not None:
            element.append_child(self._geotag.to_markup_node(document))

        if self._audio is not None:
            element.append_child(self._audio.to_markup_node(document))

        return element

    def get_container_children(self) -> list[Element]:
        """Images (valid or not), then caption and audio when set.

        The geotag is rendered but is not a container child.
        """
        children: list[Element] = list(self._images)

        if self._caption is not None:
            children.append(self._caption)

        if self._audio is not None:
            children.append(self._audio)

        return children
