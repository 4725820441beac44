# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Article elements - base class, capabilities and concrete element types."""

from .audio import Audio
from .base import Audible, Captionable, ChildrenContainer, Element
from .caption import Caption
from .cite import Cite
from .geotag import GeoTag
from .image import Image
from .slideshow import Slideshow

__all__ = [
    'Element',
    'ChildrenContainer',
    'Captionable',
    'Audible',
    'Audio',
    'Caption',
    'Cite',
    'GeoTag',
    'Image',
    'Slideshow',
]
