# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Article-Markup - Rich-article element trees rendered to markup.

Elements (slideshows, images, captions, audio, geotags, citations) validate
themselves and project into a markup tree that serializes to text. Invalid
content degrades to empty placeholders; misuse of the API raises
InvalidArgument.
"""

__version__ = "0.1.0"

from .config import RenderSettings, load_settings
from .elements import (
    Audible,
    Audio,
    Caption,
    Captionable,
    ChildrenContainer,
    Cite,
    Element,
    GeoTag,
    Image,
    Slideshow,
)
from .exceptions import ArticleMarkupError, InvalidArgument
from .logger import setup_logger
from .markup import MarkupDocument, MarkupNode
from .traversal import is_tree_valid, iter_elements, validation_warnings

__all__ = [
    # Elements
    "Element",
    "ChildrenContainer",
    "Captionable",
    "Audible",
    "Slideshow",
    "Image",
    "Caption",
    "Audio",
    "GeoTag",
    "Cite",
    # Markup output
    "MarkupDocument",
    "MarkupNode",
    # Tree passes
    "iter_elements",
    "validation_warnings",
    "is_tree_valid",
    # Configuration and logging
    "RenderSettings",
    "load_settings",
    "setup_logger",
    # Exceptions
    "ArticleMarkupError",
    "InvalidArgument",
]
