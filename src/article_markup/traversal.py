# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree passes over article elements.

Passes follow ``get_container_children()`` only: what a container leaves
out of its children (a Slideshow's geotag, for instance) is not visited.

Example:
    >>> for path, element in iter_elements(slideshow):
    ...     print(path, type(element).__name__)
    Slideshow Slideshow
    Slideshow.#0 Image
    Slideshow.#1 Caption
"""

from __future__ import annotations

from typing import Iterator

from .elements.base import ChildrenContainer, Element
from .logger import _log_debug, _log_warning


def iter_elements(root: Element, _prefix: str = '') -> Iterator[tuple[str, Element]]:
    """Walk the element tree depth first, root included.

    Args:
        root: The element to start from.
        _prefix: Internal use for path building.

    Yields:
        Tuples of (path, element). The root path is its class name,
        children append their position: 'Slideshow.#0.#1'.
    """
    path = _prefix or type(root).__name__
    yield path, root
    if isinstance(root, ChildrenContainer):
        for i, child in enumerate(root.get_container_children()):
            yield from iter_elements(child, f"{path}.#{i}")


def validation_warnings(root: Element) -> list[str]:
    """Return one message for each invalid element reachable from root.

    Invalid content is not an error: it only collapses to an empty
    placeholder when rendered. This pass reports where that happens.

    Returns:
        List of messages (empty if every element is valid).
    """
    warnings = [
        f"{path}: {type(element).__name__} is not valid and will not be rendered"
        for path, element in iter_elements(root)
        if not element.is_valid()
    ]
    for warning in warnings:
        _log_warning(warning)
    _log_debug(f"{len(warnings)} invalid element(s) under {type(root).__name__}")
    return warnings


def is_tree_valid(root: Element) -> bool:
    """True if root and every element reachable from it are valid."""
    for _path, element in iter_elements(root):
        if not element.is_valid():
            return False
    return True
