# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""GeoTag - a GeoJSON location embedded in a script tag.

Example::

    <script type="application/json" class="op-geotag">
        {"type": "Feature", "geometry": {"type": "Point", "coordinates": [23.1, 113.2]}}
    </script>

See http://geojson.org/ for the content format.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..validators import enforce_instance_of, is_text_empty
from .base import Element

if TYPE_CHECKING:
    from typing import Self

    from ..markup import MarkupDocument, MarkupNode


class GeoTag(Element):
    """GeoJSON geotag content."""

    def __init__(self) -> None:
        self._script: str | None = None

    def with_script(self, script: str | Mapping[str, Any]) -> Self:
        """Set the GeoJSON content.

        Args:
            script: JSON text, or a mapping that is serialized to JSON.
                ``</`` is written as ``<\\/`` so the content cannot close
                the script tag.
        """
        enforce_instance_of(script, (str, Mapping))
        if isinstance(script, Mapping):
            script = json.dumps(script)
        self._script = script.replace("</", "<\\/")
        return self

    @property
    def script(self) -> str | None:
        return self._script

    def is_valid(self) -> bool:
        """True if there is some JSON content."""
        return not is_text_empty(self._script)

    def to_markup_node(self, document: MarkupDocument) -> MarkupNode:
        if not self.is_valid():
            return self.empty_element(document)

        element = document.create_element('script', type='application/json', class_='op-geotag')
        element.append_child(document.create_text(self._script))
        return element
