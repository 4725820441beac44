# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Render settings for markup serialization.

Settings are an OmegaConf structured config: defaults come from the
:class:`RenderSettings` dataclass and may be overridden by a YAML file,
a mapping, or keyword arguments (applied in that order).

Example:
    >>> settings = load_settings(pretty=True, indent=4)
    >>> settings.indent
    4
    >>> load_settings({'pretty': 'yes'}).pretty
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from .exceptions import InvalidArgument
from .logger import _log_debug


@dataclass
class RenderSettings:
    """How a MarkupDocument serializes its nodes.

    Attributes:
        pretty: Put each element on its own line, indented by depth.
        indent: Spaces per depth level when pretty is set.
        self_close_void: Render void elements as ``<img/>`` instead of ``<img>``.
    """

    pretty: bool = False
    indent: int = 2
    self_close_void: bool = True


def load_settings(
    source: str | Path | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> RenderSettings:
    """Build RenderSettings from defaults, an optional source and overrides.

    Args:
        source: Path to a YAML file, or a mapping of setting values.
        **overrides: Setting values that win over source.

    Returns:
        A RenderSettings instance.

    Raises:
        InvalidArgument: On unknown keys, values of the wrong type,
            or a negative indent.
    """
    layers = [OmegaConf.structured(RenderSettings)]
    if isinstance(source, (str, Path)):
        layers.append(OmegaConf.load(source))
    elif source is not None:
        layers.append(OmegaConf.create(dict(source)))
    if overrides:
        layers.append(OmegaConf.create(overrides))

    try:
        merged = OmegaConf.merge(*layers)
    except OmegaConfBaseException as e:
        raise InvalidArgument(f"Invalid render settings: {e}") from e

    settings = OmegaConf.to_object(merged)
    if settings.indent < 0:
        raise InvalidArgument(f"indent must be >= 0, got {settings.indent}")

    _log_debug(f"Render settings loaded: {OmegaConf.to_yaml(merged).strip()!r}")
    return settings
