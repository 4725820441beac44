# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Article markup exceptions."""

from __future__ import annotations


class ArticleMarkupError(Exception):
    """Base exception for article markup errors."""

    pass


class InvalidArgument(ArticleMarkupError, ValueError):
    """Raised when the construction API is misused.

    Covers wrong sequence sizes, values outside an allowed set, unexpected
    tags or types. Malformed article content is never reported this way:
    it shows up as ``is_valid() == False`` instead.
    """

    pass
