# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Type and size checks for article elements.

Every check comes in two forms:

- ``is_*()`` returns a boolean.
- ``enforce_*()`` returns True on success and raises
  :class:`~article_markup.exceptions.InvalidArgument` otherwise.

The enforcing form is the checking form called with ``enforce=True``, so
both always agree on what passes.

Example:
    >>> is_array_size([1, 2, 3], 3)
    True
    >>> is_within('2', [1, 2, 3])
    False
    >>> enforce_within('op-left', ['op-left', 'op-right'])
    True
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Iterable, Sequence, TypeVar

from .exceptions import InvalidArgument

if TYPE_CHECKING:
    from .markup import MarkupNode

T = TypeVar('T')

_WHITESPACE = re.compile(r'\s+')
_NBSP_ENTITY = '&nbsp;'


def stringify(obj: Any) -> str:
    """Render a value for a diagnostic message."""
    return repr(obj)


def mixed_to_string(value: Any) -> str:
    """Return value if it is a string, empty string otherwise."""
    if value is not None and isinstance(value, str):
        return value
    return ''


# ==================== Sequence sizes ====================


def _raise_size_error(seq: Sequence[Any], size: int, constraint: str) -> None:
    raise InvalidArgument(
        f"Sequence expects a {constraint} of {size} "
        f"but received a sequence with {len(seq)} items."
    )


def is_array_size(seq: Sequence[Any], size: int, enforce: bool = False) -> bool:
    """Check that seq has EXACTLY size items.

    Args:
        seq: The sequence to check.
        size: The exact number of items required.
        enforce: If True, raise instead of returning False.

    Returns:
        True if len(seq) == size, False otherwise.
    """
    meets_size = len(seq) == size
    if enforce and not meets_size:
        _raise_size_error(seq, size, 'Exact size')
    return meets_size


def enforce_array_size(seq: Sequence[Any], size: int) -> bool:
    """Enforce seq to have EXACTLY size items.

    Raises:
        InvalidArgument: If the size differs.
    """
    return is_array_size(seq, size, enforce=True)


def is_array_size_greater_than(
    seq: Sequence[Any], min_size: int, enforce: bool = False
) -> bool:
    """Check that seq has at least min_size items.

    Examples:
        >>> is_array_size_greater_than([1, 2, 3], 3)
        True
        >>> is_array_size_greater_than([1, 2, 3], 4)
        False
    """
    meets_size = len(seq) >= min_size
    if enforce and not meets_size:
        _raise_size_error(seq, min_size, 'Minimal size')
    return meets_size


def enforce_array_size_greater_than(seq: Sequence[Any], min_size: int) -> bool:
    """Enforce seq to have at least min_size items.

    Raises:
        InvalidArgument: If seq has fewer than min_size items.
    """
    return is_array_size_greater_than(seq, min_size, enforce=True)


def is_array_size_lower_than(
    seq: Sequence[Any], max_size: int, enforce: bool = False
) -> bool:
    """Check that seq has at most max_size items.

    Examples:
        >>> is_array_size_lower_than([1, 2, 3], 3)
        True
        >>> is_array_size_lower_than([1, 2, 3], 2)
        False
    """
    meets_size = len(seq) <= max_size
    if enforce and not meets_size:
        _raise_size_error(seq, max_size, 'Maximum size')
    return meets_size


def enforce_array_size_lower_than(seq: Sequence[Any], max_size: int) -> bool:
    """Enforce seq to have at most max_size items.

    Raises:
        InvalidArgument: If seq has more than max_size items.
    """
    return is_array_size_lower_than(seq, max_size, enforce=True)


# ==================== Membership ====================


def _strictly_equal(a: Any, b: Any) -> bool:
    # No coercion: 1 == 1.0 and 1 == True are not matches here
    return a is b or (type(a) is type(b) and a == b)


def is_within(value: Any, universe: Iterable[Any], enforce: bool = False) -> bool:
    """Check that value is one of the universe, with strict comparison.

    Args:
        value: The value to look up.
        universe: The allowed values.
        enforce: If True, raise instead of returning False.

    Returns:
        True if value is IN the universe, False otherwise.
    """
    universe = list(universe)
    within = any(_strictly_equal(value, item) for item in universe)
    if not within and enforce:
        raise InvalidArgument(
            f"Method expects this value \n----[\n{stringify(value)}\n]----\n"
            f" to be within this universe of values "
            f"\n====[\n{stringify(universe)}\n]===="
        )
    return within


def enforce_within(value: Any, universe: Iterable[Any]) -> bool:
    """Enforce value to be IN the universe.

    Raises:
        InvalidArgument: If value is not in the universe.
    """
    return is_within(value, universe, enforce=True)


def is_instance_of(
    value: Any, types: type | tuple[type, ...], enforce: bool = False
) -> bool:
    """Check that value is an instance of one of types."""
    matches = isinstance(value, types)
    if not matches and enforce:
        allowed = types if isinstance(types, tuple) else (types,)
        names = ', '.join(t.__name__ for t in allowed)
        raise InvalidArgument(
            f"Method expects this value \n----[\n{stringify(value)}\n]----\n"
            f" to be one of the types \n====[\n{names}\n]===="
        )
    return matches


def enforce_instance_of(value: Any, types: type | tuple[type, ...]) -> bool:
    """Enforce value to be an instance of one of types.

    Raises:
        InvalidArgument: If value has an unexpected type.
    """
    return is_instance_of(value, types, enforce=True)


# ==================== Text and tags ====================


def is_text_empty(text: str | None) -> bool:
    """Check if text carries no visible content.

    Whitespace runs and literal ``&nbsp;`` entities do not count.

    Examples:
        >>> is_text_empty(None)
        True
        >>> is_text_empty(' \\n ')
        True
        >>> is_text_empty('&nbsp;')
        True
        >>> is_text_empty('  a  ')
        False
    """
    if text is None:
        return True
    text = _WHITESPACE.sub('', text)
    text = text.replace(_NBSP_ENTITY, '')
    return len(text) == 0


def is_element_tag(node: MarkupNode, tag_name: str) -> bool:
    """True if node has exactly the tag tag_name."""
    return node.tag == tag_name


def enforce_element_tag(node: MarkupNode, tag_name: str) -> bool:
    """Enforce node to have the tag tag_name.

    Raises:
        InvalidArgument: If the tags differ.
    """
    if not is_element_tag(node, tag_name):
        raise InvalidArgument(f"Tag <{tag_name}> expected, <{node.tag}> informed.")
    return True


# ==================== Sequences ====================


def concat_sequence(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Return a new list with the items of first followed by those of second.

    Neither input is modified.
    """
    result: list[T] = []
    for item in first:
        result.append(item)
    for item in second:
        result.append(item)
    return result
