# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Markup output tree: nodes, the document that owns them, serialization.

Elements never build markup text directly. They ask a
:class:`MarkupDocument` for nodes, set attributes on them and append them
to each other; the document then serializes the finished tree.

Example:
    >>> doc = MarkupDocument()
    >>> figure = doc.create_element('figure', class_='op-slideshow')
    >>> img = figure.append_child(doc.create_element('img', src='a.jpg'))
    >>> doc.to_markup(figure)
    '<figure class="op-slideshow"><img src="a.jpg"/></figure>'
"""

from __future__ import annotations

from html import escape
from typing import Any, Iterator

from .config import RenderSettings
from .exceptions import InvalidArgument

EMPTY_TAG = '#empty'
TEXT_TAG = '#text'


def _clean_attr_name(name: str) -> str:
    # class_ -> class, for_ -> for
    return name[:-1] if name.endswith('_') else name


class MarkupNode:
    """A node in a markup output tree.

    Each node has:
    - tag: Element name, or TEXT_TAG / EMPTY_TAG for the special kinds
    - attr: Attributes, serialized in insertion order
    - children: Ordered child nodes
    - text: Content of a text node
    - parent: The node this one is appended to, if any
    - document: The MarkupDocument that created this node

    Nodes are created through a MarkupDocument, not directly.
    """

    __slots__ = ('tag', 'attr', 'children', 'text', 'parent', 'document')

    def __init__(
        self,
        tag: str,
        attr: dict[str, Any] | None = None,
        text: str | None = None,
        document: MarkupDocument | None = None,
    ) -> None:
        self.tag = tag
        self.attr = attr or {}
        self.children: list[MarkupNode] = []
        self.text = text
        self.parent: MarkupNode | None = None
        self.document = document

    def __repr__(self) -> str:
        if self.is_text:
            return f"MarkupNode(#text, {self.text!r})"
        return f"MarkupNode({self.tag!r}, children={len(self.children)})"

    @property
    def is_empty(self) -> bool:
        """True for the placeholder that renders as nothing."""
        return self.tag == EMPTY_TAG

    @property
    def is_text(self) -> bool:
        """True for a text node."""
        return self.tag == TEXT_TAG

    def get_attr(self, attr: str | None = None, default: Any = None) -> Any:
        """Get attribute value or all attributes.

        Args:
            attr: Attribute name. If None, returns all attributes.
            default: Default value if attribute not found.
        """
        if attr is None:
            return self.attr
        return self.attr.get(attr, default)

    def set_attr(self, _attr: dict[str, Any] | None = None, **kwargs: Any) -> MarkupNode:
        """Set attributes on the node.

        Args:
            _attr: Dictionary of attributes to set, names used verbatim.
            **kwargs: Attributes as keyword arguments; a trailing underscore
                is dropped so ``class_`` sets ``class``.

        Returns:
            The node itself, for chaining.
        """
        if _attr:
            self.attr.update(_attr)
        for name, value in kwargs.items():
            self.attr[_clean_attr_name(name)] = value
        return self

    def append_child(self, child: MarkupNode) -> MarkupNode:
        """Append child as last child of this node.

        A child already appended elsewhere is moved here.

        Args:
            child: A node created by the same document.

        Returns:
            The appended child.

        Raises:
            InvalidArgument: If this node cannot hold children, child comes
                from another document, or child is an ancestor of this node.
        """
        if self.is_text or self.is_empty:
            raise InvalidArgument(f"{self!r} cannot have children")
        if child.document is not self.document:
            raise InvalidArgument(f"{child!r} belongs to another document")

        ancestor: MarkupNode | None = self
        while ancestor is not None:
            if ancestor is child:
                raise InvalidArgument(f"Appending {child!r} would create a cycle")
            ancestor = ancestor.parent

        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def walk(self, _prefix: str = '') -> Iterator[tuple[str, MarkupNode]]:
        """Yield (path, node) for every descendant, depth first.

        Paths use positional segments: '#0', '#0.#1'.
        """
        for i, child in enumerate(self.children):
            path = f"{_prefix}.#{i}" if _prefix else f"#{i}"
            yield path, child
            yield from child.walk(path)


class MarkupDocument:
    """Factory and serializer for MarkupNode trees.

    Usage:
        >>> doc = MarkupDocument()
        >>> cite = doc.create_element('cite')
        >>> cite.append_child(doc.create_text('Photo by Jane'))
        >>> doc.to_markup(cite)
        '<cite>Photo by Jane</cite>'

    Attributes:
        VOID_ELEMENTS: Elements without content, rendered self-closing.
        RAW_TEXT_ELEMENTS: Elements whose text content is not escaped; it must
            not contain their own closing tag.
    """

    VOID_ELEMENTS = frozenset({'img', 'source', 'br', 'hr', 'meta', 'link'})
    RAW_TEXT_ELEMENTS = frozenset({'script', 'style'})

    def __init__(self, settings: RenderSettings | None = None) -> None:
        self.settings = settings if settings is not None else RenderSettings()

    def create_element(
        self, tag: str, _attr: dict[str, Any] | None = None, **attr: Any
    ) -> MarkupNode:
        """Create an element node owned by this document, not yet appended."""
        if tag in (EMPTY_TAG, TEXT_TAG):
            raise InvalidArgument(f"'{tag}' is a reserved tag")
        node = MarkupNode(tag, document=self)
        node.set_attr(_attr, **attr)
        return node

    def create_text(self, text: str) -> MarkupNode:
        """Create a text node."""
        return MarkupNode(TEXT_TAG, text=text, document=self)

    def create_empty(self) -> MarkupNode:
        """Create the placeholder node that stands for an invalid element."""
        return MarkupNode(EMPTY_TAG, document=self)

    # ==================== Serialization ====================

    def to_markup(self, node: MarkupNode) -> str:
        """Serialize node and its descendants to markup text."""
        return self._node_to_markup(node, 0)

    def _attrs_to_markup(self, attr: dict[str, Any]) -> str:
        parts = []
        for name, value in attr.items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(name)
            else:
                parts.append(f'{name}="{escape(str(value), quote=True)}"')
        return f" {' '.join(parts)}" if parts else ""

    def _node_to_markup(self, node: MarkupNode, depth: int, raw_tag: str | None = None) -> str:
        """Recursively convert a node to markup.

        Raises:
            InvalidArgument: If text inside a raw-text element would close it.
        """
        if node.is_empty:
            return ""
        if node.is_text:
            text = node.text or ""
            if raw_tag is None:
                return escape(text, quote=False)
            if f"</{raw_tag}" in text.lower():
                raise InvalidArgument(f"Text inside <{raw_tag}> cannot contain </{raw_tag}")
            return text

        tag = node.tag
        attrs_str = self._attrs_to_markup(node.attr)

        if tag in self.VOID_ELEMENTS and not node.children:
            closing = "/>" if self.settings.self_close_void else ">"
            return f"<{tag}{attrs_str}{closing}"

        raw_tag = tag if tag in self.RAW_TEXT_ELEMENTS else None
        rendered = [
            self._node_to_markup(child, depth + 1, raw_tag) for child in node.children
        ]
        rendered = [part for part in rendered if part]

        if not rendered:
            return f"<{tag}{attrs_str}></{tag}>"

        inline = all(child.is_text or child.is_empty for child in node.children)
        if not self.settings.pretty or inline:
            return f"<{tag}{attrs_str}>{''.join(rendered)}</{tag}>"

        pad = " " * (self.settings.indent * (depth + 1))
        close_pad = " " * (self.settings.indent * depth)
        lines = [f"<{tag}{attrs_str}>"]
        lines.extend(f"{pad}{part}" for part in rendered)
        lines.append(f"{close_pad}</{tag}>")
        return "\n".join(lines)
