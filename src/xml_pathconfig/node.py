# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Configuration tree node classes.

The tree is a closed set of node kinds:

- ConfigElement: a named node with attributes and ordered children
- ConfigText: character data inside an element
- ConfigComment: a comment, kept only so it can be printed and written back
- ConfigInstruction: a processing instruction, kept only to be written back

Every node carries a ``kind`` (NodeKind) that tree walkers branch on.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Union


class NodeKind(Enum):
    """Kinds of node that may appear in a configuration tree."""

    ELEMENT = 'element'
    TEXT = 'text'
    COMMENT = 'comment'
    INSTRUCTION = 'instruction'


class ConfigText:
    """Character data inside an element."""

    __slots__ = ('value',)

    kind = NodeKind.TEXT

    def __init__(self, value: str) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"ConfigText({self.value!r})"


class ConfigComment:
    """An XML comment."""

    __slots__ = ('value',)

    kind = NodeKind.COMMENT

    def __init__(self, value: str) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"ConfigComment({self.value!r})"


class ConfigInstruction:
    """An XML processing instruction such as <?xml-stylesheet href="a.xsl"?>."""

    __slots__ = ('target', 'value')

    kind = NodeKind.INSTRUCTION

    def __init__(self, target: str, value: str = '') -> None:
        self.target = target
        self.value = value

    def __repr__(self) -> str:
        return f"ConfigInstruction({self.target!r}, {self.value!r})"


class ConfigElement:
    """A named element in a configuration tree.

    Each element has:
    - name: The element (tag) name, matched by path segments
    - attr: Ordered dictionary of attribute name -> value
    - children: Ordered list of element, text, comment and instruction nodes
    - parent: The containing element, or None for the document root

    The element's text is its first child when that child is a text node,
    so ``<a>x<b/>y</a>`` has text ``'x'`` while ``<a><b/>y</a>`` has none.

    Example:
        >>> elem = ConfigElement('port', {'unit': 'tcp'})
        >>> elem.text = '8080'
        >>> elem.text
        '8080'
    """

    __slots__ = ('name', 'attr', 'children', 'parent')

    kind = NodeKind.ELEMENT

    def __init__(
        self,
        name: str,
        attr: dict[str, str] | None = None,
        parent: ConfigElement | None = None,
    ) -> None:
        """Initialize a ConfigElement.

        Args:
            name: The element name.
            attr: Optional dictionary of attributes, order preserved.
            parent: The element containing this one.
        """
        self.name = name
        self.attr: dict[str, str] = dict(attr) if attr else {}
        self.children: list[ConfigNode] = []
        self.parent = parent

    def __repr__(self) -> str:
        return f"ConfigElement({self.name!r}, children={len(self.children)})"

    @property
    def text(self) -> str | None:
        """Text of the element, or None if it has no leading text node."""
        if self.children and self.children[0].kind is NodeKind.TEXT:
            return self.children[0].value
        return None

    @text.setter
    def text(self, value: str) -> None:
        if self.children and self.children[0].kind is NodeKind.TEXT:
            self.children[0].value = value
        else:
            self.children.insert(0, ConfigText(value))

    def append(self, child: ConfigNode) -> ConfigNode:
        """Append a child node, taking ownership of it.

        Args:
            child: Element, text, comment or instruction node.

        Returns:
            The appended node.
        """
        if child.kind is NodeKind.ELEMENT:
            child.parent = self
        self.children.append(child)
        return child

    def iter_elements(self) -> Iterator[ConfigElement]:
        """Iterate over direct element children in document order."""
        for child in self.children:
            if child.kind is NodeKind.ELEMENT:
                yield child

    def find_child(self, name: str) -> ConfigElement | None:
        """Return the first direct element child named ``name``."""
        for child in self.iter_elements():
            if child.name == name:
                return child
        return None


ConfigNode = Union[ConfigElement, ConfigText, ConfigComment, ConfigInstruction]
MiscNode = Union[ConfigComment, ConfigInstruction]


class ConfigDocument:
    """A parsed configuration document.

    Holds the root element plus the comments and processing instructions
    found before and after it, and the encoding and DOCTYPE declared by the
    source so it can be written back the same way.
    """

    __slots__ = ('root', 'prolog', 'epilog', 'encoding', 'doctype')

    def __init__(
        self,
        root: ConfigElement,
        prolog: list[MiscNode] | None = None,
        epilog: list[MiscNode] | None = None,
        encoding: str | None = None,
        doctype: str | None = None,
    ) -> None:
        self.root = root
        self.prolog = prolog or []
        self.epilog = epilog or []
        self.encoding = encoding or 'UTF-8'
        self.doctype = doctype or None

    def __repr__(self) -> str:
        return f"ConfigDocument(root={self.root.name!r})"
