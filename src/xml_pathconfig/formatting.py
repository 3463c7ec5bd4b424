# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Human-readable rendering of a configuration tree."""

from __future__ import annotations

from typing import Iterator

from .node import ConfigElement, NodeKind

ATTRIBUTE_INDENT = '  '
CHILD_INDENT = '    '


def iter_tree_lines(element: ConfigElement, indent: str = '') -> Iterator[str]:
    """Yield the lines of a depth-first rendering of ``element``.

    Each element renders as ``name:`` followed by its quoted text, then one
    ``name = value`` line per attribute, then its children. Comments are
    rendered at the element's own indentation with a ``#`` marker repeated
    after each embedded newline.

    Example:
        >>> list(iter_tree_lines(root))
        ['config:', '    Settings:', '      optX = 5', '        value: "10"']
    """
    line = f"{indent}{element.name}:"
    text = element.text
    if text is not None:
        line += f' "{text.strip()}"'
    yield line

    for name, value in element.attr.items():
        yield f"{indent}{ATTRIBUTE_INDENT}{name} = {value}"

    for child in element.children:
        if child.kind is NodeKind.COMMENT:
            comment = child.value.replace('\n', f"\n{indent}#")
            yield f"{indent}# {comment}"
        elif child.kind is NodeKind.ELEMENT:
            yield from iter_tree_lines(child, indent + CHILD_INDENT)
        elif child.kind not in (NodeKind.TEXT, NodeKind.INSTRUCTION):
            raise TypeError(f"Unknown node kind {child.kind!r}")


def render_tree(element: ConfigElement) -> str:
    """Render ``element`` and its subtree as a multi-line string."""
    return '\n'.join(iter_tree_lines(element))
