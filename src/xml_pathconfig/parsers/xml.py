# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""XML reader and writer for configuration trees.

Parsing and serialization are delegated to lxml. A parsed lxml document is
converted into an owned ConfigElement tree, and converted back into an lxml
document only when it has to be written.

Example:
    >>> from xml_pathconfig.parsers import load_document, dump_document
    >>> document = load_document('settings.xml')
    >>> document.root.name
    'config'
    >>> dump_document(document, '_settings.xml')
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from lxml import etree

from ..exceptions import (
    FileNotAccessibleError,
    NoRootElementError,
    PersistError,
    XmlParseError,
)
from ..node import (
    ConfigComment,
    ConfigDocument,
    ConfigElement,
    ConfigInstruction,
    ConfigText,
    MiscNode,
    NodeKind,
)

logger = logging.getLogger(__name__)


def _make_parser() -> etree.XMLParser:
    # Whitespace between elements is layout, not text.
    return etree.XMLParser(remove_blank_text=True)


# ==================== Reading ====================


def _convert_element(
    source: etree._Element, parent: ConfigElement | None = None
) -> ConfigElement:
    """Convert an lxml element and its subtree into a ConfigElement."""
    element = ConfigElement(source.tag, dict(source.attrib), parent)
    if source.text is not None:
        element.append(ConfigText(source.text))

    for child in source:
        misc = _convert_misc(child)
        if misc is not None:
            element.append(misc)
        elif isinstance(child.tag, str):
            element.append(_convert_element(child, element))
        if child.tail is not None:
            element.append(ConfigText(child.tail))

    return element


def _convert_misc(source: etree._Element) -> MiscNode | None:
    if isinstance(source, etree._Comment):
        return ConfigComment(source.text or '')
    if isinstance(source, etree._ProcessingInstruction):
        return ConfigInstruction(source.target, source.text or '')
    return None


def _sibling_nodes(root: etree._Element, preceding: bool) -> list[MiscNode]:
    nodes = [
        node
        for node in map(_convert_misc, root.itersiblings(preceding=preceding))
        if node is not None
    ]
    if preceding:
        nodes.reverse()
    return nodes


def parse_document(data: bytes, filename: str | None = None) -> ConfigDocument:
    """Parse XML bytes into a ConfigDocument.

    Args:
        data: Raw document content.
        filename: Source name, used in error messages only.

    Returns:
        The parsed document.

    Raises:
        NoRootElementError: If the content holds no top-level element.
        XmlParseError: If the content is not well-formed XML.
    """
    if not data.strip():
        raise NoRootElementError("XML file has no document root node.", filename)

    try:
        root = etree.fromstring(data, parser=_make_parser())
    except etree.XMLSyntaxError as exc:
        if exc.code == etree.ErrorTypes.ERR_DOCUMENT_EMPTY:
            raise NoRootElementError(
                "XML file has no document root node.", filename
            ) from exc
        raise XmlParseError(
            f"Could not load XML file '{filename}': {exc.msg}",
            filename,
            line=exc.lineno,
            column=exc.offset,
        ) from exc

    docinfo = root.getroottree().docinfo
    return ConfigDocument(
        _convert_element(root),
        prolog=_sibling_nodes(root, preceding=True),
        epilog=_sibling_nodes(root, preceding=False),
        encoding=docinfo.encoding,
        doctype=docinfo.doctype,
    )


def load_document(filename: str | os.PathLike[str]) -> ConfigDocument:
    """Read and parse an XML configuration file.

    The file is read in full before anything is handed to the parser, so a
    missing or unreadable file is always reported as such.

    Args:
        filename: Path of the XML file.

    Returns:
        The parsed document.

    Raises:
        FileNotAccessibleError: If the file cannot be opened or read.
        NoRootElementError: If the file holds no top-level element.
        XmlParseError: If the file is not well-formed XML.
    """
    name = os.fspath(filename)
    if not name:
        raise FileNotAccessibleError("No configuration file given.", name)
    try:
        with open(name, 'rb') as stream:
            data = stream.read()
    except OSError as exc:
        raise FileNotAccessibleError(
            f"Could not open file '{name}': {exc.strerror or exc}", name
        ) from exc

    logger.debug("Read %d bytes from %s", len(data), name)
    return parse_document(data, name)


# ==================== Writing ====================


def _build_misc(node: MiscNode) -> etree._Element:
    if node.kind is NodeKind.COMMENT:
        return etree.Comment(node.value)
    return etree.ProcessingInstruction(node.target, node.value or None)


def _build_element(
    element: ConfigElement, parent: etree._Element | None = None
) -> etree._Element:
    """Build the lxml counterpart of a ConfigElement subtree."""
    if parent is None:
        target = etree.Element(element.name)
    else:
        target = etree.SubElement(parent, element.name)
    for name, value in element.attr.items():
        target.set(name, value)

    last: etree._Element | None = None
    for child in element.children:
        if child.kind is NodeKind.TEXT:
            if last is None:
                target.text = (target.text or '') + child.value
            else:
                last.tail = (last.tail or '') + child.value
        elif child.kind in (NodeKind.COMMENT, NodeKind.INSTRUCTION):
            last = _build_misc(child)
            target.append(last)
        elif child.kind is NodeKind.ELEMENT:
            last = _build_element(child, target)
        else:
            raise TypeError(f"Unknown node kind {child.kind!r}")

    return target


def serialize_document(document: ConfigDocument) -> bytes:
    """Serialize a ConfigDocument to XML bytes with an XML declaration.

    The DOCTYPE recorded at load, if any, follows the declaration.
    """
    root = _build_element(document.root)
    for node in document.prolog:
        root.addprevious(_build_misc(node))
    for node in reversed(document.epilog):
        root.addnext(_build_misc(node))

    return etree.tostring(
        root.getroottree(),
        encoding=document.encoding,
        xml_declaration=True,
        pretty_print=True,
        doctype=document.doctype,
    )


def dump_document(
    document: ConfigDocument, target: str | os.PathLike[str]
) -> Path:
    """Write a ConfigDocument to a file.

    Args:
        document: The document to write.
        target: Destination path; an existing file is replaced.

    Returns:
        The path written.

    Raises:
        PersistError: If the tree cannot be serialized or the file written.
    """
    path = Path(target)
    try:
        data = serialize_document(document)
    except (TypeError, ValueError) as exc:
        # lxml rejects non-str values and text that is not XML compatible
        raise PersistError(f"Couldn't serialize XML document: {exc}") from exc

    try:
        with open(path, 'wb') as stream:
            stream.write(data)
    except OSError as exc:
        raise PersistError(
            f"Couldn't write XML document to '{path}': {exc.strerror or exc}"
        ) from exc

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path
