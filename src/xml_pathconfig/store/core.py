# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""XmlConfigStore - dotted-path access to an XML configuration file.

This module provides the XmlConfigStore class, which loads an XML file into
an owned ConfigElement tree and reads or updates element text and attribute
values addressed by dotted paths.

Path Syntax:
    - Dotted paths: 'Settings.network.port'
    - Paths start below the document root; the root's name is not part of them
    - Each segment matches the first child element with exactly that name

Persistence:
    Changes are kept in memory. When the store is closed, and only if
    something was changed, the document is written to ``_<basename>`` in the
    current working directory. The input file is never overwritten.

Example:
    Basic usage::

        with XmlConfigStore('settings.xml') as config:
            if config.exists('Settings.value'):
                print(config.get_option('Settings.value'))   # '10'
            print(config.get_attribute('Settings', 'optX'))   # '5'
            config.set_option('Settings.value', '42')
        # ./_settings.xml now holds <value>42</value>
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from ..exceptions import ConfigStoreError, LoadError, PersistError
from ..formatting import iter_tree_lines, render_tree
from ..node import ConfigDocument, ConfigElement
from ..parsers import dump_document, load_document

logger = logging.getLogger(__name__)

UNAVAILABLE = 'N/A'
"""Value returned by lookups that find nothing, unless configured otherwise."""

OUTPUT_PREFIX = '_'
"""Prefix added to the input file's base name when writing changes back."""

_DEFAULT: Any = object()


def resolve_path(start: ConfigElement, path: str) -> ConfigElement | None:
    """Find the element addressed by a dotted path below ``start``.

    At each level only element children are considered, in document order,
    and the first one whose name equals the segment is followed. There is no
    backtracking: later siblings with the same name are unreachable.

    Args:
        start: Element the path is relative to.
        path: Dotted path such as ``'a.b.c'``.

    Returns:
        The matching element, or None if any segment has no match.
    """
    current: ConfigElement | None = start
    remaining = path
    while current is not None:
        head, dot, remaining = remaining.partition('.')
        if not head:
            return None
        current = current.find_child(head)
        if not dot:
            return current
    return None


class XmlConfigStore:
    """Path-qualified read/write access to an XML configuration file.

    XmlConfigStore provides:
    - load(filename): Parse the file and keep its tree in memory
    - exists(path): Whether a path resolves to an element
    - get_option(path) / set_option(path, value): Element text
    - get_attribute(path, name) / set_attribute(path, name, value): Attributes
    - print_config_file(): Log a readable dump of the tree
    - close(): Write the tree back if it was modified

    Lookups that find nothing return the store's sentinel (``'N/A'`` by
    default) instead of raising; setters return False. Setters only ever
    update existing elements and attributes.

    Attributes:
        sentinel: Value returned by get_option/get_attribute when nothing
            is found.
        output_prefix: Prefix of the file name written on close.
        output_dir: Directory written to on close, or None for the current
            working directory.

    Example:
        >>> store = XmlConfigStore('sample.xml')
        >>> store.get_option('Settings.value')
        '10'
        >>> store.get_option('Settings.missing')
        'N/A'
        >>> store.close()
        True
    """

    __slots__ = (
        'sentinel', 'output_prefix', 'output_dir',
        '_filename', '_document', '_modified', '_closed', '_close_result',
    )

    def __init__(
        self,
        filename: str | os.PathLike[str] | None = None,
        *,
        sentinel: str | None = UNAVAILABLE,
        output_prefix: str = OUTPUT_PREFIX,
        output_dir: str | os.PathLike[str] | None = None,
    ) -> None:
        """Initialize an XmlConfigStore.

        Args:
            filename: Optional XML file to load right away.
            sentinel: Value returned by lookups that find nothing. Use a
                different value if 'N/A' is a legitimate configured value,
                or None to get None back.
            output_prefix: Prefix of the base name written on close.
            output_dir: Directory written to on close. Defaults to the
                current working directory at the time of writing.

        Raises:
            LoadError: If ``filename`` is given and cannot be loaded.
        """
        self.sentinel = sentinel
        self.output_prefix = output_prefix
        self.output_dir = output_dir
        self._filename: str | None = None
        self._document: ConfigDocument | None = None
        self._modified = False
        self._closed = False
        self._close_result = True

        if filename is not None:
            self.load(filename)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        state = 'modified' if self._modified else 'clean'
        return f"XmlConfigStore({self._filename!r}, {state})"

    def __contains__(self, path: str) -> bool:
        return self.exists(path)

    def __enter__(self) -> XmlConfigStore:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    # ==================== Properties ====================

    @property
    def loaded(self) -> bool:
        """True once a document has been loaded successfully."""
        return self._document is not None

    @property
    def modified(self) -> bool:
        """True if any option or attribute has been changed since load."""
        return self._modified

    @property
    def filename(self) -> str | None:
        """Path of the loaded configuration file."""
        return self._filename

    @property
    def root_name(self) -> str | None:
        """Name of the document root element, or None before load."""
        if self._document is None:
            return None
        return self._document.root.name

    @property
    def output_path(self) -> Path | None:
        """Path the document is written to on close, or None before load."""
        if self._filename is None:
            return None
        directory = Path(self.output_dir) if self.output_dir is not None else Path.cwd()
        return directory / f"{self.output_prefix}{os.path.basename(self._filename)}"

    # ==================== Loading ====================

    def load(self, filename: str | os.PathLike[str]) -> None:
        """Load an XML configuration file.

        A failed load leaves the store empty and may be retried. Once a
        document is loaded its root is never replaced, so loading twice is
        an error.

        Args:
            filename: Path of the XML file.

        Raises:
            FileNotAccessibleError: If the file is missing or unreadable.
            XmlParseError: If the file is not well-formed XML.
            NoRootElementError: If the file has no document root element.
            ConfigStoreError: If a document is already loaded.
        """
        if self._document is not None:
            raise ConfigStoreError(
                f"Configuration file '{self._filename}' is already loaded"
            )

        name = os.fspath(filename)
        try:
            document = load_document(name)
        except LoadError as exc:
            logger.error("%s", exc)
            raise

        self._filename = name
        self._document = document
        logger.info("The configuration file '%s' has been loaded.", name)
        logger.info("  Root node: '%s'", document.root.name)

    def _resolve(self, path: str) -> ConfigElement | None:
        if self._document is None:
            logger.warning("Empty XML document, cannot resolve '%s'", path)
            return None
        element = resolve_path(self._document.root, path)
        if element is None:
            logger.debug("Path '%s' not found", path)
        return element

    # ==================== Queries ====================

    def exists(self, path: str) -> bool:
        """Return True if ``path`` resolves to an element.

        Use this to tell an element with no text (get_option returns '')
        from a missing one.
        """
        return self._resolve(path) is not None

    def get_option(self, path: str, default: Any = _DEFAULT) -> Any:
        """Get the text of the element at ``path``.

        Args:
            path: Dotted path of the option.
            default: Returned when the path is not found. Defaults to the
                store's sentinel.

        Returns:
            The element text verbatim, '' if the element has no text, or
            ``default`` if the element does not exist.
        """
        element = self._resolve(path)
        if element is None:
            return self.sentinel if default is _DEFAULT else default
        text = element.text
        return '' if text is None else text

    def get_attribute(self, path: str, attribute: str, default: Any = _DEFAULT) -> Any:
        """Get an attribute of the element at ``path``.

        Args:
            path: Dotted path of the option that owns the attribute.
            attribute: Attribute name, matched exactly.
            default: Returned when either the element or the attribute is
                missing. Defaults to the store's sentinel.

        Returns:
            The attribute value, or ``default``.
        """
        if default is _DEFAULT:
            default = self.sentinel
        element = self._resolve(path)
        if element is None:
            return default
        return element.attr.get(attribute, default)

    # ==================== Updates ====================

    def set_option(self, path: str, value: str) -> bool:
        """Set the text of an existing element.

        Args:
            path: Dotted path of the option.
            value: New text, stored verbatim.

        Returns:
            True if the element exists and was updated, False otherwise.
        """
        element = self._resolve(path)
        if element is None:
            return False
        element.text = value
        self._modified = True
        logger.debug("Option '%s' set to %r", path, value)
        return True

    def set_attribute(self, path: str, attribute: str, value: str) -> bool:
        """Set the value of an existing attribute.

        Args:
            path: Dotted path of the option that owns the attribute.
            attribute: Attribute name; it must already exist.
            value: New attribute value.

        Returns:
            True if the attribute exists and was updated, False otherwise.
        """
        element = self._resolve(path)
        if element is None or attribute not in element.attr:
            return False
        element.attr[attribute] = value
        self._modified = True
        logger.debug("Attribute '%s' of '%s' set to %r", attribute, path, value)
        return True

    # ==================== Output ====================

    def render(self) -> str:
        """Return the readable dump of the tree logged by print_config_file."""
        if self._document is None:
            return ''
        return render_tree(self._document.root)

    def print_config_file(self) -> None:
        """Log the configuration tree in a human-readable format."""
        if self._document is None:
            logger.error("Empty XML document, nothing to print")
            return
        for line in iter_tree_lines(self._document.root):
            logger.info("%s", line)

    def save(self, target: str | os.PathLike[str] | None = None) -> Path:
        """Write the document now.

        Does not affect the modified flag: close() still writes if there
        were changes.

        Args:
            target: Destination file. Defaults to ``output_path``.

        Returns:
            The path written.

        Raises:
            ConfigStoreError: If no document is loaded.
            PersistError: If the document cannot be written.
        """
        if self._document is None:
            raise ConfigStoreError("No configuration file loaded")
        path = Path(target) if target is not None else self.output_path
        return dump_document(self._document, path)

    def close(self) -> bool:
        """Write the document back if it was modified.

        Safe to call more than once; only the first call does anything.
        A failed write is logged, not raised.

        Returns:
            False if writing the modified document failed, True otherwise.
        """
        if self._closed:
            return self._close_result
        self._closed = True

        if self._modified:
            logger.info("Writing XML Doc %s ...", self.output_path)
            try:
                self.save()
            except PersistError as exc:
                logger.error("Could not write XML file: %s", exc)
                self._close_result = False
            else:
                logger.info("XML Doc written successfully.")
        return self._close_result
