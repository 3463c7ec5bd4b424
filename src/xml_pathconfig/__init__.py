# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""xml-pathconfig - Dotted-path access to XML configuration files.

A small library that loads an XML configuration file, reads and updates
element text and attributes addressed by paths like 'Settings.value', and
writes the changes to a separate file when the store is closed.
"""

__version__ = "0.1.0"

from .exceptions import (
    ConfigStoreError,
    FileNotAccessibleError,
    LoadError,
    NoRootElementError,
    PersistError,
    XmlParseError,
)
from .formatting import render_tree
from .node import (
    ConfigComment,
    ConfigDocument,
    ConfigElement,
    ConfigInstruction,
    ConfigText,
    NodeKind,
)
from .store import OUTPUT_PREFIX, UNAVAILABLE, XmlConfigStore, resolve_path

__all__ = [
    # Core classes
    "XmlConfigStore",
    "resolve_path",
    "render_tree",
    "UNAVAILABLE",
    "OUTPUT_PREFIX",
    # Tree
    "ConfigDocument",
    "ConfigElement",
    "ConfigText",
    "ConfigComment",
    "ConfigInstruction",
    "NodeKind",
    # Exceptions
    "ConfigStoreError",
    "LoadError",
    "FileNotAccessibleError",
    "XmlParseError",
    "NoRootElementError",
    "PersistError",
]
