# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Readers and writers for configuration documents.

Available formats:
- xml: XML files, parsed and serialized through lxml

Example:
    >>> from xml_pathconfig.parsers import load_document
    >>> document = load_document('settings.xml')
    >>> document.root.find_child('Settings')
"""

from .xml import dump_document, load_document, parse_document, serialize_document

__all__ = [
    'dump_document',
    'load_document',
    'parse_document',
    'serialize_document',
]
