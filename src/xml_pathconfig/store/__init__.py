# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Store package - dotted-path access to XML configuration files.

The package is organized into:
- core: XmlConfigStore with loading, path resolution, accessors and
  write-back on close

Example:
    >>> from xml_pathconfig import XmlConfigStore
    >>> with XmlConfigStore('settings.xml') as config:
    ...     config.set_option('Settings.value', '42')
    True
"""

from .core import OUTPUT_PREFIX, UNAVAILABLE, XmlConfigStore, resolve_path

__all__ = ["OUTPUT_PREFIX", "UNAVAILABLE", "XmlConfigStore", "resolve_path"]
