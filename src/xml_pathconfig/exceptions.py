# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""XmlConfigStore exceptions."""

from __future__ import annotations


class ConfigStoreError(Exception):
    """Base exception for XmlConfigStore errors."""

    pass


class LoadError(ConfigStoreError):
    """Raised when a configuration file cannot be loaded."""

    def __init__(self, message: str, filename: str | None = None) -> None:
        super().__init__(message)
        self.filename = filename


class FileNotAccessibleError(LoadError):
    """Raised when the configuration file is missing or unreadable."""

    pass


class XmlParseError(LoadError):
    """Raised when the configuration file is not well-formed XML."""

    def __init__(
        self,
        message: str,
        filename: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message, filename)
        self.line = line
        self.column = column


class NoRootElementError(LoadError):
    """Raised when the document holds no top-level element."""

    pass


class PersistError(ConfigStoreError):
    """Raised when the document cannot be written back to disk."""

    pass
