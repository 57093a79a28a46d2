"""
Error handling for cvr-i18n.

- Structured error hierarchy
- Per-file error collection for multi-file operations
"""

from .exceptions import (
    I18nToolError,
    IoError,
    NotFoundError,
    ParseError,
    BaseFileMissingError,
    NoDefaultDirectoryError,
)

from .handlers import ErrorCollector

__all__ = [
    # Exceptions
    "I18nToolError",
    "IoError",
    "NotFoundError",
    "ParseError",
    "BaseFileMissingError",
    "NoDefaultDirectoryError",

    # Handlers
    "ErrorCollector",
]
