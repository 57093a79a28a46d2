"""
Error hierarchy for cvr-i18n.

Every error carries the offending path so the console report can name the
file, plus a context dictionary for structured logging.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

PathLike = Union[str, Path]


class I18nToolError(Exception):
    """
    Base exception for all cvr-i18n errors.

    Provides the offending path and error context for reporting and logging.
    """

    def __init__(
        self,
        message: str,
        path: Optional[PathLike] = None,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        previous_error: Optional[Exception] = None,
    ):
        super().__init__(message)

        self.message = message
        self.path = Path(path) if path is not None else None
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.previous_error = previous_error

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "error_code": self.error_code,
            "context": self.context,
            "previous_error": str(self.previous_error) if self.previous_error else None,
        }


class IoError(I18nToolError):
    """File could not be read or written."""

    def __init__(self, message: str, path: Optional[PathLike] = None, operation: str = "read", **kwargs):
        super().__init__(
            message,
            path=path,
            context={"operation": operation},
            **kwargs
        )


class NotFoundError(IoError):
    """Directory or file does not exist."""

    def __init__(self, message: str, path: Optional[PathLike] = None, **kwargs):
        super().__init__(message, path=path, operation="lookup", **kwargs)


class ParseError(I18nToolError):
    """Malformed JSON or a root value that is not an object."""

    def __init__(
        self,
        message: str,
        path: Optional[PathLike] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        **kwargs
    ):
        super().__init__(
            message,
            path=path,
            context={"line": line, "column": column},
            **kwargs
        )
        self.line = line
        self.column = column


class BaseFileMissingError(I18nToolError):
    """The base locale file is absent."""

    def __init__(self, path: PathLike, **kwargs):
        super().__init__(f"Base file {path} not found", path=path, **kwargs)


class NoDefaultDirectoryError(I18nToolError):
    """No directory was given and none of the default directories exists."""

    def __init__(self, checked: Any, **kwargs):
        checked = [str(c) for c in checked]
        listed = " and ".join(f"./{c}" for c in checked)
        super().__init__(
            f"No default directory found (checked {listed}). Please specify with -d",
            context={"checked": checked},
            **kwargs
        )
