"""
Per-run error collection.

Multi-file operations record per-file failures here and keep going; the
CLI inspects the collector afterwards to pick the exit code.
"""

from typing import Any, Dict, List, Optional

import structlog

from .exceptions import I18nToolError

logger = structlog.get_logger(__name__)


class ErrorCollector:
    """
    Collects errors raised while processing many locale files.

    Tracks error counts per type so a summary can be logged at the end.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: List[I18nToolError] = []
        self.error_counts: Dict[str, int] = {}

    def record(self, error: I18nToolError, context: Optional[Dict[str, Any]] = None) -> None:
        """Record an error occurrence with context."""
        self.errors.append(error)

        error_type = error.__class__.__name__
        self.error_counts[error_type] = self.error_counts.get(error_type, 0) + 1

        error_record = error.to_dict()
        error_record["context"] = {**error.context, **(context or {})}

        logger.info(
            "Error recorded",
            operation=self.operation,
            total_count=self.error_counts[error_type],
            **error_record,
        )

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def __iter__(self):
        return iter(self.errors)

    def get_summary(self) -> Dict[str, Any]:
        """Get error statistics for the operation."""
        return {
            "operation": self.operation,
            "total_errors": len(self.errors),
            "error_counts": self.error_counts.copy(),
            "paths": [str(e.path) for e in self.errors if e.path],
        }
