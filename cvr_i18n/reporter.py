"""Console output and exit codes."""

import sys
from enum import IntEnum
from pathlib import Path
from typing import Dict, Iterable, Optional, TextIO

from .errors import I18nToolError


class ExitStatus(IntEnum):
    OK = 0
    FINDINGS = 1
    ERROR = 2

    @classmethod
    def combine(cls, statuses: Iterable["ExitStatus"]) -> "ExitStatus":
        """The strictest status wins."""
        return max(statuses, default=cls.OK)


class Reporter:
    """Prints findings to stdout and errors to stderr."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def ok(self, path: Path) -> None:
        print(f"{path}: OK", file=self.out)

    def duplicates(self, path: Path, counts: Dict[str, int]) -> None:
        if not counts:
            self.ok(path)
            return
        print(f"{path}: DUPLICATES:", file=self.out)
        for key, count in counts.items():
            print(f"  {key}  ({count} times)", file=self.out)

    def missing(self, path: Path, keys: Iterable[str]) -> None:
        keys = list(keys)
        if not keys:
            self.ok(path)
            return
        print(f"{path}: MISSING:", file=self.out)
        for key in keys:
            print(f"  {key}", file=self.out)

    def exported(self, path: Path) -> None:
        print(f"Exported missing keys to {path}", file=self.out)

    def sorted(self, path: Path, changed: bool) -> None:
        if changed:
            print(f"Sorted {path}", file=self.out)
        else:
            print(f"{path}: already sorted", file=self.out)

    def error(self, error: I18nToolError) -> None:
        if error.path is not None and str(error.path) not in error.message:
            print(f"{error.path}: ERROR: {error.message}", file=self.err)
        else:
            print(f"ERROR: {error.message}", file=self.err)
