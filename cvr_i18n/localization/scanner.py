"""Finding the locale directory, its JSON files and the base file."""

from pathlib import Path
from typing import Iterable, List, Optional, Union

import structlog

from ..errors import BaseFileMissingError, NoDefaultDirectoryError, NotFoundError

logger = structlog.get_logger(__name__)

PathLike = Union[str, Path]


def resolve_directory(directory: Optional[PathLike], defaults: Iterable[PathLike]) -> Path:
    """Return the directory to scan.

    An explicit directory must exist. Without one, the first existing default
    is used.
    """
    if directory is not None:
        path = Path(directory)
        if not path.is_dir():
            raise NotFoundError(f"Directory does not exist: {path}", path=path)
        return path

    defaults = [Path(d) for d in defaults]
    for candidate in defaults:
        if candidate.is_dir():
            logger.info("Using default locale directory", directory=str(candidate))
            return candidate

    raise NoDefaultDirectoryError(defaults)


def list_locale_files(directory: Path) -> List[Path]:
    """List regular ``.json`` files in a directory, sorted by path."""
    files = [
        path for path in Path(directory).iterdir()
        if path.is_file() and path.suffix.lower() == ".json"
    ]
    files.sort()
    logger.debug("Scanned locale directory", directory=str(directory), files=len(files))
    return files


def resolve_base_path(directory: Path, base: str) -> Path:
    """Locate the base file.

    A value containing a path separator is taken as a path on its own,
    otherwise it names a file inside the locale directory.
    """
    if "/" in base or "\\" in base:
        path = Path(base)
    else:
        path = Path(directory) / base

    if not path.is_file():
        raise BaseFileMissingError(path)
    return path


def resolve_single_file(file: PathLike) -> Path:
    path = Path(file)
    if not path.is_file():
        raise NotFoundError(f"File does not exist: {path}", path=path)
    return path


def is_same_file(a: Path, b: Path) -> bool:
    try:
        return a.resolve() == b.resolve()
    except OSError:
        return a == b
