"""Loading and serializing locale JSON files."""

import json
import os
import stat
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import structlog

from ..errors import IoError, ParseError

logger = structlog.get_logger(__name__)


@dataclass
class LocaleFile:
    """A parsed locale file.

    ``data`` is the deduplicated mapping in source order (last value wins for
    a repeated key). ``raw_keys`` lists every top-level key occurrence,
    repeats included, in the order they appear in the source text.
    """

    path: Path
    data: Dict[str, Any]
    raw_keys: List[str] = field(default_factory=list)
    source: str = field(default="", repr=False)

    @property
    def locale(self) -> str:
        return self.path.stem

    @property
    def keys(self) -> List[str]:
        return list(self.data)

    def key_set(self) -> set:
        return set(self.data)


def parse_locale_text(text: str, path: Path) -> Tuple[Dict[str, Any], List[str]]:
    """Parse JSON text into an ordered mapping and its raw top-level keys.

    The decoder finishes nested objects before their parent, so the last
    object the hook sees is the root.
    """
    seen_objects: List[List[Tuple[str, Any]]] = []

    def collect_pairs(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
        seen_objects.append(pairs)
        return dict(pairs)

    try:
        data = json.loads(text, object_pairs_hook=collect_pairs)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"invalid JSON: {e.msg} at line {e.lineno} column {e.colno}",
            path=path,
            line=e.lineno,
            column=e.colno,
            previous_error=e,
        )
    except RecursionError as e:
        raise ParseError("invalid JSON: nesting too deep", path=path, previous_error=e)
    except ValueError as e:
        raise ParseError(f"invalid JSON: {e}", path=path, previous_error=e)

    if not isinstance(data, dict):
        raise ParseError("root is not an object", path=path)

    # lone surrogate escapes such as \ud800 decode but cannot be written back as UTF-8
    try:
        json.dumps(data, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as e:
        raise ParseError("invalid JSON: lone surrogate in string", path=path, previous_error=e)

    raw_keys = [key for key, _ in seen_objects[-1]]
    return data, raw_keys


def load_locale_file(path: Path) -> LocaleFile:
    """Read and parse one locale file.

    Raises:
        IoError: the file is missing or cannot be read
        ParseError: malformed JSON, bad encoding or a non-object root
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ParseError(f"not valid UTF-8: {e.reason}", path=path, previous_error=e)
    except OSError as e:
        raise IoError(f"Failed to read {path}: {e.strerror or e}", path=path, previous_error=e)

    data, raw_keys = parse_locale_text(text, path)
    logger.debug("Loaded locale file", file=str(path), keys=len(data), occurrences=len(raw_keys))
    return LocaleFile(path=path, data=data, raw_keys=raw_keys, source=text)


def dump_locale_data(data: Dict[str, Any], indent: int = 2) -> str:
    """Serialize a mapping the way every file written by the tool looks."""
    return json.dumps(data, ensure_ascii=False, indent=indent) + "\n"


def write_text_atomic(path: Path, text: str) -> None:
    """Replace ``path`` with ``text``; on failure the old file is left as is.

    Raises:
        IoError: the temporary file could not be written or moved into place
    """
    path = Path(path)
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_path = Path(f.name)
            f.write(text)
        # NamedTemporaryFile creates 0600 files; keep the original mode
        if path.exists():
            os.chmod(tmp_path, stat.S_IMODE(path.stat().st_mode))
        else:
            os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
    except (OSError, UnicodeEncodeError) as e:
        raise IoError(
            f"Failed to write {path}: {getattr(e, 'strerror', None) or e}",
            path=path,
            operation="write",
            previous_error=e,
        )
    finally:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
