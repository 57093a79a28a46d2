"""Exporting missing keys to JSON files."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

import structlog

from ..errors import ErrorCollector, IoError
from .loader import LocaleFile, dump_locale_data, write_text_atomic

logger = structlog.get_logger(__name__)


@dataclass
class ExportResult:
    """Files written by an export and the per-file failures."""

    written: Dict[Path, Path] = field(default_factory=dict)
    errors: ErrorCollector = field(default_factory=lambda: ErrorCollector("export"))


def export_file_name(locale_path: Path, suffix: str = "_missing") -> str:
    return f"{Path(locale_path).stem}{suffix}.json"


def ensure_output_dir(output_dir: Path) -> Path:
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoError(
            f"Failed to create export directory {output_dir}: {e.strerror or e}",
            path=output_dir,
            operation="mkdir",
            previous_error=e,
        )
    return output_dir


def export_missing(
    report: Dict[Path, List[str]],
    base: LocaleFile,
    output_dir: Path,
    indent: int = 2,
    suffix: str = "_missing",
) -> ExportResult:
    """Write each locale's missing keys, with the base values, to ``output_dir``.

    Locales without missing keys are skipped. A failed write is recorded and
    the remaining locales are still exported.

    Raises:
        IoError: the output directory cannot be created
    """
    output_dir = ensure_output_dir(output_dir)
    result = ExportResult()

    for locale_path, missing in report.items():
        if not missing:
            continue

        export_path = output_dir / export_file_name(locale_path, suffix)
        payload = {key: base.data[key] for key in missing}
        try:
            write_text_atomic(export_path, dump_locale_data(payload, indent=indent))
        except IoError as e:
            result.errors.record(e, {"locale": str(locale_path)})
            continue

        result.written[Path(locale_path)] = export_path
        logger.info("Exported missing keys", locale=str(locale_path), file=str(export_path), keys=len(missing))

    return result
