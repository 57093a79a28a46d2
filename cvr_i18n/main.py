"""Main entry point for cvr-i18n."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import structlog
from pydantic import ValidationError

from cvr_i18n import __version__
from cvr_i18n.config import Settings
from cvr_i18n.errors import ErrorCollector, I18nToolError
from cvr_i18n.localization import (
    count_duplicates,
    export_missing,
    find_missing,
    list_locale_files,
    load_locale_file,
    resolve_base_path,
    resolve_directory,
    resolve_single_file,
    sort_locale_file,
)
from cvr_i18n.localization.scanner import is_same_file
from cvr_i18n.reporter import ExitStatus, Reporter

logger = structlog.get_logger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure structured logging on stderr; stdout carries the report."""
    level = logging.DEBUG if debug else logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.dev.ConsoleRenderer(colors=False)
                if debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cvr-i18n",
        description="Check and tidy locale JSON files against a base locale",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--version", action="version", version=f"cvr-i18n {__version__}")

    parser.add_argument(
        "-d", "--directory",
        type=Path,
        help="Directory to use, default is ./locales and ./src/locales",
    )
    parser.add_argument(
        "-k", "--duplicated-key",
        action="store_true",
        help="Check for duplicate top-level keys in each JSON file",
    )
    parser.add_argument(
        "-m", "--missing-key",
        action="store_true",
        help="Check for missing top-level keys in each JSON file compared to the base file",
    )
    parser.add_argument(
        "-e", "--export",
        type=Path,
        metavar="DIR",
        help="Export missing keys to JSON files in the specified directory",
    )
    parser.add_argument(
        "-s", "--sort",
        action="store_true",
        help="Sort keys in JSON files according to the base file's key order",
    )
    parser.add_argument(
        "-b", "--base",
        metavar="FILE",
        help="Base file for key order, default is en.json",
    )
    parser.add_argument(
        "-f", "--file",
        type=Path,
        metavar="FILE",
        help="Specify a single file to process instead of the entire directory",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.export is not None and not args.missing_key:
        parser.error("-e/--export requires -m/--missing-key")
    return args


def collect_targets(args: argparse.Namespace, directory: Optional[Path]) -> List[Path]:
    if args.file is not None:
        return [resolve_single_file(args.file)]
    return list_locale_files(directory)


def check_duplicates(files: List[Path], reporter: Reporter) -> ExitStatus:
    """Report duplicate top-level keys in every file."""
    errors = ErrorCollector("duplicated-key")
    any_duplicates = False

    for path in files:
        try:
            locale_file = load_locale_file(path)
        except I18nToolError as e:
            errors.record(e)
            reporter.error(e)
            continue

        counts = count_duplicates(locale_file)
        if counts:
            any_duplicates = True
        reporter.duplicates(path, counts)

    if errors.has_errors:
        logger.warning("Duplicate key check finished with errors", **errors.get_summary())
        return ExitStatus.ERROR
    return ExitStatus.FINDINGS if any_duplicates else ExitStatus.OK


def check_missing(
    base_path: Path,
    files: List[Path],
    reporter: Reporter,
    export_dir: Optional[Path] = None,
    indent: int = 2,
    suffix: str = "_missing",
) -> ExitStatus:
    """Report keys of the base file that other files lack, optionally exporting them."""
    base = load_locale_file(base_path)
    errors = ErrorCollector("missing-key")
    report: Dict[Path, List[str]] = {}

    for path in files:
        if is_same_file(path, base_path):
            continue
        try:
            locale_file = load_locale_file(path)
        except I18nToolError as e:
            errors.record(e)
            reporter.error(e)
            continue

        missing = find_missing(base, locale_file)
        report[path] = missing
        reporter.missing(path, missing)

    export_failed = False
    if export_dir is not None:
        result = export_missing(report, base, export_dir, indent=indent, suffix=suffix)
        for export_path in result.written.values():
            reporter.exported(export_path)
        for e in result.errors:
            reporter.error(e)
        export_failed = result.errors.has_errors

    if errors.has_errors or export_failed:
        logger.warning("Missing key check finished with errors", **errors.get_summary())
        return ExitStatus.ERROR
    return ExitStatus.FINDINGS if any(report.values()) else ExitStatus.OK


def sort_files(base_path: Path, files: List[Path], reporter: Reporter, indent: int = 2) -> ExitStatus:
    """Reorder every non-base file to follow the base file's key order."""
    base = load_locale_file(base_path)
    errors = ErrorCollector("sort")

    for path in files:
        if is_same_file(path, base_path):
            continue
        try:
            changed = sort_locale_file(base, load_locale_file(path), indent=indent)
        except I18nToolError as e:
            errors.record(e)
            reporter.error(e)
            continue
        reporter.sorted(path, changed)

    if errors.has_errors:
        logger.warning("Sort finished with errors", **errors.get_summary())
        return ExitStatus.ERROR
    return ExitStatus.OK


def run(args: argparse.Namespace, settings: Settings, reporter: Reporter) -> ExitStatus:
    """Run every requested mode in order and combine their exit codes."""
    base = args.base or settings.base_file
    statuses: List[ExitStatus] = []

    if args.duplicated_key:
        try:
            directory = None
            if args.file is None:
                directory = resolve_directory(args.directory, settings.default_directories)
            statuses.append(check_duplicates(collect_targets(args, directory), reporter))
        except I18nToolError as e:
            reporter.error(e)
            statuses.append(ExitStatus.ERROR)

    if args.missing_key:
        try:
            directory = resolve_directory(args.directory, settings.default_directories)
            base_path = resolve_base_path(directory, base)
            statuses.append(
                check_missing(
                    base_path,
                    collect_targets(args, directory),
                    reporter,
                    export_dir=args.export,
                    indent=settings.indent,
                    suffix=settings.export_suffix,
                )
            )
        except I18nToolError as e:
            reporter.error(e)
            statuses.append(ExitStatus.ERROR)

    if args.sort:
        try:
            directory = resolve_directory(args.directory, settings.default_directories)
            base_path = resolve_base_path(directory, base)
            statuses.append(
                sort_files(base_path, collect_targets(args, directory), reporter, indent=settings.indent)
            )
        except I18nToolError as e:
            reporter.error(e)
            statuses.append(ExitStatus.ERROR)

    return ExitStatus.combine(statuses)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry point; returns the process exit code."""
    args = parse_args(argv)

    if not (args.duplicated_key or args.missing_key or args.sort):
        build_parser().print_help()
        return int(ExitStatus.OK)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"ERROR: invalid settings: {e}", file=sys.stderr)
        return int(ExitStatus.ERROR)

    setup_logging(debug=args.debug or settings.debug)
    logger.info("Starting cvr-i18n", version=__version__, base=args.base or settings.base_file)

    status = run(args, settings, Reporter())
    logger.info("Finished", exit_code=int(status))
    return int(status)


if __name__ == "__main__":
    sys.exit(main())
