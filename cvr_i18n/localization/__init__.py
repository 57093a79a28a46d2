"""Locale file loading, comparison, reordering and export."""

from .loader import LocaleFile, load_locale_file, parse_locale_text, dump_locale_data, write_text_atomic
from .scanner import resolve_directory, list_locale_files, resolve_base_path, resolve_single_file
from .comparator import count_duplicates, find_duplicates, find_missing
from .reorderer import reorder, sort_locale_file
from .exporter import ExportResult, export_missing

__all__ = [
    "LocaleFile",
    "load_locale_file",
    "parse_locale_text",
    "dump_locale_data",
    "write_text_atomic",
    "resolve_directory",
    "list_locale_files",
    "resolve_base_path",
    "resolve_single_file",
    "count_duplicates",
    "find_duplicates",
    "find_missing",
    "reorder",
    "sort_locale_file",
    "ExportResult",
    "export_missing",
]
