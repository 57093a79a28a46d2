"""Reordering locale files to follow the base file's key order."""

from typing import Any, Dict

import structlog

from .loader import LocaleFile, dump_locale_data, write_text_atomic

logger = structlog.get_logger(__name__)


def reorder(base: LocaleFile, target: LocaleFile) -> Dict[str, Any]:
    """Return target's entries ordered like base.

    Keys shared with base come first in base order; keys only the target has
    follow in the target's own order. Neither input is modified.
    """
    ordered = {key: target.data[key] for key in base.keys if key in target.data}
    for key, value in target.data.items():
        if key not in ordered:
            ordered[key] = value
    return ordered


def sort_locale_file(base: LocaleFile, target: LocaleFile, indent: int = 2) -> bool:
    """Rewrite target's file in base key order.

    Returns:
        True if the file was rewritten, False if it already had this content
    """
    text = dump_locale_data(reorder(base, target), indent=indent)
    if text == target.source:
        logger.debug("Locale file already sorted", file=str(target.path))
        return False

    write_text_atomic(target.path, text)
    logger.info("Sorted locale file", file=str(target.path), base=str(base.path))
    return True
