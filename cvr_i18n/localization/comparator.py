"""Key comparisons between locale files."""

from collections import Counter
from typing import Dict, List

from .loader import LocaleFile


def count_duplicates(file: LocaleFile) -> Dict[str, int]:
    """Map each repeated top-level key to its number of occurrences.

    Keys appear in order of their first occurrence.
    """
    counts = Counter(file.raw_keys)
    return {key: counts[key] for key in dict.fromkeys(file.raw_keys) if counts[key] > 1}


def find_duplicates(file: LocaleFile) -> List[str]:
    """Top-level keys that occur more than once in the raw source."""
    return list(count_duplicates(file))


def find_missing(base: LocaleFile, other: LocaleFile) -> List[str]:
    """Keys of ``base`` that ``other`` lacks, in base order."""
    present = other.key_set()
    return [key for key in base.keys if key not in present]
