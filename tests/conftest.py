"""
Pytest configuration and fixtures for cvr-i18n tests.
"""

import json
import os
import pytest
import tempfile
from pathlib import Path
from typing import Any, Dict, Generator

from cvr_i18n.config import Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's CVR_I18N_* variables out of the tests."""
    for name in list(os.environ):
        if name.startswith("CVR_I18N_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the stock defaults."""
    return Settings()


@pytest.fixture
def create_test_file(temp_dir: Path):
    """Helper to create files with raw text content."""
    def _create_file(filename: str, content: str = "{}") -> Path:
        file_path = temp_dir / filename
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
        return file_path
    return _create_file


@pytest.fixture
def create_locale(temp_dir: Path):
    """Helper to create a locale JSON file from a dict."""
    def _create_locale(filename: str, data: Dict[str, Any], directory: str = "locales") -> Path:
        file_path = temp_dir / directory / filename
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        return file_path
    return _create_locale


@pytest.fixture
def locales_dir(temp_dir: Path, create_locale) -> Path:
    """A locale directory with a base file and two translations."""
    create_locale("en.json", {"greeting": "Hello", "farewell": "Bye", "menu": {"open": "Open"}})
    create_locale("de.json", {"menu": {"open": "Öffnen"}, "greeting": "Hallo"})
    create_locale("fr.json", {"greeting": "Bonjour", "farewell": "Salut", "menu": {"open": "Ouvrir"}})
    return temp_dir / "locales"
