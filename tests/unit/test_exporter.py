"""
Unit tests for exporting missing keys.
"""

import json
from unittest.mock import patch

import pytest

from cvr_i18n.errors import IoError
from cvr_i18n.localization import export_missing, exporter, load_locale_file


@pytest.fixture
def base(create_locale):
    return load_locale_file(create_locale("en.json", {"a": "A", "b": {"nested": True}, "c": "C"}))


class TestExportMissing:
    """Test writing missing key files."""

    def test_writes_base_values(self, temp_dir, base):
        out = temp_dir / "out" / "missing"
        report = {temp_dir / "locales" / "de.json": ["a", "c"]}

        result = export_missing(report, base, out)

        export_path = out / "de_missing.json"
        assert result.written == {temp_dir / "locales" / "de.json": export_path}
        assert not result.errors.has_errors
        data = json.loads(export_path.read_text(encoding="utf-8"))
        assert data == {"a": "A", "c": "C"}
        assert list(data) == ["a", "c"]

    def test_nested_value_copied(self, temp_dir, base):
        export_missing({temp_dir / "fr.json": ["b"]}, base, temp_dir / "out")

        data = json.loads((temp_dir / "out" / "fr_missing.json").read_text(encoding="utf-8"))
        assert data == {"b": {"nested": True}}

    def test_skips_complete_locales(self, temp_dir, base):
        result = export_missing({temp_dir / "fr.json": []}, base, temp_dir / "out")

        assert result.written == {}
        assert list((temp_dir / "out").iterdir()) == []

    def test_custom_suffix(self, temp_dir, base):
        export_missing({temp_dir / "fr.json": ["a"]}, base, temp_dir / "out", suffix=".todo")

        assert (temp_dir / "out" / "fr.todo.json").exists()

    def test_output_dir_not_creatable(self, temp_dir, base, create_test_file):
        blocker = create_test_file("blocker", "not a directory")

        with pytest.raises(IoError, match="Failed to create export directory"):
            export_missing({temp_dir / "fr.json": ["a"]}, base, blocker / "out")

    def test_one_failure_does_not_stop_others(self, temp_dir, base):
        real_write = exporter.write_text_atomic

        def failing_write(path, text):
            if path.name == "de_missing.json":
                raise IoError(f"Failed to write {path}: denied", path=path, operation="write")
            real_write(path, text)

        report = {temp_dir / "de.json": ["a"], temp_dir / "fr.json": ["c"]}
        with patch.object(exporter, "write_text_atomic", side_effect=failing_write):
            result = export_missing(report, base, temp_dir / "out")

        assert list(result.written) == [temp_dir / "fr.json"]
        assert len(result.errors.errors) == 1
        assert next(iter(result.errors)).path.name == "de_missing.json"
        assert (temp_dir / "out" / "fr_missing.json").exists()
