"""
Unit tests for console output and exit status.
"""

import io
from pathlib import Path

from cvr_i18n.errors import NoDefaultDirectoryError, ParseError
from cvr_i18n.reporter import ExitStatus, Reporter


def make_reporter():
    out, err = io.StringIO(), io.StringIO()
    return Reporter(out=out, err=err), out, err


class TestExitStatus:

    def test_strictest_wins(self):
        assert ExitStatus.combine([ExitStatus.OK, ExitStatus.ERROR, ExitStatus.FINDINGS]) == ExitStatus.ERROR
        assert ExitStatus.combine([ExitStatus.OK, ExitStatus.FINDINGS]) == ExitStatus.FINDINGS
        assert ExitStatus.combine([]) == ExitStatus.OK

    def test_values(self):
        assert [int(s) for s in ExitStatus] == [0, 1, 2]


class TestReporter:

    def test_duplicates(self):
        reporter, out, _ = make_reporter()

        reporter.duplicates(Path("de.json"), {"a": 2, "b": 3})

        assert out.getvalue() == "de.json: DUPLICATES:\n  a  (2 times)\n  b  (3 times)\n"

    def test_no_duplicates(self):
        reporter, out, _ = make_reporter()

        reporter.duplicates(Path("de.json"), {})

        assert out.getvalue() == "de.json: OK\n"

    def test_missing(self):
        reporter, out, _ = make_reporter()

        reporter.missing(Path("de.json"), ["a", "c"])
        reporter.missing(Path("fr.json"), [])

        assert out.getvalue() == "de.json: MISSING:\n  a\n  c\nfr.json: OK\n"

    def test_sorted(self):
        reporter, out, _ = make_reporter()

        reporter.sorted(Path("de.json"), True)
        reporter.sorted(Path("fr.json"), False)

        assert out.getvalue() == "Sorted de.json\nfr.json: already sorted\n"

    def test_error_names_path(self):
        reporter, out, err = make_reporter()

        reporter.error(ParseError("root is not an object", path="de.json"))

        assert out.getvalue() == ""
        assert err.getvalue() == "de.json: ERROR: root is not an object\n"

    def test_error_without_path(self):
        reporter, _, err = make_reporter()

        reporter.error(NoDefaultDirectoryError(["locales"]))

        assert err.getvalue().startswith("ERROR: No default directory found")
