# ==============================================
# Integration Tests
# ==============================================
#
# These tests run the whole inspection end-to-end:
# file → source → ProfileTable → diagnostics → report / CLI.
# ==============================================

import pytest

from datainspect.analysis import ColumnKind
from datainspect.cli import main
from datainspect.config import AppConfig, ProfilingConfig, get_config
from datainspect.errors import MalformedRowError, UnsupportedFileTypeError
from datainspect.inspector import DataInspector
from datainspect.reporter import Reporter

FULL_CSV_REPORT = """\
File type: CSV
Rows: 3
Columns:
  - id
  - name
  - score
Inferred types:
  - id: integer
  - name: string
  - score: float
Summary:
  - id (integer): count=3 min=1 max=3 mean=2 stddev=1
  - name (string): count=3 unique=2
  - score (float): count=2 min=3.5 max=4.5 mean=4 stddev=0.7071067811865476 missing=1
Diagnostics:
  - id: ok
  - name: ok
  - score: missing values: 33%"""


class TestDataInspector:
    def test_inspect_csv(self, sample_csv, config):
        result = DataInspector(config).inspect(sample_csv)
        assert result.file_type == "CSV"
        assert result.header == ["id", "name", "score"]
        assert result.row_count == 3
        assert result.table.is_finalized
        assert [p.kind for p in result.table.profiles()] == [
            ColumnKind.NUMERIC, ColumnKind.CATEGORICAL, ColumnKind.NUMERIC,
        ]
        assert [d.summary() for d in result.diagnoses] == ["ok", "ok", "missing values: 33%"]
        assert result.field_types == {}

    def test_inspect_json(self, sample_json, config):
        result = DataInspector(config).inspect(sample_json)
        assert result.file_type == "JSON"
        assert result.row_count == 2
        assert result.field_types["active"] == "boolean"
        active = result.table.get(2)
        assert active.inferred_type == "boolean"
        note = result.table.get(5)
        assert note.missing == 1

    def test_source_errors_propagate(self, write_file, config):
        """No partial result when a row is malformed."""
        path = write_file("bad.csv", "a,b\n1,2\n3\n")
        with pytest.raises(MalformedRowError):
            DataInspector(config).inspect(path)

    def test_unsupported_file(self, write_file, config):
        with pytest.raises(UnsupportedFileTypeError):
            DataInspector(config).inspect(write_file("notes.txt", "hello"))

    def test_outlier_threshold_from_config(self):
        inspector = DataInspector(AppConfig(profiling=ProfilingConfig(outlier_z_threshold=3.0)))
        table = inspector.profile_rows(["v"], [["1"], ["2"], ["3"], ["5"]])
        assert table.get(0).outlier_count == 1
        assert inspector.diagnose(table)[0].warnings == [
            "extreme outliers detected: 1 values >= 3σ"
        ]

    def test_scenario_promotion_end_to_end(self, write_file, config):
        path = write_file("late.csv", 'v\n""\n""\n5\n6\n')
        result = DataInspector(config).inspect(path)
        profile = result.table.get(0)
        assert result.row_count == 4
        assert profile.missing == 2
        assert profile.kind == ColumnKind.NUMERIC
        assert profile.mean == pytest.approx(5.5)


class TestReporter:
    def test_full_csv_report(self, sample_csv, config):
        result = DataInspector(config).inspect(sample_csv)
        text = Reporter().render(result, show_types=True, show_summary=True, show_diagnostics=True)
        assert text == FULL_CSV_REPORT

    def test_plain_csv_report(self, sample_csv, config):
        result = DataInspector(config).inspect(sample_csv)
        assert Reporter().render(result) == (
            "File type: CSV\nRows: 3\nColumns:\n  - id\n  - name\n  - score"
        )

    def test_json_report_with_types(self, sample_json, config):
        result = DataInspector(config).inspect(sample_json)
        lines = Reporter().render(result, show_types=True).splitlines()
        assert lines[:4] == ["File type: JSON", "Records: 2", "Fields:", "  - id: integer"]
        assert "  - note: null" in lines

    def test_unvisited_columns(self, write_file, config):
        """A header with no rows reports unknown types and clean diagnostics."""
        result = DataInspector(config).inspect(write_file("h.csv", "a,b\n"))
        text = Reporter().render(result, show_types=True, show_summary=True, show_diagnostics=True)
        assert "  - a: unknown" in text
        assert "  - b (unknown): count=0" in text
        assert "  - b: ok" in text

    def test_numeric_failures_and_outliers_in_summary(self, write_file, config):
        path = write_file("n.csv", "v\n1\n2\n3\nx\n100\n")
        result = DataInspector(config).inspect(path)
        text = Reporter().render(result, show_summary=True)
        assert "failures=1" in text
        assert "outliers=1" in text


class TestCli:
    def test_prints_report(self, sample_csv, capsys):
        code = main(["--types", "--summary", "--diagnostics", str(sample_csv)])
        assert code == 0
        assert capsys.readouterr().out.rstrip("\n") == FULL_CSV_REPORT

    def test_unsupported_file_type(self, write_file, capsys):
        code = main([str(write_file("notes.txt", "hello"))])
        assert code == 1
        assert "error: Unsupported file type: txt" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        code = main([str(tmp_path / "missing.csv")])
        assert code == 1
        assert capsys.readouterr().err.startswith("error: ")

    def test_no_file_argument(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_delimiter_option(self, write_file, capsys):
        path = write_file("semi.csv", "a;b\n1;x\n")
        assert main(["--types", "--delimiter", ";", str(path)]) == 0
        out = capsys.readouterr().out
        assert "  - a: integer" in out
        assert "  - b: string" in out
        # The cached config is not modified by the command line
        assert get_config().reader.delimiter == ","

    def test_env_thresholds(self, write_file, capsys, monkeypatch):
        monkeypatch.setenv("DATAINSPECT_MAX_MISSING_RATIO", "0.5")
        path = write_file("m.csv", 'a\n1\n""\n3\n')
        assert main(["--diagnostics", str(path)]) == 0
        assert "  - a: ok" in capsys.readouterr().out
