"""
Tests for OutputFormatter rendering.

Covers table layout (widths, truncation, empty input), detail fields and
JSON passthrough.
"""

import copy
import json
import re

from rich.text import Text

from vercel_cli.cli.formatters import (
    MAX_COLUMN_WIDTH,
    Column,
    OutputFormatter,
    compute_column_widths,
)


def output_lines(capsys):
    return capsys.readouterr().out.splitlines()


class TestColumnWidths:
    def test_width_covers_label_and_values(self):
        records = [{"name": "a"}, {"name": "abcdefgh"}]
        columns = [Column("name", "Name"), Column("id", "Identifier")]

        assert compute_column_widths(records, columns) == [8, 10]

    def test_width_is_capped(self):
        records = [{"name": "x" * 80}]
        assert compute_column_widths(records, [Column("name", "Name")]) == [MAX_COLUMN_WIDTH]

    def test_width_uses_formatted_value(self):
        records = [{"verified": True}]
        columns = [Column("verified", "V", lambda v, _: "yes, verified" if v else "no")]
        assert compute_column_widths(records, columns) == [13]

    def test_styled_values_measured_without_markup(self):
        records = [{"state": "READY"}]
        columns = [Column("state", "State", lambda v, _: Text(v, style="green"))]
        assert compute_column_widths(records, columns) == [5]

    def test_formatter_receives_whole_record(self):
        seen = []

        def fmt(value, record):
            seen.append((value, record))
            return str(value)

        records = [{"a": 1, "b": 2}]
        compute_column_widths(records, [Column("a", "A", fmt)])
        assert seen == [(1, {"a": 1, "b": 2})]


class TestTable:
    def test_empty_records_prints_only_notice(self, capsys):
        OutputFormatter().table([], [Column("name", "Name")])
        assert output_lines(capsys) == ["No results found."]

    def test_truncating_formatter_example(self, capsys):
        columns = [Column("name", "Name", lambda v, _: (v or "")[:5])]
        OutputFormatter().table([{"name": "alpha"}, {"name": "b"}], columns)

        lines = output_lines(capsys)
        assert lines[0] == "Name "
        assert lines[1] == "─" * 5
        assert lines[2] == "alpha"
        assert lines[3] == "b    "
        assert lines[-1] == "2 result(s)"

    def test_columns_aligned_with_two_space_separator(self, capsys):
        columns = [Column("id", "ID"), Column("name", "Name")]
        records = [{"id": "prj_1", "name": "web"}, {"id": "p2", "name": "docs-site"}]
        OutputFormatter().table(records, columns)

        lines = output_lines(capsys)
        assert lines[0] == "ID     Name     "
        assert lines[1] == "─" * len("ID     Name     ")
        assert lines[2] == "prj_1  web      "
        assert lines[3] == "p2     docs-site"

    def test_long_values_cut_without_ellipsis(self, capsys):
        value = "y" * 60
        OutputFormatter().table([{"name": value}], [Column("name", "Name")])

        row = output_lines(capsys)[2]
        assert row == "y" * MAX_COLUMN_WIDTH
        assert "..." not in row

    def test_missing_value_renders_empty(self, capsys):
        columns = [Column("name", "Name"), Column("framework", "Framework")]
        OutputFormatter().table([{"name": "web"}], columns)

        row = output_lines(capsys)[2]
        assert row == "web   " + " " * len("Framework")
        assert "None" not in row

    def test_input_not_mutated(self, capsys):
        records = [{"name": "alpha", "meta": {"a": 1}}]
        snapshot = copy.deepcopy(records)
        OutputFormatter().table(records, [Column("name", "Name", lambda v, _: v.upper())])
        assert records == snapshot

    def test_quiet_suppresses_table(self, capsys):
        OutputFormatter(quiet=True).table([{"name": "x"}], [Column("name", "Name")])
        assert capsys.readouterr().out == ""


class TestDetail:
    def test_field_alignment(self, capsys):
        fmt = OutputFormatter()
        fmt.field("ID", "prj_1")
        fmt.field("Install Command", "npm ci")

        lines = output_lines(capsys)
        assert lines[0] == "ID:" + " " * 14 + " prj_1"
        assert lines[1].index("npm ci") == lines[0].index("prj_1")

    def test_missing_field_shows_na(self, capsys):
        fmt = OutputFormatter()
        fmt.field("Framework", None)
        fmt.field("Build Command", "")

        out = capsys.readouterr().out
        assert re.search(r"^Framework:\s+N/A$", out, re.MULTILINE)
        assert re.search(r"^Build Command:\s+N/A$", out, re.MULTILINE)

    def test_zero_is_not_missing(self, capsys):
        OutputFormatter().field("Count", 0)
        assert output_lines(capsys)[0].endswith(" 0")

    def test_indented_field_keeps_value_column(self, capsys):
        fmt = OutputFormatter()
        fmt.field("Name", "web")
        fmt.field("Repo", "acme/web", indent=2)

        lines = output_lines(capsys)
        assert lines[1].startswith("  Repo:")
        assert lines[1].index("acme/web") == lines[0].index("web")

    def test_bullets(self, capsys):
        OutputFormatter().bullets("Aliases", ["https://a.vercel.app", "https://b.dev"])
        assert output_lines(capsys) == [
            "",
            "Aliases:",
            "  • https://a.vercel.app",
            "  • https://b.dev",
        ]

    def test_empty_bullets_suppressed(self, capsys):
        fmt = OutputFormatter()
        fmt.bullets("Aliases", [])
        fmt.bullets("Aliases", None)
        assert capsys.readouterr().out == ""

    def test_error_goes_to_stderr_even_when_quiet(self, capsys):
        OutputFormatter(quiet=True).error("API token not configured.")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "✗ API token not configured." in captured.err


class TestJson:
    def test_round_trip(self, capsys):
        payload = {
            "deployments": [{"uid": "dpl_1", "meta": {"x": None}, "alias": ["a"]}],
            "pagination": {"count": 1, "next": None},
        }
        OutputFormatter("json").output_json(payload)
        assert json.loads(capsys.readouterr().out) == payload

    def test_two_space_indent(self, capsys):
        OutputFormatter("json").output_json({"a": [1]})
        assert capsys.readouterr().out == '{\n  "a": [\n    1\n  ]\n}\n'

    def test_json_ignores_quiet(self, capsys):
        OutputFormatter("json", quiet=True).output_json([1, 2])
        assert json.loads(capsys.readouterr().out) == [1, 2]

    def test_non_ascii_preserved(self, capsys):
        OutputFormatter("json").output_json({"name": "café"})
        assert "café" in capsys.readouterr().out
