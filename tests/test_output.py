import json
from dataclasses import dataclass
from typing import Any

from reukocyte.config.base import Severity
from reukocyte.corrector import Edit, Fix
from reukocyte.output import JsonOutput


@dataclass
class _Diagnostic:
    severity: Any
    message: str
    rule: str
    fix: Any
    line_start: int
    column_start: int
    line_end: int
    column_end: int
    start: int
    end: int


def _diag(message="Trailing whitespace detected.", fix=None, start=3, end=5):
    return _Diagnostic(
        severity=Severity.CONVENTION,
        message=message,
        rule="Layout/TrailingWhitespace",
        fix=fix,
        line_start=1,
        column_start=4,
        line_end=1,
        column_end=6,
        start=start,
        end=end,
    )


def test_json_output_empty():
    output = JsonOutput({}, {})
    assert output.summary.offense_count == 0
    assert output.files == []
    assert output.summary.target_file_count == 0


def test_offense_fields():
    fix = Fix.safe([Edit(3, 5, "")])
    output = JsonOutput({"a.rb": [_diag(fix=fix)]}, {})
    offense = output.files[0].offenses[0]
    assert offense.severity == "convention"
    assert offense.cop_name == "Layout/TrailingWhitespace"
    assert offense.correctable is True
    assert offense.corrected is False
    assert offense.location.length == 2
    assert offense.location.line == 1
    assert offense.location.column == 4


def test_length_never_negative():
    output = JsonOutput({"a.rb": [_diag(start=9, end=2)]}, {})
    assert output.files[0].offenses[0].location.length == 0


def test_files_sorted_and_counts_include_corrections():
    results = {"b.rb": [_diag()], "a.rb": [], "c.rb": [_diag(), _diag()]}
    output = JsonOutput(results, {"a.rb": 4})
    assert [entry.path for entry in output.files] == ["a.rb", "b.rb", "c.rb"]
    assert output.summary.offense_count == 7
    assert output.summary.target_file_count == 3
    assert output.summary.inspected_file_count == 3


def test_to_json_is_compact_and_ordered():
    output = JsonOutput({"a.rb": [_diag()]}, {})
    text = output.to_json()
    assert text.startswith('{"metadata":{"rubocop_version":"reuko ')
    assert ", " not in text.replace("Trailing whitespace detected.", "")
    data = json.loads(text)
    assert list(data) == ["metadata", "files", "summary"]
    assert data["files"][0]["offenses"][0]["correctable"] is False
    assert list(data["files"][0]["offenses"][0]["location"]) == [
        "start_line",
        "start_column",
        "last_line",
        "last_column",
        "length",
        "line",
        "column",
    ]
    assert data["metadata"]["ruby_engine"] == "ruby"
    assert data["summary"] == {
        "offense_count": 1,
        "target_file_count": 1,
        "inspected_file_count": 1,
    }