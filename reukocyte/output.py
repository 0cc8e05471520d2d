"""Inspection results in the JSON format RuboCop produces."""

from __future__ import annotations

import enum
import json
import sys
from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass, field
from typing import Any, Protocol

_VERSION = "0.0.1"

_PLATFORMS = {"darwin": "macos", "win32": "windows"}


class DiagnosticLike(Protocol):
    severity: Any
    message: str
    rule: Any
    fix: Any
    line_start: int
    column_start: int
    line_end: int
    column_end: int
    start: int
    end: int


def _platform() -> str:
    name = sys.platform
    if name.startswith("linux"):
        return "linux"
    return _PLATFORMS.get(name, name)


@dataclass
class Metadata:
    """Information about the inspection; the Ruby fields are fixed values."""

    rubocop_version: str = f"reuko {_VERSION}"
    ruby_engine: str = "ruby"
    ruby_version: str = "3.0.0"
    ruby_patchlevel: str = "0"
    ruby_platform: str = field(default_factory=_platform)


@dataclass
class Location:
    start_line: int
    start_column: int
    last_line: int
    last_column: int
    length: int
    line: int
    column: int


@dataclass
class Offense:
    severity: str
    message: str
    cop_name: str
    corrected: bool
    correctable: bool
    location: Location


@dataclass
class FileOffenses:
    path: str
    offenses: list[Offense]


@dataclass
class Summary:
    offense_count: int
    target_file_count: int
    inspected_file_count: int


def _severity_name(severity: Any) -> str:
    if isinstance(severity, enum.Enum):
        return str(severity.value)
    return str(severity)


def _cop_name(rule: Any) -> str:
    return str(rule() if callable(rule) else rule)


def _offense(diagnostic: DiagnosticLike) -> Offense:
    return Offense(
        severity=_severity_name(diagnostic.severity),
        message=diagnostic.message,
        cop_name=_cop_name(diagnostic.rule),
        corrected=False,
        correctable=diagnostic.fix is not None,
        location=Location(
            start_line=diagnostic.line_start,
            start_column=diagnostic.column_start,
            last_line=diagnostic.line_end,
            last_column=diagnostic.column_end,
            length=max(diagnostic.end - diagnostic.start, 0),
            line=diagnostic.line_start,
            column=diagnostic.column_start,
        ),
    )


class JsonOutput:
    """The JSON report: metadata, offenses per file, and a summary."""

    def __init__(
        self,
        file_results: Mapping[str, Sequence[DiagnosticLike]],
        corrected_counts: Mapping[str, int],
    ) -> None:
        total = 0
        files: list[FileOffenses] = []
        for path, diagnostics in file_results.items():
            offenses = [_offense(diagnostic) for diagnostic in diagnostics]
            total += len(offenses) + corrected_counts.get(path, 0)
            files.append(FileOffenses(path=path, offenses=offenses))
        files.sort(key=lambda entry: entry.path)

        self.metadata = Metadata()
        self.files = files
        self.summary = Summary(
            offense_count=total,
            target_file_count=len(file_results),
            inspected_file_count=len(file_results),
        )

    def to_dict(self) -> dict[str, Any]:
        """The report as plain dictionaries and lists."""
        return {
            "metadata": asdict(self.metadata),
            "files": [asdict(entry) for entry in self.files],
            "summary": asdict(self.summary),
        }

    def to_json(self) -> str:
        """The report as compact JSON."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)