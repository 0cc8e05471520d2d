"""Settings shared by every cop and helpers for reading them from YAML data."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any


class Severity(enum.Enum):
    """Severity of an offense, from least to most severe."""

    REFACTOR = "refactor"
    CONVENTION = "convention"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


_SEVERITY_NAMES = {
    "refactor": Severity.REFACTOR,
    "r": Severity.REFACTOR,
    "convention": Severity.CONVENTION,
    "c": Severity.CONVENTION,
    "warning": Severity.WARNING,
    "w": Severity.WARNING,
    "error": Severity.ERROR,
    "e": Severity.ERROR,
    "fatal": Severity.FATAL,
    "f": Severity.FATAL,
}


def parse_severity(s: str) -> Severity:
    """Parse a severity name or its one-letter code; unknown names mean warning."""
    return _SEVERITY_NAMES.get(s.lower(), Severity.WARNING)


def parse_enabled(value: Any) -> bool:
    """Read an ``Enabled`` value, which is a boolean or a string such as ``pending``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() != "false"
    raise TypeError(f"Enabled must be a boolean or a string, not {value!r}")


def _string_list(key: str, value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise TypeError(f"{key} must be a list of strings, not {value!r}")
    return list(value)


@dataclass
class BaseCopConfig:
    """Enabled flag, severity and file patterns that every cop carries."""

    enabled: bool = True
    severity: Severity = Severity.CONVENTION
    exclude: list[str] = field(default_factory=list)
    include: list[str] = field(default_factory=list)

    @classmethod
    def with_severity(cls, severity: Severity) -> BaseCopConfig:
        """A default configuration with the given severity."""
        return cls(severity=severity)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: BaseCopConfig | None = None) -> BaseCopConfig:
        """Read the shared keys from a cop's section, filling gaps from ``default``."""
        if not isinstance(data, Mapping):
            raise TypeError(f"cop configuration must be a mapping, not {data!r}")
        base = default if default is not None else cls()
        changes: dict[str, Any] = {
            "exclude": list(base.exclude),
            "include": list(base.include),
        }
        if "Enabled" in data:
            changes["enabled"] = parse_enabled(data["Enabled"])
        if "Severity" in data:
            value = data["Severity"]
            if not isinstance(value, str):
                raise TypeError(f"Severity must be a string, not {value!r}")
            changes["severity"] = parse_severity(value)
        if "Exclude" in data:
            changes["exclude"] = _string_list("Exclude", data["Exclude"])
        if "Include" in data:
            changes["include"] = _string_list("Include", data["Include"])
        return replace(base, **changes)