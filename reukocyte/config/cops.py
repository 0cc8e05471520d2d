"""Configuration of each cop, read from its section of a ``.rubocop.yml`` file."""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any, TypeVar

from reukocyte.config.base import BaseCopConfig, Severity

_E = TypeVar("_E", bound=enum.Enum)
_C = TypeVar("_C", bound="CopConfig")


class AccessModifierStyle(enum.Enum):
    INDENT = "indent"
    OUTDENT = "outdent"


class BeginEndAlignWith(enum.Enum):
    START_OF_LINE = "start_of_line"
    BEGIN = "begin"


class DefEndAlignWith(enum.Enum):
    START_OF_LINE = "start_of_line"
    DEF = "def"


class EndAlignWith(enum.Enum):
    KEYWORD = "keyword"
    VARIABLE = "variable"
    START_OF_LINE = "start_of_line"


class IndentationConsistencyStyle(enum.Enum):
    NORMAL = "normal"
    INDENTED_INTERNAL_METHODS = "indented_internal_methods"


class IndentationStyleKind(enum.Enum):
    SPACES = "spaces"
    TABS = "tabs"


class TrailingEmptyLinesStyle(enum.Enum):
    FINAL_NEWLINE = "final_newline"
    FINAL_BLANK_LINE = "final_blank_line"


def _enum(kind: type[_E]) -> Callable[[Any], _E]:
    def convert(value: Any) -> _E:
        try:
            return kind(value)
        except ValueError:
            choices = ", ".join(member.value for member in kind)
            raise ValueError(f"unknown {kind.__name__} {value!r}; expected one of: {choices}") from None

    return convert


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _unsigned(value: Any) -> int:
    if not _is_int(value) or value < 0:
        raise ValueError(f"expected a non-negative integer, not {value!r}")
    return value


def _optional_unsigned(value: Any) -> int | None:
    return None if value is None else _unsigned(value)


def _i32(value: Any) -> int:
    if not _is_int(value) or not -(2**31) <= value < 2**31:
        raise ValueError(f"expected a 32-bit integer, not {value!r}")
    return value


def _i32_list(value: Any) -> list[int]:
    if not isinstance(value, list):
        raise TypeError(f"expected a list of integers, not {value!r}")
    return [_i32(item) for item in value]


def _option(key: str, convert: Callable[[Any], Any], **kwargs: Any) -> Any:
    return field(metadata={"key": key, "convert": convert}, **kwargs)


def _base(severity: Severity = Severity.CONVENTION) -> Any:
    return field(default_factory=lambda: BaseCopConfig.with_severity(severity))


@dataclass
class CopConfig:
    """A cop's settings: the shared base plus options declared by subclasses."""

    base: BaseCopConfig = _base()

    @classmethod
    def from_mapping(cls: type[_C], data: Mapping[str, Any] | None) -> _C:
        """Build the configuration from a cop's YAML section; missing keys keep defaults."""
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise TypeError(f"cop configuration must be a mapping, not {data!r}")
        defaults = cls()
        values: dict[str, Any] = {"base": BaseCopConfig.from_mapping(data, defaults.base)}
        for option in fields(cls):
            key = option.metadata.get("key")
            if key is not None and key in data:
                values[option.name] = option.metadata["convert"](data[key])
        return cls(**values)


@dataclass
class AccessModifierIndentation(CopConfig):
    """Layout/AccessModifierIndentation."""

    enforced_style: AccessModifierStyle = _option(
        "EnforcedStyle", _enum(AccessModifierStyle), default=AccessModifierStyle.INDENT
    )
    indentation_width: int | None = _option("IndentationWidth", _optional_unsigned, default=None)


@dataclass
class BeginEndAlignment(CopConfig):
    """Layout/BeginEndAlignment."""

    base: BaseCopConfig = _base(Severity.WARNING)
    enforced_style_align_with: BeginEndAlignWith = _option(
        "EnforcedStyleAlignWith", _enum(BeginEndAlignWith), default=BeginEndAlignWith.START_OF_LINE
    )


@dataclass
class DefEndAlignment(CopConfig):
    """Layout/DefEndAlignment."""

    base: BaseCopConfig = _base(Severity.WARNING)
    enforced_style_align_with: DefEndAlignWith = _option(
        "EnforcedStyleAlignWith", _enum(DefEndAlignWith), default=DefEndAlignWith.START_OF_LINE
    )


@dataclass
class EmptyLines(CopConfig):
    """Layout/EmptyLines."""


@dataclass
class EndAlignment(CopConfig):
    """Layout/EndAlignment."""

    base: BaseCopConfig = _base(Severity.WARNING)
    enforced_style_align_with: EndAlignWith = _option(
        "EnforcedStyleAlignWith", _enum(EndAlignWith), default=EndAlignWith.KEYWORD
    )


@dataclass
class IndentationConsistency(CopConfig):
    """Layout/IndentationConsistency."""

    enforced_style: IndentationConsistencyStyle = _option(
        "EnforcedStyle", _enum(IndentationConsistencyStyle), default=IndentationConsistencyStyle.NORMAL
    )


@dataclass
class IndentationStyle(CopConfig):
    """Layout/IndentationStyle."""

    enforced_style: IndentationStyleKind = _option(
        "EnforcedStyle", _enum(IndentationStyleKind), default=IndentationStyleKind.SPACES
    )
    indentation_width: int = _option("IndentationWidth", _unsigned, default=2)


@dataclass
class IndentationWidth(CopConfig):
    """Layout/IndentationWidth."""

    width: int = _option("Width", _i32, default=2)
    allowed_patterns: list[int] = _option("AllowedPatterns", _i32_list, default_factory=list)


@dataclass
class LeadingEmptyLines(CopConfig):
    """Layout/LeadingEmptyLines."""


@dataclass
class TrailingEmptyLines(CopConfig):
    """Layout/TrailingEmptyLines."""

    enforced_style: TrailingEmptyLinesStyle = _option(
        "EnforcedStyle", _enum(TrailingEmptyLinesStyle), default=TrailingEmptyLinesStyle.FINAL_NEWLINE
    )


@dataclass
class TrailingWhitespace(CopConfig):
    """Layout/TrailingWhitespace."""


@dataclass
class Debugger(CopConfig):
    """Lint/Debugger."""

    base: BaseCopConfig = _base(Severity.WARNING)


@dataclass
class LayoutConfig:
    """Settings of all layout cops."""

    access_modifier_indentation: AccessModifierIndentation = field(default_factory=AccessModifierIndentation)
    begin_end_alignment: BeginEndAlignment = field(default_factory=BeginEndAlignment)
    def_end_alignment: DefEndAlignment = field(default_factory=DefEndAlignment)
    empty_lines: EmptyLines = field(default_factory=EmptyLines)
    end_alignment: EndAlignment = field(default_factory=EndAlignment)
    indentation_consistency: IndentationConsistency = field(default_factory=IndentationConsistency)
    indentation_style: IndentationStyle = field(default_factory=IndentationStyle)
    indentation_width: IndentationWidth = field(default_factory=IndentationWidth)
    leading_empty_lines: LeadingEmptyLines = field(default_factory=LeadingEmptyLines)
    trailing_empty_lines: TrailingEmptyLines = field(default_factory=TrailingEmptyLines)
    trailing_whitespace: TrailingWhitespace = field(default_factory=TrailingWhitespace)


@dataclass
class LintConfig:
    """Settings of all lint cops."""

    debugger: Debugger = field(default_factory=Debugger)