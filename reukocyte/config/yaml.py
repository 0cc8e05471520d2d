"""The structure of a ``.rubocop.yml`` file and how inherited files are merged."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from reukocyte.config.cops import (
    AccessModifierIndentation,
    BeginEndAlignment,
    CopConfig,
    Debugger,
    DefEndAlignment,
    EmptyLines,
    EndAlignment,
    IndentationConsistency,
    IndentationStyle,
    IndentationWidth,
    LayoutConfig,
    LeadingEmptyLines,
    LintConfig,
    TrailingEmptyLines,
    TrailingWhitespace,
)

# YAML section name -> (attribute name, configuration class)
_COP_SECTIONS: dict[str, tuple[str, type[CopConfig]]] = {
    "Layout/AccessModifierIndentation": ("access_modifier_indentation", AccessModifierIndentation),
    "Layout/BeginEndAlignment": ("begin_end_alignment", BeginEndAlignment),
    "Layout/DefEndAlignment": ("def_end_alignment", DefEndAlignment),
    "Layout/EmptyLines": ("empty_lines", EmptyLines),
    "Layout/EndAlignment": ("end_alignment", EndAlignment),
    "Layout/IndentationConsistency": ("indentation_consistency", IndentationConsistency),
    "Layout/IndentationStyle": ("indentation_style", IndentationStyle),
    "Layout/IndentationWidth": ("indentation_width", IndentationWidth),
    "Layout/LeadingEmptyLines": ("leading_empty_lines", LeadingEmptyLines),
    "Layout/TrailingEmptyLines": ("trailing_empty_lines", TrailingEmptyLines),
    "Layout/TrailingWhitespace": ("trailing_whitespace", TrailingWhitespace),
    "Lint/Debugger": ("debugger", Debugger),
}


@dataclass(frozen=True)
class InheritFrom:
    """The files named by ``inherit_from``: none, one, or a list."""

    paths: tuple[str, ...] = ()

    @classmethod
    def from_value(cls, value: Any) -> InheritFrom:
        """Read ``inherit_from``, which is absent, a string or a list of strings."""
        if value is None:
            return cls()
        if isinstance(value, str):
            return cls((value,))
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return cls(tuple(value))
        raise TypeError(f"inherit_from must be a string or a list of strings, not {value!r}")

    def to_paths(self) -> list[Path]:
        """The inherited files as paths, in the order given."""
        return [Path(item) for item in self.paths]

    def is_empty(self) -> bool:
        """Whether no file is inherited."""
        return not self.paths


def _optional_str(key: str, value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeError(f"{key} must be a string, not {value!r}")
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    raise TypeError(f"{key} must be a string, not {value!r}")


def _optional_bool(key: str, value: Any) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    raise TypeError(f"{key} must be a boolean, not {value!r}")


def _str_list(key: str, value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise TypeError(f"{key} must be a list of strings, not {value!r}")
    return list(value)


@dataclass
class AllCopsConfig:
    """Global settings that apply to all cops."""

    target_ruby_version: str | None = None
    exclude: list[str] = field(default_factory=list)
    include: list[str] = field(default_factory=list)
    use_cache: bool | None = None
    cache_root_directory: str | None = None
    new_cops: str | None = None
    suggested_extensions: bool | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> AllCopsConfig:
        """Read the ``AllCops`` section."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise TypeError(f"AllCops must be a mapping, not {data!r}")
        return cls(
            target_ruby_version=_optional_str("TargetRubyVersion", data.get("TargetRubyVersion")),
            exclude=_str_list("Exclude", data.get("Exclude")),
            include=_str_list("Include", data.get("Include")),
            use_cache=_optional_bool("UseCache", data.get("UseCache")),
            cache_root_directory=_optional_str("CacheRootDirectory", data.get("CacheRootDirectory")),
            new_cops=_optional_str("NewCops", data.get("NewCops")),
            suggested_extensions=_optional_bool("SuggestedExtensions", data.get("SuggestedExtensions")),
        )


@dataclass
class RubocopYaml:
    """The contents of one ``.rubocop.yml`` file."""

    inherit_from: InheritFrom = field(default_factory=InheritFrom)
    all_cops: AllCopsConfig = field(default_factory=AllCopsConfig)
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
    debugger: Debugger = field(default_factory=Debugger)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> RubocopYaml:
        """Build from a parsed YAML document; unknown sections are ignored."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise TypeError(f"configuration must be a mapping, not {data!r}")
        values: dict[str, Any] = {
            "inherit_from": InheritFrom.from_value(data.get("inherit_from")),
            "all_cops": AllCopsConfig.from_mapping(data.get("AllCops")),
        }
        for section, (name, kind) in _COP_SECTIONS.items():
            if section in data:
                values[name] = kind.from_mapping(data[section])
        return cls(**values)


@dataclass
class Config:
    """The configuration the checker runs with."""

    all_cops: AllCopsConfig = field(default_factory=AllCopsConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    lint: LintConfig = field(default_factory=LintConfig)

    @classmethod
    def from_rubocop_yaml(cls, yaml: RubocopYaml) -> Config:
        """Take the cop settings out of a parsed configuration file."""
        layout = LayoutConfig(
            **{option.name: copy.deepcopy(getattr(yaml, option.name)) for option in fields(LayoutConfig)}
        )
        lint = LintConfig(
            **{option.name: copy.deepcopy(getattr(yaml, option.name)) for option in fields(LintConfig)}
        )
        return cls(all_cops=copy.deepcopy(yaml.all_cops), layout=layout, lint=lint)


def merge_all_cops(parent: AllCopsConfig, child: AllCopsConfig) -> AllCopsConfig:
    """Merge ``AllCops`` settings; values the child sets win."""

    def pick(child_value: Any, parent_value: Any) -> Any:
        return child_value if child_value is not None else parent_value

    return AllCopsConfig(
        target_ruby_version=pick(child.target_ruby_version, parent.target_ruby_version),
        exclude=list(child.exclude or parent.exclude),
        include=list(child.include or parent.include),
        use_cache=pick(child.use_cache, parent.use_cache),
        cache_root_directory=pick(child.cache_root_directory, parent.cache_root_directory),
        new_cops=pick(child.new_cops, parent.new_cops),
        suggested_extensions=pick(child.suggested_extensions, parent.suggested_extensions),
    )


def merge_configs(parent: RubocopYaml, child: RubocopYaml) -> RubocopYaml:
    """Merge an inherited configuration into the one that inherits it.

    ``AllCops`` is merged key by key; every cop section is taken from the child.
    """
    cops = {name: getattr(child, name) for name, _ in _COP_SECTIONS.values()}
    return RubocopYaml(
        inherit_from=child.inherit_from,
        all_cops=merge_all_cops(parent.all_cops, child.all_cops),
        **cops,
    )