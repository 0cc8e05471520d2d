"""Loading ``.rubocop.yml`` files, following ``inherit_from`` references."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from reukocyte.config.yaml import RubocopYaml, merge_configs


class LoadError(Exception):
    """A configuration file could not be read or parsed."""


class CircularInheritanceError(LoadError):
    """A file inherits, directly or indirectly, from itself."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Circular inheritance detected: {path}")
        self.path = path


def parse_rubocop_yaml(content: str) -> RubocopYaml:
    """Parse configuration from YAML text."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as error:
        raise LoadError(f"YAML parsing error: {error}") from error
    try:
        return RubocopYaml.from_mapping(data)
    except (TypeError, ValueError) as error:
        raise LoadError(f"YAML parsing error: {error}") from error


def load_rubocop_yaml(path: str | os.PathLike[str]) -> RubocopYaml:
    """Load a configuration file and merge in every file it inherits from.

    Inherited files that are missing or fail to load are skipped.
    """
    return _load_with_inheritance(Path(path), set())


def _canonical(path: Path) -> Path:
    try:
        return path.resolve(strict=True)
    except OSError:
        return path


def _load_with_inheritance(path: Path, visited: set[Path]) -> RubocopYaml:
    canonical = _canonical(path)
    if canonical in visited:
        raise CircularInheritanceError(canonical)
    visited.add(canonical)

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise LoadError(f"IO error: {error}") from error
    config = parse_rubocop_yaml(content)

    base_dir = path.parent
    for inherit_path in config.inherit_from.to_paths():
        full_path = inherit_path if inherit_path.is_absolute() else base_dir / inherit_path
        if not full_path.exists():
            continue
        try:
            parent_config = _load_with_inheritance(full_path, visited)
        except LoadError:
            continue
        config = merge_configs(parent_config, config)
    return config