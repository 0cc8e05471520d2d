import pytest

from reukocyte.config.base import Severity
from reukocyte.config.cops import EndAlignWith
from reukocyte.config.loader import LoadError, load_rubocop_yaml, parse_rubocop_yaml
from reukocyte.config.yaml import merge_configs


def test_parse_simple():
    config = parse_rubocop_yaml("Layout/EndAlignment:\n  EnforcedStyleAlignWith: variable\n")
    assert config.end_alignment.enforced_style_align_with == EndAlignWith.VARIABLE


def test_merge_configs():
    parent = parse_rubocop_yaml(
        "Layout/EndAlignment:\n  Enabled: true\n  EnforcedStyleAlignWith: keyword\n"
    )
    child = parse_rubocop_yaml("Layout/EndAlignment:\n  EnforcedStyleAlignWith: variable\n")
    merged = merge_configs(parent, child)
    assert merged.end_alignment.base.enabled is True
    assert merged.end_alignment.enforced_style_align_with == EndAlignWith.VARIABLE


def test_merge_all_cops():
    parent = parse_rubocop_yaml("AllCops:\n  TargetRubyVersion: 3.1\n  Exclude:\n    - vendor/**/*\n")
    child = parse_rubocop_yaml("AllCops:\n  TargetRubyVersion: 3.2\n")
    merged = merge_configs(parent, child)
    assert merged.all_cops.target_ruby_version == "3.2"
    assert len(merged.all_cops.exclude) == 1


def test_enabled_false():
    config = parse_rubocop_yaml("Layout/EndAlignment:\n  Enabled: false\n")
    assert config.end_alignment.base.enabled is False


def test_invalid_yaml_raises():
    with pytest.raises(LoadError):
        parse_rubocop_yaml("Layout/EndAlignment: [unclosed\n")


def test_invalid_value_raises():
    with pytest.raises(LoadError):
        parse_rubocop_yaml("Layout/EndAlignment:\n  EnforcedStyleAlignWith: sideways\n")


def test_missing_file_raises(tmp_path):
    with pytest.raises(LoadError):
        load_rubocop_yaml(tmp_path / "absent.yml")


def test_load_with_inheritance(tmp_path):
    (tmp_path / "base.yml").write_text("AllCops:\n  Exclude:\n    - vendor/**/*\n  TargetRubyVersion: 3.0\n")
    main = tmp_path / ".rubocop.yml"
    main.write_text(
        "inherit_from: base.yml\nAllCops:\n  TargetRubyVersion: 3.3\nLint/Debugger:\n  Severity: error\n"
    )
    config = load_rubocop_yaml(main)
    assert config.all_cops.exclude == ["vendor/**/*"]
    assert config.all_cops.target_ruby_version == "3.3"
    assert config.debugger.base.severity == Severity.ERROR


def test_missing_inherited_file_is_skipped(tmp_path):
    main = tmp_path / ".rubocop.yml"
    main.write_text("inherit_from:\n  - nowhere.yml\nAllCops:\n  NewCops: enable\n")
    config = load_rubocop_yaml(main)
    assert config.all_cops.new_cops == "enable"


def test_broken_inherited_file_is_skipped(tmp_path):
    (tmp_path / "broken.yml").write_text("AllCops: [oops\n")
    main = tmp_path / ".rubocop.yml"
    main.write_text("inherit_from: broken.yml\nAllCops:\n  UseCache: false\n")
    config = load_rubocop_yaml(main)
    assert config.all_cops.use_cache is False


def test_circular_inheritance_is_ignored(tmp_path):
    (tmp_path / "a.yml").write_text("inherit_from: b.yml\n")
    (tmp_path / "b.yml").write_text("inherit_from: a.yml\nAllCops:\n  Exclude:\n    - db/**/*\n")
    config = load_rubocop_yaml(tmp_path / "a.yml")
    assert config.all_cops.exclude == ["db/**/*"]