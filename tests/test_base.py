import pytest

from reukocyte.config.base import BaseCopConfig, Severity, parse_enabled, parse_severity


@pytest.mark.parametrize(
    "name, expected",
    [
        ("refactor", Severity.REFACTOR),
        ("r", Severity.REFACTOR),
        ("Convention", Severity.CONVENTION),
        ("C", Severity.CONVENTION),
        ("warning", Severity.WARNING),
        ("w", Severity.WARNING),
        ("ERROR", Severity.ERROR),
        ("e", Severity.ERROR),
        ("fatal", Severity.FATAL),
        ("f", Severity.FATAL),
    ],
)
def test_parse_severity_names(name, expected):
    assert parse_severity(name) is expected


def test_parse_severity_unknown_is_warning():
    assert parse_severity("info") is Severity.WARNING
    assert parse_severity("") is Severity.WARNING


def test_parse_enabled_values():
    assert parse_enabled(True) is True
    assert parse_enabled(False) is False
    assert parse_enabled("pending") is True
    assert parse_enabled("FALSE") is False
    assert parse_enabled("true") is True


def test_parse_enabled_rejects_other_types():
    with pytest.raises(TypeError):
        parse_enabled(3)


def test_default_base_config():
    base = BaseCopConfig()
    assert base.enabled is True
    assert base.severity is Severity.CONVENTION
    assert base.exclude == []
    assert base.include == []


def test_with_severity_keeps_other_defaults():
    base = BaseCopConfig.with_severity(Severity.WARNING)
    assert base.severity is Severity.WARNING
    assert base.enabled is True
    assert base.exclude == [] and base.include == []


def test_from_mapping_reads_keys():
    base = BaseCopConfig.from_mapping(
        {"Enabled": False, "Severity": "error", "Exclude": ["a.rb"], "Include": ["b.rb", "c.rb"]}
    )
    assert base.enabled is False
    assert base.severity is Severity.ERROR
    assert base.exclude == ["a.rb"]
    assert base.include == ["b.rb", "c.rb"]


def test_from_mapping_falls_back_to_default():
    default = BaseCopConfig.with_severity(Severity.WARNING)
    base = BaseCopConfig.from_mapping({"Enabled": "pending", "Unknown": 1}, default)
    assert base.severity is Severity.WARNING
    assert base.enabled is True
    assert base == default


def test_from_mapping_does_not_share_lists_with_default():
    default = BaseCopConfig(exclude=["x.rb"])
    base = BaseCopConfig.from_mapping({}, default)
    base.exclude.append("y.rb")
    assert default.exclude == ["x.rb"]


def test_from_mapping_rejects_non_string_severity():
    with pytest.raises(TypeError):
        BaseCopConfig.from_mapping({"Severity": 5})


def test_from_mapping_rejects_bad_exclude():
    with pytest.raises(TypeError):
        BaseCopConfig.from_mapping({"Exclude": "vendor/**/*"})