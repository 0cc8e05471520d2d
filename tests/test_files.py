from pathlib import Path

import pytest

from reukocyte.files import (
    GlobSet,
    build_exclude_matcher,
    collect_ruby_files,
    is_excluded_by_pattern,
    is_ruby_file,
)


@pytest.mark.parametrize(
    "name",
    [
        "test.rb",
        "path/to/file.rake",
        "my_gem.gemspec",
        "config.ru",
        "view.jbuilder",
        "template.builder",
        "app.podspec",
    ],
)
def test_is_ruby_file_by_extension(name):
    assert is_ruby_file(Path(name)) is True


@pytest.mark.parametrize(
    "name",
    [
        "Gemfile",
        "Rakefile",
        "path/to/Gemfile",
        "Dangerfile",
        "Fastfile",
        "Steepfile",
        ".pryrc",
        ".irbrc",
        "rakefile",
    ],
)
def test_is_ruby_file_by_name(name):
    assert is_ruby_file(Path(name)) is True


@pytest.mark.parametrize("name", ["file.txt", "file.py", "Makefile", "test.RB"])
def test_non_ruby_files(name):
    assert is_ruby_file(Path(name)) is False


def test_build_exclude_matcher():
    assert build_exclude_matcher([]) is None
    matcher = build_exclude_matcher(["vendor/**/*", "db/schema.rb"])
    assert isinstance(matcher, GlobSet)
    assert len(matcher) == 2
    assert matcher.is_match("db/schema.rb") is True


def test_is_excluded_by_pattern():
    matcher = build_exclude_matcher(["vendor/**/*", "db/schema.rb", "**/*.generated.rb"])
    assert is_excluded_by_pattern(Path("vendor/gems/foo.rb"), matcher) is True
    assert is_excluded_by_pattern(Path("db/schema.rb"), matcher) is True
    assert is_excluded_by_pattern(Path("app/models/user.generated.rb"), matcher) is True
    assert is_excluded_by_pattern(Path("app/models/user.rb"), matcher) is False
    assert is_excluded_by_pattern(Path("vendor/gems/foo.rb"), None) is False


def test_leading_dot_slash_is_stripped():
    matcher = build_exclude_matcher(["db/schema.rb"])
    assert is_excluded_by_pattern("./db/schema.rb", matcher) is True


def test_absolute_path_matched_relative_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    matcher = build_exclude_matcher(["db/*.rb"])
    assert is_excluded_by_pattern(tmp_path / "db" / "schema.rb", matcher) is True


@pytest.mark.parametrize(
    "pattern, path, expected",
    [
        ("**", "a/b/c.rb", True),
        ("**/*.rb", "top.rb", True),
        ("a/**/b", "a/b", True),
        ("a/**/b", "a/x/y/b", True),
        ("*.rb", "dir/file.rb", True),
        ("file?.rb", "file1.rb", True),
        ("file?.rb", "file10.rb", False),
        ("[ab].rb", "a.rb", True),
        ("[!ab].rb", "a.rb", False),
        ("{spec,test}/*.rb", "test/x.rb", True),
        ("{spec,test}/*.rb", "lib/x.rb", False),
        ("vendor/**", "vendor", False),
    ],
)
def test_glob_semantics(pattern, path, expected):
    assert GlobSet([pattern]).is_match(path) is expected


def test_invalid_patterns_are_skipped():
    matcher = GlobSet(["[abc", "{a,b", "ok.rb"])
    assert len(matcher) == 1
    assert matcher.is_match("ok.rb") is True


def test_collect_ruby_files(tmp_path):
    (tmp_path / "app").mkdir()
    (tmp_path / "app" / "a.rb").write_text("")
    (tmp_path / "app" / "notes.txt").write_text("")
    (tmp_path / "Gemfile").write_text("")
    (tmp_path / "vendor").mkdir()
    (tmp_path / "vendor" / "v.rb").write_text("")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "n.rb").write_text("")

    files = collect_ruby_files([tmp_path], [])
    assert sorted(files) == sorted([tmp_path / "Gemfile", tmp_path / "app" / "a.rb"])


def test_collect_ruby_files_with_exclude(tmp_path):
    (tmp_path / "gen").mkdir()
    (tmp_path / "gen" / "x.generated.rb").write_text("")
    (tmp_path / "keep.rb").write_text("")
    files = collect_ruby_files([tmp_path], ["**/*.generated.rb"])
    assert files == [tmp_path / "keep.rb"]


def test_collect_single_files(tmp_path):
    ruby = tmp_path / "one.rb"
    ruby.write_text("")
    text = tmp_path / "two.txt"
    text.write_text("")
    missing = tmp_path / "missing.rb"
    assert collect_ruby_files([ruby, text, missing], []) == [ruby]