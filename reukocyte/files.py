"""Finding the Ruby files to inspect."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

RUBY_EXTENSIONS = frozenset({
    "rb", "arb", "axlsx", "builder", "fcgi", "gemfile", "gemspec", "god", "jb",
    "jbuilder", "mspec", "opal", "pluginspec", "podspec", "rabl", "rake", "rbuild",
    "rbw", "rbx", "ru", "ruby", "schema", "spec", "thor", "watchr",
})

RUBY_FILENAMES = frozenset({
    ".irbrc", ".pryrc", ".simplecov",
    "buildfile", "Appraisals", "Berksfile", "Brewfile", "Buildfile", "Capfile",
    "Cheffile", "Dangerfile", "Deliverfile", "Fastfile", "Gemfile", "Guardfile",
    "Jarfile", "Mavenfile", "Podfile", "Puppetfile", "Rakefile", "rakefile",
    "Schemafile", "Snapfile", "Steepfile", "Thorfile", "Vagabondfile", "Vagrantfile",
})

EXCLUDED_DIRS = frozenset({".git", "node_modules", "tmp", "vendor"})


class GlobError(ValueError):
    """A glob pattern is malformed."""


def _char_class(pattern: str, start: int) -> tuple[int, str]:
    j = start + 1
    negate = j < len(pattern) and pattern[j] == "!"
    if negate:
        j += 1
    body_start = j
    if j < len(pattern) and pattern[j] == "]":
        j += 1
    while j < len(pattern) and pattern[j] != "]":
        j += 1
    if j >= len(pattern):
        raise GlobError(f"unclosed character class in {pattern!r}")
    body = "".join("-" if ch == "-" else re.escape(ch) for ch in pattern[body_start:j])
    return j + 1, f"[{'^' if negate else ''}{body}]"


def _translate(pattern: str) -> str:
    if pattern == "**":
        return ".*"
    parts: list[str] = []
    n = len(pattern)
    i = 0
    in_group = False
    if pattern.startswith("**/"):
        parts.append("(?:.*/)?")
        i = 3
    while i < n:
        c = pattern[i]
        if (
            c == "/"
            and not in_group
            and pattern.startswith("/**", i)
            and (i + 3 == n or pattern[i + 3] == "/")
        ):
            if i + 3 == n:
                parts.append("/.*")
                break
            parts.append("/(?:.*/)?")
            i += 4
            continue
        if c == "[":
            i, cls = _char_class(pattern, i)
            parts.append(cls)
            continue
        if c == "*":
            parts.append(".*")
        elif c == "?":
            parts.append(".")
        elif c == "{":
            if in_group:
                raise GlobError(f"nested alternate groups in {pattern!r}")
            in_group = True
            parts.append("(?:")
        elif c == "}":
            if not in_group:
                raise GlobError(f"unopened alternate group in {pattern!r}")
            in_group = False
            parts.append(")")
        elif c == "," and in_group:
            parts.append("|")
        elif c == "\\":
            if i + 1 == n:
                raise GlobError(f"dangling escape in {pattern!r}")
            i += 1
            parts.append(re.escape(pattern[i]))
        else:
            parts.append(re.escape(c))
        i += 1
    if in_group:
        raise GlobError(f"unclosed alternate group in {pattern!r}")
    return "".join(parts)


def _path_text(path: str | os.PathLike[str]) -> str:
    text = os.fspath(path)
    if os.sep != "/":
        text = text.replace(os.sep, "/")
    return text


class GlobSet:
    """A set of glob patterns; ``*`` also matches across ``/``. Invalid patterns are skipped."""

    def __init__(self, patterns: Iterable[str]) -> None:
        self._regexes: list[re.Pattern[str]] = []
        for pattern in patterns:
            try:
                self._regexes.append(re.compile(_translate(pattern), re.DOTALL))
            except (GlobError, re.error):
                continue

    def __len__(self) -> int:
        return len(self._regexes)

    def is_match(self, path: str | os.PathLike[str]) -> bool:
        """Whether the path matches any pattern."""
        text = _path_text(path)
        return any(regex.fullmatch(text) for regex in self._regexes)


def build_exclude_matcher(patterns: Sequence[str]) -> GlobSet | None:
    """A matcher for exclude patterns, or ``None`` when there are none."""
    if not patterns:
        return None
    return GlobSet(patterns)


def is_excluded_by_pattern(path: str | os.PathLike[str], matcher: GlobSet | None) -> bool:
    """Whether the path matches an exclude pattern, as given, relative to the
    current directory, or without a leading ``./``."""
    if matcher is None:
        return False
    if matcher.is_match(path):
        return True
    candidate = Path(path)
    if candidate.is_absolute():
        try:
            relative = candidate.relative_to(Path.cwd())
        except ValueError:
            pass
        else:
            if matcher.is_match(relative):
                return True
    text = _path_text(path)
    return text.startswith("./") and matcher.is_match(text[2:])


def is_ruby_file(path: str | os.PathLike[str]) -> bool:
    """Whether the file is Ruby, judged by its extension or its name."""
    candidate = Path(path)
    extension = candidate.suffix[1:]
    return extension in RUBY_EXTENSIONS or candidate.name in RUBY_FILENAMES


def _walk_directory(directory: Path, matcher: GlobSet | None) -> Iterator[Path]:
    if directory.name in EXCLUDED_DIRS:
        return
    seen: set[str] = set()
    for root, dirnames, filenames in os.walk(directory, followlinks=True):
        real = os.path.realpath(root)
        if real in seen:
            dirnames[:] = []
            continue
        seen.add(real)
        dirnames[:] = sorted(name for name in dirnames if name not in EXCLUDED_DIRS)
        for name in sorted(filenames):
            path = Path(root, name)
            if path.is_file() and is_ruby_file(path) and not is_excluded_by_pattern(path, matcher):
                yield path


def collect_ruby_files(
    paths: Iterable[str | os.PathLike[str]], exclude_patterns: Sequence[str]
) -> list[Path]:
    """All Ruby files among the given files and, recursively, directories.

    ``.gitignore`` is not consulted; use exclude patterns instead.
    """
    matcher = build_exclude_matcher(exclude_patterns)
    files: list[Path] = []
    for item in paths:
        path = Path(item)
        if path.is_file():
            if is_ruby_file(path) and not is_excluded_by_pattern(item, matcher):
                files.append(path)
        elif path.is_dir():
            files.extend(_walk_directory(path, matcher))
    return files