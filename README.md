# reukocyte

Building blocks for a Ruby linter with RuboCop-compatible configuration and
output. The package provides:

- **Configuration** (`reukocyte.config`): reads `.rubocop.yml` files, follows
  `inherit_from` chains, merges parent and child settings, and exposes typed
  settings for each supported cop (eleven `Layout/*` cops and `Lint/Debugger`).
- **Autocorrection** (`reukocyte.corrector`): a `Corrector` that merges fixes,
  rejects edits that clobber each other, and applies the rest to source bytes.
- **Conflict tracking** (`reukocyte.conflict`): a `ConflictRegistry` that
  records which rules already had fixes applied in a pass, so incompatible
  rules can be held back for a later pass.
- **File discovery** (`reukocyte.files`): finds Ruby files by extension and
  well-known file name (`Gemfile`, `Rakefile`, ...), skips `.git`,
  `node_modules`, `tmp` and `vendor`, and honours exclude globs.
- **Command-line options** (`reukocyte.args`): a parser for the usual linter
  flags (`-a`, `-A`, `--only`, `--except`, `-f json`, `--fail-level`, ...).
- **JSON output** (`reukocyte.output`): a RuboCop-compatible JSON report.

Requires Python 3.10 or later and PyYAML.

## Configuration

```python
from reukocyte.config.loader import load_rubocop_yaml, parse_rubocop_yaml
from reukocyte.config.yaml import Config

yaml = parse_rubocop_yaml("""
AllCops:
  Exclude:
    - vendor/**/*
Layout/EndAlignment:
  EnforcedStyleAlignWith: variable
""")
config = Config.from_rubocop_yaml(yaml)
print(config.all_cops.exclude)                                  # ['vendor/**/*']
print(config.layout.end_alignment.enforced_style_align_with)    # EndAlignWith.VARIABLE

# Load a file on disk, resolving inherit_from references.
yaml = load_rubocop_yaml(".rubocop.yml")
```

- `Enabled` accepts booleans or strings; any string other than `"false"`
  (for example `pending`) counts as enabled.
- `Severity` accepts a name or one-letter code; unknown values fall back to
  `warning`.
- Unknown top-level sections are ignored; missing keys keep each cop's
  defaults.
- Invalid YAML, values of the wrong type and unknown style names raise
  `LoadError`, as do files that cannot be read.
- Inherited files are merged in the order listed: `AllCops` is merged key by
  key (the inheriting file wins), while each cop section is taken from the
  inheriting file. Inherited files that are missing, fail to load, or would
  make the chain circular are skipped.

## Autocorrection

```python
from reukocyte.corrector import ClobberingError, Corrector, Edit, Fix

corrector = Corrector()
corrector.merge(Fix.safe([Edit(0, 3, "AAA")]))
corrector.merge(Fix.safe([Edit(8, 11, "CCC")]))
print(corrector.apply(b"aaa bbb ccc"))   # b'AAA bbb CCC'

try:
    corrector.merge(Fix.safe([Edit(1, 9, "x")]))
except ClobberingError as err:
    print("skipped:", err)
```

A fix is merged whole or not at all. Conflicts raise one of
`DifferentReplacementsError`, `SwallowedInsertionError` or `OverlappingError`,
all subclasses of `ClobberingError`.

`should_apply_fix(fix, unsafe_fixes)` tells whether a fix is allowed: safe
fixes always, unsafe fixes only when asked for, display-only fixes never.

## Conflict tracking

```python
from reukocyte.conflict import ConflictRegistry

registry = ConflictRegistry({"Layout/A": ["Layout/B"]})
registry.mark_applied("Layout/B")
print(registry.conflicts_with_applied("Layout/A"))   # True
registry.clear()
```

Conflicts are checked in both directions.

## Finding files

```python
from reukocyte.files import collect_ruby_files, is_ruby_file

print(is_ruby_file("Gemfile"))           # True
files = collect_ruby_files(["."], ["db/schema.rb", "**/*.generated.rb"])
```

Exclude patterns are globs in which `*` also matches across `/`, `**/`
matches any leading directories, and `{a,b}` and `[...]` are supported;
malformed patterns are skipped. `.gitignore` is not consulted.

## Command-line options

```python
from reukocyte.args import parse_args

args = parse_args(["-A", "--only", "Layout/TrailingWhitespace,Lint/Debugger", "."])
print(args.should_fix(), args.unsafe_fixes())   # True True
print(args.only)            # ['Layout/TrailingWhitespace', 'Lint/Debugger']
print(args.output_format()) # OutputFormat.PROGRESS
```

`build_parser()` returns the underlying `argparse.ArgumentParser`.

## JSON report

`JsonOutput(file_results, corrected_counts)` takes a mapping of file paths to
remaining diagnostics and a mapping of file paths to the number of corrected
offenses. Each diagnostic is any object with `severity`, `message`, `rule`,
`fix`, `line_start`, `column_start`, `line_end`, `column_end`, `start` and
`end` attributes. `to_dict()` gives the report as plain data and `to_json()`
as compact JSON, with files sorted by path.

## What this package does not do

The package contains no Ruby parser and no cop implementations, so it does not
inspect Ruby source or produce diagnostics by itself, and it installs no
command: `reukocyte.args` parses options but nothing runs an inspection from
them. The pieces above are meant to be combined by a program that supplies the
checking.