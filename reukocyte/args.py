"""Command-line options of the ``reuko`` command."""

from __future__ import annotations

import argparse
import enum
import os
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

_VERSION = "0.0.1"

_E = TypeVar("_E", bound=enum.Enum)


class OutputFormat(enum.Enum):
    """How offenses are reported."""

    JSON = "json"
    SIMPLE = "simple"
    QUIET = "quiet"
    PROGRESS = "progress"
    CLANG = "clang"
    EMACS = "emacs"
    GITHUB = "github"
    FILES = "files"


class Severity(enum.IntEnum):
    """Severity levels accepted by ``--fail-level``, from least to most severe."""

    INFO = 0
    REFACTOR = 1
    CONVENTION = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5


_FORMAT_ALIASES = {
    "j": OutputFormat.JSON,
    "s": OutputFormat.SIMPLE,
    "q": OutputFormat.QUIET,
    "p": OutputFormat.PROGRESS,
    "c": OutputFormat.CLANG,
    "e": OutputFormat.EMACS,
    "g": OutputFormat.GITHUB,
    "fi": OutputFormat.FILES,
}

_SEVERITY_ALIASES = {
    "I": Severity.INFO,
    "R": Severity.REFACTOR,
    "C": Severity.CONVENTION,
    "W": Severity.WARNING,
    "E": Severity.ERROR,
    "F": Severity.FATAL,
}


def _choice(kind: type[_E], aliases: Mapping[str, _E]) -> Callable[[str], _E]:
    lookup: dict[str, _E] = {member.name.lower(): member for member in kind}
    lookup.update(aliases)

    def convert(text: str) -> _E:
        try:
            return lookup[text]
        except KeyError:
            names = ", ".join(member.name.lower() for member in kind)
            raise argparse.ArgumentTypeError(
                f"invalid value {text!r} (possible values: {names})"
            ) from None

    convert.__name__ = kind.__name__
    return convert


def _split_list(text: str) -> list[str]:
    return text.split(",")


@dataclass
class Args:
    """Parsed command-line options."""

    files: list[Path] = field(default_factory=lambda: [Path(".")])
    autocorrect: bool = False
    autocorrect_all: bool = False
    only: list[str] | None = None
    except_: list[str] | None = None
    lint: bool = False
    fix_layout: bool = False
    safe: bool = False
    format: OutputFormat | None = None
    display_cop_names: bool = True
    no_display_cop_names: bool = False
    output_file: Path | None = None
    stderr: bool = False
    color: bool = False
    no_color: bool = False
    config: Path | None = None
    stdin: Path | None = None
    fail_level: Severity | None = None
    fail_fast: bool = False
    force_exclusion: bool = False
    parallel: bool = False
    no_parallel: bool = False
    debug: bool = False
    display_time: bool = False

    def should_fix(self) -> bool:
        """Whether any autocorrect mode (``-a``, ``-A`` or ``-x``) is on."""
        return self.autocorrect or self.autocorrect_all or self.fix_layout

    def unsafe_fixes(self) -> bool:
        """Whether unsafe fixes are applied too."""
        return self.autocorrect_all

    def output_format(self) -> OutputFormat:
        """The chosen output format, progress by default."""
        return self.format if self.format is not None else OutputFormat.PROGRESS

    def use_color(self) -> bool:
        """Whether to colour the output."""
        if self.no_color:
            return False
        if self.color:
            return True
        return "TERM" in os.environ

    def show_cop_names(self) -> bool:
        """Whether offense messages carry the cop name."""
        return not self.no_display_cop_names and self.display_cop_names


def build_parser() -> argparse.ArgumentParser:
    """The argument parser of the ``reuko`` command."""
    parser = argparse.ArgumentParser(
        prog="reuko",
        description="Reuko: an extremely fast Ruby linter (Reukocyte)",
        allow_abbrev=False,
    )
    parser.add_argument("-V", "--version", action="version", version=f"reuko {_VERSION}")
    parser.add_argument(
        "files", nargs="*", type=Path, metavar="FILE", default=None,
        help="List of files or directories to check",
    )

    fixing = parser.add_argument_group("autocorrection options")
    fixing.add_argument("-a", "--autocorrect", action="store_true",
                        help="Autocorrect offenses (only when it's safe)")
    fixing.add_argument("-A", "--autocorrect-all", dest="autocorrect_all", action="store_true",
                        help="Autocorrect offenses (safe and unsafe)")

    rules = parser.add_argument_group("rule selection options")
    rules.add_argument("--only", action="extend", type=_split_list, metavar="RULE1,RULE2,...",
                       default=None, help="Run only the given rule(s)")
    rules.add_argument("--except", dest="except_", action="extend", type=_split_list,
                       metavar="RULE1,RULE2,...", default=None, help="Exclude the given rule(s)")
    rules.add_argument("-l", "--lint", action="store_true", help="Run only lint rules")
    rules.add_argument("-x", "--fix-layout", dest="fix_layout", action="store_true",
                       help="Run only layout rules, with autocorrect on")
    rules.add_argument("--safe", action="store_true", help="Run only safe rules")

    output = parser.add_argument_group("output options")
    output.add_argument("-f", "--format", type=_choice(OutputFormat, _FORMAT_ALIASES),
                        metavar="FORMATTER", default=None, help="Choose an output formatter")
    output.add_argument("-D", "--display-cop-names", dest="display_cop_names",
                        action="store_true", default=True,
                        help="Display rule names in offense messages (default: true)")
    output.add_argument("--no-display-cop-names", dest="no_display_cop_names", action="store_true",
                        help="Do not display rule names in offense messages")
    output.add_argument("-o", "--out", dest="output_file", type=Path, metavar="FILE",
                        help="Write output to a file instead of STDOUT")
    output.add_argument("--stderr", action="store_true", help="Write all output to stderr")
    output.add_argument("--color", action="store_true", help="Force color output on or off")
    output.add_argument("--no-color", dest="no_color", action="store_true",
                        help="Disable color output")

    configuration = parser.add_argument_group("configuration options")
    configuration.add_argument("-c", "--config", type=Path, metavar="FILE",
                               help="Specify configuration file")
    configuration.add_argument("-s", "--stdin", type=Path, metavar="FILE",
                               help="Pipe source from STDIN, using FILE in offense reports")

    behaviour = parser.add_argument_group("behavior options")
    behaviour.add_argument("--fail-level", dest="fail_level",
                           type=_choice(Severity, _SEVERITY_ALIASES), metavar="SEVERITY",
                           help="Minimum severity for exit with error code")
    behaviour.add_argument("-F", "--fail-fast", dest="fail_fast", action="store_true",
                           help="Inspect files in order and stop after the first file with offenses")
    behaviour.add_argument("--force-exclusion", dest="force_exclusion", action="store_true",
                           help="Force exclusion of files specified in config")
    behaviour.add_argument("-P", "--parallel", action="store_true",
                           help="Use available CPUs to execute inspection in parallel")
    behaviour.add_argument("--no-parallel", dest="no_parallel", action="store_true",
                           help="Disable parallel execution")

    debugging = parser.add_argument_group("debug/info options")
    debugging.add_argument("-d", "--debug", action="store_true", help="Display debug info")
    debugging.add_argument("--display-time", dest="display_time", action="store_true",
                           help="Display elapsed time in seconds")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Args:
    """Parse command-line arguments, without the program name."""
    namespace = build_parser().parse_args(argv)
    values = vars(namespace)
    if not values["files"]:
        values["files"] = [Path(".")]
    return Args(**values)