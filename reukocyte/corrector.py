"""Merging autocorrection fixes and applying them to source code."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field


class Applicability(enum.Enum):
    """How safe it is to apply a fix automatically."""

    SAFE = "safe"
    UNSAFE = "unsafe"
    DISPLAY_ONLY = "display_only"


@dataclass(frozen=True)
class Edit:
    """Replace the bytes ``start:end`` of the source with ``content``."""

    start: int
    end: int
    content: str = ""

    @property
    def is_insertion(self) -> bool:
        return self.start == self.end

    @property
    def is_deletion(self) -> bool:
        return not self.content


@dataclass(frozen=True)
class Fix:
    """A group of edits that together correct one offense."""

    applicability: Applicability
    edits: tuple[Edit, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "edits", tuple(self.edits))

    @classmethod
    def safe(cls, edits: Iterable[Edit]) -> Fix:
        """A fix that is always applied when correcting."""
        return cls(Applicability.SAFE, tuple(edits))

    @classmethod
    def unsafe(cls, edits: Iterable[Edit]) -> Fix:
        """A fix applied only when unsafe corrections are requested."""
        return cls(Applicability.UNSAFE, tuple(edits))

    @classmethod
    def display_only(cls, edits: Iterable[Edit]) -> Fix:
        """A fix that is shown but never applied."""
        return cls(Applicability.DISPLAY_ONLY, tuple(edits))


class ClobberingError(Exception):
    """A fix conflicts with edits already merged into the corrector."""


class DifferentReplacementsError(ClobberingError):
    """Two edits replace the same range with different content."""

    def __init__(self, range_: tuple[int, int], existing_content: str, new_content: str) -> None:
        super().__init__(
            f"range {range_} replaced with both {existing_content!r} and {new_content!r}"
        )
        self.range = range_
        self.existing_content = existing_content
        self.new_content = new_content


class SwallowedInsertionError(ClobberingError):
    """An insertion falls inside a range that another edit deletes."""

    def __init__(self, insertion_pos: int, deletion_range: tuple[int, int]) -> None:
        super().__init__(f"insertion at {insertion_pos} swallowed by deletion of {deletion_range}")
        self.insertion_pos = insertion_pos
        self.deletion_range = deletion_range


class OverlappingError(ClobberingError):
    """Two edits touch overlapping, non-identical ranges."""

    def __init__(self, existing: tuple[int, int], new: tuple[int, int]) -> None:
        super().__init__(f"edit {new} overlaps edit {existing}")
        self.existing = existing
        self.new = new


def ranges_overlap(start1: int, end1: int, start2: int, end2: int) -> bool:
    """Whether the half-open ranges ``[start1, end1)`` and ``[start2, end2)`` overlap."""
    return start1 < end2 and start2 < end1


def should_apply_fix(fix: Fix, unsafe_fixes: bool) -> bool:
    """Whether a fix may be applied, given whether unsafe fixes are allowed."""
    if fix.applicability is Applicability.SAFE:
        return True
    if fix.applicability is Applicability.UNSAFE:
        return unsafe_fixes
    return False


class Corrector:
    """Collects non-conflicting edits and applies them to a source."""

    def __init__(self) -> None:
        self._edits: list[Edit] = []

    def merge(self, fix: Fix) -> None:
        """Add all edits of ``fix``, or none of them if any conflicts.

        Raises a ``ClobberingError`` subclass when an edit conflicts.
        """
        for new_edit in fix.edits:
            self._check_conflict(new_edit)
        self._edits.extend(fix.edits)
        self._edits.sort(key=lambda edit: (edit.start, edit.end))

    def _check_conflict(self, new: Edit) -> None:
        for existing in self._edits:
            if existing.start == new.start and existing.end == new.end:
                if existing.content != new.content:
                    raise DifferentReplacementsError(
                        (existing.start, existing.end), existing.content, new.content
                    )
                continue
            if new.is_insertion and existing.is_deletion and existing.start < new.start < existing.end:
                raise SwallowedInsertionError(new.start, (existing.start, existing.end))
            if existing.is_insertion and new.is_deletion and new.start < existing.start < new.end:
                raise SwallowedInsertionError(existing.start, (new.start, new.end))
            # Overlaps are rejected rather than merged; a later pass picks them up.
            if ranges_overlap(existing.start, existing.end, new.start, new.end):
                raise OverlappingError((existing.start, existing.end), (new.start, new.end))

    def apply(self, source: bytes) -> bytes:
        """Return ``source`` with every merged edit applied."""
        if not self._edits:
            return bytes(source)
        parts: list[bytes] = []
        last_pos = 0
        for edit in self._edits:
            if last_pos < edit.start:
                parts.append(source[last_pos:edit.start])
            parts.append(edit.content.encode("utf-8"))
            last_pos = edit.end
        if last_pos < len(source):
            parts.append(source[last_pos:])
        return b"".join(parts)

    def edit_count(self) -> int:
        """Number of edits that will be applied."""
        return len(self._edits)

    def __len__(self) -> int:
        return len(self._edits)