"""Tracking which rules' fixes were applied in one correction pass."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping


class ConflictRegistry:
    """Rules whose fixes were applied in the current pass, and their conflicts.

    ``conflicts`` maps a rule to the rules whose corrections it is incompatible
    with. A rule conflicting with an applied rule, in either direction, is
    skipped and retried in the next pass.
    """

    def __init__(self, conflicts: Mapping[Hashable, Iterable[Hashable]] | None = None) -> None:
        self._conflicts: dict[Hashable, frozenset[Hashable]] = {
            rule: frozenset(others) for rule, others in (conflicts or {}).items()
        }
        self._applied: set[Hashable] = set()

    def _declared(self, rule_id: Hashable) -> frozenset[Hashable]:
        return self._conflicts.get(rule_id, frozenset())

    def mark_applied(self, rule_id: Hashable) -> None:
        """Record that the rule's fixes were applied."""
        self._applied.add(rule_id)

    def was_applied(self, rule_id: Hashable) -> bool:
        """Whether the rule's fixes were applied in this pass."""
        return rule_id in self._applied

    def conflicts_with_applied(self, rule_id: Hashable) -> bool:
        """Whether the rule conflicts with any rule already applied."""
        if self._declared(rule_id) & self._applied:
            return True
        return any(rule_id in self._declared(applied) for applied in self._applied)

    def clear(self) -> None:
        """Start a new pass."""
        self._applied.clear()

    def applied_count(self) -> int:
        """Number of rules applied in this pass."""
        return len(self._applied)