"""In-memory name history store.

Each name maps to a tracked entry that is either:
- an ordered list of history records (outputs and named meta outputs), or
- a single terminal `ActionRecord` (revoke / reject).

Iteration follows the order in which names were first referenced. The order
is kept in an explicit key list next to the dict index, and replacing an
entry never moves its name.
"""

from __future__ import annotations

from collections.abc import Iterator

from spaceind.core.config import ConflictPolicy
from spaceind.core.errors import ConsistencyError
from spaceind.core.models import ActionRecord, Entry, HistoryRecord


class NameHistoryStore:
    """Append-only per-name history with terminal overwrite.

    Parameters
    ----------
    policy : ConflictPolicy
        Behaviour of `append` when the name's entry is terminal.
    """

    def __init__(self, policy: ConflictPolicy = ConflictPolicy.REJECT) -> None:
        self.policy = policy
        self._order: list[str] = []
        self._entries: dict[str, Entry] = {}
        self._halted: set[str] = set()

    # ---- writes ----

    def _track(self, name: str, entry: Entry) -> None:
        if name not in self._entries:
            self._order.append(name)
        self._entries[name] = entry

    def append(self, name: str, record: HistoryRecord) -> None:
        """Push `record` onto the history of `name`, creating it if needed."""
        entry = self._entries.get(name)
        if entry is None:
            self._track(name, [record])
        elif isinstance(entry, ActionRecord):
            if self.policy is ConflictPolicy.REJECT:
                raise ConsistencyError(name)
            self._track(name, [record])
        else:
            entry.append(record)

    def set_terminal(self, name: str, record: ActionRecord) -> None:
        """Replace whatever `name` tracks with the terminal `record`."""
        self._track(name, record)

    def halt(self, name: str) -> None:
        """Mark `name` as no longer processed for the rest of the run."""
        self._halted.add(name)

    # ---- reads ----

    def get(self, name: str) -> Entry | None:
        return self._entries.get(name)

    def history(self, name: str) -> list[HistoryRecord]:
        """Copy of the history list of `name` (empty when unknown or terminal)."""
        entry = self._entries.get(name)
        if entry is None or isinstance(entry, ActionRecord):
            return []
        return list(entry)

    def terminal(self, name: str) -> ActionRecord | None:
        entry = self._entries.get(name)
        return entry if isinstance(entry, ActionRecord) else None

    def is_terminal(self, name: str) -> bool:
        return self.terminal(name) is not None

    def is_halted(self, name: str) -> bool:
        return name in self._halted

    def halted(self) -> list[str]:
        """Halted names, in insertion order."""
        return [n for n in self._order if n in self._halted]

    def entries(self) -> Iterator[tuple[str, Entry]]:
        """Yield `(name, entry)` pairs in order of first reference."""
        for name in self._order:
            yield name, self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._order))

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._order)
