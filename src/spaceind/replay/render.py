from __future__ import annotations

from collections.abc import Iterator

from spaceind.history.store import NameHistoryStore
from spaceind.replay.events import Event, describe
from spaceind.replay.machine import replay_entry

HALTED_NOTE = "(halted after conflicting update)"


def replay_store(store: NameHistoryStore) -> Iterator[tuple[str, list[Event]]]:
    """Yield `(name, events)` for every tracked name, in insertion order."""
    for name, entry in store.entries():
        yield name, replay_entry(entry)


def render_event_log(store: NameHistoryStore) -> list[str]:
    """Human readable event log of the whole store."""
    lines: list[str] = []
    for name, events in replay_store(store):
        lines.append(f"Space: {name}")
        lines.extend(f"  {describe(ev)}" for ev in events)
        if store.is_halted(name):
            lines.append(f"  {HALTED_NOTE}")
    return lines
