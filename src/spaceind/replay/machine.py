"""Covenant state machine.

Scans a name's history left to right and labels each covenant-bearing
record, carrying two values forward:

- `last_covenant` (P): covenant of the previous covenant-bearing record
- `last_claim_height` (H): its claim height, or None

Rules for the current covenant C:

1. P is a bid and C is a transfer     -> Register
2. C is a bid, H is None, C has claim -> Rollout
   C is a bid otherwise               -> Bid(C.total_burned)
3. C is a transfer                    -> Transfer
4. any other type                     -> nothing

After every covenant-bearing record, P := C and H := C.claim_height.
Records without a covenant are skipped and leave P/H untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from spaceind.core.models import (
    BID,
    REJECT,
    REVOKE,
    TRANSFER,
    ActionRecord,
    Covenant,
    Entry,
    HistoryRecord,
)
from spaceind.replay.events import (
    Bid,
    Event,
    LifecycleEvent,
    Register,
    Rejected,
    Revoked,
    Rollout,
    TerminalAction,
    TerminalNotice,
    Transfer,
)


def classify_covenant(
    covenant: Covenant,
    last_covenant: Covenant | None,
    last_claim_height: int | None,
) -> LifecycleEvent | None:
    """Label one covenant given the carried-forward state."""
    if last_covenant is not None and last_covenant.type == BID and covenant.type == TRANSFER:
        return Register()

    if covenant.type == BID:
        if last_claim_height is None and covenant.claim_height is not None:
            return Rollout(claim_height=covenant.claim_height)
        return Bid(amount=covenant.total_burned)

    if covenant.type == TRANSFER:
        return Transfer()

    return None


def replay_history(records: Iterable[HistoryRecord]) -> Iterator[LifecycleEvent]:
    """Yield the lifecycle events of an ordered history list."""
    last_covenant: Covenant | None = None
    last_claim_height: int | None = None

    for record in records:
        covenant = record.covenant
        if covenant is None:
            continue

        event = classify_covenant(covenant, last_covenant, last_claim_height)
        if event is not None:
            yield event

        last_covenant = covenant
        last_claim_height = covenant.claim_height


def terminal_notice(record: ActionRecord) -> TerminalNotice:
    """Notice reported in place of the history of a terminal entry."""
    if record.action == REVOKE:
        return Revoked()
    if record.action == REJECT:
        return Rejected()
    return TerminalAction(action=record.action)


def replay_entry(entry: Entry) -> list[Event]:
    """Events for one tracked entry: a single notice if terminal."""
    if isinstance(entry, ActionRecord):
        return [terminal_notice(entry)]
    return list(replay_history(entry))
