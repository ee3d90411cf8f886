"""History replay.

This package provides:
- Lifecycle events and terminal notices (Rollout, Bid, Register, Transfer, Revoked, Rejected)
- The covenant state machine that labels a name's history
- Rendering of the whole store as a human readable event log
"""

from spaceind.replay.events import (
    Bid,
    Event,
    Register,
    Rejected,
    Revoked,
    Rollout,
    TerminalAction,
    Transfer,
    describe,
)
from spaceind.replay.machine import classify_covenant, replay_entry, replay_history, terminal_notice
from spaceind.replay.render import render_event_log, replay_store

__all__ = [
    "Bid",
    "Event",
    "Register",
    "Rejected",
    "Revoked",
    "Rollout",
    "TerminalAction",
    "Transfer",
    "describe",
    "classify_covenant",
    "replay_entry",
    "replay_history",
    "terminal_notice",
    "render_event_log",
    "replay_store",
]
