from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# ---- lifecycle events (one per classified covenant) ----


@dataclass(slots=True, frozen=True)
class Rollout:
    """First bid of an auction; carries the claim height."""

    claim_height: int


@dataclass(slots=True, frozen=True)
class Bid:
    amount: int | None


@dataclass(slots=True, frozen=True)
class Register:
    """A bid immediately followed by a transfer: the auction was won."""


@dataclass(slots=True, frozen=True)
class Transfer:
    pass


# ---- terminal notices (replace the whole history) ----


@dataclass(slots=True, frozen=True)
class Revoked:
    pass


@dataclass(slots=True, frozen=True)
class Rejected:
    pass


@dataclass(slots=True, frozen=True)
class TerminalAction:
    """Terminal marker with an action tag the indexer does not know."""

    action: str


LifecycleEvent = Union[Rollout, Bid, Register, Transfer]
TerminalNotice = Union[Revoked, Rejected, TerminalAction]
Event = Union[LifecycleEvent, TerminalNotice]


def describe(event: Event) -> str:
    """One-line human readable label for `event`."""
    match event:
        case Rollout():
            return "Rollout"
        case Bid(amount=amount):
            return f"Bid: {amount} sats"
        case Register():
            return "Register"
        case Transfer():
            return "Transfer"
        case Revoked():
            return "Revoked"
        case Rejected():
            return "Rejected"
        case TerminalAction(action=action):
            return f"Terminal action: {action}"
    raise RuntimeError(f"Unsupported event type: {type(event).__name__}")
