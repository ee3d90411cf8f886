"""Core data models: wire payloads and history records.

This module defines:
- `Covenant`, `Output`, `MetaOutput`, `SpacesTx`: pydantic models for the
  transaction data returned by spaced (`getblockdata` -> `tx_data`).
- `Locator`: stable (txid, output index) reference to an output.
- `OutputRecord`, `NamedMetaRecord`, `ActionRecord`: the tagged union of
  records folded into a name's tracked entry.

Design notes
------------
- Wire models ignore unknown fields; only the keys the indexer reads are
  declared.
- Records are frozen; a locator is attached by building a new record, the
  wire `Output` is never mutated.
- `HistoryRecord` entries are appended, an `ActionRecord` replaces the
  whole entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pydantic import BaseModel, ConfigDict

# === Wire models (spaced JSON) ===

BID = "bid"
TRANSFER = "transfer"

REVOKE = "revoke"
REJECT = "reject"


class Covenant(BaseModel):
    """Intended name-state transition attached to an output."""

    model_config = ConfigDict(frozen=True)

    type: str | None = None  # opaque when absent or unknown
    total_burned: int | None = None  # bids only
    claim_height: int | None = None  # first bid of an auction only


class Output(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    covenant: Covenant | None = None


class Target(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None


class MetaOutput(BaseModel):
    """Auxiliary state change not tied to a new spendable output."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    covenant: Covenant | None = None
    action: str | None = None  # e.g. "revoke", "reject"
    target: Target | None = None


class SpacesTx(BaseModel):
    """A protocol-relevant transaction as flagged by spaced."""

    model_config = ConfigDict(frozen=True)

    txid: str
    vout: list[Output] = []
    vmetaout: list[MetaOutput] = []


# === Records ===


@dataclass(slots=True, frozen=True)
class Locator:
    """(txid, output index) reference to a transaction output."""

    txid: str
    index: int

    def __str__(self) -> str:
        return f"{self.txid}:{self.index}"


@dataclass(slots=True, frozen=True)
class OutputRecord:
    """A regular name-bearing output."""

    name: str
    locator: Locator
    covenant: Covenant | None = None


@dataclass(slots=True, frozen=True)
class NamedMetaRecord:
    """A meta output carrying a name; appended like an output record."""

    name: str
    covenant: Covenant | None = None


@dataclass(slots=True, frozen=True)
class ActionRecord:
    """Terminal marker (revoke / reject) that replaces a name's entry."""

    action: str
    target: str

    @property
    def name(self) -> str:
        return self.target


HistoryRecord = Union[OutputRecord, NamedMetaRecord]
Record = Union[OutputRecord, NamedMetaRecord, ActionRecord]

# A tracked entry is either the ordered history list or a terminal marker.
Entry = Union[list[HistoryRecord], ActionRecord]
