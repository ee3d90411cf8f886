from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from spaceind.constants import (
    DEFAULT_BITCOIN_RPC_PASSWORD,
    DEFAULT_BITCOIN_RPC_URL,
    DEFAULT_BITCOIN_RPC_USER,
    DEFAULT_SPACED_RPC_URL,
    TESTNET_ACTIVATION_HEIGHT,
)


class ConflictPolicy(str, Enum):
    """What the history store does when a record targets a terminal entry."""

    REJECT = "reject"  # raise ConsistencyError
    RESET = "reset"  # discard the terminal marker and start a new history


@dataclass(frozen=True)
class RpcEndpoint:
    """A JSON-RPC endpoint with optional basic-auth credentials."""

    url: str
    user: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class IndexerConfig:
    """Configuration for one indexing run (CLI)."""

    bitcoin: RpcEndpoint = field(
        default_factory=lambda: RpcEndpoint(
            DEFAULT_BITCOIN_RPC_URL, DEFAULT_BITCOIN_RPC_USER, DEFAULT_BITCOIN_RPC_PASSWORD
        )
    )
    spaced: RpcEndpoint = field(default_factory=lambda: RpcEndpoint(DEFAULT_SPACED_RPC_URL))
    start_height: int = TESTNET_ACTIVATION_HEIGHT
    end_height: int | None = None  # None -> current chain tip
    timeout_s: int = 20
    conflict_policy: ConflictPolicy = ConflictPolicy.REJECT
