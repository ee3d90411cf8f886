"""Indexing orchestrator: walk the chain and fold spaces history.

This module provides two layers:

1) `index_chain(...)`:
   - Pure application-layer use case.
   - Depends ONLY on interfaces (IBitcoinNode, ISpacesNode).
   - Does NOT instantiate RPC clients or manage their lifecycle.

2) `run_indexer(...)` (convenience wrapper):
   - Wires concrete `BitcoinRPC` / `SpacedRPC` clients from an `IndexerConfig`
     for typical CLI / script usage, and closes them afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from spaceind.clients.rpc import BitcoinRPC, SpacedRPC
from spaceind.core.config import IndexerConfig
from spaceind.core.interfaces import IBitcoinNode, ISpacesNode
from spaceind.core.use_cases.process_block import BlockProcessor, ProcessStats
from spaceind.history.store import NameHistoryStore
from spaceind.orchestration.walker import ChainWalker, OnBlock, WalkResult


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


@dataclass(kw_only=True)
class IndexOutput:
    """High-level output of one indexing run."""

    store: NameHistoryStore
    stats: ProcessStats
    walk: WalkResult


# ---------------------------------------------------------------------------
# 1) Pure application use case (no concrete instantiation)
# ---------------------------------------------------------------------------


async def index_chain(
    *,
    config: IndexerConfig,
    bitcoin: IBitcoinNode,
    spaced: ISpacesNode,
    on_block: OnBlock | None = None,
) -> IndexOutput:
    """Walk the configured height range and return the folded index."""
    store = NameHistoryStore(policy=config.conflict_policy)
    processor = BlockProcessor(store)
    walker = ChainWalker(bitcoin, spaced, processor)

    walk = await walker.walk(config.start_height, config.end_height, on_block=on_block)

    return IndexOutput(store=store, stats=processor.stats, walk=walk)


# ---------------------------------------------------------------------------
# 2) Convenience wrapper with concrete clients
# ---------------------------------------------------------------------------


def make_clients(config: IndexerConfig) -> tuple[BitcoinRPC, SpacedRPC]:
    bitcoin = BitcoinRPC(
        config.bitcoin.url,
        user=config.bitcoin.user,
        password=config.bitcoin.password,
        timeout_s=config.timeout_s,
    )
    spaced = SpacedRPC(
        config.spaced.url,
        user=config.spaced.user,
        password=config.spaced.password,
        timeout_s=config.timeout_s,
    )
    return bitcoin, spaced


async def run_indexer(config: IndexerConfig, on_block: OnBlock | None = None) -> IndexOutput:
    """Index with RPC clients built from `config`."""
    bitcoin, spaced = make_clients(config)
    try:
        return await index_chain(config=config, bitcoin=bitcoin, spaced=spaced, on_block=on_block)
    finally:
        await bitcoin.aclose()
        await spaced.aclose()
