"""Chain walker: heights -> (hash, block, spaces txs) -> block processor.

Blocks are fetched and folded one at a time. Each block's fetches are
awaited before `process_block` runs, so the fold order is the height order.
No retries happen here; a failing RPC call aborts the walk.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from spaceind.core.errors import NodeNotSyncedError
from spaceind.core.interfaces import IBitcoinNode, IBlockProcessor, ISpacesNode

logger = logging.getLogger(__name__)

OnBlock = Callable[[int, int], None]


@dataclass(kw_only=True)
class WalkResult:
    """Heights covered by one walk (inclusive)."""

    first_height: int
    last_height: int | None
    blocks: int


async def resolve_end_height(bitcoin: IBitcoinNode, start_height: int, end_height: int | None) -> int:
    """Return the last height to walk, refusing to start on a lagging node."""
    block_count = await bitcoin.get_block_count()
    if block_count < start_height:
        raise NodeNotSyncedError(block_count=block_count, start_height=start_height)
    if end_height is None:
        return block_count
    if end_height < start_height:
        raise ValueError("start_height must be <= end_height")
    return min(end_height, block_count)


class ChainWalker:
    """Feeds consecutive blocks from bitcoind + spaced into a block processor."""

    def __init__(self, bitcoin: IBitcoinNode, spaced: ISpacesNode, processor: IBlockProcessor) -> None:
        self.bitcoin = bitcoin
        self.spaced = spaced
        self.processor = processor

    async def walk_block(self, height: int) -> int:
        """Fetch and fold one block; return its spaces tx count."""
        block_hash = await self.bitcoin.get_block_hash(height)
        block = await self.bitcoin.get_block(block_hash)
        txs = await self.spaced.get_block_data(block_hash)

        logger.debug("Process block height: %d block hash: %s space tx count: %d", height, block_hash, len(txs))
        self.processor.process_block(height, block_hash, block, txs)
        return len(txs)

    async def walk(
        self,
        start_height: int,
        end_height: int | None = None,
        on_block: OnBlock | None = None,
    ) -> WalkResult:
        """
        Walk `start_height..end_height` inclusive.

        Parameters
        ----------
        start_height : int
            First height to fold.
        end_height : int | None
            Last height to fold; defaults to (and is capped at) the chain tip.
        on_block : callable(height, tx_count) | None
            Progress callback invoked after each folded block.
        """
        last = await resolve_end_height(self.bitcoin, start_height, end_height)

        walked = 0
        last_done: int | None = None
        for height in range(start_height, last + 1):
            tx_count = await self.walk_block(height)
            walked += 1
            last_done = height
            if on_block is not None:
                on_block(height, tx_count)

        logger.info("Walked %d block(s) starting at %d", walked, start_height)
        return WalkResult(first_height=start_height, last_height=last_done, blocks=walked)
