from __future__ import annotations

from collections.abc import Sequence
from typing import Any, List, Protocol, runtime_checkable

from spaceind.core.models import SpacesTx


# ---------------------------------------------------------------------------
# IBitcoinNode
# ---------------------------------------------------------------------------

@runtime_checkable
class IBitcoinNode(Protocol):
    """
    Abstract source of raw Bitcoin blocks.

    Domain expectations:
    - Heights are resolved to hashes by the node's active chain.
    - Block bodies are returned as decoded JSON; the indexer never inspects them.
    """

    async def get_block_count(self) -> int:
        """Return the height of the current chain tip."""
        ...

    async def get_block_hash(self, height: int) -> str:
        """Return the hash of the block at `height`."""
        ...

    async def get_block(self, block_hash: str) -> dict[str, Any]:
        """
        Return the block body for `block_hash`.

        Implementations:
        - bitcoind RPC (current `BitcoinRPC` class)
        - In-memory or synthetic provider for testing
        """
        ...


# ---------------------------------------------------------------------------
# ISpacesNode
# ---------------------------------------------------------------------------

@runtime_checkable
class ISpacesNode(Protocol):
    """
    Abstract source of protocol-relevant transactions.

    Domain expectations:
    - spaced only stores blocks that contain spaces transactions; any other
      block yields an empty list.
    """

    async def get_block_data(self, block_hash: str) -> List[SpacesTx]:
        """Return the spaces transactions of `block_hash`, in block order."""
        ...


# ---------------------------------------------------------------------------
# IBlockProcessor
# ---------------------------------------------------------------------------

@runtime_checkable
class IBlockProcessor(Protocol):
    """
    Consumer of the block supply.

    Domain expectations:
    - Called once per block, heights strictly increasing, none skipped.
    - A block is folded to completion before the next call.
    """

    def process_block(
        self,
        height: int,
        block_hash: str,
        block: dict[str, Any],
        txs: Sequence[SpacesTx],
    ) -> None:
        ...
