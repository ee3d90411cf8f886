"""Exception hierarchy shared by the indexer components."""

from __future__ import annotations


class SpaceIndError(Exception):
    """Base class for all indexer errors."""


class ConsistencyError(SpaceIndError):
    """A history record arrived for a name whose entry is already terminal."""

    def __init__(self, name: str) -> None:
        super().__init__(f"cannot append to {name!r}: entry is terminal (revoked or rejected)")
        self.name = name


class BlockSequenceError(SpaceIndError):
    """Blocks were supplied out of order (skipped, repeated or rewound)."""

    def __init__(self, expected: int, got: int) -> None:
        super().__init__(f"expected block height {expected}, got {got}")
        self.expected = expected
        self.got = got


class NodeNotSyncedError(SpaceIndError):
    """The Bitcoin node has not reached the requested start height yet."""

    def __init__(self, block_count: int, start_height: int) -> None:
        super().__init__(
            f"bitcoin node is still syncing (block count {block_count} < start height {start_height})"
        )
        self.block_count = block_count
        self.start_height = start_height
