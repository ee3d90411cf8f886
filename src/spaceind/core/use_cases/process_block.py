from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from spaceind.classification.classifier import classify_tx, count_malformed
from spaceind.core.errors import BlockSequenceError, ConsistencyError
from spaceind.core.models import ActionRecord, NamedMetaRecord, OutputRecord, Record, SpacesTx
from spaceind.history.store import NameHistoryStore

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------


@dataclass(kw_only=True)
class ProcessStats:
    """
    Aggregated counters for one indexing run.

    Mutated by the block processor to track:
    - how many blocks were seen and how many carried spaces transactions
    - how many records were appended or turned into terminal entries
    - how many meta outputs were malformed
    - how many records were dropped because of a consistency conflict
    """

    blocks: int = 0
    blocks_with_spaces: int = 0
    spaces_txs: int = 0
    records_appended: int = 0
    terminal_actions: int = 0
    malformed_meta_outputs: int = 0
    conflicts: int = 0
    skipped_records: int = 0


# ---------------------------------------------------------------------------
# Domain service – BlockProcessor
# ---------------------------------------------------------------------------


class BlockProcessor:
    """
    Folds the spaces transactions of consecutive blocks into a history store.

    It owns no I/O: blocks are pushed in by a chain walker (or a test) in
    strictly increasing height order. Within a block, transactions are folded
    in the order supplied, records in the order the classifier emits them.
    """

    def __init__(self, store: NameHistoryStore, stats: ProcessStats | None = None) -> None:
        self.store = store
        self.stats = stats if stats is not None else ProcessStats()
        self.last_height: int | None = None

    def _check_height(self, height: int) -> None:
        if self.last_height is not None and height != self.last_height + 1:
            raise BlockSequenceError(expected=self.last_height + 1, got=height)

    def process_block(
        self,
        height: int,
        block_hash: str,
        block: dict[str, Any],
        txs: Sequence[SpacesTx],
    ) -> None:
        """
        Fold one block.

        Parameters
        ----------
        height : int
            Block height; must follow the previously processed height.
        block_hash : str
            Block hash, used for logging only.
        block : dict
            Full block body (unused by the fold, kept for the supply contract).
        txs : Sequence[SpacesTx]
            Protocol-relevant transactions of the block, in block order.
        """
        self._check_height(height)
        self.last_height = height
        self.stats.blocks += 1

        if not txs:
            return

        logger.debug("Block %d (%s): %d spaces tx(s)", height, block_hash, len(txs))
        self.stats.blocks_with_spaces += 1
        for tx in txs:
            self.process_tx(tx)

    def process_tx(self, tx: SpacesTx) -> None:
        """Classify `tx` and fold every record it emits."""
        self.stats.spaces_txs += 1
        self.stats.malformed_meta_outputs += count_malformed(tx)
        for record in classify_tx(tx):
            self._fold(record)

    def _fold(self, record: Record) -> None:
        name = record.name
        if self.store.is_halted(name):
            logger.warning("Skipping record for halted name %r: %s", name, record)
            self.stats.skipped_records += 1
            return

        match record:
            case ActionRecord():
                self.store.set_terminal(name, record)
                self.stats.terminal_actions += 1
            case OutputRecord() | NamedMetaRecord():
                try:
                    self.store.append(name, record)
                except ConsistencyError as e:
                    logger.error("%s; halting further processing of %r", e, name)
                    self.store.halt(name)
                    self.stats.conflicts += 1
                    return
                self.stats.records_appended += 1
