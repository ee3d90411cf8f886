from __future__ import annotations

from .classification.classifier import classify_tx
from .core.config import ConflictPolicy, IndexerConfig, RpcEndpoint
from .core.models import ActionRecord, Covenant, Locator, NamedMetaRecord, OutputRecord, SpacesTx
from .core.use_cases.process_block import BlockProcessor, ProcessStats
from .history.store import NameHistoryStore
from .replay.machine import replay_entry, replay_history
from .replay.render import render_event_log

__all__ = [
    "classify_tx",
    "ConflictPolicy",
    "IndexerConfig",
    "RpcEndpoint",
    "ActionRecord",
    "Covenant",
    "Locator",
    "NamedMetaRecord",
    "OutputRecord",
    "SpacesTx",
    "BlockProcessor",
    "ProcessStats",
    "NameHistoryStore",
    "replay_entry",
    "replay_history",
    "render_event_log",
]
