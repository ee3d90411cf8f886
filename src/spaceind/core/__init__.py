"""Core data models, configuration, errors and interfaces.

This package provides:
- Wire models (SpacesTx, Output, MetaOutput, Covenant) and history records
- Configuration classes (IndexerConfig, RpcEndpoint, ConflictPolicy)
- The exception hierarchy rooted at SpaceIndError
"""

from spaceind.core.config import ConflictPolicy, IndexerConfig, RpcEndpoint
from spaceind.core.errors import BlockSequenceError, ConsistencyError, NodeNotSyncedError, SpaceIndError
from spaceind.core.models import (
    ActionRecord,
    Covenant,
    Locator,
    MetaOutput,
    NamedMetaRecord,
    Output,
    OutputRecord,
    SpacesTx,
)

__all__ = [
    "ConflictPolicy",
    "IndexerConfig",
    "RpcEndpoint",
    "BlockSequenceError",
    "ConsistencyError",
    "NodeNotSyncedError",
    "SpaceIndError",
    "ActionRecord",
    "Covenant",
    "Locator",
    "MetaOutput",
    "NamedMetaRecord",
    "Output",
    "OutputRecord",
    "SpacesTx",
]
