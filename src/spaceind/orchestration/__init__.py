"""Orchestration: walking the chain and wiring concrete clients.

This package provides:
- ChainWalker, which feeds consecutive blocks into a block processor
- index_chain / run_indexer, which build the store and run a walk
"""

from spaceind.orchestration.orchestrator import IndexOutput, index_chain, run_indexer
from spaceind.orchestration.walker import ChainWalker, WalkResult

__all__ = [
    "ChainWalker",
    "WalkResult",
    "IndexOutput",
    "index_chain",
    "run_indexer",
]
