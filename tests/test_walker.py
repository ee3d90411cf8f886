from typing import Any
from unittest.mock import MagicMock

import pytest
from conftest import make_tx

from spaceind.core.config import IndexerConfig
from spaceind.core.errors import NodeNotSyncedError
from spaceind.orchestration.orchestrator import index_chain
from spaceind.orchestration.walker import ChainWalker
from spaceind.replay.render import render_event_log


@pytest.mark.asyncio
async def test_walk_visits_each_height_in_order(mock_bitcoin: Any, mock_spaced: Any) -> None:
    processor = MagicMock()
    seen: list[tuple[int, int]] = []

    walker = ChainWalker(mock_bitcoin, mock_spaced, processor)
    result = await walker.walk(100, on_block=lambda h, n: seen.append((h, n)))

    assert [c.args[0] for c in processor.process_block.call_args_list] == [100, 101, 102]
    first = processor.process_block.call_args_list[0].args
    assert first == (100, "hash100", {"hash": "hash100", "tx": []}, [])
    assert seen == [(100, 0), (101, 0), (102, 0)]
    assert (result.first_height, result.last_height, result.blocks) == (100, 102, 3)


@pytest.mark.asyncio
async def test_walk_respects_end_height(mock_bitcoin: Any, mock_spaced: Any) -> None:
    processor = MagicMock()

    result = await ChainWalker(mock_bitcoin, mock_spaced, processor).walk(100, end_height=100)

    assert processor.process_block.call_count == 1
    assert result.last_height == 100


@pytest.mark.asyncio
async def test_walk_refuses_lagging_node(mock_bitcoin: Any, mock_spaced: Any) -> None:
    mock_bitcoin.get_block_count.return_value = 50
    processor = MagicMock()

    with pytest.raises(NodeNotSyncedError):
        await ChainWalker(mock_bitcoin, mock_spaced, processor).walk(100)

    processor.process_block.assert_not_called()


@pytest.mark.asyncio
async def test_rpc_failure_propagates(mock_bitcoin: Any, mock_spaced: Any) -> None:
    mock_spaced.get_block_data.side_effect = RuntimeError("RPC error: boom")
    processor = MagicMock()

    with pytest.raises(RuntimeError, match="boom"):
        await ChainWalker(mock_bitcoin, mock_spaced, processor).walk(100)

    processor.process_block.assert_not_called()


@pytest.mark.asyncio
async def test_index_chain_end_to_end(mock_bitcoin: Any, mock_spaced: Any) -> None:
    blocks = {
        "hash100": [make_tx("t1", vout=[{"name": "alice", "covenant": {"type": "bid", "total_burned": 1000, "claim_height": 500}}])],
        "hash101": [],
        "hash102": [
            make_tx("t2", vout=[{"name": "alice", "covenant": {"type": "bid", "total_burned": 2000}}]),
            make_tx("t3", vmetaout=[{"action": "revoke", "target": {"name": "bob"}}]),
        ],
    }
    mock_spaced.get_block_data.side_effect = lambda bh: blocks[bh]

    out = await index_chain(config=IndexerConfig(start_height=100), bitcoin=mock_bitcoin, spaced=mock_spaced)

    assert out.walk.last_height == 102
    assert out.stats.blocks == 3
    assert out.stats.blocks_with_spaces == 2
    assert render_event_log(out.store) == [
        "Space: alice",
        "  Rollout",
        "  Bid: 2000 sats",
        "Space: bob",
        "  Revoked",
    ]
