from typing import Any
from unittest.mock import AsyncMock

import pytest

from spaceind.core.models import SpacesTx


def make_tx(txid: str, vout: list[dict[str, Any]] | None = None, vmetaout: list[dict[str, Any]] | None = None) -> SpacesTx:
    return SpacesTx.model_validate({"txid": txid, "vout": vout or [], "vmetaout": vmetaout or []})


@pytest.fixture
def mock_bitcoin():
    node = AsyncMock()
    node.get_block_count = AsyncMock(return_value=102)
    node.get_block_hash = AsyncMock(side_effect=lambda h: f"hash{h}")
    node.get_block = AsyncMock(side_effect=lambda bh: {"hash": bh, "tx": []})
    node.aclose = AsyncMock()
    return node


@pytest.fixture
def mock_spaced():
    node = AsyncMock()
    node.get_block_data = AsyncMock(return_value=[])
    node.aclose = AsyncMock()
    return node
