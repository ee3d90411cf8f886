"""Lightweight JSON-RPC clients for bitcoind and spaced.

This module provides:
- `JsonRpcClient`: an async client with sane timeouts/connection limits
- `BitcoinRPC`: block count / hash / body lookups against bitcoind
- `SpacedRPC`: protocol-relevant transactions of a block from spaced

It returns `SpacesTx` records ready for classification.
"""

from __future__ import annotations

import itertools
from typing import Any

import httpx

from spaceind.core.errors import SpaceIndError
from spaceind.core.models import SpacesTx


class RpcError(SpaceIndError, RuntimeError):
    """The node answered with a JSON-RPC error object."""

    def __init__(self, method: str, code: int | None, message: str | None) -> None:
        super().__init__(f"RPC error: {method}: {code} {message}")
        self.method = method
        self.code = code
        self.message = message


class JsonRpcClient:
    """Minimal async JSON-RPC client.

    Parameters
    ----------
    url : str
        RPC endpoint URL.
    user, password : str | None
        Basic-auth credentials (bitcoind's rpcuser / rpcpassword).
    timeout_s : int
        Per-operation timeout in seconds (connect/read/write).
    max_connections : int
        Maximum concurrent connections to keep in the pool.
    transport : httpx.AsyncBaseTransport | None
        Custom transport (tests use `httpx.MockTransport`).
    """

    def __init__(
        self,
        url: str,
        *,
        user: str | None = None,
        password: str | None = None,
        timeout_s: int = 20,
        max_connections: int = 8,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self._ids = itertools.count(1)
        auth = httpx.BasicAuth(user, password or "") if user else None
        self.client = httpx.AsyncClient(
            auth=auth,
            timeout=httpx.Timeout(
                connect=timeout_s,
                read=timeout_s,
                write=timeout_s,
                pool=max(30, timeout_s * 3),
            ),
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max(1, max_connections // 2),
            ),
            http2=True,
            transport=transport,
        )

    async def request(self, method: str, params: list[Any] | None = None) -> Any:
        """Call `method` and return its `result`."""
        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params or []}
        r = await self.client.post(self.url, json=payload)
        # bitcoind reports RPC errors with a 500 status and a JSON body
        try:
            data = r.json()
        except ValueError:
            r.raise_for_status()
            raise
        if not isinstance(data, dict):
            r.raise_for_status()
            raise RpcError(method, None, f"unexpected response body of type {type(data).__name__}")
        if data.get("error"):
            e = data["error"]
            if isinstance(e, dict):
                raise RpcError(method, e.get("code"), e.get("message"))
            raise RpcError(method, None, str(e))
        r.raise_for_status()
        return data.get("result")

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()


class BitcoinRPC(JsonRpcClient):
    """bitcoind block source."""

    async def get_block_count(self) -> int:
        return int(await self.request("getblockcount"))

    async def get_block_hash(self, height: int) -> str:
        return str(await self.request("getblockhash", [height]))

    async def get_block(self, block_hash: str) -> dict[str, Any]:
        return await self.request("getblock", [block_hash])


class SpacedRPC(JsonRpcClient):
    """spaced source of protocol-relevant transactions."""

    async def get_block_data(self, block_hash: str) -> list[SpacesTx]:
        """Spaces transactions of `block_hash`; blocks spaced never stored yield []."""
        data = await self.request("getblockdata", [block_hash])
        tx_data = data.get("tx_data") if isinstance(data, dict) else None
        return [SpacesTx.model_validate(tx) for tx in tx_data or []]
