from spaceind.clients.rpc import BitcoinRPC, JsonRpcClient, RpcError, SpacedRPC

__all__ = ["BitcoinRPC", "JsonRpcClient", "RpcError", "SpacedRPC"]
