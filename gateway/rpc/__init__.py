"""JSON-RPC access to the Ethereum node."""

from gateway.rpc.client import FeeData, RpcClient, Web3RpcClient

__all__ = ["FeeData", "RpcClient", "Web3RpcClient"]
