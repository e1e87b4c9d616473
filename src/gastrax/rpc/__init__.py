"""RPC access to fee-history data."""

from .client import DEFAULT_PERCENTILES, FeeHistoryClient, RpcError, RpcTimeoutError

__all__ = ["DEFAULT_PERCENTILES", "FeeHistoryClient", "RpcError", "RpcTimeoutError"]
