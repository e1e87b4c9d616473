"""JSON-RPC client for ``eth_feeHistory``."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

import httpx

logger = logging.getLogger(__name__)

DEFAULT_PERCENTILES = (10, 25, 50, 75, 90)


class RpcError(RuntimeError):
    """Raised when the RPC endpoint answers with an error."""


class RpcTimeoutError(RpcError):
    """Raised when the RPC endpoint does not answer in time."""


class FeeHistoryClient:
    """Minimal async JSON-RPC client bound to one endpoint."""

    def __init__(
        self,
        rpc_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.rpc_url = rpc_url
        self.timeout = timeout
        self.session = httpx.AsyncClient(timeout=timeout, transport=transport)
        self._next_id = 1

    async def __aenter__(self) -> "FeeHistoryClient":
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.session.aclose()

    async def aclose(self) -> None:
        await self.session.aclose()

    async def call(self, method: str, params: Sequence[Any]) -> Any:
        payload = {"jsonrpc": "2.0", "id": self._next_id, "method": method, "params": list(params)}
        self._next_id += 1
        try:
            resp = await self.session.post(self.rpc_url, json=payload)
        except httpx.TimeoutException:
            raise RpcTimeoutError(
                f"Request timed out ({self.timeout:g} s). Check your RPC URL."
            ) from None
        if resp.is_error:
            raise RpcError(f"RPC HTTP {resp.status_code}")
        try:
            body = resp.json()
        except ValueError:
            raise RpcError("RPC returned invalid JSON") from None
        if not isinstance(body, dict):
            raise RpcError("RPC returned an unexpected payload")
        error = body.get("error")
        if error:
            message = error.get("message") if isinstance(error, dict) else None
            raise RpcError(message or "RPC error")
        return body.get("result")

    async def fee_history(
        self,
        block_count: int = 10,
        newest: str = "latest",
        percentiles: Sequence[int] = DEFAULT_PERCENTILES,
    ) -> Dict[str, Any]:
        """Return the raw ``eth_feeHistory`` result for the newest blocks."""
        result = await self.call("eth_feeHistory", [hex(block_count), newest, list(percentiles)])
        if not isinstance(result, dict):
            raise RpcError("bad response")
        logger.debug("eth_feeHistory returned %d base fees", len(result.get("baseFeePerGas") or ()))
        return result
