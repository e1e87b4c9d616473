"""Configuration management utilities."""

from dataclasses import dataclass
import argparse
import os
from typing import Optional, List
from urllib.parse import urlparse

DEFAULT_RPC = "https://ethereum-rpc.publicnode.com"


def validate_rpc_url(url: str) -> str:
    """Return ``url`` stripped, raising ``ValueError`` if it is unusable."""
    url = (url or "").strip()
    if not url:
        raise ValueError("URL cannot be empty.")
    if not url.startswith("https://"):
        raise ValueError("URL must start with https://")
    if not urlparse(url).hostname:
        raise ValueError("Invalid URL format.")
    return url


def _rpc_url(value: str) -> str:
    if not value.strip():
        return DEFAULT_RPC
    try:
        return validate_rpc_url(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments or provided list."""
    parser = argparse.ArgumentParser(description="gastrax fee tracker")
    parser.add_argument(
        "--rpc-http",
        type=_rpc_url,
        default=os.getenv("RPC_HTTP", DEFAULT_RPC),
        help="Ethereum JSON-RPC endpoint (https only)",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=float(os.getenv("REFRESH_INTERVAL", "30")),
        help="Seconds between fee-history refreshes",
    )
    parser.add_argument(
        "--block-count",
        type=int,
        default=int(os.getenv("BLOCK_COUNT", "10")),
        help="Number of blocks requested from eth_feeHistory",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=float(os.getenv("RPC_TIMEOUT", "10")),
        help="RPC request timeout in seconds",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        help="Logging level",
    )
    parser.add_argument("--host", default=os.getenv("HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")))
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print a single fee summary as JSON then exit",
    )
    ns = parser.parse_args(args)
    if ns.block_count < 1:
        parser.error("--block-count must be positive")
    if ns.interval <= 0:
        parser.error("--interval must be positive")
    return ns


@dataclass
class GasConfig:
    rpc_http: str = DEFAULT_RPC
    interval: float = 30.0
    block_count: int = 10
    timeout: float = 10.0
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    once: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "GasConfig":
        return cls(
            rpc_http=args.rpc_http,
            interval=args.interval,
            block_count=args.block_count,
            timeout=args.timeout,
            log_level=args.log_level,
            host=args.host,
            port=args.port,
            once=args.once,
        )
