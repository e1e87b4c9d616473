"""Generic utility functions."""

from .config import DEFAULT_RPC, GasConfig, parse_args, validate_rpc_url

__all__ = ["DEFAULT_RPC", "GasConfig", "parse_args", "validate_rpc_url"]
