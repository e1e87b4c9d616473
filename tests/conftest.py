import pytest
from prometheus_client import REGISTRY


def gwei_hex(value: float) -> str:
    return hex(int(round(value * 10**9)))


def make_history(base_fees, rewards, ratios):
    """Build an ``eth_feeHistory`` style result from gwei values."""
    return {
        "oldestBlock": "0x1",
        "baseFeePerGas": [gwei_hex(v) for v in base_fees],
        "reward": [[gwei_hex(v) for v in row] for row in rewards],
        "gasUsedRatio": list(ratios),
    }


@pytest.fixture
def rising_history():
    return make_history(
        [10, 10, 10, 10, 10, 10, 12, 14, 16, 18, 20],
        [[1, 2, 3, 4, 5]] * 10,
        [0.5] * 10,
    )


@pytest.fixture
def clean_registry():
    for collector in list(REGISTRY._collector_to_names.keys()):
        REGISTRY.unregister(collector)
    yield
