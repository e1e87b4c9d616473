from fractions import Fraction

import pytest

from gastrax.engine import MalformedInputError, parse, wei_to_gwei

from conftest import make_history


def test_wei_to_gwei_accepts_hex_decimal_and_int():
    assert wei_to_gwei("0x3b9aca00") == 1.0
    assert wei_to_gwei("1500000000") == 1.5
    assert wei_to_gwei(2_000_000_000) == 2.0
    assert wei_to_gwei("0X0") == 0.0


def test_wei_to_gwei_divides_exact_integer():
    wei = 2**70 + 12345
    assert wei_to_gwei(hex(wei)) == float(Fraction(wei, 10**9))
    assert wei_to_gwei(str(wei)) == float(Fraction(wei, 10**9))


@pytest.mark.parametrize("value", ["0x", "abc", "", "1.5", None, True, 1.5])
def test_wei_to_gwei_rejects_garbage(value):
    with pytest.raises(MalformedInputError):
        wei_to_gwei(value)


def test_parse_normalizes_fields(rising_history):
    samples = parse(rising_history)
    assert samples.base_fees[0] == 10.0
    assert samples.base_fees[-1] == 20.0
    assert len(samples.base_fees) == 11
    assert samples.utilization == (0.5,) * 10
    assert samples.priority_fees[0] == (1.0,) * 10
    assert samples.priority_fees[4] == (5.0,) * 10


def test_parse_drops_short_reward_rows_whole():
    raw = make_history([1, 1, 1], [[1, 2, 3], [1, 2, 3, 4, 5], [9, 9, 9, 9]], [0.1, 0.2])
    samples = parse(raw)
    assert all(len(col) == 1 for col in samples.priority_fees)
    assert samples.priority_fees[2] == (3.0,)


def test_parse_ignores_extra_percentiles():
    raw = make_history([1, 1], [[1, 2, 3, 4, 5, 6]], [0.3])
    samples = parse(raw)
    assert [col[0] for col in samples.priority_fees] == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_parse_skips_non_list_rows():
    raw = make_history([1, 1], [], [0.3])
    raw["reward"] = [None, "0x1", ["0x1"] * 5]
    samples = parse(raw)
    assert all(len(col) == 1 for col in samples.priority_fees)


def test_parse_allows_empty_base_fees():
    samples = parse({"baseFeePerGas": [], "reward": [], "gasUsedRatio": []})
    assert samples.base_fees == ()
    assert all(col == () for col in samples.priority_fees)


@pytest.mark.parametrize("missing", ["baseFeePerGas", "reward", "gasUsedRatio"])
def test_parse_missing_field(rising_history, missing):
    del rising_history[missing]
    with pytest.raises(MalformedInputError):
        parse(rising_history)


@pytest.mark.parametrize("field", ["baseFeePerGas", "reward", "gasUsedRatio"])
def test_parse_field_not_a_list(rising_history, field):
    rising_history[field] = "0x1"
    with pytest.raises(MalformedInputError):
        parse(rising_history)


def test_parse_rejects_non_mapping():
    with pytest.raises(MalformedInputError):
        parse(None)
    with pytest.raises(MalformedInputError):
        parse([1, 2, 3])


def test_malformed_input_is_value_error():
    assert issubclass(MalformedInputError, ValueError)


def test_oversized_fee_is_malformed():
    huge = "0x" + "f" * 300
    with pytest.raises(MalformedInputError):
        wei_to_gwei(huge)
    with pytest.raises(MalformedInputError):
        parse({"baseFeePerGas": [huge], "reward": [], "gasUsedRatio": []})
    with pytest.raises(MalformedInputError):
        parse({"baseFeePerGas": ["0x1"], "reward": [["0x1"] * 4 + [huge]], "gasUsedRatio": []})


def test_oversized_gas_ratio_is_malformed():
    with pytest.raises(MalformedInputError):
        parse({"baseFeePerGas": ["0x1"], "reward": [], "gasUsedRatio": [10**400]})
