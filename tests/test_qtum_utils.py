from decimal import Decimal

import pytest

from rpcgateway.errors import ConversionError
from qtumgateway.qtum_utils import (
    eth_value_to_qtum,
    qtum_to_eth_value,
    qtum_to_satoshi,
    qtum_to_wei,
)


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("0"), "0x0"),
        (Decimal("0E-8"), "0x0"),
        (Decimal("1"), hex(10**18)),
        (Decimal("0.1"), "0x16345785d8a0000"),
        (Decimal("0.00000001"), hex(10**10)),
        (Decimal("21000000.12345678"), hex(2100000012345678 * 10**10)),
        (5, hex(5 * 10**18)),
        ("0.5", hex(5 * 10**17)),
    ],
)
def test_qtum_to_eth_value(amount, expected):
    assert qtum_to_eth_value(amount) == expected


def test_float_amount_uses_shortest_repr():
    # 0.1 * 1e18 in binary floating point is 100000000000000005.55...
    assert qtum_to_wei(0.1) == 10**17
    assert qtum_to_wei(0.29) == 29 * 10**16
    assert qtum_to_satoshi(1.15) == 115000000


@pytest.mark.parametrize(
    "amount",
    [
        Decimal("-0.1"),
        -1,
        Decimal("NaN"),
        Decimal("Infinity"),
        float("inf"),
        float("nan"),
        Decimal("0.000000001"),
        "not-a-number",
        None,
        True,
    ],
)
def test_qtum_to_eth_value_invalid(amount):
    with pytest.raises(ConversionError):
        qtum_to_eth_value(amount)


@pytest.mark.parametrize(
    "amount",
    ["0", "0.1", "0.00000001", "1.23456789", "99999999.99999999", "123"],
)
def test_round_trip_through_wei(amount):
    value = qtum_to_eth_value(Decimal(amount))
    assert eth_value_to_qtum(value) == Decimal(amount)
    assert eth_value_to_qtum(int(value, 16)) == Decimal(amount)


def test_eth_value_to_qtum_invalid():
    with pytest.raises(ConversionError):
        eth_value_to_qtum("0xzz")
    with pytest.raises(ConversionError):
        eth_value_to_qtum(-1)
    # 1 wei is below the 8 decimals of QTUM
    with pytest.raises(ConversionError):
        eth_value_to_qtum("0x1")


@pytest.mark.parametrize(
    "amount", ["100000000000000000000", "123456789012345678901234567890.12345678"]
)
def test_amounts_beyond_default_precision(amount):
    expected_satoshi = int(amount.replace(".", "")) if "." in amount else int(amount) * 10**8
    assert qtum_to_satoshi(Decimal(amount)) == expected_satoshi
    assert qtum_to_eth_value(amount) == hex(expected_satoshi * 10**10)
    assert eth_value_to_qtum(qtum_to_eth_value(amount)) == Decimal(amount)


def test_too_many_decimals_beyond_default_precision():
    with pytest.raises(ConversionError):
        qtum_to_eth_value(Decimal("123456789012345678901234567890.123456789"))
