from decimal import Decimal, InvalidOperation, ROUND_DOWN, localcontext
from typing import Union

from rpcgateway.errors import ConversionError

# QTUM has a fixed precision of 8 decimals, 1 QTUM = 10^8 satoshi
QTUM_DECIMALS = 8
# the target chain's base unit, 1 QTUM = 10^18 wei
ETH_DECIMALS = 18

SATOSHI_TO_WEI = 10 ** (ETH_DECIMALS - QTUM_DECIMALS)

Number = Union[Decimal, int, float, str]


def _exact_precision(value: Decimal) -> int:
    # enough digits to hold value with all of its satoshi decimals
    return max(28, value.adjusted() + QTUM_DECIMALS + 2)


def to_qtum_decimal(amount: Number) -> Decimal:
    if isinstance(amount, bool):
        raise ConversionError(f"Amount must be a number, got {amount!r}")
    if isinstance(amount, float):
        # go through repr, so 0.1 stays 0.1 rather than its binary expansion
        amount = repr(amount)
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(amount)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ConversionError(f"Amount {amount!r} is not a number") from e

    if not value.is_finite():
        raise ConversionError(f"Amount {amount!r} is not finite")
    if value < 0:
        raise ConversionError(f"Amount {amount!r} is negative")

    try:
        with localcontext() as ctx:
            ctx.prec = _exact_precision(value)
            truncated = value.quantize(Decimal(1).scaleb(-QTUM_DECIMALS), ROUND_DOWN)
    except InvalidOperation as e:
        raise ConversionError(f"Amount {amount!r} is out of range") from e
    if value != truncated:
        raise ConversionError(
            f"Amount {amount!r} has more than {QTUM_DECIMALS} fractional digits"
        )
    return value


def qtum_to_satoshi(amount: Number) -> int:
    value = to_qtum_decimal(amount)
    with localcontext() as ctx:
        ctx.prec = _exact_precision(value)
        return int(value.scaleb(QTUM_DECIMALS))


def qtum_to_wei(amount: Number) -> int:
    return qtum_to_satoshi(amount) * SATOSHI_TO_WEI


def qtum_to_eth_value(amount: Number) -> str:
    """Converts a QTUM amount into the hex wei quantity of the eth dialect.

    >>> qtum_to_eth_value(Decimal("0.1"))
    '0x16345785d8a0000'
    """
    return hex(qtum_to_wei(amount))


def eth_value_to_qtum(value: Union[str, int]) -> Decimal:
    if isinstance(value, str):
        try:
            value = int(value, 16)
        except ValueError as e:
            raise ConversionError(f"Not a hex quantity '{value}'") from e
    if value < 0:
        raise ConversionError(f"Value {value} is negative")
    satoshi, remainder = divmod(value, SATOSHI_TO_WEI)
    if remainder != 0:
        raise ConversionError(f"Value {hex(value)} is below the satoshi precision")
    value = Decimal(satoshi)
    with localcontext() as ctx:
        ctx.prec = _exact_precision(value)
        return value.scaleb(-QTUM_DECIMALS)
