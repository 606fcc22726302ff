from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from qtumgateway.rpc.qtum_rpc import QtumRpc

TXID = "6b7f70d8520e1ec87ba7f1ee559b491cc3028b77ae166e789be882b5d370eac9"
BLOCK_HASH = "0d3b0e3fc5e1ed4d3e9f5e4c0a5b8e4c2a5d1b3f1d0c6f9a4e2b7c8d9e0f1a2b"
RAW_HEX = "0200000001d1a2b3c4"
CONTRACT = "b2f4c7c47b7ecd0f0d7a1f0ca6f1ec9d1c2a6c50"
SENDER = "7926223070547d2d15b2ef5e7383e541c338ffe9"
CALL_DATA = (
    "a9059cbb"
    "0000000000000000000000007926223070547d2d15b2ef5e7383e541c338ffe9"
    "00000000000000000000000000000000000000000000000000000000000003e8"
)
BYTECODE = "6060604052341561000f57600080fd5b"

CALL_ASM = f"4 250000 40 {CALL_DATA} {CONTRACT} OP_CALL"
CREATE_ASM = f"4 2500000 40 {BYTECODE} OP_CREATE"


def make_vout(*outputs):
    """Builds a decoderawtransaction vout from (type, asm) pairs."""
    return [
        {
            "value": Decimal("0E-8"),
            "n": n,
            "scriptPubKey": {"asm": asm, "hex": "00", "type": type_},
        }
        for n, (type_, asm) in enumerate(outputs)
    ]


def make_decoded(*outputs):
    return {
        "txid": TXID,
        "hash": TXID,
        "version": 2,
        "size": 234,
        "locktime": 0,
        "vin": [],
        "vout": make_vout(*outputs),
    }


@pytest.fixture
def gettransaction_result():
    return {
        "amount": Decimal("0.1"),
        "fee": Decimal("-0.0009"),
        "confirmations": 12,
        "blockhash": BLOCK_HASH,
        "blockindex": 3,
        "blocktime": 1537327792,
        "txid": TXID,
        "time": 1537327650,
        "details": [],
        "hex": RAW_HEX,
    }


@pytest.fixture
def receipt():
    return {
        "blockHash": BLOCK_HASH,
        "blockNumber": 42,
        "transactionHash": TXID,
        "transactionIndex": 3,
        "from": SENDER,
        "to": CONTRACT,
        "cumulativeGasUsed": 36601,
        "gasUsed": 36601,
        "contractAddress": CONTRACT,
        "log": [],
        "excepted": "None",
    }


@pytest.fixture
def qtum_rpc():
    rpc = MagicMock(spec=QtumRpc)
    rpc.decoderawtransaction.return_value = make_decoded(
        ("pubkeyhash", "OP_DUP OP_HASH160 abcd OP_EQUALVERIFY OP_CHECKSIG")
    )
    rpc.gettransactionreceipt.return_value = None
    return rpc
