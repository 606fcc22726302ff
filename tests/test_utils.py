import pytest

from rpcgateway.errors import ConversionError, ValidationError
from rpcgateway.jsonrpc import JSONRPCRequest
from ethgateway.utils import add_hex_prefix, encode_big, encode_uint, remove_hex_prefix


@pytest.mark.parametrize(
    "value, expected", [("abc123", "0xabc123"), ("0xabc123", "0xabc123"), (None, None)]
)
def test_add_hex_prefix(value, expected):
    assert add_hex_prefix(value) == expected


@pytest.mark.parametrize(
    "value, expected", [("0xabc123", "abc123"), ("0Xabc123", "abc123"), ("abc123", "abc123")]
)
def test_remove_hex_prefix(value, expected):
    assert remove_hex_prefix(value) == expected


def test_encode_big():
    assert encode_big(0) == "0x0"
    assert encode_big(255) == "0xff"
    assert encode_big(2**100) == "0x1" + "0" * 25
    with pytest.raises(ConversionError):
        encode_big(-1)


def test_encode_uint_overflow():
    assert encode_uint(2**64 - 1) == "0xffffffffffffffff"
    with pytest.raises(ConversionError):
        encode_uint(2**64)


def test_request_from_dict():
    request = JSONRPCRequest.from_dict(
        {"jsonrpc": "2.0", "method": "eth_getTransactionByHash", "params": ["0x01"], "id": 3}
    )
    assert request.method == "eth_getTransactionByHash"
    assert request.params_as_list() == ["0x01"]
    assert request.to_dict()["id"] == 3


@pytest.mark.parametrize("payload", [[], {"params": []}, {"method": 1}])
def test_request_from_dict_invalid(payload):
    with pytest.raises(ValidationError):
        JSONRPCRequest.from_dict(payload)
