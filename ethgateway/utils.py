# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.


from typing import Optional

from eth_utils.hexadecimal import add_0x_prefix, remove_0x_prefix

from rpcgateway.errors import ConversionError


def add_hex_prefix(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return add_0x_prefix(value)


def remove_hex_prefix(value: str) -> str:
    return remove_0x_prefix(value)


def encode_big(value: int) -> str:
    """Encodes a non-negative integer as an eth hex quantity, eg: 0 -> 0x0"""
    if value < 0:
        raise ConversionError(f"hex quantity must not be negative, got {value}")
    return hex(value)


def encode_uint(value: int) -> str:
    # the eth dialect caps block number/index at uint64
    if value >= 1 << 64:
        raise ConversionError(f"{value} overflows uint64")
    return encode_big(value)
