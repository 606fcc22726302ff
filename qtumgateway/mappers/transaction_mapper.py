# MIT License
#
# Copyright (c) 2018 Omidiora Samuel, samparsky@gmail.com
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


from decimal import Decimal
from typing import Any, Dict

from rpcgateway.errors import ValidationError
from qtumgateway.domain.transaction import QtumTransaction, QtumDecodedTransaction
from qtumgateway.mappers.transaction_output_mapper import QtumTransactionOutputMapper


def _require_str(json_dict: Dict[str, Any], key: str) -> str:
    value = json_dict.get(key)
    if not isinstance(value, str):
        raise ValidationError(
            f'"{key}" must be a string in the transaction, got {value!r}'
        )
    return value


class QtumTransactionMapper(object):
    def __init__(self):
        self.transaction_output_mapper = QtumTransactionOutputMapper()

    def json_dict_to_transaction(self, json_dict: Dict[str, Any]) -> QtumTransaction:
        if not isinstance(json_dict, dict):
            raise ValidationError(f"transaction must be an object, got {json_dict!r}")

        transaction = QtumTransaction()
        transaction.txid = _require_str(json_dict, "txid")
        transaction.block_hash = _require_str(json_dict, "blockhash")
        transaction.hex = _require_str(json_dict, "hex")

        amount = json_dict.get("amount")
        if isinstance(amount, bool) or not isinstance(amount, (Decimal, int, float)):
            raise ValidationError(
                f'"amount" must be a number in the transaction, got {amount!r}'
            )
        transaction.amount = amount

        return transaction

    def json_dict_to_decoded_transaction(
        self, json_dict: Dict[str, Any]
    ) -> QtumDecodedTransaction:
        if not isinstance(json_dict, dict):
            raise ValidationError(
                f"decoded transaction must be an object, got {json_dict!r}"
            )
        vout = json_dict.get("vout")
        if not isinstance(vout, list):
            raise ValidationError(
                f'"vout" must be a list in the decoded transaction, got {vout!r}'
            )

        transaction = QtumDecodedTransaction()
        transaction.txid = json_dict.get("txid")
        transaction.hash = json_dict.get("hash")
        transaction.version = json_dict.get("version")
        transaction.size = json_dict.get("size")
        transaction.locktime = json_dict.get("locktime")

        # keep the node's output order, contract detection depends on it
        transaction.outputs = self.transaction_output_mapper.vout_to_outputs(vout)

        return transaction
