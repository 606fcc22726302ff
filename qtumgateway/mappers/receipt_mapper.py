from typing import Any, Dict, Optional

from rpcgateway.errors import ValidationError
from qtumgateway.domain.receipt import QtumTransactionReceipt


class QtumReceiptMapper(object):
    def json_dict_to_receipt(self, json_dict: Dict[str, Any]) -> QtumTransactionReceipt:
        if not isinstance(json_dict, dict):
            raise ValidationError(f"receipt must be an object, got {json_dict!r}")

        receipt = QtumTransactionReceipt()
        receipt.block_hash = json_dict.get("blockHash")
        receipt.block_number = self._require_uint(json_dict, "blockNumber")
        receipt.transaction_hash = json_dict.get("transactionHash")
        receipt.transaction_index = self._require_uint(json_dict, "transactionIndex")
        receipt.from_address = self._optional_str(json_dict, "from")
        receipt.to_address = json_dict.get("to")
        receipt.contract_address = self._optional_str(json_dict, "contractAddress")
        receipt.cumulative_gas_used = json_dict.get("cumulativeGasUsed")
        receipt.gas_used = json_dict.get("gasUsed")
        receipt.excepted = json_dict.get("excepted")

        return receipt

    def _require_uint(self, json_dict: Dict[str, Any], key: str) -> int:
        value = json_dict.get(key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValidationError(
                f'"{key}" must be an unsigned integer in the receipt, got {value!r}'
            )
        return value

    def _optional_str(self, json_dict: Dict[str, Any], key: str) -> Optional[str]:
        value = json_dict.get(key)
        if value is not None and not isinstance(value, str):
            raise ValidationError(
                f'"{key}" must be a string in the receipt, got {value!r}'
            )
        return value
