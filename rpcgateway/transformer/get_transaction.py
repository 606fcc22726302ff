import json
import logging
from decimal import Decimal
from typing import Any, Callable, Optional, Union

from rpcgateway.errors import ValidationError
from rpcgateway.jsonrpc import JSONRPCRequest
from qtumgateway.domain.receipt import QtumTransactionReceipt
from qtumgateway.domain.transaction import QtumTransaction, QtumDecodedTransaction
from qtumgateway.mappers.receipt_mapper import QtumReceiptMapper
from qtumgateway.mappers.transaction_mapper import QtumTransactionMapper
from qtumgateway.qtum_utils import qtum_to_eth_value
from qtumgateway.rpc.qtum_rpc import QtumRpc
from qtumgateway.service.qtum_script_service import ContractScript, parse_contract_asm
from ethgateway.domain.transaction import EthTransactionResponse
from ethgateway.utils import add_hex_prefix, remove_hex_prefix, encode_big, encode_uint

logger = logging.getLogger(__name__)

ResponseTransformer = Callable[[Any], EthTransactionResponse]


class _LookupState(object):
    """Per-call values handed from one pipeline step to the next."""

    def __init__(self, result: Any):
        self.result = result
        self.transaction: Optional[QtumTransaction] = None
        self.decoded: Optional[QtumDecodedTransaction] = None
        self.script: Optional[ContractScript] = None
        self.receipt: Optional[QtumTransactionReceipt] = None
        self.response = EthTransactionResponse()


class GetTransactionByHash(object):
    """eth_getTransactionByHash on top of qtum's gettransaction.

    The request is rewritten into `gettransaction <txid>`, the result is then
    rebuilt into an eth transaction by running the steps in order:

    1. parse the txid, blockhash, hex and amount of the wallet transaction
    2. convert the QTUM amount into a wei quantity
    3. decode the raw transaction into its outputs
    4. parse the first `call` or `create` output script, if any
    5. fill input, gas and gasPrice from that script
    6. fetch the receipt of a contract transaction
    7. fill blockNumber, transactionIndex, from and to from the receipt

    Any failing step aborts the whole lookup, nothing is returned.
    """

    method = "eth_getTransactionByHash"
    backend_method = "gettransaction"

    def __init__(self, qtum_rpc: QtumRpc):
        self.qtum_rpc = qtum_rpc
        self.transaction_mapper = QtumTransactionMapper()
        self.receipt_mapper = QtumReceiptMapper()
        self.steps = [
            self._parse_transaction,
            self._convert_amount,
            self._decode_raw_transaction,
            self._find_contract_script,
            self._apply_contract_script,
            self._fetch_receipt,
            self._apply_receipt,
        ]

    def transform_request(self, request: JSONRPCRequest) -> ResponseTransformer:
        params = request.params_as_list()
        if len(params) == 0:
            raise ValidationError("params must be set")
        if not isinstance(params[0], str):
            raise ValidationError(
                f"transaction hash must be a string, got {params[0]!r}"
            )

        txid = remove_hex_prefix(params[0])
        request.params = [txid]
        request.method = self.backend_method

        return self.transform_response

    def transform_response(
        self, result: Union[dict, str, bytes]
    ) -> EthTransactionResponse:
        state = _LookupState(result)
        for step in self.steps:
            step(state)
        return state.response

    def _parse_transaction(self, state: _LookupState):
        result = state.result
        if isinstance(result, (str, bytes, bytearray)):
            try:
                result = json.loads(result, parse_float=Decimal)
            except ValueError as e:
                raise ValidationError(f"gettransaction result is not JSON: {e}") from e

        transaction = self.transaction_mapper.json_dict_to_transaction(result)
        state.transaction = transaction
        state.response.hash = add_hex_prefix(transaction.txid)
        state.response.block_hash = add_hex_prefix(transaction.block_hash)

    def _convert_amount(self, state: _LookupState):
        state.response.value = qtum_to_eth_value(state.transaction.amount)

    def _decode_raw_transaction(self, state: _LookupState):
        result = self.qtum_rpc.decoderawtransaction(state.transaction.hex)
        state.decoded = self.transaction_mapper.json_dict_to_decoded_transaction(
            result
        )

    def _find_contract_script(self, state: _LookupState):
        # only the first contract output counts, later ones are never parsed
        for output in state.decoded.outputs:
            if output.is_contract():
                logger.debug(
                    "Found %s output #%s in %s",
                    output.type,
                    output.index,
                    state.transaction.txid,
                )
                state.script = parse_contract_asm(output.type, output.script_asm)
                break

    def _apply_contract_script(self, state: _LookupState):
        script = state.script
        if script is None:
            return
        state.response.input = add_hex_prefix(script.get_encoded_abi())
        state.response.gas = encode_big(script.get_gas_limit())
        state.response.gas_price = encode_big(script.get_gas_price())

    def _fetch_receipt(self, state: _LookupState):
        if state.script is None:
            return
        result = self.qtum_rpc.gettransactionreceipt(state.transaction.txid)
        if result is None:
            logger.debug("No receipt of %s yet", state.transaction.txid)
            return
        state.receipt = self.receipt_mapper.json_dict_to_receipt(result)

    def _apply_receipt(self, state: _LookupState):
        receipt = state.receipt
        if receipt is None:
            return
        state.response.block_number = encode_uint(receipt.block_number)
        state.response.transaction_index = encode_uint(receipt.transaction_index)
        state.response.from_address = add_hex_prefix(receipt.from_address)
        state.response.to_address = add_hex_prefix(receipt.contract_address)
