import logging
from typing import Any, Dict

from rpcgateway.errors import GatewayError, MethodNotFoundError
from rpcgateway.jsonrpc import JSONRPCRequest, make_error_response, make_result_response
from rpcgateway.transformer.get_transaction import GetTransactionByHash, ResponseTransformer
from qtumgateway.rpc.qtum_rpc import QtumRpc
from ethgateway.mappers.transaction_mapper import EthTransactionMapper

logger = logging.getLogger(__name__)


class Manager(object):
    def __init__(self, qtum_rpc: QtumRpc):
        self.qtum_rpc = qtum_rpc
        self.transaction_mapper = EthTransactionMapper()
        self.transformers = {}
        self.register(GetTransactionByHash(qtum_rpc))

    def register(self, transformer):
        self.transformers[transformer.method] = transformer

    def transform(self, request: JSONRPCRequest) -> ResponseTransformer:
        """Rewrites request into its qtum call, returns its result handler."""
        transformer = self.transformers.get(request.method)
        if transformer is None:
            raise MethodNotFoundError(f"method {request.method} is not supported")
        return transformer.transform_request(request)

    def execute(self, request: JSONRPCRequest) -> Dict[str, Any]:
        eth_method = request.method
        transform_response = self.transform(request)
        logger.info(
            "Proxy %s as %s%s", eth_method, request.method, request.params
        )
        result = self.qtum_rpc.call(request.method, request.params)
        transaction = transform_response(result)
        return self.transaction_mapper.transaction_to_dict(transaction)

    def handle(self, request: JSONRPCRequest) -> Dict[str, Any]:
        """Runs a request end to end and returns the JSON-RPC response."""
        request_id = request.id
        eth_method = request.method
        try:
            result = self.execute(request)
        except GatewayError as e:
            logger.warning("%s failed: %s", eth_method, e)
            return make_error_response(request_id, e.to_rpc_error())
        return make_result_response(request_id, result)
