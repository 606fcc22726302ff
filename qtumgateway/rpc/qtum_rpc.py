# The MIT License (MIT)
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


import logging
import decimal
import json
import itertools
from typing import Optional, Dict, List, Any

import requests

from rpcgateway.errors import BackendError
from qtumgateway.rpc.request import make_jsonrpc_request


logger = logging.getLogger("qtum_rpc")


class QtumRpc:
    def __init__(self, provider_uri, timeout=60):
        self.provider_uri = provider_uri
        self.timeout = timeout
        self._ids = itertools.count(1)

    def call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        rpc_call = {
            "jsonrpc": "1.0",
            "method": method,
            "params": params or [],
            "id": next(self._ids),
        }
        logger.debug("Making request: %s", rpc_call)

        try:
            raw_response = make_jsonrpc_request(
                self.provider_uri,
                rpc_call,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise BackendError(
                f"{method} request to {self.provider_uri} failed: {e}", method=method
            ) from e

        response = self._decode_rpc_response(method, raw_response)
        logger.debug("Getting response of %s: %s", method, response)

        error = response.get("error")
        if error is not None:
            code = error.get("code") if isinstance(error, dict) else None
            message = error.get("message") if isinstance(error, dict) else error
            raise BackendError(
                f"{method} failed: {message}", method=method, backend_code=code
            )
        if "result" not in response:
            raise BackendError(
                f'"result" is missing in the JSON RPC response {response}',
                method=method,
            )
        return response["result"]

    def gettransaction(self, txid: str) -> Dict:
        return self.call("gettransaction", [txid])

    def decoderawtransaction(self, hex_string: str) -> Dict:
        return self.call("decoderawtransaction", [hex_string])

    def gettransactionreceipt(self, txid: str) -> Optional[Dict]:
        """Returns the first receipt of txid, None if it is not mined yet."""
        response = self.call("gettransactionreceipt", [txid])
        if isinstance(response, list):
            return response[0] if len(response) > 0 else None
        return response

    def _decode_rpc_response(self, method, response) -> Dict:
        try:
            response_text = response.decode("utf-8")
            decoded = json.loads(response_text, parse_float=decimal.Decimal)
        except ValueError as e:
            raise BackendError(
                f"{method} returned a non JSON response: {e}", method=method
            ) from e
        if not isinstance(decoded, dict):
            raise BackendError(
                f"{method} returned an unexpected response: {decoded}", method=method
            )
        return decoded
