import json
from typing import Any, Dict, List, Optional, Union

from rpcgateway.errors import ValidationError

JSONRPC_VERSION = "2.0"


class JSONRPCRequest(object):
    def __init__(
        self,
        method: str,
        params: Union[List[Any], str, bytes, None] = None,
        id: Optional[Union[int, str]] = None,
        jsonrpc: str = JSONRPC_VERSION,
    ):
        self.jsonrpc = jsonrpc
        self.method = method
        self.params = params if params is not None else []
        self.id = id

    @classmethod
    def from_dict(cls, json_dict: Dict[str, Any]) -> "JSONRPCRequest":
        if not isinstance(json_dict, dict):
            raise ValidationError("JSON-RPC request must be an object")
        method = json_dict.get("method")
        if not isinstance(method, str):
            raise ValidationError("JSON-RPC request method must be a string")
        return cls(
            method,
            params=json_dict.get("params"),
            id=json_dict.get("id"),
            jsonrpc=json_dict.get("jsonrpc", JSONRPC_VERSION),
        )

    def params_as_list(self) -> List[Any]:
        """Returns the params as a list, parsing raw JSON text if needed."""
        params = self.params
        if isinstance(params, (str, bytes, bytearray)):
            try:
                params = json.loads(params)
            except ValueError as e:
                raise ValidationError(f"params is not valid JSON: {e}") from e
        if not isinstance(params, list):
            raise ValidationError(
                f"params must be a list, got {type(params).__name__}"
            )
        return params

    def to_dict(self) -> Dict[str, Any]:
        return {
            "jsonrpc": self.jsonrpc,
            "method": self.method,
            "params": self.params,
            "id": self.id,
        }

    def __repr__(self):
        return f"JSONRPCRequest(method={self.method!r}, params={self.params!r}, id={self.id!r})"


def make_result_response(request_id, result) -> Dict[str, Any]:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def make_error_response(request_id, error: Dict[str, Any]) -> Dict[str, Any]:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "error": error}
