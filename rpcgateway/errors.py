from enum import IntEnum
from typing import Optional


class RPCErrorCode(IntEnum):
    # https://www.jsonrpc.org/specification#error_object
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603
    # implementation defined server error, reserved for backend node faults
    SERVER_ERROR = -32000


class GatewayError(Exception):
    """Base class of every error raised while transforming a request."""

    code = RPCErrorCode.INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_rpc_error(self):
        return {"code": int(self.code), "message": self.message}


class ValidationError(GatewayError, ValueError):
    """Malformed or missing input, eg: empty params or a missing JSON field."""

    code = RPCErrorCode.INVALID_PARAMS


class ConversionError(GatewayError, ValueError):
    """A numeric value can't be represented in the target dialect."""

    code = RPCErrorCode.INVALID_PARAMS


class ScriptParseError(GatewayError):
    """A contract script doesn't match its declared call/create layout."""

    code = RPCErrorCode.INTERNAL_ERROR


class MethodNotFoundError(GatewayError):
    code = RPCErrorCode.METHOD_NOT_FOUND


class BackendError(GatewayError):
    """The backend node call itself failed."""

    code = RPCErrorCode.SERVER_ERROR

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        backend_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.method = method
        self.backend_code = backend_code

    def to_rpc_error(self):
        error = super().to_rpc_error()
        if self.backend_code is not None:
            error["data"] = {"method": self.method, "code": self.backend_code}
        return error
