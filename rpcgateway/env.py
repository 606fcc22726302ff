import os


def _int_env(name: str, default: int) -> int:
    return int(os.environ.get(name, default))


QTUM_RPC_URI = os.environ.get("RPC_GATEWAY_QTUM_RPC_URI", "http://127.0.0.1:3889")

REQUEST_TIMEOUT_SECONDS = _int_env("RPC_GATEWAY_REQUEST_TIMEOUT_SECONDS", 10)

# HTTPAdapter pool sizes of the backend session
HTTP_POOL_CONNECTIONS = _int_env("RPC_GATEWAY_HTTP_POOL_CONNECTIONS", 50)
HTTP_POOL_MAXSIZE = _int_env("RPC_GATEWAY_HTTP_POOL_MAXSIZE", 200)

LOGGING_LEVEL = os.environ.get("RPC_GATEWAY_LOGGING_LEVEL", "INFO")
