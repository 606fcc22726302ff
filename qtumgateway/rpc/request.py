import hashlib
import requests

from requests.sessions import HTTPAdapter

from rpcgateway import env

_session_cache = {}


def _get_session(endpoint_uri):
    cache_key = hashlib.md5(endpoint_uri.encode("utf-8")).hexdigest()
    if cache_key not in _session_cache:
        session = requests.Session()
        adapter = HTTPAdapter(
            pool_connections=env.HTTP_POOL_CONNECTIONS,
            pool_maxsize=env.HTTP_POOL_MAXSIZE,
        )
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        _session_cache[cache_key] = session
    return _session_cache[cache_key]


def make_jsonrpc_request(endpoint_uri, data, *args, **kwargs):
    kwargs.setdefault("timeout", env.REQUEST_TIMEOUT_SECONDS)
    session = _get_session(endpoint_uri)
    response = session.post(endpoint_uri, json=data, *args, **kwargs)
    # qtumd answers RPC errors with HTTP 500 and a JSON body holding the error,
    # let the caller decode the body instead of raising here
    if response.status_code != 500:
        response.raise_for_status()

    return response.content
