from ._client import create_client, get_httpx_client_kwargs
from ._outputs import publish_response
from .request_service import RequestService, execute, prepare_request

__all__ = [
    "RequestService",
    "create_client",
    "execute",
    "get_httpx_client_kwargs",
    "prepare_request",
    "publish_response",
]
