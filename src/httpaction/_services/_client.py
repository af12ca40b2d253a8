from typing import Any, Callable, Dict

from httpx import AsyncClient, BasicAuth, Headers, Timeout

from .._config import InstanceConfig
from .._utils._ssl_context import get_verify
from .._utils.constants import HEADER_AUTHORIZATION

ClientFactory = Callable[[InstanceConfig], AsyncClient]


def get_httpx_client_kwargs(instance: InstanceConfig) -> Dict[str, Any]:
    """Translate an instance configuration into ``httpx.AsyncClient`` arguments."""
    headers = Headers(instance.headers)
    if instance.bearer_token and HEADER_AUTHORIZATION not in headers:
        headers[HEADER_AUTHORIZATION] = f"Bearer {instance.bearer_token}"

    kwargs: Dict[str, Any] = {
        "headers": headers,
        # zero disables the timeout
        "timeout": Timeout(instance.timeout or None),
        "follow_redirects": True,
        "verify": get_verify(
            ignore_ssl=instance.ignore_ssl,
            ca_file=instance.ca_file,
            cert_file=instance.cert_file,
            key_file=instance.key_file,
        ),
    }

    if instance.username is not None:
        kwargs["auth"] = BasicAuth(instance.username, instance.password or "")

    return kwargs


def create_client(instance: InstanceConfig) -> AsyncClient:
    return AsyncClient(**get_httpx_client_kwargs(instance))
