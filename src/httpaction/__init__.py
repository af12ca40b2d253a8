"""Execute a single HTTP request from an automation pipeline.

Example:
    >>> import asyncio
    >>> from httpaction import InstanceConfig, LoggingReporter, RequestOptions, RequestSpec, execute
    >>> spec = RequestSpec("GET", InstanceConfig(url="https://example.com"))
    >>> outcome = asyncio.run(execute(spec, RequestOptions(), LoggingReporter()))
"""

from ._config import InstanceConfig, RequestOptions
from ._services import (
    RequestService,
    create_client,
    execute,
    prepare_request,
    publish_response,
)
from ._utils._request_spec import RequestSpec
from .models import (
    Failure,
    FailureKind,
    Outcome,
    RequestFailure,
    Success,
    Suppressed,
)
from .reporters import GitHubActionsReporter, LoggingReporter, Reporter

__all__ = [
    "Failure",
    "FailureKind",
    "GitHubActionsReporter",
    "InstanceConfig",
    "LoggingReporter",
    "Outcome",
    "Reporter",
    "RequestFailure",
    "RequestOptions",
    "RequestService",
    "RequestSpec",
    "Success",
    "Suppressed",
    "create_client",
    "execute",
    "prepare_request",
    "publish_response",
]
