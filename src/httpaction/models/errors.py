import errno
import json
from enum import Enum
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel


class FailureKind(str, Enum):
    """How far a failed request got before it failed."""

    RESPONSE = "response"
    NO_RESPONSE = "no_response"
    OTHER = "other"


def response_data(response: httpx.Response) -> Any:
    """Return the response body, decoded as JSON when possible."""
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_code(exception: BaseException) -> Optional[str]:
    """Find the symbolic errno (e.g. ``ECONNREFUSED``) behind a transport error."""
    current: Optional[BaseException] = exception
    while current is not None:
        if isinstance(current, OSError) and current.errno is not None:
            return errno.errorcode.get(current.errno, str(current.errno))
        current = current.__cause__ or current.__context__
    return None


class RequestFailure(BaseModel):
    """Classified description of a failed request attempt."""

    kind: FailureKind
    name: str
    message: str
    code: Optional[str] = None
    status_code: Optional[int] = None
    response_body: Any = None
    request_body: Optional[str] = None
    detail: Optional[str] = None
    is_transport_error: bool = False

    @classmethod
    def from_exception(
        cls,
        exception: BaseException,
        request_body: Optional[str] = None,
        response: Optional[httpx.Response] = None,
    ) -> "RequestFailure":
        """Classify ``exception``.

        ``response`` is passed when the status line arrived but reading the
        body failed; the body is then unavailable.
        """
        name = type(exception).__name__
        message = str(exception) or name
        is_transport_error = isinstance(exception, httpx.HTTPError)

        if isinstance(exception, httpx.HTTPStatusError):
            return cls(
                kind=FailureKind.RESPONSE,
                name=name,
                message=message,
                status_code=exception.response.status_code,
                response_body=response_data(exception.response),
                request_body=request_body,
                detail=repr(exception),
                is_transport_error=is_transport_error,
            )

        if response is not None:
            return cls(
                kind=FailureKind.RESPONSE,
                name=name,
                message=message,
                status_code=response.status_code,
                request_body=request_body,
                detail=repr(exception),
                is_transport_error=is_transport_error,
            )

        if isinstance(exception, httpx.RequestError):
            return cls(
                kind=FailureKind.NO_RESPONSE,
                name=name,
                message=message,
                code=_error_code(exception),
                request_body=request_body,
                detail=repr(exception),
                is_transport_error=is_transport_error,
            )

        return cls(
            kind=FailureKind.OTHER,
            name=name,
            message=message,
            request_body=request_body,
            detail=repr(exception),
            is_transport_error=is_transport_error,
        )

    def transport_record(self) -> Dict[str, Any]:
        """Structured record published as the ``requestError`` output."""
        return {
            "name": self.name,
            "message": self.message,
            "code": self.code,
            "status": self.status_code,
        }

    def failure_record(self) -> Dict[str, Any]:
        """Record sent to the failure channel, shaped by how far the request got."""
        if self.kind == FailureKind.RESPONSE:
            return {"code": self.status_code, "message": self.response_body}
        if self.kind == FailureKind.NO_RESPONSE:
            return {
                "error": "no response received",
                "message": self.message,
                "errorFull": self.detail,
            }
        return {"message": self.message, "data": self.request_body}

    def failure_message(self) -> str:
        return json.dumps(self.failure_record())
