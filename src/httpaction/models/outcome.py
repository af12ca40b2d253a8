from dataclasses import dataclass
from typing import Union

import httpx

from .errors import RequestFailure


@dataclass(frozen=True)
class Success:
    """A response was received and is considered successful.

    ``ignored_status`` is set when the status code was an error that the caller
    asked to ignore.
    """

    response: httpx.Response
    ignored_status: bool = False


@dataclass(frozen=True)
class Suppressed:
    """No response was received and the failure was suppressed."""

    message: str


@dataclass(frozen=True)
class Failure:
    """The request failed and the failure has been reported."""

    error: RequestFailure


Outcome = Union[Success, Suppressed, Failure]
