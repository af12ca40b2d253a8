from .errors import FailureKind, RequestFailure, response_data
from .outcome import Failure, Outcome, Success, Suppressed

__all__ = [
    "Failure",
    "FailureKind",
    "Outcome",
    "RequestFailure",
    "Success",
    "Suppressed",
    "response_data",
]
