from typing import Any, Dict, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._utils.constants import DEFAULT_RETRY_DELAY_SECONDS, DEFAULT_TIMEOUT_SECONDS

_REDACTED = "***"


class InstanceConfig(BaseModel):
    """Target of a request: URL, headers, authentication, timeout and TLS."""

    model_config = ConfigDict(extra="forbid")

    url: str
    headers: Dict[str, str] = Field(default_factory=dict)
    timeout: Optional[float] = Field(default=DEFAULT_TIMEOUT_SECONDS, ge=0)
    username: Optional[str] = None
    password: Optional[str] = None
    bearer_token: Optional[str] = None
    ignore_ssl: bool = False
    ca_file: Optional[str] = None
    cert_file: Optional[str] = None
    key_file: Optional[str] = None

    @field_validator("url")
    @classmethod
    def _require_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("url must not be empty")
        return value

    def redacted(self) -> Dict[str, Any]:
        """Return a JSON-safe dump with credentials masked."""
        dump = self.model_dump(mode="json")
        for key in ("password", "bearer_token"):
            if dump.get(key):
                dump[key] = _REDACTED
        headers = dict(dump.get("headers") or {})
        for name in headers:
            if name.lower() == "authorization":
                headers[name] = _REDACTED
        dump["headers"] = headers
        return dump


class RequestOptions(BaseModel):
    """Behavior modifiers for a single request execution."""

    model_config = ConfigDict(extra="forbid")

    ignored_status_codes: Set[int] = Field(default_factory=set)
    prevent_failure_on_no_response: bool = False
    escape_data: bool = False
    retry_count: int = Field(default=0, ge=0)
    retry_delay: float = Field(default=DEFAULT_RETRY_DELAY_SECONDS, ge=0)

    @field_validator("ignored_status_codes", mode="before")
    @classmethod
    def _split_status_codes(cls, value: Any) -> Any:
        """Support providing status codes as a comma-separated string."""
        if value is None:
            return set()
        if isinstance(value, str):
            return {int(code.strip()) for code in value.split(",") if code.strip()}
        return value
