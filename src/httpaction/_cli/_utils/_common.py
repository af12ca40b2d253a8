import json
import os
from typing import Dict, Optional

import click

from ...reporters import GitHubActionsReporter, LoggingReporter, Reporter
from ..._utils.constants import (
    ENV_GITHUB_ACTIONS,
    ENV_INPUT_PREFIX,
    HEADER_CONTENT_TYPE,
)


def input_envvar(name: str) -> str:
    """Environment variable GitHub Actions uses for the action input ``name``."""
    return f"{ENV_INPUT_PREFIX}{name.replace(' ', '_').upper()}"


def parse_custom_headers(value: Optional[str]) -> Dict[str, str]:
    if not value or not value.strip():
        return {}

    try:
        headers = json.loads(value)
    except ValueError as e:
        raise click.BadParameter(f"custom headers must be valid JSON: {e}") from e

    if not isinstance(headers, dict):
        raise click.BadParameter("custom headers must be a JSON object")

    return {str(key): str(val) for key, val in headers.items()}


def build_headers(
    content_type: Optional[str], custom_headers: Optional[str]
) -> Dict[str, str]:
    custom = parse_custom_headers(custom_headers)

    headers: Dict[str, str] = {}
    overridden = any(name.lower() == HEADER_CONTENT_TYPE.lower() for name in custom)
    if content_type and not overridden:
        headers[HEADER_CONTENT_TYPE] = content_type
    headers.update(custom)
    return headers


def select_reporter(name: Optional[str]) -> Reporter:
    if name is None:
        name = "github" if os.environ.get(ENV_GITHUB_ACTIONS) == "true" else "log"

    if name == "github":
        return GitHubActionsReporter()
    return LoggingReporter()
