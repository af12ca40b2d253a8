"""Reporters receive the logs, outputs and failures of a request execution.

The executor never writes to the console or the process state itself. It is
handed a reporter and routes everything through it, so the same execution can
drive a GitHub Actions step or a plain Python logger.
"""

import logging
import os
import sys
import uuid
from typing import Any, Dict, List, Optional, Protocol, TextIO

import click

from ._utils.constants import ENV_GITHUB_OUTPUT

logger = logging.getLogger("httpaction")


class Reporter(Protocol):
    """Capability used by the executor to report what happens."""

    def debug(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def set_output(self, key: str, value: Any) -> None: ...

    def set_failed(self, message: str) -> None: ...


def _to_command_value(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def escape_command_data(value: str) -> str:
    """Escape workflow command data the way the Actions toolkit does."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_command_data(value).replace(":", "%3A").replace(",", "%2C")


class GitHubActionsReporter:
    """Reporter speaking the GitHub Actions workflow command protocol."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        output_file: Optional[str] = None,
    ) -> None:
        self._stream = stream
        self._output_file = output_file or os.environ.get(ENV_GITHUB_OUTPUT)
        self.exit_code = 0

    def _issue(self, command: str, message: str = "", **properties: str) -> None:
        props = ",".join(
            f"{key}={escape_property(value)}" for key, value in properties.items()
        )
        prefix = f"::{command} {props}::" if props else f"::{command}::"
        click.echo(
            f"{prefix}{escape_command_data(message)}", file=self._stream or sys.stdout
        )

    def debug(self, message: str) -> None:
        self._issue("debug", message)

    def warning(self, message: str) -> None:
        self._issue("warning", message)

    def set_output(self, key: str, value: Any) -> None:
        value = _to_command_value(value)
        if not self._output_file:
            self._issue("set-output", value, name=key)
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in key or delimiter in value:
            raise ValueError(
                f"Unexpected input: output delimiter '{delimiter}' found in {key!r}"
            )
        with open(self._output_file, "a", encoding="utf-8") as output:
            output.write(f"{key}<<{delimiter}\n{value}\n{delimiter}\n")

    def set_failed(self, message: str) -> None:
        self.exit_code = 1
        self._issue("error", message)

    @property
    def failed(self) -> bool:
        return self.exit_code != 0


class LoggingReporter:
    """Reporter routing everything to the ``httpaction`` logger.

    Outputs and failures are kept in memory so callers can inspect them after
    the execution finished.
    """

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self._logger = log or logger
        self.outputs: Dict[str, Any] = {}
        self.failures: List[str] = []

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def set_output(self, key: str, value: Any) -> None:
        self._logger.info(f"output {key}: {value}")
        self.outputs[key] = value

    def set_failed(self, message: str) -> None:
        self._logger.error(message)
        self.failures.append(message)

    @property
    def failed(self) -> bool:
        return bool(self.failures)
