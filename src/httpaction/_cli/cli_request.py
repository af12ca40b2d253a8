import asyncio
import logging
from typing import Optional

import click
from dotenv import load_dotenv
from pydantic import ValidationError

from .._config import InstanceConfig, RequestOptions
from .._services import execute, publish_response
from .._utils._logs import setup_logging
from .._utils._request_spec import RequestSpec
from .._utils.constants import (
    CONTENT_TYPE_JSON,
    DOTENV_FILE,
    METHOD_POST,
    SUPPORTED_METHODS,
)
from ..models import Failure, Success
from ._utils._common import build_headers, input_envvar, select_reporter

logger = logging.getLogger(__name__)

load_dotenv(DOTENV_FILE)


@click.command()
@click.option("--url", required=True, envvar=input_envvar("url"), help="Request URL")
@click.option(
    "--method",
    type=click.Choice(SUPPORTED_METHODS, case_sensitive=False),
    default=METHOD_POST,
    show_default=True,
    envvar=input_envvar("method"),
    help="HTTP method",
)
@click.option(
    "--content-type",
    default=CONTENT_TYPE_JSON,
    show_default=True,
    envvar=input_envvar("contentType"),
    help="Value of the Content-Type header",
)
@click.option(
    "--data",
    default="{}",
    show_default=True,
    envvar=input_envvar("data"),
    help="Request body",
)
@click.option(
    "--timeout",
    type=click.IntRange(min=0),
    default=5000,
    show_default=True,
    envvar=input_envvar("timeout"),
    help="Request timeout in milliseconds",
)
@click.option("--username", envvar=input_envvar("username"), help="Basic auth user")
@click.option(
    "--password", envvar=input_envvar("password"), help="Basic auth password"
)
@click.option(
    "--bearer-token",
    envvar=input_envvar("bearerToken"),
    help="Bearer token for the Authorization header",
)
@click.option(
    "--custom-headers",
    envvar=input_envvar("customHeaders"),
    help="Additional headers as a JSON object",
)
@click.option(
    "--escape-data",
    is_flag=True,
    envvar=input_envvar("escapeData"),
    help="Escape line breaks inside quoted strings of the body",
)
@click.option(
    "--prevent-failure-on-no-response",
    is_flag=True,
    envvar=input_envvar("preventFailureOnNoResponse"),
    help="Do not fail when no response is received",
)
@click.option(
    "--ignore-status-codes",
    envvar=input_envvar("ignoreStatusCodes"),
    help="Comma separated status codes treated as success",
)
@click.option(
    "--retry",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    envvar=input_envvar("retry"),
    help="Number of retries after a failed attempt",
)
@click.option(
    "--retry-wait",
    type=click.IntRange(min=0),
    default=3000,
    show_default=True,
    envvar=input_envvar("retryWait"),
    help="Wait between retries in milliseconds",
)
@click.option(
    "--ignore-ssl",
    is_flag=True,
    envvar=input_envvar("ignoreSsl"),
    help="Skip TLS certificate verification",
)
@click.option(
    "--https-ca",
    type=click.Path(exists=True, dir_okay=False),
    envvar=input_envvar("httpsCA"),
    help="CA bundle used to verify the server",
)
@click.option(
    "--https-cert",
    type=click.Path(exists=True, dir_okay=False),
    envvar=input_envvar("httpsCert"),
    help="Client certificate",
)
@click.option(
    "--https-key",
    type=click.Path(exists=True, dir_okay=False),
    envvar=input_envvar("httpsKey"),
    help="Client certificate key",
)
@click.option(
    "--response-file",
    type=click.Path(dir_okay=False),
    envvar=input_envvar("responseFile"),
    help="File the response body is written to",
)
@click.option(
    "--reporter",
    "reporter_name",
    type=click.Choice(["github", "log"]),
    default=None,
    envvar="HTTPACTION_REPORTER",
    help="Where logs and outputs go (default: github inside GitHub Actions)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def request(
    url: str,
    method: str,
    content_type: str,
    data: str,
    timeout: int,
    username: Optional[str],
    password: Optional[str],
    bearer_token: Optional[str],
    custom_headers: Optional[str],
    escape_data: bool,
    prevent_failure_on_no_response: bool,
    ignore_status_codes: Optional[str],
    retry: int,
    retry_wait: int,
    ignore_ssl: bool,
    https_ca: Optional[str],
    https_cert: Optional[str],
    https_key: Optional[str],
    response_file: Optional[str],
    reporter_name: Optional[str],
    verbose: bool,
) -> None:
    """Send a single HTTP request and publish the response as outputs."""
    setup_logging(verbose)
    reporter = select_reporter(reporter_name)
    ctx = click.get_current_context()

    try:
        instance = InstanceConfig(
            url=url,
            headers=build_headers(content_type, custom_headers),
            timeout=timeout / 1000,
            username=username,
            password=password,
            bearer_token=bearer_token,
            ignore_ssl=ignore_ssl,
            ca_file=https_ca,
            cert_file=https_cert,
            key_file=https_key,
        )
        options = RequestOptions(
            ignored_status_codes=ignore_status_codes,
            prevent_failure_on_no_response=prevent_failure_on_no_response,
            escape_data=escape_data,
            retry_count=retry,
            retry_delay=retry_wait / 1000,
        )
    except (ValidationError, click.BadParameter) as e:
        logger.debug(f"Invalid inputs: {e}")
        reporter.set_failed(f"invalid inputs: {e}")
        ctx.exit(1)

    spec = RequestSpec(method=method.upper(), instance=instance, data=data)
    outcome = asyncio.run(execute(spec, options, reporter))

    if isinstance(outcome, Success):
        publish_response(outcome.response, reporter, response_file)
    elif isinstance(outcome, Failure):
        ctx.exit(1)
