import asyncio
import json
from typing import Awaitable, Callable, Optional

from httpx import AsyncClient, HTTPStatusError, RequestError
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_result,
    stop_after_attempt,
    wait_fixed,
)

from .._config import RequestOptions
from .._utils._payload import escape_quoted_newlines, to_form_urlencoded
from .._utils._request_spec import RequestSpec
from .._utils.constants import (
    CONTENT_TYPE_URLENCODED,
    HEADER_CONTENT_TYPE,
    METHOD_GET,
    OUTPUT_REQUEST_ERROR,
)
from ..models import (
    Failure,
    Outcome,
    RequestFailure,
    Success,
    Suppressed,
    response_data,
)
from ..reporters import Reporter
from ._client import ClientFactory, create_client

Sleep = Callable[[float], Awaitable[None]]


def is_failure(outcome: Outcome) -> bool:
    return isinstance(outcome, Failure)


def prepare_request(spec: RequestSpec, options: RequestOptions) -> RequestSpec:
    """Apply the body transforms, in order: escaping, GET body drop, form encoding."""
    data = spec.data

    if options.escape_data and data is not None:
        data = escape_quoted_newlines(data)

    if spec.method.upper() == METHOD_GET:
        data = None

    if spec.headers.get(HEADER_CONTENT_TYPE) == CONTENT_TYPE_URLENCODED:
        data = to_form_urlencoded(data)

    return spec.with_data(data)


class RequestService:
    """Executes a single request with retries and reports the outcome.

    The reporter receives every log line, output and failure. ``client_factory``
    builds the HTTP client from the instance configuration and ``sleep`` waits
    between retries; both can be replaced for tests.
    """

    def __init__(
        self,
        reporter: Reporter,
        client_factory: ClientFactory = create_client,
        sleep: Optional[Sleep] = None,
    ) -> None:
        self._reporter = reporter
        self._client_factory = client_factory
        self._sleep = sleep or asyncio.sleep

    async def execute(self, spec: RequestSpec, options: RequestOptions) -> Outcome:
        self._reporter.debug(f"options: {options.model_dump_json()}")

        try:
            prepared = prepare_request(spec, options)

            self._reporter.debug(
                "Instance Configuration: " + json.dumps(spec.instance.redacted())
            )
            self._reporter.debug("Request Data: " + json.dumps(prepared.descriptor()))

            async with self._client_factory(prepared.instance) as client:
                outcome = await self._retrying(options)(
                    self._attempt, client, prepared, options
                )
        except Exception as e:
            outcome = Failure(RequestFailure.from_exception(e, spec.data))

        if isinstance(outcome, Failure):
            self._report_failure(outcome.error)

        return outcome

    def _retrying(self, options: RequestOptions) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(options.retry_count + 1),
            wait=wait_fixed(options.retry_delay),
            retry=retry_if_result(is_failure),
            before_sleep=self._log_retry,
            retry_error_callback=lambda state: state.outcome.result(),
            sleep=self._sleep,
        )

    def _log_retry(self, retry_state: RetryCallState) -> None:
        outcome = retry_state.outcome.result()
        self._reporter.warning(
            f"#{retry_state.attempt_number} request failed: {outcome.error.message}"
        )

    async def _attempt(
        self, client: AsyncClient, spec: RequestSpec, options: RequestOptions
    ) -> Outcome:
        try:
            request = client.build_request(
                spec.method, spec.instance.url, content=spec.data
            )
            response = await client.send(request, stream=True)
        except RequestError as e:
            if options.prevent_failure_on_no_response:
                self._reporter.warning(
                    "no response received: "
                    + json.dumps({"name": type(e).__name__, "message": str(e)})
                )
                return Suppressed(message=str(e))
            return Failure(RequestFailure.from_exception(e, spec.data))
        except Exception as e:
            return Failure(RequestFailure.from_exception(e, spec.data))

        try:
            await response.aread()
        except Exception as e:
            # the response arrived but its body could not be read
            await response.aclose()
            return Failure(
                RequestFailure.from_exception(e, spec.data, response=response)
            )

        try:
            response.raise_for_status()
            return Success(response)
        except HTTPStatusError as e:
            if e.response.status_code in options.ignored_status_codes:
                self._reporter.warning(
                    "ignored status code: "
                    + json.dumps(
                        {
                            "code": e.response.status_code,
                            "message": response_data(e.response),
                        }
                    )
                )
                return Success(e.response, ignored_status=True)
            return Failure(RequestFailure.from_exception(e, spec.data))

    def _report_failure(self, error: RequestFailure) -> None:
        if error.is_transport_error:
            self._reporter.set_output(
                OUTPUT_REQUEST_ERROR, json.dumps(error.transport_record())
            )
        self._reporter.set_failed(error.failure_message())


async def execute(
    spec: RequestSpec, options: RequestOptions, reporter: Reporter
) -> Outcome:
    """Execute ``spec`` with ``options``, reporting through ``reporter``."""
    return await RequestService(reporter).execute(spec, options)
