import json
from pathlib import Path
from typing import Optional, Union

from httpx import Response

from .._utils.constants import OUTPUT_HEADERS, OUTPUT_RESPONSE, OUTPUT_STATUS
from ..models import response_data
from ..reporters import Reporter


def publish_response(
    response: Response,
    reporter: Reporter,
    response_file: Optional[Union[str, Path]] = None,
) -> None:
    """Publish the ``response``, ``headers`` and ``status`` outputs.

    The raw body is also written to ``response_file`` when one is given.
    """
    data = response_data(response)
    body = data if isinstance(data, str) else json.dumps(data)

    reporter.set_output(OUTPUT_RESPONSE, body)
    reporter.set_output(OUTPUT_HEADERS, json.dumps(dict(response.headers)))
    reporter.set_output(OUTPUT_STATUS, response.status_code)

    if response_file:
        path = Path(response_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(response.content)
        reporter.debug(f"response written to {path}")
