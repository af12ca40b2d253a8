import json
import logging
from pathlib import Path

import httpx
import pytest

from httpaction import LoggingReporter, publish_response


@pytest.fixture
def reporter() -> LoggingReporter:
    return LoggingReporter(logging.getLogger("tests.outputs"))


class TestPublishResponse:
    def test_json_response(self, reporter: LoggingReporter):
        response = httpx.Response(
            200, json={"id": 1, "name": "deploy"}, headers={"X-Request-Id": "abc"}
        )

        publish_response(response, reporter)

        assert json.loads(reporter.outputs["response"]) == {"id": 1, "name": "deploy"}
        assert reporter.outputs["status"] == 200
        headers = json.loads(reporter.outputs["headers"])
        assert headers["x-request-id"] == "abc"
        assert headers["content-type"] == "application/json"

    def test_text_response(self, reporter: LoggingReporter):
        publish_response(httpx.Response(202, text="accepted"), reporter)

        assert reporter.outputs["response"] == "accepted"
        assert reporter.outputs["status"] == 202

    def test_writes_response_file(self, reporter: LoggingReporter, tmp_path: Path):
        response_file = tmp_path / "out" / "response.json"

        publish_response(
            httpx.Response(200, content=b'{"a":1}'), reporter, response_file
        )

        assert response_file.read_bytes() == b'{"a":1}'
