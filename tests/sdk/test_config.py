import pytest
from pydantic import ValidationError

from httpaction import InstanceConfig, RequestOptions


class TestRequestOptions:
    def test_defaults(self):
        options = RequestOptions()

        assert options.ignored_status_codes == set()
        assert options.prevent_failure_on_no_response is False
        assert options.escape_data is False
        assert options.retry_count == 0
        assert options.retry_delay == 3.0

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("404", {404}),
            ("404, 409,", {404, 409}),
            ("", set()),
            (None, set()),
            ([500, 502], {500, 502}),
        ],
    )
    def test_ignored_status_codes(self, value, expected):
        assert RequestOptions(ignored_status_codes=value).ignored_status_codes == expected

    def test_invalid_status_code(self):
        with pytest.raises(ValidationError):
            RequestOptions(ignored_status_codes="404,abc")

    @pytest.mark.parametrize(
        "field, value", [("retry_count", -1), ("retry_delay", -0.5)]
    )
    def test_negative_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            RequestOptions(**{field: value})

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            RequestOptions(retries=3)


class TestInstanceConfig:
    def test_empty_url_rejected(self):
        with pytest.raises(ValidationError):
            InstanceConfig(url="   ")

    def test_redacted_masks_secrets(self):
        instance = InstanceConfig(
            url="https://api.example.com",
            headers={"authorization": "Token abc", "Accept": "application/json"},
            username="ci",
            password="hunter2",
            bearer_token="secret-token",
        )

        redacted = instance.redacted()

        assert redacted["password"] == "***"
        assert redacted["bearer_token"] == "***"
        assert redacted["headers"] == {
            "authorization": "***",
            "Accept": "application/json",
        }
        assert redacted["username"] == "ci"
        assert instance.password == "hunter2"

    def test_redacted_keeps_unset_secrets_empty(self):
        redacted = InstanceConfig(url="https://api.example.com").redacted()
        assert redacted["password"] is None
        assert redacted["bearer_token"] is None
