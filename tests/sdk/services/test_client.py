import ssl

from httpx import BasicAuth

from httpaction import InstanceConfig
from httpaction._services import get_httpx_client_kwargs


class TestClientKwargs:
    def test_defaults(self):
        kwargs = get_httpx_client_kwargs(
            InstanceConfig(url="https://api.example.com", headers={"X-A": "1"})
        )

        assert kwargs["headers"]["X-A"] == "1"
        assert kwargs["follow_redirects"] is True
        assert kwargs["timeout"].read == 5.0
        assert isinstance(kwargs["verify"], ssl.SSLContext)
        assert "auth" not in kwargs

    def test_basic_auth(self):
        kwargs = get_httpx_client_kwargs(
            InstanceConfig(url="https://api.example.com", username="ci", password="pw")
        )
        assert isinstance(kwargs["auth"], BasicAuth)

    def test_bearer_token(self):
        kwargs = get_httpx_client_kwargs(
            InstanceConfig(url="https://api.example.com", bearer_token="tok")
        )
        assert kwargs["headers"]["Authorization"] == "Bearer tok"

    def test_explicit_authorization_header_wins(self):
        kwargs = get_httpx_client_kwargs(
            InstanceConfig(
                url="https://api.example.com",
                headers={"authorization": "Token custom"},
                bearer_token="tok",
            )
        )
        assert kwargs["headers"]["Authorization"] == "Token custom"

    def test_ignore_ssl(self):
        kwargs = get_httpx_client_kwargs(
            InstanceConfig(url="https://api.example.com", ignore_ssl=True)
        )
        assert kwargs["verify"] is False

    def test_no_timeout(self):
        kwargs = get_httpx_client_kwargs(
            InstanceConfig(url="https://api.example.com", timeout=None)
        )
        assert kwargs["timeout"].read is None

    def test_zero_timeout_disables_timeout(self):
        kwargs = get_httpx_client_kwargs(
            InstanceConfig(url="https://api.example.com", timeout=0)
        )
        assert kwargs["timeout"].connect is None
        assert kwargs["timeout"].read is None
