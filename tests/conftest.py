import sys
from pathlib import Path
from typing import List
from unittest.mock import Mock

import pytest
from click.testing import CliRunner

# Ensure local source package (src/httpaction) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from httpaction import InstanceConfig, LoggingReporter, RequestService  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
    monkeypatch.delenv("HTTPACTION_REPORTER", raising=False)


@pytest.fixture
def url() -> str:
    return "https://api.example.com/hooks/deploy"


@pytest.fixture
def instance(url: str) -> InstanceConfig:
    return InstanceConfig(url=url, headers={"Content-Type": "application/json"})


@pytest.fixture
def reporter() -> Mock:
    return Mock(spec=LoggingReporter)


@pytest.fixture
def sleeps() -> List[float]:
    """Delays requested between retries, in order."""
    return []


@pytest.fixture
def service(reporter: Mock, sleeps: List[float]) -> RequestService:
    async def fake_sleep(seconds: float) -> None:
        sleeps.append(seconds)

    return RequestService(reporter, sleep=fake_sleep)
