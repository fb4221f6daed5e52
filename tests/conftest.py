import sys
from pathlib import Path
from typing import Callable

import httpx
import pytest

# Ensure local source package (src/restify) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from restify import Config, Executor  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "RESTIFY_CONNECT_TIMEOUT",
        "RESTIFY_READ_TIMEOUT",
        "RESTIFY_USER_AGENT",
        "RESTIFY_FOLLOW_REDIRECTS",
        "RESTIFY_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return "http://localhost:7000"


@pytest.fixture
def user_agent() -> str:
    return "restify-tests/1.0"


@pytest.fixture
def config(user_agent: str) -> Config:
    return Config(user_agent=user_agent)


@pytest.fixture
def executor(config: Config) -> Executor:
    return Executor(config=config)


@pytest.fixture
def unreachable_transport() -> httpx.MockTransport:
    """A transport that fails the test if anything is sent through it."""

    def handler(request: httpx.Request) -> httpx.Response:
        pytest.fail(f"Unexpected request: {request.method} {request.url}")

    return httpx.MockTransport(handler)


@pytest.fixture
def transport_executor(
    config: Config,
) -> Callable[[httpx.BaseTransport], Executor]:
    def factory(transport: httpx.BaseTransport) -> Executor:
        return Executor(config=config, transport=transport)

    return factory
