import sys
from pathlib import Path
from typing import Generator

import pytest

from plugin_http import RequestClient

# Ensure local source package (src/plugin_http) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def base_url() -> str:
    return "https://billing.example.com/api"


@pytest.fixture
def username() -> str:
    return "user"


@pytest.fixture
def password() -> str:
    return "pass"


@pytest.fixture
def client(
    base_url: str, username: str, password: str
) -> Generator[RequestClient, None, None]:
    client = RequestClient(base_url, username=username, password=password)
    yield client
    client.close()


@pytest.fixture
def anonymous_client(base_url: str) -> Generator[RequestClient, None, None]:
    client = RequestClient(base_url)
    yield client
    client.close()
