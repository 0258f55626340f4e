from __future__ import annotations  # noqa: D100

import pytest

from moat.dmap.config import CFG_ENV


@pytest.fixture(autouse=True, scope="session")
def anyio_backend():
    "never use asyncio for testing"
    return "trio"


@pytest.fixture(autouse=True)
def no_env_cfg(monkeypatch):
    """
    This fixture ensures that a config file named in the environment
    doesn't leak into the tests.
    """
    monkeypatch.delenv(CFG_ENV, raising=False)
