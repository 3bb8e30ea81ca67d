import os
import sys

import pytest
import structlog

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fn_selector import SelectorValue  # noqa: E402
from fn_selector.core.config import settings  # noqa: E402


@pytest.fixture
def transfer_value() -> SelectorValue:
    """ERC-20 transfer declaration, written the way it appears in source."""
    return SelectorValue.from_signature(
        "function transfer(address recipient, uint256 amount)"
    )


@pytest.fixture
def quiet_sentinels(monkeypatch):
    """Disable sentinel warnings for tests that only care about return values."""
    monkeypatch.setattr(settings, "LOG_SENTINELS", False)


@pytest.fixture
def reset_structlog():
    """Undo global structlog configuration made by a test."""
    yield
    structlog.reset_defaults()
