import json
from typing import Any

import pytest

from tests.payloads import make_payload


@pytest.fixture
def payload() -> dict[str, Any]:
    """Default payload dict."""
    return make_payload()


@pytest.fixture
def payload_json(payload: dict[str, Any]) -> str:
    """Default payload as JSON text."""
    return json.dumps(payload)
