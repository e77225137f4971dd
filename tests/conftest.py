from unittest.mock import AsyncMock

import httpx
import pytest

from kissmetrics.models.types import ClientConfig
from kissmetrics.providers.tracking.kissmetrics_adapter import KissmetricsTrackingAdapter
from tests.factories import FROZEN_NOW, make_response


@pytest.fixture
def http_client():
    """Mock httpx client answering every GET with a 200."""
    client = AsyncMock(spec=httpx.AsyncClient)
    client.get = AsyncMock(return_value=make_response())
    return client


@pytest.fixture
def adapter(http_client):
    return KissmetricsTrackingAdapter(
        ClientConfig(key="test-key"), client=http_client, clock=lambda: FROZEN_NOW
    )
