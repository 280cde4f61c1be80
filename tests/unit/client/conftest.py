from typing import AsyncGenerator

import pytest

from src.client.daybook_client import DaybookClient


@pytest.fixture
async def daybook_client() -> AsyncGenerator[DaybookClient, None]:
    async with DaybookClient(
        base_url="http://daybook.test/", api_key="test-key"
    ) as client:
        yield client
