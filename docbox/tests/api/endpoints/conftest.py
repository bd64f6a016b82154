from unittest.mock import AsyncMock, Mock

import pytest

from docbox.api.http_client import AsyncHttpClient


@pytest.fixture
def mock_http() -> Mock:
    http = Mock(spec=AsyncHttpClient)
    http.request = AsyncMock(return_value={})
    return http
