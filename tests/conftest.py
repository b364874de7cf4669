from unittest.mock import Mock

import pytest

from syno_filestation.models import Session
from syno_filestation.transport import HttpTransport
from tests.helpers.responses import json_result


@pytest.fixture
def session():
    return Session(sid="test-sid-123")


@pytest.fixture
def mock_transport():
    transport = Mock(spec=HttpTransport)
    transport.send.return_value = json_result({"success": True, "data": {}})
    return transport


@pytest.fixture(autouse=True)
def clean_synology_env(monkeypatch):
    for key in [
        "SYNOLOGY_BASE_URL",
        "SYNOLOGY_API_PATH",
        "SYNOLOGY_SID",
        "SYNOLOGY_TIMEOUT_SECONDS",
        "SYNOLOGY_VERIFY_SSL",
        "SYNOLOGY_DEBUG",
        "SYNOLOGY_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)
