"""
Tests for the proxy validation script.

The script lives outside the package, so it is loaded from its path and
run against a mocked SaavnService.
"""

import importlib.util
from datetime import datetime
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "validate_saavn.py"


@pytest.fixture
def validate_module():
    spec = importlib.util.spec_from_file_location("validate_saavn", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def service():
    client = MagicMock()
    client.get_service_info.return_value = {"failover": {"current_base_url": "https://primary.example.com"}}

    service = MagicMock()
    service.__aenter__ = AsyncMock(return_value=service)
    service.__aexit__ = AsyncMock(return_value=False)
    service.search_songs = AsyncMock(side_effect=RuntimeError("offline"))
    service.client_manager.get_saavn_client = AsyncMock(return_value=client)
    return service


class TestRunValidation:
    """Test the validation report."""

    @pytest.mark.asyncio
    async def test_report_timestamp_is_timezone_aware(self, validate_module, service, one_url_config, monkeypatch):
        monkeypatch.setattr(validate_module, "SaavnService", MagicMock(return_value=service))

        report = await validate_module.SaavnValidator(one_url_config).run_validation()

        assert datetime.fromisoformat(report["timestamp"]).utcoffset().total_seconds() == 0
        assert report["search"]["success_rate"] == 0
        assert report["songs"] == {"skipped": "no search results"}
        assert report["failover"] == {"current_base_url": "https://primary.example.com"}
