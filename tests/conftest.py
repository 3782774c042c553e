"""Shared pytest fixtures for all tests."""
import pytest

from chronos_client.core.config import Settings
from chronos_client.services.chronos_client import ChronosClient

CHRONOS_URL = "http://chronos.test:4400"


@pytest.fixture
def settings():
    """Settings pointing at a fake Chronos with a v1 API prefix."""
    return Settings(url=CHRONOS_URL, api_prefix="v1", request_timeout=5)


@pytest.fixture
def api_url():
    """Base URL of the prefixed Chronos API."""
    return f"{CHRONOS_URL}/v1"


@pytest.fixture
def client(settings):
    """Provide a ChronosClient and close it afterwards."""
    client = ChronosClient(settings)
    yield client
    client.close()


@pytest.fixture
def mock_jobs_response():
    """Mock Chronos job listing."""
    return [
        {
            "name": "etl-nightly",
            "command": "python etl.py",
            "shell": True,
            "epsilon": "PT30M",
            "retries": 2,
            "owner": "data@example.com",
            "successCount": 12,
            "errorCount": 1,
            "lastSuccess": "2024-01-02T03:00:05.000Z",
            "lastError": "2023-12-30T03:00:04.000Z",
            "cpus": 0.5,
            "disk": 256.0,
            "mem": 512.0,
            "schedule": "R/2024-01-01T03:00:00.000Z/P1D",
            "scheduleTimeZone": "UTC",
            "parents": [],
        },
        {
            "name": "etl-report",
            "command": "python report.py",
            "shell": True,
            "parents": ["etl-nightly"],
            "container": {
                "type": "DOCKER",
                "image": "registry.local/report:1.4",
                "network": "BRIDGE",
                "volumes": [{"containerPath": "/data", "hostPath": "/srv/data", "mode": "RO"}],
                "parameters": [{"key": "env", "value": "STAGE=prod"}],
            },
        },
    ]


@pytest.fixture
def sample_job_payload():
    """Sample job as a caller would build it."""
    return {
        "name": "cleanup",
        "command": "rm -rf /tmp/scratch",
        "owner": "ops@example.com",
        "cpus": 0.1,
        "mem": 64.0,
        "schedule": "R5//PT1H",
    }
