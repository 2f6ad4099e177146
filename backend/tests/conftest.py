"""Root conftest - shared test configuration and fixtures."""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Human-readable logs when a test run prints them
os.environ.setdefault("LOG_FORMAT", "text")

from peaks.core.peak import Peak  # noqa: E402
from peaks.infrastructure.peak_repository import (  # noqa: E402
    InMemoryPeakRepository, get_peak_repository,
)
from peaks.main import app  # noqa: E402


@pytest.fixture
def repository():
    """Fresh, empty catalog per test."""
    return InMemoryPeakRepository()


@pytest.fixture
def sample_peaks():
    """Small dataset with a height tie (Kazbek / Dykh-Tau) and mixed-case countries."""
    return [
        Peak(name="Elbrus", country="Russia", height=5642, coordinates="43.35, 42.44"),
        Peak(name="Kazbek", country="Georgia", height=5047, coordinates="42.70, 44.52"),
        Peak(name="Mont Blanc", country="France", height=4808, coordinates="45.83, 6.86"),
        Peak(name="Dykh-Tau", country="russia", height=5047, coordinates="43.05, 43.13"),
        Peak(name="Kilimanjaro", country="Tanzania", height=5895, coordinates="-3.07, 37.35"),
        Peak(name="Aconcagua", country="Argentina", height=6961, coordinates="-32.65, -70.01"),
    ]


@pytest.fixture
def seeded_repository(repository, sample_peaks):
    for peak in sample_peaks:
        repository.add(peak)
    return repository


@pytest.fixture
async def client(repository):
    """FastAPI test client with the catalog dependency overridden."""
    app.dependency_overrides[get_peak_repository] = lambda: repository

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
