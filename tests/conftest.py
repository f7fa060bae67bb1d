"""
Shared fixtures for flight service tests
"""

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from flight_service.clients.data_gateway import InMemoryDataGateway, SqlDataGateway
from flight_service.main import create_app
from flight_service.services.audit_logger import AuditLogger
from flight_service.types import ClassificationRecord, FlightOffer

MEMORY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def sample_flight():
    """Flight priced below the premium threshold"""
    return FlightOffer(
        id=1,
        origin="NYC",
        destination="LAX",
        departure_time="2025-06-01T08:00:00",
        arrival_time="2025-06-01T11:00:00",
        price=199.0
    )


@pytest.fixture
def premium_flight():
    """Flight priced above the premium threshold"""
    return FlightOffer(
        id=3,
        origin="NYC",
        destination="SFO",
        departure_time="2025-06-02T07:15:00",
        arrival_time="2025-06-02T10:40:00",
        price=329.0
    )


@pytest.fixture
def memory_gateway(sample_flight, premium_flight):
    """In-memory gateway holding the sample flights"""
    gateway = InMemoryDataGateway()
    gateway.flights[sample_flight.id] = sample_flight
    gateway.flights[premium_flight.id] = premium_flight
    return gateway


@pytest.fixture
def human_record():
    """Classification of a caller with no signals"""
    return ClassificationRecord()


@pytest.fixture
def bot_record():
    """Classification of a self-declared bot"""
    return ClassificationRecord(confidence_score=0.9, agent_type="bot")


@pytest.fixture
def mock_audit():
    """Audit logger double"""
    return MagicMock(spec=AuditLogger)


@pytest.fixture
def classification_events():
    """Collected classification events"""
    return []


@pytest.fixture
def audit():
    """Enabled audit logger"""
    return AuditLogger(enabled=True)


@pytest.fixture
def client(classification_events, audit):
    """Test client over a seeded in-memory SQL store"""
    app = create_app(
        gateway=SqlDataGateway(MEMORY_DATABASE_URL),
        classification_sink=classification_events.append,
        audit=audit,
        seed_demo_data=True
    )
    with TestClient(app) as client:
        yield client
