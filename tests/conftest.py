from __future__ import annotations

from email.message import EmailMessage

import pytest
from fastapi.testclient import TestClient

from carbath.config import Settings
from carbath.main import create_app
from carbath.services.slots import SlotRegistry


class FakeMailer:
    """Collects messages instead of talking to SMTP."""

    def __init__(self) -> None:
        self.sent: list[EmailMessage] = []
        self.fail = False

    def send(self, message: EmailMessage) -> None:
        if self.fail:
            raise ConnectionRefusedError("SMTP unreachable")
        self.sent.append(message)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        email_user="bookings@thecarbath.example",
        email_pass="secret",
        notify_to="owner@thecarbath.example",
        cors_origin="https://thecarbath.example",
    )


@pytest.fixture
def registry() -> SlotRegistry:
    return SlotRegistry()


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def client(settings: Settings, registry: SlotRegistry, mailer: FakeMailer) -> TestClient:
    app = create_app(settings=settings, registry=registry, mailer=mailer)
    return TestClient(app)


@pytest.fixture
def booking_payload() -> dict:
    return {
        "service": "Full Valet",
        "businessPark": "Lot A",
        "firstName": "Sam",
        "lastName": "Taylor",
        "email": "sam@example.com",
        "phone": "07700 900123",
        "vehicleMake": "Ford",
        "vehicleModel": "Focus",
        "vehicleYear": 2019,
        "vehicleColor": "Blue",
        "preferredDate": "2024-06-01",
        "preferredTime": "10:00",
        "notes": "Dog hair in the boot",
        "agreedToTerms": True,
    }
