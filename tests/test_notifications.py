from __future__ import annotations

import pytest

from carbath.config import Settings
from carbath.schemas.bookings import BookingSubmission
from carbath.services import notifications
from carbath.services.notifications import SmtpMailer, build_booking_email


class FakeSMTP:
    instances: list["FakeSMTP"] = []

    def __init__(self, host: str, port: int, timeout: float) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout
        self.started_tls = False
        self.logged_in: tuple[str, str] | None = None
        self.messages = []
        FakeSMTP.instances.append(self)

    def __enter__(self) -> "FakeSMTP":
        return self

    def __exit__(self, *exc) -> None:
        return None

    def ehlo(self) -> None:
        pass

    def has_extn(self, name: str) -> bool:
        return name == "starttls"

    def starttls(self) -> None:
        self.started_tls = True

    def login(self, user: str, password: str) -> None:
        self.logged_in = (user, password)

    def send_message(self, message) -> None:
        self.messages.append(message)


@pytest.fixture
def submission(booking_payload: dict) -> BookingSubmission:
    return BookingSubmission.model_validate(booking_payload)


def test_build_booking_email_headers(submission: BookingSubmission, settings: Settings) -> None:
    message = build_booking_email(submission, "bk-1", settings)

    assert message["To"] == "owner@thecarbath.example"
    assert message["Reply-To"] == "sam@example.com"
    assert message["Subject"] == "New Booking – Full Valet – Sam Taylor"
    assert "The Car Bath Website" in message["From"]
    assert "bookings@thecarbath.example" in message["From"]


def test_build_booking_email_html_body(submission: BookingSubmission, settings: Settings) -> None:
    message = build_booking_email(submission, "bk-1", settings)
    html = message.get_body(preferencelist=("html",)).get_content()

    assert "<strong>Booking ID:</strong> bk-1" in html
    assert "<strong>Vehicle:</strong> 2019 Ford Focus" in html
    assert "<strong>Business Park:</strong> Lot A" in html
    assert "<strong>Agreed To Terms:</strong> Yes" in html


def test_recipient_falls_back_to_email_user(submission: BookingSubmission) -> None:
    settings = Settings(_env_file=None, email_user="bookings@thecarbath.example")
    message = build_booking_email(submission, "bk-1", settings)
    assert message["To"] == "bookings@thecarbath.example"


def test_empty_optionals_render_as_dash(booking_payload: dict, settings: Settings) -> None:
    booking_payload.pop("notes")
    booking_payload.pop("agreedToTerms")
    submission = BookingSubmission.model_validate(booking_payload)

    html = build_booking_email(submission, "bk-1", settings).get_body(preferencelist=("html",)).get_content()
    assert "<strong>Notes:</strong> -" in html
    assert "<strong>Agreed To Terms:</strong> No" in html


def test_smtp_mailer_uses_starttls_and_login(
    monkeypatch: pytest.MonkeyPatch,
    submission: BookingSubmission,
    settings: Settings,
) -> None:
    FakeSMTP.instances.clear()
    monkeypatch.setattr(notifications.smtplib, "SMTP", FakeSMTP)

    SmtpMailer(settings).send(build_booking_email(submission, "bk-1", settings))

    (smtp,) = FakeSMTP.instances
    assert (smtp.host, smtp.port) == ("smtp.gmail.com", 587)
    assert smtp.started_tls
    assert smtp.logged_in == ("bookings@thecarbath.example", "secret")
    assert len(smtp.messages) == 1


def test_smtp_mailer_requires_recipient(
    monkeypatch: pytest.MonkeyPatch,
    submission: BookingSubmission,
) -> None:
    monkeypatch.setattr(notifications.smtplib, "SMTP", FakeSMTP)
    settings = Settings(_env_file=None)

    with pytest.raises(RuntimeError, match=r"No notification recipient"):
        SmtpMailer(settings).send(build_booking_email(submission, "bk-1", settings))
