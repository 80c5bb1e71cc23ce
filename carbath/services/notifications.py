# carbath/services/notifications.py
"""
Booking notification email.

Contents:
- render_booking_html() — HTML summary of a booking
- build_booking_email() — ready-to-send EmailMessage
- SmtpMailer — SMTP delivery (STARTTLS when offered)
"""

import logging
import smtplib
from email.message import EmailMessage
from email.utils import formataddr

from ..config import Settings
from ..schemas.bookings import BookingSubmission

logger = logging.getLogger(__name__)

SENDER_NAME = "The Car Bath Website"


def render_booking_html(submission: BookingSubmission, booking_id: str) -> str:
    return f"""
    <h2>New Booking Request</h2>
    <p><strong>Booking ID:</strong> {booking_id}</p>
    <p><strong>Name:</strong> {submission.full_name}</p>
    <p><strong>Email:</strong> {submission.email}</p>
    <p><strong>Phone:</strong> {submission.phone}</p>
    <p><strong>Service:</strong> {submission.service}</p>
    <p><strong>Business Park:</strong> {submission.location}</p>
    <p><strong>Date:</strong> {submission.preferred_date}</p>
    <p><strong>Time:</strong> {submission.preferred_time}</p>
    <hr />
    <p><strong>Vehicle:</strong> {submission.vehicle}</p>
    <p><strong>Color:</strong> {submission.vehicle_color or '-'}</p>
    <p><strong>Notes:</strong> {submission.notes or '-'}</p>
    <p><strong>Agreed To Terms:</strong> {'Yes' if submission.agreed_to_terms else 'No'}</p>
    """


def build_booking_email(
    submission: BookingSubmission,
    booking_id: str,
    settings: Settings,
) -> EmailMessage:
    message = EmailMessage()
    if settings.email_user:
        message["From"] = formataddr((SENDER_NAME, settings.email_user))
    if settings.notification_recipient:
        message["To"] = settings.notification_recipient
    message["Reply-To"] = submission.email
    message["Subject"] = f"New Booking – {submission.service} – {submission.full_name}"
    message.set_content(
        f"New booking {booking_id}: {submission.full_name}, "
        f"{submission.preferred_date} {submission.preferred_time} at {submission.location}"
    )
    message.add_alternative(render_booking_html(submission, booking_id), subtype="html")
    return message


class SmtpMailer:
    """Sends messages through the configured SMTP server."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def send(self, message: EmailMessage) -> None:
        s = self.settings
        if not message["To"]:
            raise RuntimeError("No notification recipient configured (NOTIFY_TO / EMAIL_USER)")

        with smtplib.SMTP(s.email_host, s.email_port, timeout=s.email_timeout) as smtp:
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                smtp.starttls()
                smtp.ehlo()
            if s.email_user and s.email_pass:
                smtp.login(s.email_user, s.email_pass)
            smtp.send_message(message)

        logger.info(f"Notification sent to {message['To']}: {message['Subject']}")
