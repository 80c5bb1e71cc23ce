# carbath/schemas/bookings.py

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..services.validation import LOCATION_OTHER, LOCATION_PRIVATE


class BookingSubmission(BaseModel):
    """Booking form payload (camelCase on the wire)."""
    service: str
    business_park: str
    custom_business_park: Optional[str] = None
    private_address: Optional[str] = None

    first_name: str
    last_name: str
    email: str
    phone: str

    vehicle_make: str
    vehicle_model: str
    vehicle_year: str
    vehicle_color: str

    preferred_date: str
    preferred_time: str

    notes: Optional[str] = None
    agreed_to_terms: Any = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p).strip()

    @property
    def location(self) -> str:
        """Display location, also used for the slot key."""
        kind = self.business_park.strip().lower()
        if kind == LOCATION_OTHER:
            return self.custom_business_park or "Other"
        if kind == LOCATION_PRIVATE:
            return self.private_address or "Private"
        return self.business_park

    @property
    def vehicle(self) -> str:
        return " ".join(p for p in (self.vehicle_year, self.vehicle_make, self.vehicle_model) if p)


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class BookingConfirmation(CamelModel):
    ok: bool = True
    booking_id: str
    date: str
    time: str
    location: str
    message: str


class BookingConflict(BaseModel):
    error: str = "Time slot unavailable"
    message: str = "This time slot is already booked. Please choose another time."
    date: str
    time: str
    location: str


class ReservationRead(CamelModel):
    booking_id: str
    date: str
    time: str
    location: str
    reserved_at: datetime


class BookingCancelled(CamelModel):
    ok: bool = True
    booking_id: str
    message: str = "Booking cancelled"
