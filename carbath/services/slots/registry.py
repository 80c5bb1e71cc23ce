# carbath/services/slots/registry.py
"""
In-memory registry of reserved appointment slots.

Key format: {date}-{time}-{location}
Value: Reservation bound to one booking id.

The registry lives as long as its owner (one per application instance).
Nothing is persisted: a process restart clears every reservation.
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone


KEY_DELIMITER = "-"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Reservation:
    """One occupied appointment slot."""
    booking_id: str
    date: str
    time: str
    location: str
    reserved_at: datetime = field(default_factory=_utcnow)


class SlotRegistry:
    """Slot key → Reservation mapping with lookup by booking id."""

    def __init__(self):
        self._slots: dict[str, Reservation] = {}
        self._lock = threading.Lock()

    @staticmethod
    def slot_key(date: str, time: str, location: str) -> str:
        # Plain join, no escaping: values containing the delimiter may collide.
        return KEY_DELIMITER.join((date, time, location))

    # ── Write ────────────────────────────────────────────────────────────

    def reserve(
        self,
        date: str,
        time: str,
        location: str,
        booking_id: str,
    ) -> Reservation:
        """
        Store a reservation for the slot.

        Does not check availability: an existing reservation under the
        same slot key is overwritten (last write wins).
        """
        reservation = Reservation(
            booking_id=booking_id,
            date=date,
            time=time,
            location=location,
        )
        with self._lock:
            self._slots[self.slot_key(date, time, location)] = reservation
        return reservation

    def try_reserve(
        self,
        date: str,
        time: str,
        location: str,
        booking_id: str,
    ) -> Reservation | None:
        """
        Reserve the slot only if it is free.

        Check and insert happen under one lock, so two concurrent callers
        cannot both win the same slot.

        Returns:
            The new Reservation, or None if the slot is already taken.
        """
        key = self.slot_key(date, time, location)
        with self._lock:
            if key in self._slots:
                return None
            reservation = Reservation(
                booking_id=booking_id,
                date=date,
                time=time,
                location=location,
            )
            self._slots[key] = reservation
        return reservation

    # ── Read ─────────────────────────────────────────────────────────────

    def is_available(self, date: str, time: str, location: str) -> bool:
        return self.slot_key(date, time, location) not in self._slots

    def find_by_booking_id(self, booking_id: str) -> Reservation | None:
        """First reservation (in insertion order) carrying booking_id."""
        for reservation in list(self._slots.values()):
            if reservation.booking_id == booking_id:
                return reservation
        return None

    def reservations(self) -> list[Reservation]:
        return list(self._slots.values())

    def __len__(self) -> int:
        return len(self._slots)

    # ── Delete ───────────────────────────────────────────────────────────

    def remove(self, booking_id: str) -> bool:
        """
        Delete the reservation carrying booking_id.

        Returns:
            True if a reservation was found and deleted.
        """
        with self._lock:
            for key, reservation in self._slots.items():
                if reservation.booking_id == booking_id:
                    del self._slots[key]
                    return True
        return False

    def clear(self) -> None:
        with self._lock:
            self._slots.clear()
