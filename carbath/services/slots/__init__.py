# carbath/services/slots/__init__.py
"""
Slot reservation module.

Holds which (date, time, location) slots are taken, in memory only.
"""

from .registry import KEY_DELIMITER, Reservation, SlotRegistry

__all__ = [
    "KEY_DELIMITER",
    "Reservation",
    "SlotRegistry",
]
