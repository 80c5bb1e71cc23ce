# carbath/services/validation.py
"""
Presence validation for incoming form payloads.

Required fields and conditional rules are declared as data, so every
handler shares one implementation:

    PayloadValidator(
        required=("date", "time"),
        conditional=(RequiredWhen("businessPark", "other", "customBusinessPark"),),
    )
"""

from dataclasses import dataclass, field
from typing import Any


def is_present(value: Any) -> bool:
    """A value is present when its string form is not blank."""
    if value is None:
        return False
    return bool(str(value).strip())


@dataclass(frozen=True)
class RequiredWhen:
    """`requires` must be present when `field` equals `equals` (case-insensitive)."""
    field: str
    equals: str
    requires: str

    def applies(self, payload: dict) -> bool:
        value = payload.get(self.field)
        if value is None:
            return False
        return str(value).strip().lower() == self.equals.lower()


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    missing: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class PayloadValidator:
    required: tuple[str, ...]
    conditional: tuple[RequiredWhen, ...] = ()

    def validate(self, payload: Any) -> ValidationResult:
        if not isinstance(payload, dict):
            return ValidationResult(ok=False, missing=list(self.required))

        missing = [name for name in self.required if not is_present(payload.get(name))]

        for rule in self.conditional:
            if rule.applies(payload) and not is_present(payload.get(rule.requires)):
                if rule.requires not in missing:
                    missing.append(rule.requires)

        return ValidationResult(ok=not missing, missing=missing)


# Location sentinels that need a supplementary free-text value
LOCATION_OTHER = "other"
LOCATION_PRIVATE = "private"

BOOKING_VALIDATOR = PayloadValidator(
    required=(
        "service",
        "businessPark",
        "firstName",
        "lastName",
        "email",
        "phone",
        "vehicleMake",
        "vehicleModel",
        "vehicleYear",
        "vehicleColor",
        "preferredDate",
        "preferredTime",
    ),
    conditional=(
        RequiredWhen("businessPark", LOCATION_OTHER, "customBusinessPark"),
        RequiredWhen("businessPark", LOCATION_PRIVATE, "privateAddress"),
    ),
)

AVAILABILITY_VALIDATOR = PayloadValidator(
    required=("date", "time", "location"),
)
