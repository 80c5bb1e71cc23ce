# carbath/schemas/availability.py

from pydantic import BaseModel, ConfigDict


class AvailabilityQuery(BaseModel):
    date: str
    time: str
    location: str

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")


class AvailabilityResponse(BaseModel):
    available: bool
    date: str
    time: str
    location: str
    message: str
