# schemas/base/address.py
from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common_validators import CountryCode, Latitude, Longitude, Timezone
from .model import EMISModel


class Address(EMISModel):
    """Postal address usable for any country, with optional geocoding."""
    street: str = Field(..., min_length=1, max_length=200)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100, description="State / province / region")
    country: CountryCode
    postal_code: str = Field(..., min_length=1, max_length=20)
    latitude: Optional[Latitude] = None
    longitude: Optional[Longitude] = None
    timezone: Timezone
