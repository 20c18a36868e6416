"""
Pydantic models for sauna records.

``SaunaBase`` holds the editable fields, ``SaunaCreate`` is the insert
payload, ``SaunaUpdate`` a partial update and ``SaunaRead`` a stored
record with its ``id`` and ``created_at``.  Enum values are the
display strings stored in the database.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from ..utils.opening_hours import WEEKDAYS


class BookingType(str, Enum):
    DROP_IN = "Drop-in welcome"
    REQUIRED = "Online booking required"
    MEMBERS_ONLY = "Members only"


class HeatSource(str, Enum):
    WOOD = "Wood-fired"
    ELECTRIC = "Electric"


class SaunaType(str, Enum):
    DRY = "Finnish Dry"
    STEAM = "Steam Room"
    INFRARED = "Infrared"


class Setting(str, Enum):
    LAKESIDE = "Lakeside"
    SEASIDE = "Seaside"
    CITY_SPA = "City Spa"
    GYM = "Gym"
    ROOFTOP = "Rooftop"
    FLOATING = "Floating"


class OpeningHours(BaseModel):
    """Weekly schedule: ``"closed"`` or ``"HH:MM-HH:MM"`` per weekday.

    Values are not validated beyond being strings; malformed entries
    are simply treated as closed when evaluated.
    """

    monday: str = Field(..., examples=["09:00-21:00"])
    tuesday: str = Field(..., examples=["09:00-21:00"])
    wednesday: str = Field(..., examples=["09:00-21:00"])
    thursday: str = Field(..., examples=["09:00-21:00"])
    friday: str = Field(..., examples=["09:00-22:00"])
    saturday: str = Field(..., examples=["10:00-22:00"])
    sunday: str = Field(..., examples=["Closed"])

    def as_dict(self) -> dict:
        return {day: getattr(self, day) for day in WEEKDAYS}


class SaunaBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Hellasgården Bastu"])
    address: str = Field(..., examples=["Ältavägen 101, 131 33 Nacka"])
    gmaps_url: Optional[str] = None
    website: Optional[str] = None
    booking_url: Optional[str] = None
    phone: Optional[str] = None
    opening_hours: OpeningHours
    pricing_details: str = Field(..., examples=["Adults 140 SEK"])
    booking_type: BookingType
    heat_sources: List[HeatSource] = Field(default_factory=list)
    sauna_types: List[SaunaType] = Field(default_factory=list)
    setting: Setting
    has_lake_access: bool = False
    amenities: Optional[List[str]] = None
    swimsuit_policy: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


class SaunaCreate(SaunaBase):
    """Schema for inserting a sauna (``id`` and ``created_at`` are assigned by the store)."""
    pass


class SaunaUpdate(BaseModel):
    """Partial update; only provided fields are written."""

    name: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = None
    gmaps_url: Optional[str] = None
    website: Optional[str] = None
    booking_url: Optional[str] = None
    phone: Optional[str] = None
    opening_hours: Optional[OpeningHours] = None
    pricing_details: Optional[str] = None
    booking_type: Optional[BookingType] = None
    heat_sources: Optional[List[HeatSource]] = None
    sauna_types: Optional[List[SaunaType]] = None
    setting: Optional[Setting] = None
    has_lake_access: Optional[bool] = None
    amenities: Optional[List[str]] = None
    swimsuit_policy: Optional[str] = None


class SaunaRead(SaunaBase):
    """A stored sauna as returned by the row store."""

    id: str
    created_at: datetime
    avg_rating: Optional[float] = None
    review_count: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }


class SaunaDetail(SaunaRead):
    """A sauna prepared for its detail page."""

    slug: str
    is_open: bool
    formatted_hours: str


class SaunaMarker(BaseModel):
    """Data needed to place one sauna on the listing map."""

    id: str
    name: str
    slug: str
    address: str
    setting: Setting
    coordinates: Tuple[float, float]
