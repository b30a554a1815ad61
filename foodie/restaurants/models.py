from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Cuisine(str, Enum):
    italian = "Italian"
    french = "French"
    japanese = "Japanese"
    chinese = "Chinese"
    indian = "Indian"
    mexican = "Mexican"
    thai = "Thai"
    mediterranean = "Mediterranean"
    american = "American"
    korean = "Korean"
    vietnamese = "Vietnamese"
    greek = "Greek"
    spanish = "Spanish"
    turkish = "Turkish"
    lebanese = "Lebanese"
    moroccan = "Moroccan"
    brazilian = "Brazilian"
    fusion = "Fusion"
    fast_food = "Fast Food"
    seafood = "Seafood"
    steakhouse = "Steakhouse"
    vegetarian = "Vegetarian"
    vegan = "Vegan"
    other = "Other"


class PriceRange(str, Enum):
    budget = "budget"
    mid_range = "mid-range"
    fine_dining = "fine-dining"


class Feature(str, Enum):
    outdoor_seating = "Outdoor Seating"
    wifi = "WiFi"
    parking = "Parking"
    delivery = "Delivery"
    takeout = "Takeout"
    reservations = "Reservations"
    kids_friendly = "Kids Friendly"
    pet_friendly = "Pet Friendly"
    bar = "Bar"
    wine_bar = "Wine Bar"
    live_music = "Live Music"
    credit_cards = "Credit Cards"
    wheelchair_accessible = "Wheelchair Accessible"
    private_dining = "Private Dining"
    catering = "Catering"
    brunch = "Brunch"
    late_night = "Late Night"
    counter_seating = "Counter Seating"
    sake_bar = "Sake Bar"
    vegetarian = "Vegetarian"
    vegan = "Vegan"


ImageUrl = Annotated[str, Field(pattern=r"^https?://.+")]


class GeoPoint(CamelModel):
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class Location(CamelModel):
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    coordinates: GeoPoint


class DayHours(CamelModel):
    open: str = ""
    close: str = ""
    closed: bool = False

    def is_open_at(self, clock: str) -> bool:
        """``clock`` is ``HH:MM``; a close earlier than the open means the hours run past midnight."""
        if self.closed or not self.open or not self.close:
            return False
        if self.close < self.open:
            return clock >= self.open or clock <= self.close
        return self.open <= clock <= self.close


WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


class OpeningHours(CamelModel):
    monday: DayHours = Field(default_factory=DayHours)
    tuesday: DayHours = Field(default_factory=DayHours)
    wednesday: DayHours = Field(default_factory=DayHours)
    thursday: DayHours = Field(default_factory=DayHours)
    friday: DayHours = Field(default_factory=DayHours)
    saturday: DayHours = Field(default_factory=DayHours)
    sunday: DayHours = Field(default_factory=DayHours)

    def for_day(self, when: datetime) -> DayHours:
        return getattr(self, WEEKDAYS[when.weekday()])


class Contact(CamelModel):
    phone: str | None = None
    website: str | None = None
    email: str | None = None


class RestaurantCreate(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=2, max_length=100)
    description: str = Field(..., min_length=10, max_length=1000)
    cuisine: Cuisine
    price_range: PriceRange
    location: Location
    images: list[ImageUrl] = Field(default_factory=list)
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)
    features: list[Feature] = Field(default_factory=list)
    opening_hours: OpeningHours = Field(default_factory=OpeningHours)
    contact: Contact = Field(default_factory=Contact)

    def is_open_at(self, when: datetime) -> bool:
        return self.opening_hours.for_day(when).is_open_at(when.strftime("%H:%M"))

    def opening_status(self, when: datetime | None = None) -> tuple[bool, str]:
        """
        Whether the restaurant is open at ``when`` (default: now, local time)
        and a short label for the next change, e.g. ``"Closes at 23:00"``.

        Only the hours listed for ``when``'s weekday are consulted.
        """
        when = when or datetime.now()
        hours = self.opening_hours.for_day(when)
        if hours.closed or not hours.open or not hours.close:
            return False, "Closed today"
        if self.is_open_at(when):
            return True, f"Closes at {hours.close}"
        return False, f"Opens at {hours.open}"


class Restaurant(RestaurantCreate):
    id: str
    created_at: datetime
    updated_at: datetime


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class RestaurantPage(BaseModel):
    restaurants: list[Restaurant]
    pagination: Pagination

    def to_json(self) -> dict:
        return {
            "restaurants": [r.to_json() for r in self.restaurants],
            "pagination": self.pagination.model_dump(),
        }


class FilterOptions(CamelModel):
    cuisines: list[str]
    cities: list[str]
    features: list[str]
    price_ranges: list[str]
