"""Schema of the restaurant knowledge record loaded at startup.

Only ``brand`` is mandatory. Every other block is optional so that a partial
record still validates; the corpus builder skips whatever is missing.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    # Keys may be written in snake_case or in the camelCase of the website's JSON.
    model_config = ConfigDict(frozen=True, extra="ignore", alias_generator=to_camel, populate_by_name=True)


class Brand(_Record):
    name: str
    tagline: str = ""
    short_description: str = ""


class Location(_Record):
    address: str
    landmarks: list[str] = Field(default_factory=list)
    map_url: str | None = None


class Social(_Record):
    facebook: str | None = None
    instagram: str | None = None
    tiktok: str | None = None


class Contact(_Record):
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    social: Social | None = None


class OpeningHours(_Record):
    days: str
    open: str
    close: str


class Reservations(_Record):
    how_to_book: str
    email_template_hint: str = ""


class HallCapacity(_Record):
    large_hall: int
    small_hall_each: int
    total_small_halls: int


class MeetingHalls(_Record):
    summary: str
    amenities: list[str] = Field(default_factory=list)
    booking_notes: list[str] = Field(default_factory=list)
    capacity: HallCapacity | None = None


class Catering(_Record):
    available: bool = False
    notes: str = ""


class Delivery(_Record):
    available: bool = False
    notes: str = ""


class Services(_Record):
    reservations: Reservations | None = None
    meeting_halls: MeetingHalls | None = None
    catering: Catering | None = None
    delivery: Delivery | None = None


class MenuItem(_Record):
    title: str
    description: str = ""


class Menu(_Record):
    signature: list[MenuItem] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)


class Policies(_Record):
    booking: list[str] = Field(default_factory=list)
    allergens: list[str] = Field(default_factory=list)


class Faq(_Record):
    q: str
    a: str


class Developer(_Record):
    name: str
    role: str = ""


class KnowledgeRecord(_Record):
    """Everything the concierge is allowed to know about the restaurant."""

    brand: Brand
    location: Location | None = None
    contact: Contact | None = None
    hours: list[OpeningHours] = Field(default_factory=list)
    services: Services = Field(default_factory=Services)
    menu: Menu = Field(default_factory=Menu)
    policies: Policies = Field(default_factory=Policies)
    faqs: list[Faq] = Field(default_factory=list)
    developers: list[Developer] = Field(default_factory=list)


__all__ = [
    "Brand",
    "Location",
    "Social",
    "Contact",
    "OpeningHours",
    "Reservations",
    "HallCapacity",
    "MeetingHalls",
    "Catering",
    "Delivery",
    "Services",
    "MenuItem",
    "Menu",
    "Policies",
    "Faq",
    "Developer",
    "KnowledgeRecord",
]
