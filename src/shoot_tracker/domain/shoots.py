"""Domain models for shoot bookings."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class ShootDetails:
    """Booking fields supplied by the client on create and update."""

    model_name: str
    salon_name: str
    date: str
    price: float


@dataclass(frozen=True)
class Shoot:
    """A booking in the pending bucket."""

    id: str
    model_name: str
    salon_name: str
    date: str
    price: float
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class EditedShoot:
    """A booking in the edited bucket."""

    id: str
    original_shoot_id: str
    model_name: str
    salon_name: str
    date: str
    price: float
    created_at: datetime
    edited_at: datetime


@dataclass
class ShootDocument:
    """Both buckets as they are persisted together."""

    shoots: list[Shoot] = field(default_factory=list)
    edited_shoots: list[EditedShoot] = field(default_factory=list)
