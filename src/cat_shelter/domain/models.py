"""Domain models for the cat shelter."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True)
class UserIdentity:
    """The authenticated caller."""

    user_id: UUID


@dataclass(frozen=True)
class AuthorizationResult:
    """Answer of the authorization service for a session."""

    is_success: bool
    user_id: UUID | None = None


@dataclass(frozen=True)
class Offer:
    """A catalog entry marking a cat as currently for sale."""

    id: UUID
    breed_id: UUID


@dataclass(frozen=True)
class Bill:
    """Receipt returned by the billing service after a sale."""

    id: UUID
    cat_id: UUID
    price: Decimal


@dataclass(frozen=True)
class CatRecord:
    """The shelter's durable record of a cat."""

    id: UUID
    breed_id: UUID
    added_by: UUID
    name: str
    photo: bytes


@dataclass(frozen=True)
class BreedInfo:
    """Descriptive data about a breed."""

    breed_id: UUID
    breed_name: str
    photo: bytes


@dataclass(frozen=True)
class PricePoint:
    """A breed price observed at a point in time."""

    date: datetime
    price: Decimal


@dataclass(frozen=True)
class Cat:
    """Read-time view combining a cat record, its breed and price history."""

    id: UUID
    breed_id: UUID
    added_by: UUID
    breed: str
    name: str
    cat_photo: bytes
    breed_photo: bytes
    price: Decimal
    prices: list[PricePoint]


@dataclass
class UserFavorites:
    """A user's set of favorite cat ids."""

    user_id: UUID
    favorite_ids: set[UUID] = field(default_factory=set)


@dataclass(frozen=True)
class AddCatRequest:
    """Input for registering a new cat."""

    breed: str
    name: str
    photo: bytes
