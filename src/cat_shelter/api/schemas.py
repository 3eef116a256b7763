"""Pydantic models for the shelter HTTP API."""

import base64
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import Base64Bytes, BaseModel

from cat_shelter.domain.models import AddCatRequest, Bill, Cat


class PricePointResponse(BaseModel):
    """A historical breed price."""

    date: datetime
    price: Decimal


class CatResponse(BaseModel):
    """A cat with its breed and pricing."""

    id: UUID
    breed_id: UUID
    added_by: UUID
    breed: str
    name: str
    cat_photo: str
    breed_photo: str
    price: Decimal
    prices: list[PricePointResponse]

    @classmethod
    def from_domain(cls, cat: Cat) -> "CatResponse":
        """Build the response from a domain aggregate."""
        return cls(
            id=cat.id,
            breed_id=cat.breed_id,
            added_by=cat.added_by,
            breed=cat.breed,
            name=cat.name,
            cat_photo=base64.b64encode(cat.cat_photo).decode("ascii"),
            breed_photo=base64.b64encode(cat.breed_photo).decode("ascii"),
            price=cat.price,
            prices=[
                PricePointResponse(date=point.date, price=point.price)
                for point in cat.prices
            ],
        )


class BillResponse(BaseModel):
    """Bill issued for a purchase."""

    id: UUID
    cat_id: UUID
    price: Decimal

    @classmethod
    def from_domain(cls, bill: Bill) -> "BillResponse":
        """Build the response from a domain bill."""
        return cls(id=bill.id, cat_id=bill.cat_id, price=bill.price)


class AddCatPayload(BaseModel):
    """Request body for registering a cat; ``photo`` is base64 encoded."""

    breed: str
    name: str
    photo: Base64Bytes = b""

    def to_domain(self) -> AddCatRequest:
        """Convert to the domain request."""
        return AddCatRequest(breed=self.breed, name=self.name, photo=self.photo)


class AddCatResponse(BaseModel):
    """Identifier of a newly registered cat."""

    id: UUID
