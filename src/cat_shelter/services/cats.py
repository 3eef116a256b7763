"""Composition of the ``Cat`` aggregate from shelter dependencies."""

import base64
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from cat_shelter.domain.models import BreedInfo, Cat, CatRecord, PricePoint
from cat_shelter.errors import InternalError
from cat_shelter.services.documents import DocumentStore
from cat_shelter.services.fanout import gather_ordered
from cat_shelter.services.retry import DEFAULT_ATTEMPTS, with_retry

FALLBACK_PRICE = Decimal(1000)

_logger = logging.getLogger(__name__)


class CatInfoClient(Protocol):
    """Interface for the breed information service."""

    async def find_by_breed_id(self, breed_id: UUID) -> BreedInfo | None:
        """Return breed info by id, if the breed is known."""

    async def find_by_breed_name(self, breed_name: str) -> BreedInfo | None:
        """Return breed info by name, if the breed is known."""


class CatExchangeClient(Protocol):
    """Interface for the breed price history service."""

    async def get_price_history(self, breed_id: UUID) -> list[PricePoint]:
        """Return the chronological price history of a breed."""


def current_price(prices: list[PricePoint]) -> Decimal:
    """Return the most recent price, or the fallback for unpriced breeds."""
    if not prices:
        return FALLBACK_PRICE
    return max(prices, key=lambda point: point.date).price


@dataclass
class CatAggregator:
    """Builds ``Cat`` views from records, breed info and price history."""

    documents: DocumentStore
    cat_info_client: CatInfoClient
    cat_exchange_client: CatExchangeClient
    collection: str = "cats"
    retry_attempts: int = DEFAULT_ATTEMPTS

    async def build_cat(self, cat_id: UUID) -> Cat | None:
        """Compose the aggregate for a cat, or ``None`` without a record."""
        record = await self.get_record(cat_id)
        if record is None:
            return None
        breed, prices = await gather_ordered(
            [self.get_breed(record.breed_id), self.get_prices(record.breed_id)]
        )
        if breed is None:
            _logger.error(
                "Cat %s references unknown breed %s", record.id, record.breed_id
            )
            raise InternalError(
                f"Breed {record.breed_id} of cat {record.id} is unknown"
            )
        return Cat(
            id=record.id,
            breed_id=record.breed_id,
            added_by=record.added_by,
            breed=breed.breed_name,
            name=record.name,
            cat_photo=record.photo,
            breed_photo=breed.photo,
            price=current_price(prices),
            prices=prices,
        )

    async def get_record(self, cat_id: UUID) -> CatRecord | None:
        """Load a cat record from the document store."""
        document = await with_retry(
            self.retry_attempts,
            lambda: self.documents.find(self.collection, cat_id),
            action="find cat record",
        )
        if document is None:
            return None
        return cat_record_from_document(document)

    async def save_record(self, record: CatRecord) -> None:
        """Persist a cat record to the document store."""
        await with_retry(
            self.retry_attempts,
            lambda: self.documents.write(
                self.collection, record.id, cat_record_to_document(record)
            ),
            action="write cat record",
        )

    async def get_breed(self, breed_id: UUID) -> BreedInfo | None:
        """Look up breed info by id."""
        return await with_retry(
            self.retry_attempts,
            lambda: self.cat_info_client.find_by_breed_id(breed_id),
            action="find breed by id",
        )

    async def find_breed(self, breed_name: str) -> BreedInfo | None:
        """Look up breed info by name."""
        return await with_retry(
            self.retry_attempts,
            lambda: self.cat_info_client.find_by_breed_name(breed_name),
            action="find breed by name",
        )

    async def get_prices(self, breed_id: UUID) -> list[PricePoint]:
        """Return the breed's price history in chronological order."""
        history = await with_retry(
            self.retry_attempts,
            lambda: self.cat_exchange_client.get_price_history(breed_id),
            action="get price history",
        )
        return sorted(history, key=lambda point: point.date)


def cat_record_to_document(record: CatRecord) -> dict[str, object]:
    """Serialize a cat record for the document store."""
    return {
        "id": str(record.id),
        "breed_id": str(record.breed_id),
        "added_by": str(record.added_by),
        "name": record.name,
        "photo": base64.b64encode(record.photo).decode("ascii"),
    }


def cat_record_from_document(document: dict[str, object]) -> CatRecord:
    """Deserialize a cat record stored in the document store."""
    photo = document.get("photo") or ""
    return CatRecord(
        id=UUID(str(document["id"])),
        breed_id=UUID(str(document["breed_id"])),
        added_by=UUID(str(document["added_by"])),
        name=str(document.get("name", "")),
        photo=base64.b64decode(str(photo)),
    )
