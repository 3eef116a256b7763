"""Shelter use cases combining authorization, billing, breeds and favorites."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol
from uuid import UUID, uuid4

from cat_shelter.domain.models import AddCatRequest, Bill, Cat, CatRecord, Offer
from cat_shelter.errors import InternalError, InvalidRequestError
from cat_shelter.services.authorization import AuthorizationGate
from cat_shelter.services.cats import CatAggregator, current_price
from cat_shelter.services.favorites import FavoritesStore
from cat_shelter.services.fanout import gather_ordered
from cat_shelter.services.retry import DEFAULT_ATTEMPTS, with_retry

_logger = logging.getLogger(__name__)


class BillingClient(Protocol):
    """Interface for the billing service that owns the catalog of offers."""

    async def list_offers(self, skip: int, limit: int) -> list[Offer]:
        """Return a page of offers."""

    async def get_offer(self, cat_id: UUID) -> Offer | None:
        """Return the offer for a cat, if it is for sale."""

    async def add_offer(self, offer: Offer) -> None:
        """Register a cat for sale."""

    async def sell(self, cat_id: UUID, price: Decimal) -> Bill:
        """Sell a cat at the given price."""


@dataclass
class CatShelterService:
    """Application service exposing the shelter use cases."""

    authorization: AuthorizationGate
    billing_client: BillingClient
    cats: CatAggregator
    favorites: FavoritesStore
    retry_attempts: int = DEFAULT_ATTEMPTS

    async def list_for_sale(self, session_id: str, skip: int, limit: int) -> list[Cat]:
        """Return the cats on one page of the sale catalog, in catalog order."""
        await self.authorization.authorize(session_id)
        offers = await with_retry(
            self.retry_attempts,
            lambda: self.billing_client.list_offers(skip, limit),
            action="list offers",
        )
        return await gather_ordered(self._require_cat(offer.id) for offer in offers)

    async def add_favorite(self, session_id: str, cat_id: UUID) -> None:
        """Add a cat id to the caller's favorites."""
        user = await self.authorization.authorize(session_id)
        await self.favorites.add_favorite(user.user_id, cat_id)

    async def list_favorites(self, session_id: str) -> list[Cat]:
        """Return the caller's favorite cats that are still for sale."""
        user = await self.authorization.authorize(session_id)
        favorites = await self.favorites.get_favorites(user.user_id)
        if favorites is None:
            return []
        cat_ids = sorted(favorites.favorite_ids, key=str)
        offers = await gather_ordered(self._get_offer(cat_id) for cat_id in cat_ids)
        for_sale = [cat_id for cat_id, offer in zip(cat_ids, offers) if offer]
        return await gather_ordered(self._require_cat(cat_id) for cat_id in for_sale)

    async def remove_favorite(self, session_id: str, cat_id: UUID) -> None:
        """Remove a cat id from the caller's favorites."""
        user = await self.authorization.authorize(session_id)
        await self.favorites.remove_favorite(user.user_id, cat_id)

    async def buy_cat(self, session_id: str, cat_id: UUID) -> Bill:
        """Sell a listed cat at its breed's current price."""
        user = await self.authorization.authorize(session_id)
        offer = await self._get_offer(cat_id)
        if offer is None:
            raise InvalidRequestError(f"Cat {cat_id} is not for sale")
        price = current_price(await self.cats.get_prices(offer.breed_id))
        bill = await with_retry(
            self.retry_attempts,
            lambda: self.billing_client.sell(cat_id, price),
            action="sell cat",
        )
        _logger.info("User %s bought cat %s for %s", user.user_id, cat_id, price)
        return bill

    async def add_cat(self, session_id: str, request: AddCatRequest) -> UUID:
        """Register a new cat for sale and return its id."""
        user = await self.authorization.authorize(session_id)
        breed = await self.cats.find_breed(request.breed)
        if breed is None:
            raise InvalidRequestError(f"Unknown breed {request.breed!r}")
        record = CatRecord(
            id=uuid4(),
            breed_id=breed.breed_id,
            added_by=user.user_id,
            name=request.name,
            photo=request.photo,
        )
        offer = Offer(id=record.id, breed_id=record.breed_id)
        await with_retry(
            self.retry_attempts,
            lambda: self.billing_client.add_offer(offer),
            action="add offer",
        )
        await self.cats.save_record(record)
        _logger.info("User %s added cat %s", user.user_id, record.id)
        return record.id

    async def _get_offer(self, cat_id: UUID) -> Offer | None:
        return await with_retry(
            self.retry_attempts,
            lambda: self.billing_client.get_offer(cat_id),
            action="get offer",
        )

    async def _require_cat(self, cat_id: UUID) -> Cat:
        cat = await self.cats.build_cat(cat_id)
        if cat is None:
            _logger.error("Cat %s is for sale but has no record", cat_id)
            raise InternalError(f"Cat {cat_id} has no record")
        return cat
