"""Billing service client for the catalog of offers."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

import httpx

from cat_shelter.adapters.http_transport import send
from cat_shelter.domain.models import Bill, Offer
from cat_shelter.services.shelter import BillingClient


@dataclass
class HttpxBillingClient(BillingClient):
    """HTTPX-backed billing client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(
        cls, base_url: str, timeout: float = 10
    ) -> "HttpxBillingClient":
        """Create a billing client with a managed httpx session."""
        return cls(
            base_url=base_url, http_client=httpx.AsyncClient(), timeout=timeout
        )

    async def list_offers(self, skip: int, limit: int) -> list[Offer]:
        """Return a page of offers."""
        response = await send(
            self.http_client,
            "GET",
            f"{self.base_url}/products",
            timeout=self.timeout,
            params={"skip": skip, "limit": limit},
        )
        return [_parse_offer(item) for item in response.json()]

    async def get_offer(self, cat_id: UUID) -> Offer | None:
        """Return the offer for a cat, if present."""
        response = await send(
            self.http_client,
            "GET",
            f"{self.base_url}/products/{cat_id}",
            timeout=self.timeout,
            allow_not_found=True,
        )
        if response is None:
            return None
        return _parse_offer(response.json())

    async def add_offer(self, offer: Offer) -> None:
        """Register a cat for sale."""
        await send(
            self.http_client,
            "POST",
            f"{self.base_url}/products",
            timeout=self.timeout,
            json={"id": str(offer.id), "breedId": str(offer.breed_id)},
        )

    async def sell(self, cat_id: UUID, price: Decimal) -> Bill:
        """Sell a cat and return the bill."""
        response = await send(
            self.http_client,
            "POST",
            f"{self.base_url}/products/{cat_id}/sell",
            timeout=self.timeout,
            json={"price": str(price)},
        )
        payload = response.json()
        return Bill(
            id=UUID(payload["id"]),
            cat_id=UUID(payload.get("productId") or str(cat_id)),
            price=Decimal(str(payload["price"])),
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _parse_offer(payload: dict[str, object]) -> Offer:
    return Offer(id=UUID(str(payload["id"])), breed_id=UUID(str(payload["breedId"])))
