"""Breed price history service client."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

import httpx

from cat_shelter.adapters.http_transport import send
from cat_shelter.domain.models import PricePoint
from cat_shelter.services.cats import CatExchangeClient


@dataclass
class HttpxCatExchangeClient(CatExchangeClient):
    """HTTPX-backed price history client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(
        cls, base_url: str, timeout: float = 10
    ) -> "HttpxCatExchangeClient":
        """Create a price history client with a managed httpx session."""
        return cls(
            base_url=base_url, http_client=httpx.AsyncClient(), timeout=timeout
        )

    async def get_price_history(self, breed_id: UUID) -> list[PricePoint]:
        """Fetch the price history of a breed; unknown breeds have none."""
        response = await send(
            self.http_client,
            "GET",
            f"{self.base_url}/prices/{breed_id}",
            timeout=self.timeout,
            allow_not_found=True,
        )
        if response is None:
            return []
        return [
            PricePoint(
                date=datetime.fromisoformat(str(item["date"])),
                price=Decimal(str(item["price"])),
            )
            for item in response.json().get("prices", [])
        ]

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
