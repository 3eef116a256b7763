"""Breed information service client."""

import base64
from dataclasses import dataclass
from uuid import UUID

import httpx

from cat_shelter.adapters.http_transport import send
from cat_shelter.domain.models import BreedInfo
from cat_shelter.services.cats import CatInfoClient


@dataclass
class HttpxCatInfoClient(CatInfoClient):
    """HTTPX-backed breed info client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(
        cls, base_url: str, timeout: float = 10
    ) -> "HttpxCatInfoClient":
        """Create a breed info client with a managed httpx session."""
        return cls(
            base_url=base_url, http_client=httpx.AsyncClient(), timeout=timeout
        )

    async def find_by_breed_id(self, breed_id: UUID) -> BreedInfo | None:
        """Fetch a breed by id."""
        response = await send(
            self.http_client,
            "GET",
            f"{self.base_url}/breeds/{breed_id}",
            timeout=self.timeout,
            allow_not_found=True,
        )
        return _parse_breed(response.json()) if response is not None else None

    async def find_by_breed_name(self, breed_name: str) -> BreedInfo | None:
        """Fetch a breed by its name."""
        response = await send(
            self.http_client,
            "GET",
            f"{self.base_url}/breeds",
            timeout=self.timeout,
            allow_not_found=True,
            params={"name": breed_name},
        )
        return _parse_breed(response.json()) if response is not None else None

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _parse_breed(payload: dict[str, object]) -> BreedInfo:
    photo = payload.get("photo") or ""
    return BreedInfo(
        breed_id=UUID(str(payload["breedId"])),
        breed_name=str(payload["breedName"]),
        photo=base64.b64decode(str(photo)),
    )
