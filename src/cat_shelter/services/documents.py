"""Document store interface shared by the shelter services."""

from typing import Protocol
from uuid import UUID


class DocumentStore(Protocol):
    """Persistence interface for keyed JSON documents grouped in collections."""

    async def find(self, collection: str, key: UUID) -> dict[str, object] | None:
        """Return the document stored under ``key``, if present."""

    async def write(
        self, collection: str, key: UUID, document: dict[str, object]
    ) -> None:
        """Create or replace the document stored under ``key``."""
