"""Supabase-backed document store."""

import asyncio
from dataclasses import dataclass
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from cat_shelter.services.documents import DocumentStore

_TRANSIENT_CODES = {"502", "503", "504"}


@dataclass
class SupabaseDocumentStore(DocumentStore):
    """Stores each collection as a table of ``id`` / ``document`` rows."""

    client: Client

    async def find(self, collection: str, key: UUID) -> dict[str, object] | None:
        """Return the document stored under ``key``, if present."""
        return await self._run(self._find, collection, key)

    async def write(
        self, collection: str, key: UUID, document: dict[str, object]
    ) -> None:
        """Upsert the document stored under ``key``."""
        await self._run(self._write, collection, key, document)

    def _find(self, collection: str, key: UUID) -> dict[str, object] | None:
        response = (
            self.client.table(collection)
            .select("id, document")
            .eq("id", str(key))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0]["document"]

    def _write(self, collection: str, key: UUID, document: dict[str, object]) -> None:
        self.client.table(collection).upsert(
            {"id": str(key), "document": document}
        ).execute()

    @staticmethod
    async def _run(func, *args):  # type: ignore[no-untyped-def]
        try:
            return await asyncio.to_thread(func, *args)
        except httpx.TransportError as exc:
            raise ConnectionError(f"Document store unavailable: {exc}") from exc
        except APIError as exc:
            if str(exc.code) in _TRANSIENT_CODES:
                raise ConnectionError(
                    f"Document store returned {exc.code}: {exc.message}"
                ) from exc
            raise
