"""Per-user favorites persisted in the document store."""

from dataclasses import dataclass
from uuid import UUID

from cat_shelter.domain.models import UserFavorites
from cat_shelter.services.documents import DocumentStore
from cat_shelter.services.retry import DEFAULT_ATTEMPTS, with_retry


@dataclass
class FavoritesStore:
    """Reads and mutates the favorites document of a user.

    Mutations are a plain read-modify-write without locking, so concurrent
    edits for the same user may overwrite each other.
    """

    documents: DocumentStore
    collection: str = "favorites"
    retry_attempts: int = DEFAULT_ATTEMPTS

    async def get_favorites(self, user_id: UUID) -> UserFavorites | None:
        """Return the user's favorites, if a document exists."""
        document = await with_retry(
            self.retry_attempts,
            lambda: self.documents.find(self.collection, user_id),
            action="find favorites",
        )
        if document is None:
            return None
        return favorites_from_document(document)

    async def add_favorite(self, user_id: UUID, cat_id: UUID) -> None:
        """Add a cat to the user's favorites, creating the document if needed."""
        favorites = await self.get_favorites(user_id) or UserFavorites(user_id)
        favorites.favorite_ids.add(cat_id)
        await self._write(favorites)

    async def remove_favorite(self, user_id: UUID, cat_id: UUID) -> None:
        """Remove a cat from the user's favorites; missing entries are ignored."""
        favorites = await self.get_favorites(user_id)
        if favorites is None or cat_id not in favorites.favorite_ids:
            return
        favorites.favorite_ids.discard(cat_id)
        await self._write(favorites)

    async def _write(self, favorites: UserFavorites) -> None:
        await with_retry(
            self.retry_attempts,
            lambda: self.documents.write(
                self.collection,
                favorites.user_id,
                favorites_to_document(favorites),
            ),
            action="write favorites",
        )


def favorites_to_document(favorites: UserFavorites) -> dict[str, object]:
    """Serialize favorites for the document store."""
    return {
        "user_id": str(favorites.user_id),
        "favorite_ids": sorted(str(cat_id) for cat_id in favorites.favorite_ids),
    }


def favorites_from_document(document: dict[str, object]) -> UserFavorites:
    """Deserialize a favorites document."""
    raw_ids = document.get("favorite_ids") or []
    return UserFavorites(
        user_id=UUID(str(document["user_id"])),
        favorite_ids={UUID(str(value)) for value in raw_ids},
    )
