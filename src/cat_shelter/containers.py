"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from cat_shelter.adapters.authorization_client import HttpxAuthorizationClient
from cat_shelter.adapters.billing_client import HttpxBillingClient
from cat_shelter.adapters.cat_exchange_client import HttpxCatExchangeClient
from cat_shelter.adapters.cat_info_client import HttpxCatInfoClient
from cat_shelter.adapters.supabase_document_store import SupabaseDocumentStore
from cat_shelter.config import Settings
from cat_shelter.services.authorization import AuthorizationGate
from cat_shelter.services.cats import CatAggregator
from cat_shelter.services.favorites import FavoritesStore
from cat_shelter.services.shelter import CatShelterService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    shelter_service: CatShelterService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    timeout = resolved_settings.http_timeout_seconds
    attempts = resolved_settings.retry_attempts
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    documents = SupabaseDocumentStore(supabase_client)
    authorization_client = HttpxAuthorizationClient.create(
        resolved_settings.authorization_service_url, timeout=timeout
    )
    billing_client = HttpxBillingClient.create(
        resolved_settings.billing_service_url, timeout=timeout
    )
    cat_info_client = HttpxCatInfoClient.create(
        resolved_settings.cat_info_service_url, timeout=timeout
    )
    cat_exchange_client = HttpxCatExchangeClient.create(
        resolved_settings.cat_exchange_service_url, timeout=timeout
    )
    shelter_service = CatShelterService(
        authorization=AuthorizationGate(authorization_client, retry_attempts=attempts),
        billing_client=billing_client,
        cats=CatAggregator(
            documents=documents,
            cat_info_client=cat_info_client,
            cat_exchange_client=cat_exchange_client,
            collection=resolved_settings.cats_collection,
            retry_attempts=attempts,
        ),
        favorites=FavoritesStore(
            documents=documents,
            collection=resolved_settings.favorites_collection,
            retry_attempts=attempts,
        ),
        retry_attempts=attempts,
    )

    async def close_resources() -> None:
        await authorization_client.close()
        await billing_client.close()
        await cat_info_client.close()
        await cat_exchange_client.close()

    return AppContainer(
        settings=resolved_settings,
        shelter_service=shelter_service,
        close_resources=close_resources,
    )
