"""Session authorization."""

import logging
from dataclasses import dataclass
from typing import Protocol

from cat_shelter.domain.models import AuthorizationResult, UserIdentity
from cat_shelter.errors import AuthorizationError
from cat_shelter.services.retry import DEFAULT_ATTEMPTS, with_retry

_logger = logging.getLogger(__name__)


class AuthorizationClient(Protocol):
    """Interface for the authorization service."""

    async def authorize(self, session_id: str) -> AuthorizationResult:
        """Exchange a session token for an authorization result."""


@dataclass
class AuthorizationGate:
    """Validates sessions before any other dependency is touched."""

    client: AuthorizationClient
    retry_attempts: int = DEFAULT_ATTEMPTS

    async def authorize(self, session_id: str) -> UserIdentity:
        """Return the caller identity or raise ``AuthorizationError``."""
        result = await with_retry(
            self.retry_attempts,
            lambda: self.client.authorize(session_id),
            action="authorize",
        )
        if not result.is_success or result.user_id is None:
            _logger.info("Session rejected by authorization service")
            raise AuthorizationError()
        return UserIdentity(user_id=result.user_id)
