"""Authorization service client."""

from dataclasses import dataclass
from uuid import UUID

import httpx

from cat_shelter.adapters.http_transport import send
from cat_shelter.domain.models import AuthorizationResult
from cat_shelter.services.authorization import AuthorizationClient

_DENIED_STATUS_CODES = {httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN}


@dataclass
class HttpxAuthorizationClient(AuthorizationClient):
    """HTTPX-backed authorization client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(
        cls, base_url: str, timeout: float = 10
    ) -> "HttpxAuthorizationClient":
        """Create an authorization client with a managed httpx session."""
        return cls(
            base_url=base_url, http_client=httpx.AsyncClient(), timeout=timeout
        )

    async def authorize(self, session_id: str) -> AuthorizationResult:
        """Validate a session token."""
        try:
            response = await send(
                self.http_client,
                "POST",
                f"{self.base_url}/authorize",
                timeout=self.timeout,
                json={"sessionId": session_id},
            )
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code in _DENIED_STATUS_CODES:
                return AuthorizationResult(is_success=False)
            raise
        payload = response.json()
        user_id = payload.get("userId")
        return AuthorizationResult(
            is_success=bool(payload.get("isSuccess")),
            user_id=UUID(user_id) if user_id else None,
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
