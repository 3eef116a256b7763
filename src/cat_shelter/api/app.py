"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import Depends, FastAPI, Header, Request, Response, status
from fastapi.responses import JSONResponse

from cat_shelter.api.schemas import (
    AddCatPayload,
    AddCatResponse,
    BillResponse,
    CatResponse,
)
from cat_shelter.app_logging import configure_logging
from cat_shelter.config import parse_page
from cat_shelter.containers import AppContainer
from cat_shelter.errors import (
    AuthorizationError,
    CatShelterError,
    InternalError,
    InvalidRequestError,
)

_ERROR_STATUS_CODES: dict[type[CatShelterError], int] = {
    AuthorizationError: status.HTTP_401_UNAUTHORIZED,
    InvalidRequestError: status.HTTP_400_BAD_REQUEST,
    InternalError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


async def require_session(x_session_id: str | None = Header(default=None)) -> str:
    """Return the caller's session token from the request headers."""
    if not x_session_id:
        raise AuthorizationError("Missing session header")
    return x_session_id


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(CatShelterError)
    async def handle_shelter_error(
        request: Request, exc: CatShelterError
    ) -> JSONResponse:
        status_code = _status_code_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"detail": exc.message})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/cats")
    async def list_cats(
        request: Request,
        skip: int = 0,
        limit: int = 10,
        session_id: str = Depends(require_session),
    ) -> list[CatResponse]:
        """Return a page of cats for sale."""
        state_container: AppContainer = request.app.state.container
        skip, limit = parse_page(
            skip, limit, state_container.settings.list_page_limit
        )
        cats = await state_container.shelter_service.list_for_sale(
            session_id, skip, limit
        )
        return [CatResponse.from_domain(cat) for cat in cats]

    @app.post("/cats", status_code=status.HTTP_201_CREATED)
    async def add_cat(
        payload: AddCatPayload,
        request: Request,
        session_id: str = Depends(require_session),
    ) -> AddCatResponse:
        """Register a new cat for sale."""
        state_container: AppContainer = request.app.state.container
        cat_id = await state_container.shelter_service.add_cat(
            session_id, payload.to_domain()
        )
        return AddCatResponse(id=cat_id)

    @app.post("/cats/{cat_id}/buy")
    async def buy_cat(
        cat_id: UUID,
        request: Request,
        session_id: str = Depends(require_session),
    ) -> BillResponse:
        """Buy a cat that is for sale."""
        state_container: AppContainer = request.app.state.container
        bill = await state_container.shelter_service.buy_cat(session_id, cat_id)
        return BillResponse.from_domain(bill)

    @app.get("/favorites")
    async def list_favorites(
        request: Request, session_id: str = Depends(require_session)
    ) -> list[CatResponse]:
        """Return the caller's favorite cats that are still for sale."""
        state_container: AppContainer = request.app.state.container
        cats = await state_container.shelter_service.list_favorites(session_id)
        return [CatResponse.from_domain(cat) for cat in cats]

    @app.put("/favorites/{cat_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def add_favorite(
        cat_id: UUID,
        request: Request,
        session_id: str = Depends(require_session),
    ) -> Response:
        """Add a cat to the caller's favorites."""
        state_container: AppContainer = request.app.state.container
        await state_container.shelter_service.add_favorite(session_id, cat_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.delete("/favorites/{cat_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def remove_favorite(
        cat_id: UUID,
        request: Request,
        session_id: str = Depends(require_session),
    ) -> Response:
        """Remove a cat from the caller's favorites."""
        state_container: AppContainer = request.app.state.container
        await state_container.shelter_service.remove_favorite(session_id, cat_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app


def _status_code_for(exc: CatShelterError) -> int:
    """Map a shelter error to an HTTP status code."""
    for error_type, status_code in _ERROR_STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
