"""FastAPI application factory."""

import logging
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from fat_method.api.fat import router as fat_router
from fat_method.app_logging import configure_logging
from fat_method.containers import AppContainer
from fat_method.domain.signups import InvalidEmailError, SignupError

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": (
        "authorization, x-client-info, apikey, content-type"
    ),
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(fat_router)

    @app.middleware("http")
    async def cors_headers(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Answer preflight requests and add CORS headers to every response."""
        if request.method == "OPTIONS":
            return PlainTextResponse("ok", headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/save-email")
    @app.post("/functions/v1/save-email")
    async def save_email(request: Request) -> JSONResponse:
        """Register an email, answering success for already known emails."""
        state_container: AppContainer = request.app.state.container
        try:
            try:
                payload = await request.json()
            except ValueError as exc:
                raise InvalidEmailError("Invalid request body") from exc
            email = payload.get("email") if isinstance(payload, dict) else None
            result = state_container.signup_service.subscribe(email)
        except SignupError as exc:
            logger.info("Signup rejected: %s", exc)
            return JSONResponse(
                {"error": str(exc)}, status_code=status.HTTP_400_BAD_REQUEST
            )
        if not result.created:
            return JSONResponse({"success": True})
        return JSONResponse({"success": True, "data": result.data})

    return app
