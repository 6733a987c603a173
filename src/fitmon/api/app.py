"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from fitmon.app_logging import configure_logging
from fitmon.config import parse_allowed_origins
from fitmon.containers import AppContainer
from fitmon.domain.analysis import AnalysisFailure
from fitmon.services.analysis import parse_analysis_request

CHAT_PATH = "/api/chat"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    allowed_origins = parse_allowed_origins(container.settings.allowed_origins)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post(CHAT_PATH)
    async def chat(request: Request) -> JSONResponse:
        """Estimate calories for a food or workout description."""
        state_container: AppContainer = request.app.state.container
        origin = request.headers.get("origin")
        headers: dict[str, str] = {}
        if origin and origin in allowed_origins:
            headers = _cors_headers(origin)
        elif origin:
            logger.warning("Unauthorized origin blocked: %s", origin)
            return _error_response(status.HTTP_403_FORBIDDEN, "Origin not allowed")

        parsed = parse_analysis_request(await _read_json_body(request))
        if isinstance(parsed, AnalysisFailure):
            return _error_response(parsed.status_code, parsed.message, headers)

        try:
            result = await state_container.analysis_service.analyze(parsed)
        except Exception:
            logger.exception(
                "Error calling model API", extra={"analysis_type": parsed.type.value}
            )
            return _error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "Analysis failed", headers
            )
        if isinstance(result, AnalysisFailure):
            return _error_response(result.status_code, result.message, headers)
        return JSONResponse(result.payload, headers=headers)

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Render 405s in the same error shape as the chat endpoint."""
        if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED:
            return await http_exception_handler(request, exc)
        return _error_response(
            exc.status_code, "Method not allowed", dict(exc.headers or {})
        )

    return app


def _cors_headers(origin: str) -> dict[str, str]:
    """Return CORS headers for an allowed origin."""
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": "POST",
        "Access-Control-Allow-Headers": "Content-Type",
    }


def _error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


async def _read_json_body(request: Request) -> object | None:
    """Decode a JSON body; anything else is treated as no body."""
    content_type = request.headers.get("content-type", "")
    if "application/json" not in content_type.lower():
        return None
    try:
        return await request.json()
    except ValueError:
        return None
