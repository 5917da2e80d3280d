import time
from contextlib import asynccontextmanager
from typing import List, Optional, Sequence

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from processarchitec import __version__
from processarchitec.ai.orchestrator import FallbackOrchestrator
from processarchitec.ai.providers import build_providers, close_providers
from processarchitec.ai.providers.base import ProviderClient
from processarchitec.api.rest.models import (
    ErrorResponse,
    GenerateWorkflowRequest,
    HealthResponse,
)
from processarchitec.config import Settings, get_settings

logger = structlog.get_logger(__name__)

PROVIDER_NAMES = ("anthropic", "openai", "openrouter")


def create_app(
    settings: Optional[Settings] = None,
    providers: Optional[Sequence[ProviderClient]] = None,
) -> FastAPI:
    """Build the API.

    ``providers`` overrides the ones built from ``settings``; injected
    providers are owned by the caller and are not closed on shutdown.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned: List[ProviderClient] = []
        if providers is None:
            owned = build_providers(settings)
            active = owned
        else:
            active = list(providers)

        app.state.orchestrator = FallbackOrchestrator(active)
        logger.info(
            "api_started",
            app=settings.app_name,
            environment=settings.environment,
            providers=[provider.name for provider in active],
        )
        try:
            yield
        finally:
            await close_providers(owned)
            logger.info("api_stopped")

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Generates importable workflow definitions from plain-language requirements",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        logger.info(
            "request_processed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time=f"{process_time:.4f}s",
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # malformed bodies are reported as 500, not 422
        detail = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        logger.error("invalid_generation_request", path=request.url.path, detail=detail)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Invalid workflow generation request", detail=detail).model_dump(),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Internal server error", detail=str(exc)).model_dump(),
        )

    @app.get("/", response_model=HealthResponse, response_model_by_alias=True)
    async def health_check(request: Request):
        orchestrator: FallbackOrchestrator = request.app.state.orchestrator
        active = {provider.name for provider in orchestrator.providers}
        return HealthResponse(
            status=f"{settings.app_name} Backend Running",
            version=__version__,
            providers={name: name in active for name in PROVIDER_NAMES},
            heuristic_fallback=True,
        )

    @app.post("/api/generate-workflow")
    async def generate_workflow(body: GenerateWorkflowRequest, request: Request):
        orchestrator: FallbackOrchestrator = request.app.state.orchestrator
        result = await orchestrator.run(body.context(), body.workflow_description)
        return JSONResponse(content=result.document.to_dict())

    return app
