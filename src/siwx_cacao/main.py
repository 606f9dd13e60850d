from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from siwx_cacao import __version__
from siwx_cacao.api.routes.health import router as health_router
from siwx_cacao.api.routes.verify import router as verify_router
from siwx_cacao.core.config import settings
from siwx_cacao.observability.logging import configure_logging
from siwx_cacao.observability.request_logging import request_logging_middleware


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    yield


app = FastAPI(
    title="SIWx CACAO Verifier",
    summary="Verification service for chain-agnostic sign-in capabilities",
    version=__version__,
    license_info={"name": "Apache-2.0"},
    openapi_url="/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    servers=[
        {"url": f"http://localhost:{settings.app_port}", "description": "Local development"},
    ],
    lifespan=lifespan,
)
app.add_middleware(BaseHTTPMiddleware, dispatch=request_logging_middleware)

app.include_router(health_router)
app.include_router(verify_router)
