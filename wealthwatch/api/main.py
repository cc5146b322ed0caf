"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from wealthwatch.api.middleware import RequestIDMiddleware, MetricsMiddleware
from wealthwatch.api.v1 import analytics, budgets, debts, goals, transactions
from wealthwatch.api.v1 import settings as settings_routes
from wealthwatch.domain.exceptions import InvalidRecordError, InvalidWindowError
from wealthwatch.infrastructure.database.session import init_db
from wealthwatch.infrastructure.observability.logging import setup_logging
from wealthwatch.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="WealthWatch",
        description="Personal finance records and analytics",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Domain errors that reach the edge are caller mistakes
    @app.exception_handler(InvalidWindowError)
    @app.exception_handler(InvalidRecordError)
    async def invalid_input_handler(request: Request, exc: Exception):
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(transactions.router, prefix="/v1", tags=["transactions"])
    app.include_router(debts.router, prefix="/v1", tags=["debts"])
    app.include_router(budgets.router, prefix="/v1", tags=["budgets"])
    app.include_router(goals.router, prefix="/v1", tags=["goals"])
    app.include_router(analytics.router, prefix="/v1", tags=["analytics"])
    app.include_router(settings_routes.router, prefix="/v1", tags=["settings"])

    return app


app = create_app()
