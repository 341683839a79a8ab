"""FastAPI application factory"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from truecost.api.middleware import RequestIDMiddleware, MetricsMiddleware
from truecost.api.v1 import calculators, insights, scenarios
from truecost.infrastructure.database.models import Base
from truecost.infrastructure.database.session import engine
from truecost.infrastructure.observability.logging import setup_logging
from truecost.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # No migrations: the scenario table is created if missing
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="TrueCost",
        description="Loan, credit card payoff and time-cost calculators with saved loan scenarios",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(calculators.router, prefix="/v1", tags=["calculators"])
    app.include_router(scenarios.router, prefix="/v1", tags=["scenarios"])
    app.include_router(insights.router, prefix="/v1", tags=["insights"])

    return app


app = create_app()
