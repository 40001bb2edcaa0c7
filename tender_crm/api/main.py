"""FastAPI application factory"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from tender_crm.api.errors import register_exception_handlers
from tender_crm.api.middleware import RequestIDMiddleware, MetricsMiddleware
from tender_crm.api.v1 import admin, clients, financials, oems, products, tenders, users
from tender_crm.infrastructure.observability.logging import setup_logging
from tender_crm.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Tender CRM",
        description="Clients, tenders, financial instruments and admin lookups",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(financials.router, prefix="/api/v1", tags=["financials"])
    app.include_router(tenders.router, prefix="/api/v1", tags=["tenders"])
    app.include_router(clients.router, prefix="/api/v1", tags=["clients"])
    app.include_router(users.router, prefix="/api/v1", tags=["users"])
    app.include_router(oems.router, prefix="/api/v1", tags=["oems"])
    app.include_router(products.router, prefix="/api/v1", tags=["products"])
    app.include_router(admin.router, prefix="/api/v1/admin", tags=["admin"])

    return app


app = create_app()
