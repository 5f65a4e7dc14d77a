"""
Restaurant Back-Office - FastAPI Backend Application
"""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from backoffice.config import settings
from backoffice.errors import BackofficeError
from backoffice.api import (
    addons,
    auth,
    categories,
    deliveries,
    drivers,
    feedback,
    invoices,
    menu_items,
    menu_options,
    option_groups,
    orders,
    payments,
    reports,
    rewards,
)

# Configure structured logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting Restaurant Back-Office API", version="1.0.0")
    yield
    logger.info("Shutting down Restaurant Back-Office API")


# Create FastAPI application
app = FastAPI(
    title="Restaurant Back-Office",
    description="Admin API for the menu catalog, orders, deliveries and billing",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BackofficeError)
async def backoffice_error_handler(request: Request, exc: BackofficeError):
    log = logger.error if exc.status_code >= 500 else logger.info
    log(
        "Request failed",
        method=request.method,
        path=request.url.path,
        status_code=exc.status_code,
        detail=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Request rejected", method=request.method, path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


# Health check endpoints
@app.get("/health")
async def health():
    """Basic health check"""
    return {"status": "healthy", "service": "api", "version": "1.0.0"}


@app.get("/health/ready")
async def ready():
    """Readiness check with dependency verification"""
    from backoffice.database import SessionLocal

    checks = {}

    try:
        async with SessionLocal() as db:
            await db.execute(text("SELECT 1"))
        checks["database"] = "ok"
    except Exception as e:
        checks["database"] = f"failed: {str(e)}"

    all_ok = all(v == "ok" for v in checks.values())

    return {
        "status": "ready" if all_ok else "not_ready",
        "checks": checks,
    }


# Include API routers
app.include_router(auth.router, prefix="/auth", tags=["Authentication"])
app.include_router(categories.router, prefix="/categories", tags=["Categories"])
app.include_router(menu_items.router, prefix="/menu_items", tags=["Menu Items"])
app.include_router(addons.router, prefix="/addons", tags=["Addons"])
app.include_router(option_groups.router, prefix="/option_groups", tags=["Option Groups"])
app.include_router(menu_options.router, prefix="/menu_options", tags=["Menu Options"])
app.include_router(orders.router, prefix="/orders", tags=["Orders"])
app.include_router(reports.router, prefix="/reports", tags=["Reports"])
app.include_router(drivers.router, prefix="/drivers", tags=["Drivers"])
app.include_router(deliveries.router, prefix="/deliveries", tags=["Deliveries"])
app.include_router(invoices.router, prefix="/invoices", tags=["Invoices"])
app.include_router(payments.router, prefix="/payments", tags=["Payments"])
app.include_router(feedback.router, prefix="/order_feedback", tags=["Order Feedback"])
app.include_router(rewards.router, prefix="/rewards", tags=["Rewards"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "backoffice.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )
