from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory_api.core.config import settings
from inventory_api.core.logging import LoggingMiddleware, get_logger, setup_logging
from inventory_api.db import database, models
from inventory_api.routers import products
from inventory_api.utils.exceptions import ValidationFailure

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if settings.AUTO_CREATE_TABLES:
        models.Base.metadata.create_all(bind=database.engine)
    logger.info("Application started", environment=settings.ENVIRONMENT)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=(
        "Inventory management for a retail store: CRUD over products, "
        "supplier listing and filterable stock reports."
    ),
    contact={"name": "Inventory Team", "email": "support@example.com"},
    license_info={"name": "Apache 2.0", "url": "https://www.apache.org/licenses/LICENSE-2.0.html"},
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    failure = ValidationFailure.from_errors(exc.errors())
    logger.info("Request validation failed", path=request.url.path, errors=failure.errors)
    return JSONResponse(status_code=failure.status_code, content=failure.errors)


@app.get("/health")
def health_check():
    """Basic health check endpoint"""
    return {"status": "healthy", "message": f"{settings.APP_NAME} is running"}


@app.get("/")
def root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health"
    }


app.include_router(products.router)
