import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from sheet_cleanup.core.config import settings
from sheet_cleanup.core.exceptions import InvalidRequestError, TableParseError, TableWriteError
from sheet_cleanup.core.logging_config import setup_logging
from sheet_cleanup.api import clean, health

setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    debug=settings.DEBUG,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

# Include routers
app.include_router(health.router, prefix=settings.API_PREFIX, tags=["health"])
app.include_router(clean.router, prefix=settings.API_PREFIX, tags=["clean"])


@app.exception_handler(InvalidRequestError)
async def invalid_request_handler(request: Request, exc: InvalidRequestError):
    logger.info(f"Rejected {request.url.path}: {exc}")
    return PlainTextResponse(str(exc), status_code=400)


@app.exception_handler(TableParseError)
async def parse_error_handler(request: Request, exc: TableParseError):
    logger.error(f"Parse failure on {request.url.path}: {exc}", exc_info=exc)
    return PlainTextResponse(str(exc), status_code=500)


@app.exception_handler(TableWriteError)
async def write_error_handler(request: Request, exc: TableWriteError):
    logger.error(f"Write failure on {request.url.path}: {exc}", exc_info=exc)
    return PlainTextResponse(str(exc), status_code=500)


@app.get("/")
async def root():
    return {
        "name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
    }
