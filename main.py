from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from pitico_app.config import settings
from pitico_app.database.connection import get_db, init_db
from pitico_app.exceptions import ErrorKind, PiticoError
from pitico_app.logging_config import setup_logging
from pitico_app.middleware import RequestLoggingMiddleware
from pitico_app.storage.mapping_store import MappingStore
from pitico_app.api import pages, redirect
from pitico_app.api.v1 import urls

setup_logging(
    level=settings.log_level,
    log_file=settings.log_file,
    json_format=settings.log_json,
)

# Create database tables (StorageUnavailable here stops the service from starting)
init_db()

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Pitico, a very very simple URL shortener built with FastAPI",
    debug=settings.debug
)
app.add_middleware(RequestLoggingMiddleware)


ERROR_STATUS_CODES = {
    ErrorKind.STORAGE_UNAVAILABLE: 503,
    ErrorKind.STORAGE_ERROR: 500,
    ErrorKind.REGISTRATION_CONFLICT: 500,
    ErrorKind.ALIAS_NOT_FOUND: 404,
    ErrorKind.INVALID_ALIAS: 400,
}


@app.exception_handler(PiticoError)
async def pitico_error_handler(request: Request, exc: PiticoError):
    """Render core errors as {"kind", "detail"} with a status per kind"""
    return JSONResponse(
        status_code=ERROR_STATUS_CODES.get(exc.kind, 500),
        content={"kind": exc.kind.value, "detail": exc.detail},
    )


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint; counting records proves the database answers"""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "urls": MappingStore(db).count(),
    }




######## Include routers (redirect last: it matches any single path segment)
app.include_router(urls.router, prefix="/api/v1")
app.include_router(pages.router)
app.include_router(redirect.router)
