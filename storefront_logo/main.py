"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront_logo import __version__
from storefront_logo.api.v1.router import api_v1_router
from storefront_logo.core.exceptions import (
    http_exception_handler,
    validation_exception_handler,
)
from storefront_logo.core.middleware.cors import get_cors_config
from storefront_logo.core.middleware.request_id import RequestIdMiddleware

app = FastAPI(
    title="Storefront Logo API",
    version=__version__,
    docs_url="/docs",
    openapi_url="/openapi.json",
)

# Middleware (last added = first executed)
app.add_middleware(RequestIdMiddleware)
app.add_middleware(CORSMiddleware, **get_cors_config())

# Exception handlers (RFC 7807) for framework-level errors
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Routes
app.include_router(api_v1_router, prefix="/api/v1")
