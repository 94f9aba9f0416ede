"""FastAPI application factory.

Domain errors never escape as 500s: one exception handler maps the
taxonomy to status codes.  ``StorageError`` is deliberately left out so
a corrupt data file fails loudly.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import (
    AuthError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ExternalServiceError,
    ForbiddenError,
    ValidationError,
)
from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.config import load_settings
from storefront.infrastructure.web import admin_routes, customer_routes

logger = logging.getLogger(__name__)

# Checked in order, so subclasses come before their bases.
ERROR_STATUS_CODES: list[tuple[type[DomainException], int]] = [
    (ValidationError, 400),
    (ForbiddenError, 403),
    (AuthError, 401),
    (EntityNotFoundError, 404),
    (ConflictError, 409),
    (ExternalServiceError, 502),
]


def status_for(exc: DomainException) -> int:
    for exc_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 500


async def domain_error_handler(request: Request, exc: DomainException) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error_type": type(exc).__name__},
    )


def create_app(container: Container | None = None) -> FastAPI:
    if container is None:
        container = build_container(load_settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        container.close()

    app = FastAPI(title="Storefront", lifespan=lifespan)
    app.state.container = container
    app.add_exception_handler(DomainException, domain_error_handler)
    app.include_router(customer_routes.router)
    app.include_router(admin_routes.login_router)
    app.include_router(admin_routes.router)
    return app
