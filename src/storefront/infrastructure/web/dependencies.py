"""FastAPI dependencies: the container and the authenticated principal."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, Request

from storefront.domain.exceptions import AuthError
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.session.session_store import Principal


def get_container(request: Request) -> Container:
    return request.app.state.container


def bearer_token(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthError("Authorization header must be 'Bearer <token>'")
    return token.strip()


def get_principal(
    token: Optional[str] = Depends(bearer_token),
    container: Container = Depends(get_container),
) -> Principal:
    return container.sessions.resolve(token)


def current_customer(principal: Principal = Depends(get_principal)) -> str:
    """The signed-in customer's ID (their e-mail)."""
    return principal.require_customer()


def require_admin(principal: Principal = Depends(get_principal)) -> None:
    principal.require_admin()
