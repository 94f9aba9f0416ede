"""Application services: customer signup/login and admin login."""

from __future__ import annotations

import hmac
import logging

from storefront.application.dto import UserDTO
from storefront.domain.exceptions import AuthError, ConflictError
from storefront.domain.model.user import User, normalize_email, validate_password
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class SignupHandler:

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def handle(self, email: str, password: str) -> UserDTO:
        email = normalize_email(email)
        validate_password(password)
        password_hash = self._hasher.hash(password)

        with self._user_repo.locked():
            if self._user_repo.get_by_email(email) is not None:
                raise ConflictError(f"An account for {email} already exists")
            user = User(email=email, password_hash=password_hash)
            self._user_repo.save(user)

        logger.info("User %s signed up", email)
        return UserDTO.from_domain(user)


class LoginHandler:

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def handle(self, email: str, password: str) -> UserDTO:
        """Return the user if the credentials match, else raise AuthError.

        Unknown e-mail and wrong password give the same message.
        """
        user = self._user_repo.get_by_email(normalize_email(email))
        if user is None or not self._hasher.verify(password or "", user.password_hash):
            raise AuthError("Invalid e-mail or password")
        return UserDTO.from_domain(user)


class ListUsersHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self) -> list[UserDTO]:
        return [UserDTO.from_domain(u) for u in self._user_repo.list_all()]


class AdminLoginHandler:

    def __init__(self, admin_password: str) -> None:
        if not admin_password:
            raise ValueError("admin password must not be empty")
        self._admin_password = admin_password

    def handle(self, password: str) -> None:
        if not hmac.compare_digest(
            (password or "").encode("utf-8"), self._admin_password.encode("utf-8")
        ):
            logger.warning("Rejected admin login attempt")
            raise AuthError("Access denied")
