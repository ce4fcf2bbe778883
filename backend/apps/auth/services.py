from __future__ import annotations

from typing import Any, Dict, Tuple

from django.db import IntegrityError, transaction
from rest_framework import status

from apps.api.exceptions import Conflict, DomainError
from apps.common import get_logger
from apps.users.services import UserNotFoundError
from .protocols import CredentialRepositoryProtocol, TokenServiceProtocol

logger = get_logger(__name__).bind(component="auth", layer="service")


class DuplicateEmailError(Conflict):
    code = "DUPLICATE_EMAIL"
    default_message = "Email already registered"


class InvalidCredentialsError(DomainError):
    code = "INVALID_CREDENTIALS"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Incorrect password"


class RegistrationService:
    def __init__(self, users: CredentialRepositoryProtocol):
        self.users = users
        self.logger = logger.bind(service="RegistrationService")

    def register(self, data: Dict[str, Any]) -> Dict[str, Any]:
        name = data["name"].strip()
        email = data["email"].strip()
        self.logger.debug("Received registration request", email=email)
        if self.users.email_exists(email):
            self.logger.info("Registration rejected: email already exists", email=email)
            raise DuplicateEmailError(details={"email": email})
        try:
            with transaction.atomic(using=self.users.using):
                user = self.users.create_user(
                    email=email, password=data["psw"], name=name
                )
        except IntegrityError as exc:
            # Lost the race against a concurrent registration of the same address.
            self.logger.info(
                "Registration rejected by unique constraint", email=email
            )
            raise DuplicateEmailError(details={"email": email}) from exc
        self.logger.info("User registered successfully", user_id=user.id)
        return {"id": user.id, "name": user.name, "email": user.email}


class CredentialService:
    """Password verification, session token issue and password change."""

    def __init__(
        self, users: CredentialRepositoryProtocol, tokens: TokenServiceProtocol
    ):
        self.users = users
        self.tokens = tokens
        self.logger = logger.bind(service="CredentialService")

    def login(self, email: str, password: str) -> Tuple[str, Any]:
        """Return ``(token, user)`` for a matching email/password pair."""
        user = self.users.get_by_email(email)
        if user is None:
            self.logger.info("Login rejected: unknown email", email=email)
            raise UserNotFoundError()
        if not user.check_password(password):
            self.logger.info("Login rejected: wrong password", user_id=user.id)
            raise InvalidCredentialsError()
        token = self.tokens.issue(user.id, user.role)
        self.logger.info("User logged in", user_id=user.id)
        return token, user

    def change_password(self, user_id: int, new_password: str) -> None:
        user = self.users.get(id=user_id)
        if user is None:
            self.logger.warning("Password change for missing user", user_id=user_id)
            raise UserNotFoundError(details={"user_id": str(user_id)})
        self.users.set_password(user, new_password)
        self.logger.info("Password changed", user_id=user_id)
