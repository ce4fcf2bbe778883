from __future__ import annotations

from django.db import DEFAULT_DB_ALIAS

from .repositories import DjangoCredentialRepository
from .services import CredentialService, RegistrationService
from .tokens import SessionTokenService


def build_registration_service(using: str = DEFAULT_DB_ALIAS) -> RegistrationService:
    return RegistrationService(users=DjangoCredentialRepository(using=using))


def build_credential_service(using: str = DEFAULT_DB_ALIAS) -> CredentialService:
    return CredentialService(
        users=DjangoCredentialRepository(using=using),
        tokens=SessionTokenService(),
    )
