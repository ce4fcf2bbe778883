from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model
from django.db import DEFAULT_DB_ALIAS

from apps.common.repository import GenericRepository
from .protocols import CredentialRepositoryProtocol


class DjangoCredentialRepository(GenericRepository, CredentialRepositoryProtocol):
    def __init__(self, using: str = DEFAULT_DB_ALIAS) -> None:
        super().__init__(get_user_model(), using=using)

    def email_exists(self, email: str) -> bool:
        return self.objects.filter(email__iexact=email.strip()).exists()

    def get_by_email(self, email: str):
        return self.objects.filter(email__iexact=email.strip()).first()

    def create_user(self, **data: Any):
        return self.model._default_manager.db_manager(self.using).create_user(**data)

    def set_password(self, user, raw_password: str) -> None:
        user.set_password(raw_password)
        user.save(using=self.using, update_fields=["password"])
