from __future__ import annotations

from django.db import DEFAULT_DB_ALIAS

from .repositories import UserRepository
from .services import UserService


def build_user_service(using: str = DEFAULT_DB_ALIAS) -> UserService:
    return UserService(users=UserRepository(using=using))
