from django.db import DEFAULT_DB_ALIAS

from apps.common.repository import GenericRepository
from .models import User


class UserRepository(GenericRepository[User]):
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        super().__init__(User, using=using)

    def list(self, **filters):
        return self.objects.filter(**filters).order_by("id")

    def has_orders(self, user: User) -> bool:
        return user.orders.using(self.using).exists()
