from typing import Type, TypeVar, Generic, Iterable, Optional

from django.db import DEFAULT_DB_ALIAS, models

T = TypeVar('T', bound=models.Model)


class GenericRepository(Generic[T]):
    """Row access for one model, bound to an explicit database alias.

    Services never touch the global connection directly: every query and every
    transaction they open goes through the alias the repository was built with.
    """

    def __init__(self, model: Type[T], using: str = DEFAULT_DB_ALIAS):
        self.model = model
        self.using = using

    @property
    def objects(self) -> models.QuerySet:
        return self.model._default_manager.using(self.using)

    def get(self, **filters) -> Optional[T]:
        return self.objects.filter(**filters).first()

    def list(self, **filters) -> Iterable[T]:
        return self.objects.filter(**filters)

    def lock(self, **filters) -> Optional[T]:
        """Fetch a single row with a row-level lock; call inside ``transaction.atomic(using=...)``."""
        return self.objects.select_for_update().filter(**filters).first()

    def exists(self, **filters) -> bool:
        return self.objects.filter(**filters).exists()

    def create(self, **data) -> T:
        return self.objects.create(**data)

    def update(self, obj: T, **data) -> T:
        for k, v in data.items():
            setattr(obj, k, v)
        obj.save(using=self.using)
        return obj

    def delete(self, obj: T):
        obj.delete(using=self.using)
