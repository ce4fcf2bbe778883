import unittest
from datetime import datetime, timezone

from django.db.models import ProtectedError

from apps.api.exceptions import Forbidden
from apps.api.policy import Identity
from apps.users.services import UserHasOrdersError, UserNotFoundError, UserService


class FakeUser:
    def __init__(self, user_id, name, email, role="customer", profile_pic=""):
        self.id = user_id
        self.name = name
        self.email = email
        self.role = role
        self.profile_pic = profile_pic
        self.password = "bcrypt$$2b$10$hash"
        self.date_joined = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeUserRepository:
    def __init__(self, users=None):
        self._users = {u.id: u for u in (users or [])}
        self.with_orders = set()
        self.protected = set()

    def list(self, **filters):
        return [self._users[k] for k in sorted(self._users)]

    def get(self, **filters):
        return self._users.get(filters.get("id"))

    def has_orders(self, user):
        return user.id in self.with_orders

    def delete(self, user):
        if user.id in self.protected:
            raise ProtectedError("protected", set())
        self._users.pop(user.id, None)


class UserServiceTests(unittest.TestCase):
    def setUp(self):
        self.repo = FakeUserRepository(
            [
                FakeUser(1, "Admin", "admin@example.com", role="admin"),
                FakeUser(2, "Alice", "alice@example.com", profile_pic="alice.png"),
            ]
        )
        self.service = UserService(users=self.repo)

    def test_list_users_excludes_password(self):
        users = self.service.list_users()
        self.assertEqual([u.id for u in users], [1, 2])
        self.assertFalse(hasattr(users[0], "password"))
        self.assertEqual(users[0].date_joined, "2024-01-01T00:00:00+00:00")

    def test_remove_user(self):
        self.service.remove_user(2)
        self.assertIsNone(self.repo.get(id=2))

    def test_remove_missing_user(self):
        with self.assertRaises(UserNotFoundError):
            self.service.remove_user(99)

    def test_remove_user_with_orders_conflicts(self):
        self.repo.with_orders.add(2)
        with self.assertRaises(UserHasOrdersError) as ctx:
            self.service.remove_user(2)
        self.assertEqual(ctx.exception.status_code, 409)
        self.assertIsNotNone(self.repo.get(id=2))

    def test_remove_user_protected_at_delete_time(self):
        self.repo.protected.add(2)
        with self.assertRaises(UserHasOrdersError):
            self.service.remove_user(2)

    def test_get_role_from_identity(self):
        self.assertEqual(self.service.get_role(Identity(id=1, role="admin")), "admin")

    def test_get_role_missing(self):
        with self.assertRaises(Forbidden) as ctx:
            self.service.get_role(Identity(id=1, role=None))
        self.assertEqual(ctx.exception.message, "Access denied, no role found")

    def test_get_username_and_profile_pic(self):
        self.assertEqual(self.service.get_username(2), "Alice")
        self.assertEqual(self.service.get_profile_pic(2), "alice.png")
        self.assertEqual(self.service.get_profile_pic(1), "")

    def test_profile_reads_for_removed_user(self):
        with self.assertRaises(UserNotFoundError):
            self.service.get_username(42)
