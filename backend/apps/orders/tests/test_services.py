import unittest
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import patch

from apps.api.exceptions import Forbidden, ResourceNotFound
from apps.api.policy import Identity, ROLE_ADMIN
from apps.carts.services import CartNotFoundError
from apps.orders.commands import DeliveryCommand
from apps.orders.services import EmptyCartError, OrderNotFoundError, OrderService


class DummyAtomic:
    def __call__(self, *args, **kwargs):
        return self

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


class StubUser:
    def __init__(self, user_id, name):
        self.id = user_id
        self.name = name


class StubProduct:
    def __init__(self, product_id, name, price):
        self.id = product_id
        self.name = name
        self.price = Decimal(price)


class StubCart:
    def __init__(self, cart_id, user_id):
        self.id = cart_id
        self.user_id = user_id


class StubCartItem:
    def __init__(self, cart_id, product, quantity):
        self.cart_id = cart_id
        self.product = product
        self.product_id = product.id
        self.quantity = quantity


class StubOrder:
    def __init__(self, order_id, user, **fields):
        self.id = order_id
        self.user = user
        self.user_id = user.id
        self.created_at = datetime(2025, 1, order_id, tzinfo=timezone.utc)
        for key, value in fields.items():
            setattr(self, key, value)


class StubOrderItem:
    def __init__(self, order, product, quantity, unit_price):
        self.order_id = order.id
        self.product = product
        self.product_id = product.id
        self.quantity = quantity
        self.unit_price = unit_price


class FakeOrderRepository:
    using = "default"

    def __init__(self, users):
        self.users = users
        self._orders = {}
        self._pk = 1

    def create(self, **data):
        user = self.users[data.pop("user_id")]
        order = StubOrder(self._pk, user, **data)
        self._orders[order.id] = order
        self._pk += 1
        return order

    def get(self, **filters):
        return self._orders.get(filters.get("id"))

    def lock(self, **filters):
        return self.get(**filters)

    def update(self, order, **data):
        for key, value in data.items():
            setattr(order, key, value)
        return order

    def delete(self, order):
        self._orders.pop(order.id, None)

    def list_with_user(self, **filters):
        orders = [
            o
            for o in self._orders.values()
            if all(getattr(o, k) == v for k, v in filters.items())
        ]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)


class FakeOrderItemRepository:
    def __init__(self):
        self._items = []

    def create_many(self, order, rows):
        created = [StubOrderItem(order, **row) for row in rows]
        self._items.extend(created)
        return created

    def delete_for_order(self, order_id):
        before = len(self._items)
        self._items = [i for i in self._items if i.order_id != order_id]
        return before - len(self._items)

    def list_with_product(self, **filters):
        return [
            i
            for i in self._items
            if all(getattr(i, k) == v for k, v in filters.items())
        ]


class FakeCartRepository:
    def __init__(self, carts):
        self._carts = carts

    def lock(self, **filters):
        for cart in self._carts:
            if all(getattr(cart, k) == v for k, v in filters.items()):
                return cart
        return None


class FakeCartItemRepository:
    def __init__(self, items):
        self._items = items

    def list_for_cart(self, cart_id):
        return [i for i in self._items if i.cart_id == cart_id]

    def delete_for_cart(self, cart_id):
        before = len(self._items)
        self._items[:] = [i for i in self._items if i.cart_id != cart_id]
        return before - len(self._items)


DELIVERY = DeliveryCommand(city="Oslo", address="Main St 1", postcode="0150", tel="555-0101")


class OrderServiceTests(unittest.TestCase):
    def setUp(self):
        self.atomic_patcher = patch(
            "apps.orders.services.transaction.atomic", new=DummyAtomic()
        )
        self.atomic_patcher.start()
        self.addCleanup(self.atomic_patcher.stop)
        self.phone = StubProduct(1, "Pixel 9", "10.00")
        self.tablet = StubProduct(2, "iPad Air", "5.50")
        users = {7: StubUser(7, "Alice"), 8: StubUser(8, "Bob")}
        self.cart_items = [
            StubCartItem(1, self.phone, 2),
            StubCartItem(1, self.tablet, 1),
        ]
        self.orders = FakeOrderRepository(users)
        self.order_items = FakeOrderItemRepository()
        self.service = OrderService(
            orders=self.orders,
            order_items=self.order_items,
            carts=FakeCartRepository([StubCart(1, 7), StubCart(2, 8)]),
            cart_items=FakeCartItemRepository(self.cart_items),
        )
        self.alice = Identity(id=7)
        self.bob = Identity(id=8)
        self.admin = Identity(id=1, role=ROLE_ADMIN)

    def test_create_order_freezes_prices_and_totals(self):
        order = self.service.create_order(7, DELIVERY)
        self.assertEqual(order.total_amount, "25.50")
        self.assertEqual(order.city, "Oslo")
        self.assertEqual(
            [(i.product_id, i.quantity, i.unit_price) for i in order.items],
            [(1, 2, "10.00"), (2, 1, "5.50")],
        )
        self.phone.price = Decimal("99.00")
        lines = self.service.list_items_for_order(self.alice, order.id)
        self.assertEqual(lines[0].unit_price, "10.00")

    def test_create_order_empties_cart(self):
        self.service.create_order(7, DELIVERY)
        self.assertEqual(self.cart_items, [])

    def test_create_order_with_explicit_cart_id(self):
        order = self.service.create_order(7, DELIVERY, cart_id=1)
        self.assertEqual(order.user_id, 7)

    def test_create_order_with_someone_elses_cart(self):
        with self.assertRaises(CartNotFoundError) as ctx:
            self.service.create_order(7, DELIVERY, cart_id=2)
        self.assertEqual(ctx.exception.message, "No such cart")

    def test_create_order_without_cart(self):
        with self.assertRaises(CartNotFoundError):
            self.service.create_order(99, DELIVERY)

    def test_create_order_with_empty_cart(self):
        with self.assertRaises(EmptyCartError):
            self.service.create_order(8, DELIVERY)

    def test_owner_deletes_order(self):
        order = self.service.create_order(7, DELIVERY)
        self.service.delete_order(self.alice, order.id)
        self.assertIsNone(self.orders.get(id=order.id))
        self.assertEqual(self.order_items.list_with_product(order_id=order.id), [])

    def test_other_customer_cannot_delete_order(self):
        order = self.service.create_order(7, DELIVERY)
        with self.assertRaises(Forbidden):
            self.service.delete_order(self.bob, order.id)
        self.assertIsNotNone(self.orders.get(id=order.id))

    def test_admin_deletes_any_order(self):
        order = self.service.create_order(7, DELIVERY)
        self.service.delete_order(self.admin, order.id)
        self.assertIsNone(self.orders.get(id=order.id))

    def test_delete_missing_order(self):
        with self.assertRaises(OrderNotFoundError):
            self.service.delete_order(self.admin, 404)

    def test_empty_listings_are_not_found(self):
        for call in (
            self.service.list_orders,
            self.service.list_order_items,
            lambda: self.service.list_orders_for_user(7),
        ):
            with self.assertRaises(ResourceNotFound):
                call()

    def test_listings_after_order(self):
        order = self.service.create_order(7, DELIVERY)
        summaries = self.service.list_orders()
        self.assertEqual(summaries[0].user_name, "Alice")
        self.assertEqual(summaries[0].total_amount, "25.50")
        self.assertEqual(len(self.service.list_order_items()), 2)
        self.assertEqual(self.service.list_orders_for_user(7)[0].order_id, order.id)
        with self.assertRaises(ResourceNotFound):
            self.service.list_orders_for_user(8)

    def test_ordered_items_only_for_owner_or_admin(self):
        order = self.service.create_order(7, DELIVERY)
        with self.assertRaises(Forbidden):
            self.service.list_items_for_order(self.bob, order.id)
        self.assertEqual(len(self.service.list_items_for_order(self.admin, order.id)), 2)
