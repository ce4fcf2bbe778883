import os
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.carts.models import Cart, CartItem
from apps.catalog.models import Category, Product
from apps.orders.models import Order, OrderItem
from apps.users.models import Role, User

PRODUCTS = [
    ("Pixel 9", Category.PHONE, "799.00", 25, "pixel-9.png"),
    ("iPhone 16", Category.PHONE, "899.00", 30, "iphone-16.png"),
    ("Galaxy S24", Category.PHONE, "849.00", 20, "galaxy-s24.png"),
    ("iPad Air", Category.TABLET, "599.00", 15, "ipad-air.png"),
    ("Galaxy Tab S9", Category.TABLET, "699.00", 12, "galaxy-tab-s9.png"),
    ("ThinkPad X1 Carbon", Category.LAPTOP, "1499.00", 8, "thinkpad-x1.png"),
    ("MacBook Air 13", Category.LAPTOP, "1199.00", 10, "macbook-air-13.png"),
    ("Dell XPS 13", Category.LAPTOP, "1099.00", 9, "dell-xps-13.png"),
]

CUSTOMERS = [
    {"name": "Alice", "email": "alice@example.com", "password": "alice-pass"},
    {"name": "Bob", "email": "bob@example.com", "password": "bob-pass"},
]


class Command(BaseCommand):
    help = "Seed the storefront catalog, an admin account and sample customers."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush", action="store_true", help="Delete existing data before seeding"
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            self.stdout.write("Flushing existing data...")
            OrderItem.objects.all().delete()
            Order.objects.all().delete()
            CartItem.objects.all().delete()
            Cart.objects.all().delete()
            User.objects.all().delete()
            Product.objects.all().delete()

        self.stdout.write("Seeding products...")
        for name, category, price, stock, image in PRODUCTS:
            Product.objects.get_or_create(
                name=name,
                defaults=dict(
                    category=category, price=Decimal(price), stock=stock, image=image
                ),
            )

        self.stdout.write("Seeding admin...")
        admin_email = os.getenv("SEED_ADMIN_EMAIL", "admin@example.com")
        admin, created = User.objects.get_or_create(
            email=admin_email, defaults={"name": "Admin", "role": Role.ADMIN}
        )
        if created:
            admin.set_password(os.getenv("SEED_ADMIN_PASSWORD", "admin-pass"))
            admin.save()

        self.stdout.write("Seeding customers...")
        for payload in CUSTOMERS:
            user, created = User.objects.get_or_create(
                email=payload["email"], defaults={"name": payload["name"]}
            )
            if created:
                user.set_password(payload["password"])
                user.save()

        self.stdout.write(self.style.SUCCESS("Storefront seed completed."))
