from __future__ import annotations

import random
from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from modules.categories.models import Category
from modules.customers.models import Customer
from modules.orders.constants import OrderStatus, ShippingStatus
from modules.orders.models import ExportOrder, Order
from modules.products.models import Product
from modules.suppliers.models import Supplier


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    def add_arguments(self, parser):
        parser.add_argument(
            "--orders",
            type=int,
            default=20,
            help="Number of purchase orders and of export orders to create.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        categories = self._seed_categories()
        products = self._seed_products(categories)
        suppliers = self._seed_suppliers()
        customers = self._seed_customers()
        orders_created = self._seed_orders(suppliers, products, options["orders"])
        exports_created = self._seed_export_orders(
            customers, products, options["orders"]
        )

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"categories={len(categories)}, "
                f"products={len(products)}, "
                f"suppliers={len(suppliers)}, "
                f"customers={len(customers)}, "
                f"orders={orders_created}, "
                f"export_orders={exports_created}"
            )
        )

    def _seed_categories(self) -> dict[str, Category]:
        self.stdout.write("Creating categories...")
        categories: dict[str, Category] = {}
        for name, description in [
            ("Electronics", "Devices and accessories"),
            ("Furniture", "Office furniture"),
            ("Stationery", "Paper, pens and desk supplies"),
        ]:
            category, _ = Category.objects.get_or_create(
                category_name=name, defaults={"description": description}
            )
            categories[name] = category
        self.stdout.write(self.style.SUCCESS("Creating categories... Done!"))
        return categories

    def _seed_products(self, categories: dict[str, Category]) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        catalog = [
            ("ELEC-001", "Monitor 27\"", "Electronics", Decimal("1299.90")),
            ("ELEC-002", "Mechanical Keyboard", "Electronics", Decimal("399.90")),
            ("ELEC-003", "Wireless Mouse", "Electronics", Decimal("249.90")),
            ("ELEC-004", "Headset", "Electronics", Decimal("299.90")),
            ("FURN-001", "Office Desk", "Furniture", Decimal("899.00")),
            ("FURN-002", "Ergonomic Chair", "Furniture", Decimal("1499.00")),
            ("FURN-003", "Bookshelf", "Furniture", Decimal("699.00")),
            ("STAT-001", "A4 Paper", "Stationery", Decimal("29.90")),
            ("STAT-002", "Blue Pen", "Stationery", Decimal("4.90")),
            ("STAT-003", "Notebook", "Stationery", Decimal("19.90")),
        ]
        for sku, name, category, price in catalog:
            product, _ = Product.objects.get_or_create(
                sku=sku,
                defaults={
                    "product_name": name,
                    "category": categories[category],
                    "unit_price": price,
                    "quantity": random.randint(10, 200),
                },
            )
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products

    def _seed_suppliers(self) -> list[Supplier]:
        self.stdout.write("Creating suppliers...")
        suppliers: list[Supplier] = []
        for name, contact, phone in [
            ("Acme Components", "Alice Moore", "+1-555-0100"),
            ("Globex Trading", "Bob Stone", "+1-555-0101"),
            ("Initech Supply", "Carol Diaz", "+1-555-0102"),
        ]:
            supplier, _ = Supplier.objects.get_or_create(
                supplier_name=name,
                defaults={"contact_name": contact, "phone": phone},
            )
            suppliers.append(supplier)
        self.stdout.write(self.style.SUCCESS("Creating suppliers... Done!"))
        return suppliers

    def _seed_customers(self) -> list[Customer]:
        self.stdout.write("Creating customers...")
        customers: list[Customer] = []
        for name, phone, address in [
            ("Northwind Retail", "+44-20-7946-0000", "1 High Street, London"),
            ("Contoso Markets", "+49-30-123456", "Alexanderplatz 5, Berlin"),
            ("Tailspin Imports", "+81-3-1234-5678", "2-1 Marunouchi, Tokyo"),
        ]:
            customer, _ = Customer.objects.get_or_create(
                customer_name=name,
                defaults={"phone": phone, "address": address},
            )
            customers.append(customer)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_orders(
        self, suppliers: list[Supplier], products: list[Product], count: int
    ) -> int:
        self.stdout.write("Creating orders...")
        if Order.objects.exists():
            self.stdout.write(self.style.WARNING("Skipping orders (already seeded)."))
            return 0

        for _ in range(count):
            product = random.choice(products)
            quantity = random.randint(1, 20)
            subtotal = product.unit_price * quantity
            Order.objects.create(
                supplier=random.choice(suppliers),
                product=product,
                quantity=quantity,
                subtotal=subtotal,
                total_amount=subtotal,
                order_date=timezone.now() - timedelta(days=random.randint(0, 30)),
                status=random.choice(OrderStatus.values),
            )
        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return count

    def _seed_export_orders(
        self, customers: list[Customer], products: list[Product], count: int
    ) -> int:
        self.stdout.write("Creating export orders...")
        if ExportOrder.objects.exists():
            self.stdout.write(
                self.style.WARNING("Skipping export orders (already seeded).")
            )
            return 0

        for _ in range(count):
            customer = random.choice(customers)
            product = random.choice(products)
            quantity = random.randint(1, 10)
            subtotal = product.unit_price * quantity
            order_date = timezone.now() - timedelta(days=random.randint(0, 30))
            ExportOrder.objects.create(
                customer=customer,
                product=product,
                quantity=quantity,
                subtotal=subtotal,
                total_amount=subtotal + Decimal("25.00"),
                order_date=order_date,
                shipping_date=(order_date + timedelta(days=3)).date(),
                shipping_address=customer.address,
                shipping_status=random.choice(ShippingStatus.values),
                status=random.choice(OrderStatus.values),
            )
        self.stdout.write(self.style.SUCCESS("Creating export orders... Done!"))
        return count
