"""Bundled sample rows used by the demo pages and the tests."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List

SAMPLE_ATTRIBUTE_NAMES: List[str] = [
    "orderNumber",
    "customer.name",
    "customer.address.city",
    "orderDate",
    "total",
    "status",
]


@dataclass
class Address:
    street: str
    city: str
    postal_code: str = ""


@dataclass
class Party:
    """Shared base for everyone that can appear on an order."""

    name: str
    email: str = ""
    address: Address | None = None


@dataclass
class Customer(Party):
    tier: str = "standard"


@dataclass
class Supplier(Party):
    vendor_code: str = ""


@dataclass
class Order:
    orderNumber: str
    customer: Party | None
    orderDate: datetime | None
    total: Decimal = Decimal("0")
    status: str = "open"
    notes: List[str] = field(default_factory=list)


def sample_orders() -> List[Order]:
    """Return a small order list mixing customers, suppliers and gaps."""

    return [
        Order(
            orderNumber="SO-1001",
            customer=Customer(
                name="Ann Lee",
                email="ann@example.com",
                address=Address("1 Main St", "Fairfield", "52557"),
                tier="gold",
            ),
            orderDate=datetime(2024, 3, 5, 14, 30),
            total=Decimal("249.90"),
            status="shipped",
        ),
        Order(
            orderNumber="SO-1002",
            customer=Supplier(
                name="Acme Parts",
                address=Address("9 Mill Rd", "Ottumwa"),
                vendor_code="ACM",
            ),
            orderDate=datetime(2024, 3, 6, 9, 5),
            total=Decimal("1200.00"),
            status="open",
        ),
        Order(
            orderNumber="SO-1003",
            customer=Customer(name="Bo Chen"),
            orderDate=None,
            total=Decimal("15.00"),
            status="cancelled",
        ),
        Order(
            orderNumber="SO-1004",
            customer=None,
            orderDate=datetime(2024, 3, 8, 23, 59),
            status="draft",
        ),
    ]


__all__ = [
    "Address",
    "Customer",
    "Order",
    "Party",
    "SAMPLE_ATTRIBUTE_NAMES",
    "Supplier",
    "sample_orders",
]
