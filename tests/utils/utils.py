"""Shared builders and assertions for the test suite."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from httpx import Response

from invoicing.models.customers import Customer
from invoicing.models.invoices import Invoice, InvoiceItem, InvoiceStatus

ACME = {
    "name": "Acme Corporation",
    "email": "contact@acme.com",
    "taxNumber": "TAX-001-ACME",
    "address": "123 Business St, New York, NY 10001",
}

ACME_ITEMS = [
    {"description": "Web Development Services", "quantity": 40, "unitPrice": 25, "total": 1000},
    {"description": "Hosting & Maintenance", "quantity": 1, "unitPrice": 500, "total": 500},
]


def customer_payload(**overrides) -> Dict[str, Any]:
    payload = dict(ACME)
    payload.update(overrides)
    return payload


def item_payload(description: str, quantity, unit_price) -> Dict[str, Any]:
    total = Decimal(str(quantity)) * Decimal(str(unit_price))
    return {
        "description": description,
        "quantity": str(quantity),
        "unitPrice": str(unit_price),
        "total": str(total),
    }


def invoice_payload(customer_id: str, **overrides) -> Dict[str, Any]:
    payload = {
        "customerId": customer_id,
        "number": "INV-2024-001",
        "date": "2024-01-15",
        "dueDate": "2024-02-15",
        "status": "DRAFT",
        "totalAmount": 1500,
        "items": [dict(item) for item in ACME_ITEMS],
    }
    payload.update(overrides)
    return payload


def create_customer(client, **overrides) -> Dict[str, Any]:
    response = client.post("/api/customers", json=customer_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


def create_invoice(client, customer_id: str, **overrides) -> Dict[str, Any]:
    response = client.post("/api/invoices", json=invoice_payload(customer_id, **overrides))
    assert response.status_code == 201, response.text
    return response.json()


def register_user(
    client,
    email: str = "admin@example.com",
    password: str = "admin123",
    name: str = "Admin User",
) -> Dict[str, Any]:
    response = client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201, response.text
    return response.json()


def assert_error(response: Response, status_code: int, message: Optional[str] = None) -> None:
    assert response.status_code == status_code, response.text
    body = response.json()
    assert "error" in body
    if message is not None:
        assert body["error"] == message


def build_customer(**overrides) -> Customer:
    now = datetime(2024, 1, 1, 12, 0, 0)
    fields = {
        "id": "cust-1",
        "name": ACME["name"],
        "email": ACME["email"],
        "tax_number": ACME["taxNumber"],
        "address": ACME["address"],
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return Customer(**fields)


def build_items(count: int, unit_price: str = "10.00") -> List[InvoiceItem]:
    return [
        InvoiceItem(
            id=f"item-{index}",
            invoice_id="inv-1",
            description=f"Line item {index + 1}",
            quantity=Decimal("1"),
            unit_price=Decimal(unit_price),
            total=Decimal(unit_price),
        )
        for index in range(count)
    ]


def build_invoice(items: Optional[List[InvoiceItem]] = None, **overrides) -> Invoice:
    now = datetime(2024, 1, 15, 9, 30, 0)
    if items is None:
        items = [
            InvoiceItem(
                id="item-1",
                invoice_id="inv-1",
                description="Web Development Services",
                quantity=Decimal("40.00"),
                unit_price=Decimal("25.00"),
                total=Decimal("1000.00"),
            ),
            InvoiceItem(
                id="item-2",
                invoice_id="inv-1",
                description="Hosting & Maintenance",
                quantity=Decimal("1.00"),
                unit_price=Decimal("500.00"),
                total=Decimal("500.00"),
            ),
        ]
    fields = {
        "id": "inv-1",
        "customer_id": "cust-1",
        "number": "INV-2024-001",
        "issue_date": date(2024, 1, 15),
        "due_date": date(2024, 2, 15),
        "status": InvoiceStatus.PAID,
        "total_amount": sum((item.total for item in items), Decimal("0")),
        "created_at": now,
        "updated_at": now,
        "customer": build_customer(),
        "items": items,
    }
    fields.update(overrides)
    return Invoice(**fields)
