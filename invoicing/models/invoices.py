# invoicing/models/invoices.py

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from invoicing.models.base import CamelModel
from invoicing.models.customers import Customer


class InvoiceStatus(str, Enum):
    DRAFT = "DRAFT"
    SENT = "SENT"
    PAID = "PAID"
    CANCELLED = "CANCELLED"


class InvoiceItemIn(CamelModel):
    description: str = Field(..., min_length=1)
    quantity: Decimal = Field(..., gt=0)
    unit_price: Decimal = Field(..., ge=0)
    total: Decimal


class InvoiceCreate(CamelModel):
    customer_id: str = Field(..., min_length=1)
    number: str = Field(..., min_length=1)
    issue_date: date = Field(..., alias="date")
    due_date: date
    status: InvoiceStatus = InvoiceStatus.DRAFT
    total_amount: Decimal
    items: List[InvoiceItemIn] = Field(default_factory=list)


class InvoiceUpdate(CamelModel):
    """
    Partial update. Only fields present in the request are applied; a supplied
    item list replaces the stored items as a whole.
    """

    customer_id: Optional[str] = Field(default=None, min_length=1)
    number: Optional[str] = Field(default=None, min_length=1)
    issue_date: Optional[date] = Field(default=None, alias="date")
    due_date: Optional[date] = None
    status: Optional[InvoiceStatus] = None
    total_amount: Optional[Decimal] = None
    items: Optional[List[InvoiceItemIn]] = None

    @field_validator(
        "customer_id", "number", "issue_date", "due_date", "status", "total_amount", "items"
    )
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class InvoiceItem(CamelModel):
    id: str
    invoice_id: str
    description: str
    quantity: Decimal
    unit_price: Decimal
    total: Decimal


class InvoiceSummary(CamelModel):
    id: str
    customer_id: str
    number: str
    issue_date: date = Field(..., alias="date")
    due_date: date
    status: InvoiceStatus
    total_amount: Decimal
    created_at: datetime
    updated_at: datetime


class Invoice(InvoiceSummary):
    customer: Customer
    items: List[InvoiceItem] = Field(default_factory=list)


# Customer read model that embeds the customer's invoices, newest first
class CustomerDetail(Customer):
    invoices: List[InvoiceSummary] = Field(default_factory=list)


class InvoiceSortField(str, Enum):
    NUMBER = "number"
    DATE = "date"
    DUE_DATE = "dueDate"
    STATUS = "status"
    TOTAL_AMOUNT = "totalAmount"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class InvoiceFilters(CamelModel):
    search: Optional[str] = None
    status: Optional[InvoiceStatus] = None
    customer_id: Optional[str] = None
    sort_by: InvoiceSortField = InvoiceSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC
