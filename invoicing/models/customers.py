# invoicing/models/customers.py

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from invoicing.models.base import CamelModel


class CustomerCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    tax_number: Optional[str] = None
    address: Optional[str] = None


class CustomerUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    tax_number: Optional[str] = None
    address: Optional[str] = None

    @field_validator("name", "email")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class Customer(CamelModel):
    id: str
    name: str
    email: str
    tax_number: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime
    updated_at: datetime
