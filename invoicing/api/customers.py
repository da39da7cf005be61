# invoicing/api/customers.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from invoicing.api.deps import get_customer_service
from invoicing.models.customers import Customer, CustomerCreate, CustomerUpdate
from invoicing.models.invoices import CustomerDetail
from invoicing.services.customers import CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=List[Customer])
def list_customers(
    search: Optional[str] = Query(
        default=None,
        description="Case-insensitive match on name, email or tax number",
    ),
    service: CustomerService = Depends(get_customer_service),
) -> List[Customer]:
    """
    Return customers, newest first.
    """
    return service.list_customers(search)


@router.get("/{customer_id}", response_model=CustomerDetail)
def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerDetail:
    """
    Return a single customer with its invoices.
    """
    return service.get_customer(customer_id)


@router.post("", response_model=Customer, status_code=status.HTTP_201_CREATED)
def create_customer(
    payload: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
) -> Customer:
    return service.create_customer(payload)


@router.put("/{customer_id}", response_model=Customer)
def update_customer(
    customer_id: str,
    payload: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
) -> Customer:
    return service.update_customer(customer_id, payload)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    """
    Delete a customer. Its invoices are deleted with it.
    """
    service.delete_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
