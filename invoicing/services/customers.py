# invoicing/services/customers.py

import logging
from typing import List, Optional

from invoicing.core.errors import CustomerNotFound
from invoicing.models.customers import Customer, CustomerCreate, CustomerUpdate
from invoicing.models.invoices import CustomerDetail
from invoicing.repositories.customers import CustomerRepository
from invoicing.services import validation

logger = logging.getLogger(__name__)


class CustomerService:
    def __init__(self, customers: CustomerRepository):
        self.customers = customers

    def list_customers(self, search: Optional[str] = None) -> List[Customer]:
        return self.customers.find_all(search)

    def get_customer(self, customer_id: str) -> CustomerDetail:
        customer = self.customers.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFound()
        return customer

    def create_customer(self, data: CustomerCreate) -> Customer:
        existing = self.customers.find_by_email(str(data.email))
        validation.validate_new_customer(data, existing)

        customer = self.customers.create(data)
        logger.info("Created customer %s", customer.id)
        return customer

    def update_customer(self, customer_id: str, data: CustomerUpdate) -> Customer:
        existing = self.customers.find_by_id(customer_id)
        by_email = None
        if "email" in data.model_fields_set:
            by_email = self.customers.find_by_email(str(data.email))
        validation.validate_customer_update(customer_id, data, existing, by_email)

        return self.customers.update(customer_id, data)

    def delete_customer(self, customer_id: str) -> None:
        """
        Delete a customer and, in the same transaction, every invoice it owns.
        """
        if not self.customers.delete(customer_id):
            raise CustomerNotFound()
        logger.info("Deleted customer %s and its invoices", customer_id)
