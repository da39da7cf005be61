# invoicing/api/deps.py
"""
FastAPI dependencies. The engine is created once per process (see the app
lifespan) and handed to repositories per request.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.engine import Engine

from invoicing.core.config import Settings
from invoicing.core.errors import MissingToken
from invoicing.core.security import TokenClaims
from invoicing.repositories.customers import CustomerRepository
from invoicing.repositories.invoices import InvoiceRepository
from invoicing.repositories.users import UserRepository
from invoicing.services.auth import AuthService
from invoicing.services.customers import CustomerService
from invoicing.services.invoices import InvoiceService

bearer_scheme = HTTPBearer(auto_error=False)


def get_engine(request: Request) -> Engine:
    return request.app.state.engine


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_customer_service(engine: Engine = Depends(get_engine)) -> CustomerService:
    return CustomerService(CustomerRepository(engine))


def get_invoice_service(engine: Engine = Depends(get_engine)) -> InvoiceService:
    return InvoiceService(InvoiceRepository(engine), CustomerRepository(engine))


def get_auth_service(
    engine: Engine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(UserRepository(engine), settings)


def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> TokenClaims:
    """
    Require ``Authorization: Bearer <token>``. Only /api/auth/me uses this;
    customer and invoice routes are currently open.
    """
    if credentials is None:
        raise MissingToken()
    return auth.verify(credentials.credentials)
