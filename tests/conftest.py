from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from invoicing.core.config import Settings
from invoicing.db.engine import create_db_engine, init_schema
from invoicing.main import create_app
from invoicing.repositories.customers import CustomerRepository
from invoicing.repositories.invoices import InvoiceRepository
from invoicing.repositories.users import UserRepository
from invoicing.services.auth import AuthService
from invoicing.services.customers import CustomerService
from invoicing.services.invoices import InvoiceService

TEST_SECRET = "test-secret-0123456789abcdef0123456789"


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    """Settings for an isolated in-memory database and cheap password hashing."""
    return Settings(
        jwt_secret=TEST_SECRET,
        database_url="sqlite://",
        bcrypt_rounds=4,
        token_ttl_seconds=3600,
    )


@pytest.fixture(scope="function")
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """Create a test client backed by a fresh database."""
    with TestClient(create_app(test_settings)) as c:
        yield c


@pytest.fixture(scope="function")
def engine() -> Generator[Engine, None, None]:
    """Create an in-memory SQLite engine with the schema applied."""
    db_engine = create_db_engine("sqlite://")
    init_schema(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture(scope="function")
def customer_service(engine: Engine) -> CustomerService:
    return CustomerService(CustomerRepository(engine))


@pytest.fixture(scope="function")
def invoice_service(engine: Engine) -> InvoiceService:
    return InvoiceService(InvoiceRepository(engine), CustomerRepository(engine))


@pytest.fixture(scope="function")
def auth_service(engine: Engine, test_settings: Settings) -> AuthService:
    return AuthService(UserRepository(engine), test_settings)
