# invoicing/__init__.py
"""
Invoice management API: customers, invoices with line items, PDF export
and token-based authentication.

This lets us run:
    uvicorn invoicing:app --reload
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
