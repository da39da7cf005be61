# invoicing/core/errors.py
"""
Named failure conditions raised by the validation engine, services and the
PDF renderer. Each class carries the HTTP status the API reports it with.
"""


class InvoicingError(Exception):
    """Base class for every domain failure."""

    status_code = 500
    message = "Something went wrong"

    def __init__(self, message=None):
        super().__init__(message or self.message)

    @property
    def detail(self) -> str:
        return str(self)


# ---- Not found (404) ----

class NotFoundError(InvoicingError):
    status_code = 404
    message = "Resource not found"


class CustomerNotFound(NotFoundError):
    message = "Customer not found"


class InvoiceNotFound(NotFoundError):
    message = "Invoice not found"


class UserNotFound(NotFoundError):
    message = "User not found"


# ---- Conflicts (400) ----

class ConflictError(InvoicingError):
    status_code = 400
    message = "Resource already exists"


class DuplicateEmail(ConflictError):
    message = "Customer with this email already exists"


class EmailInUse(ConflictError):
    message = "Email is already in use by another customer"


class DuplicateInvoiceNumber(ConflictError):
    message = "Invoice number already exists"


class EmailTaken(ConflictError):
    message = "User with this email already exists"


# ---- Validation (400) ----

class ValidationError(InvoicingError):
    status_code = 400
    message = "Validation failed"


class EmptyItems(ValidationError):
    message = "Invoice must have at least one item"


class TotalMismatch(ValidationError):
    message = "Total amount does not match sum of items"

    def __init__(self, calculated=None, declared=None):
        super().__init__()
        self.calculated = calculated
        self.declared = declared


class WeakPassword(ValidationError):
    message = "Password must be at least 6 characters long"


# ---- Auth (401 / 403) ----

class UnauthorizedError(InvoicingError):
    status_code = 401
    message = "Not authenticated"


class InvalidCredentials(UnauthorizedError):
    message = "Invalid email or password"


class MissingToken(UnauthorizedError):
    message = "Access token required"


class InvalidOrExpiredToken(UnauthorizedError):
    status_code = 403
    message = "Invalid or expired token"


# ---- Internal (500) ----

class RenderFailed(InvoicingError):
    message = "Failed to render invoice PDF"
