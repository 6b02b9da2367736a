"""
Business-rule errors raised by the store services.

Hierarchy:
    JewelleryStoreError
    ├── JewelleryItemNotFoundError
    ├── ItemUnavailableError
    ├── InsufficientStockError
    ├── CustomerNotFoundError
    ├── DuplicateEmailError
    ├── CartEmptyError
    └── TotalMismatchError

Lookups whose absence is an expected outcome return None instead of raising.
Database failures are not wrapped; they reach the caller as sqlalchemy errors.
"""


class JewelleryStoreError(Exception):
    """
    Base class for every business-rule failure.

    Attributes:
        message: Human-readable error message
        details: Structured context (ids, quantities, amounts)
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.__class__.__name__}('{self.message}', {details_str})"
        return f"{self.__class__.__name__}('{self.message}')"


class JewelleryItemNotFoundError(JewelleryStoreError):
    def __init__(self, item_id: int):
        super().__init__(
            f"Jewellery item with ID {item_id} not found",
            details={"item_id": item_id},
        )
        self.item_id = item_id


class ItemUnavailableError(JewelleryStoreError):
    """
    Raised when an inactive item is added to, updated in, or ordered from a cart.

    New additions read "not available"; items already sitting in a cart read
    "no longer available".
    """

    def __init__(self, item_id: int, item_name: str | None = None, already_in_cart: bool = False):
        if already_in_cart:
            message = f"{item_name or 'Jewellery item'} is no longer available"
        else:
            message = f"Jewellery item with ID {item_id} is not available"
        super().__init__(message, details={"item_id": item_id, "item_name": item_name})
        self.item_id = item_id
        self.item_name = item_name


class InsufficientStockError(JewelleryStoreError):
    def __init__(self, item_id: int, available: int, requested: int, item_name: str | None = None):
        target = f" for {item_name}" if item_name else ""
        super().__init__(
            f"Insufficient stock{target}. Available: {available}, requested: {requested}",
            details={"item_id": item_id, "available": available, "requested": requested},
        )
        self.item_id = item_id
        self.available = available
        self.requested = requested


class CustomerNotFoundError(JewelleryStoreError):
    def __init__(self, customer_id: int):
        super().__init__(
            f"Customer not found (ID {customer_id})",
            details={"customer_id": customer_id},
        )
        self.customer_id = customer_id


class DuplicateEmailError(JewelleryStoreError):
    def __init__(self, email: str):
        super().__init__(
            f"Customer with email {email} already exists",
            details={"email": email},
        )
        self.email = email


class CartEmptyError(JewelleryStoreError):
    def __init__(self, session_id: str):
        super().__init__(
            f"Cart is empty for session {session_id}",
            details={"session_id": session_id},
        )
        self.session_id = session_id


class TotalMismatchError(JewelleryStoreError):
    def __init__(self, expected, provided):
        super().__init__(
            f"Total amount mismatch. Expected: {expected}, provided: {provided}",
            details={"expected": expected, "provided": provided},
        )
        self.expected = expected
        self.provided = provided
