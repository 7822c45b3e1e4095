"""
Exception hierarchy shared by services, repositories and the HTTP layer
"""
from typing import List, Optional


class CafezinhoError(Exception):
    """Base class for every error raised by the ordering core"""


class ValidationError(CafezinhoError):
    """Bad or missing required data, shown to the customer"""


class InvalidOrder(ValidationError):
    """Order request rejected by the validator"""

    def __init__(self, violations: List[str]):
        self.violations = list(violations)
        super().__init__("; ".join(self.violations) or "invalid order")


class NameRequired(ValidationError):
    def __init__(self, message: str = "customer name required"):
        super().__init__(message)


class EmptyCart(ValidationError):
    def __init__(self, message: str = "cart is empty"):
        super().__init__(message)


class NotFoundError(CafezinhoError):
    """Lookup miss"""

    resource = "resource"

    def __init__(self, identifier: Optional[str] = None):
        self.identifier = identifier
        if identifier is None:
            super().__init__(f"{self.resource} not found")
        else:
            super().__init__(f"{self.resource} not found: {identifier}")


class OrderNotFound(NotFoundError):
    resource = "order"


class ProductNotFound(NotFoundError):
    resource = "product"


class UserNotFound(NotFoundError):
    resource = "user"


class StorageError(CafezinhoError):
    """Durable storage could not be read or written"""


class StorageUnavailable(StorageError):
    """A write to durable storage failed"""
