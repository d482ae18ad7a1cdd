"""
Core domain exceptions.

These exceptions are transport-agnostic and should be caught by the server
layer to convert into appropriate HTTP responses.
"""


class CoreError(Exception):
    """Base exception for all core errors."""

    pass


class NotFoundError(CoreError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str | int):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ValidationFailedError(CoreError):
    """Raised when input is malformed, e.g. an empty chat message."""

    pass


class MutationFailedError(CoreError):
    """Raised when the product store rejects a write."""

    def __init__(self, product_id: int, reason: str):
        self.product_id = product_id
        self.reason = reason
        super().__init__(f"Failed to update product {product_id}: {reason}")


class SimulatedFailureError(CoreError):
    """Intentional random failure used to exercise client retry paths."""

    pass
