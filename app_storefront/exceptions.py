"""Exceptions raised by storefront operations."""


class StorefrontError(Exception):
    """Base class for storefront errors."""


class CartError(StorefrontError):
    """A cart operation was rejected."""


class InvalidStatusTransition(StorefrontError):
    """An order status change is not allowed from the current status."""

    def __init__(self, current, requested):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot move order from '{current}' to '{requested}'")
