"""
Domain exceptions for the Stockbook application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class StockbookError(Exception):
    """Base exception for all Stockbook errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for presentation callers."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(StockbookError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class StoreWriteError(StorageError):
    """A value could not be serialized or written to the key-value store."""

    def __init__(self, key: str, error: str):
        super().__init__(
            f"Failed to write '{key}': {error}",
            code="STORE_WRITE_FAILED",
            details={"key": key, "error": error},
        )


# Sale Exceptions
class SaleError(StockbookError):
    """
    Base exception for a rejected sale batch.

    message_key names the translation string the presentation shows.
    """

    message_key: str = "saleError"


class ProductNotFoundError(SaleError):
    """A line item references a product id that does not exist."""

    message_key = "saleErrorProductNotFound"

    def __init__(self, product_id: str):
        super().__init__(
            f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id},
        )


class InsufficientStockError(SaleError):
    """Cumulative requested quantity exceeds the product's stock."""

    message_key = "saleErrorInsufficientStock"

    def __init__(self, product_id: str, requested: int, available: int):
        super().__init__(
            f"Insufficient stock for {product_id}: "
            f"requested {requested}, available {available}",
            code="INSUFFICIENT_STOCK",
            details={
                "product_id": product_id,
                "requested": requested,
                "available": available,
            },
        )


class NoSaleItemsError(SaleError):
    """The batch has no line item with a positive quantity."""

    message_key = "saleErrorNoItems"

    def __init__(self) -> None:
        super().__init__(
            "Sale contains no items with a positive quantity",
            code="NO_ITEMS",
        )


# Validation Exceptions
class ValidationError(StockbookError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


class ConfigurationError(StockbookError):
    """Configuration error."""

    pass
