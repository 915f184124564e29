# catering/exceptions/order_exceptions.py
class OrderException(Exception):
    """Base exception for order-related errors."""
    pass


class InvalidQuantityError(OrderException):
    """Raised when a base or requested quantity is missing, non-numeric or not positive."""

    def __init__(self, message: str = "Quantities must be positive numbers"):
        super().__init__(message)


class UnitMismatchError(OrderException):
    """Raised when the requested unit differs from the dish base unit."""

    def __init__(self, expected_unit: str, requested_unit: str):
        self.expected_unit = expected_unit
        self.requested_unit = requested_unit
        super().__init__(
            f"Unit mismatch: expected '{expected_unit}', got '{requested_unit}'"
        )


class EmptyOrderError(OrderException):
    """Raised when an order has no dishes."""

    def __init__(self, message: str = "At least one dish is required"):
        super().__init__(message)


class OrderNotFoundError(OrderException):
    """Raised when order is not found."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order with id {order_id} not found")


class OrderAccessDeniedError(OrderException):
    """Raised when user is neither the owner of the order nor an admin."""

    def __init__(self, message: str = "Access to this order is denied"):
        super().__init__(message)


class InvalidReportRangeError(OrderException):
    """Raised when a report granularity is not daily, monthly or yearly."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Invalid report range '{value}': expected daily, monthly or yearly"
        )
