# catering/exceptions/customer_exceptions.py
class CustomerException(Exception):
    """Base exception for customer-related errors."""
    pass


class CustomerNotFoundError(CustomerException):
    """Raised when customer is not found."""

    def __init__(self, customer_id: str):
        self.customer_id = customer_id
        super().__init__(f"Customer with id {customer_id} not found")


class CustomerInUseError(CustomerException):
    """Raised when deleting a customer that has orders."""

    def __init__(self, customer_id: str):
        self.customer_id = customer_id
        super().__init__(
            "Cannot delete customer that has orders. "
            "Please remove or reassign orders first."
        )
