"""Domain errors raised by the customer registry."""


class CustomerRegistryError(ValueError):
    """Base class for errors raised when a customer is rejected."""


class MissingNameError(CustomerRegistryError):
    """Raised when the first or last name of a customer is absent."""

    def __init__(self) -> None:
        super().__init__("mandatory name parameter is missing")


class DuplicateCustomerError(CustomerRegistryError):
    """Raised when a customer with the same name pair already exists."""

    def __init__(self, first_name: str, last_name: str) -> None:
        super().__init__("customer already exists")
        self.first_name = first_name
        self.last_name = last_name
