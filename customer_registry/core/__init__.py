"""Core domain logic for the customer registry.

This package contains zero external dependencies and represents
the pure business logic of the application. The CLI and other
drivers live in the adapters package.
"""

from .customer_service import CustomerService
from .errors import CustomerRegistryError, DuplicateCustomerError, MissingNameError
from .models import Customer, NamePair
from .ports import CustomerRegistryPort, CustomerRow

__all__ = [
    "Customer",
    "CustomerRegistryError",
    "CustomerRegistryPort",
    "CustomerRow",
    "CustomerService",
    "DuplicateCustomerError",
    "MissingNameError",
    "NamePair",
]
