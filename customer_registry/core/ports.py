"""Port interfaces for the customer registry.

These abstract base classes define the boundary between the core
domain logic and the adapters that drive it (CLI, acceptance tests).

Driving Ports (adapters call into core):
    - CustomerRegistryPort: register customers and query the registry
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date

from .errors import CustomerRegistryError
from .models import Customer

CustomerRow = tuple[str, str, date]


class CustomerRegistryPort(ABC):
    """Port for registering and looking up customers.

    Implementations own their collection of customers exclusively.
    Query results are new lists of immutable Customer records, so
    callers can never mutate the registry through them.
    """

    @abstractmethod
    def add_customer(
        self, first_name: str, last_name: str, birth_date: date
    ) -> Customer:
        """Validate and register a new customer.

        Args:
            first_name: First name, must be non-empty.
            last_name: Last name, must be non-empty.
            birth_date: Calendar birth date.

        Returns:
            The newly registered Customer.

        Raises:
            MissingNameError: If either name is absent or empty.
                Checked before uniqueness.
            DuplicateCustomerError: If a customer with the same
                (first_name, last_name) already exists.
        """

    @abstractmethod
    def add_customers(
        self, rows: Iterable[CustomerRow]
    ) -> list[CustomerRegistryError]:
        """Register several customers, continuing past rejected rows.

        Args:
            rows: (first_name, last_name, birth_date) tuples.

        Returns:
            Errors for the rejected rows in row order. Empty if every
            row was registered.
        """

    @abstractmethod
    def search_customers(self) -> list[Customer]:
        """Return every registered customer in insertion order.

        Returns:
            List of customers. Empty list if none are registered.
        """

    @abstractmethod
    def search_customers_by_name(
        self, first_name: str, last_name: str
    ) -> list[Customer]:
        """Return all customers whose names match exactly.

        Matching is case-sensitive and consistent with the uniqueness
        check, so at most one customer is returned in practice.

        Returns:
            List of matching customers. Empty list if none match.
        """

    @abstractmethod
    def search_customer(self, first_name: str, last_name: str) -> Customer | None:
        """Return the customer with the given names.

        Returns:
            The first matching Customer, or None if not found.
        """
