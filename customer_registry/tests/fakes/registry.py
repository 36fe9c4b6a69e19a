"""Fake CustomerRegistryPort implementation for testing."""

from collections.abc import Iterable
from datetime import date

from customer_registry.core.errors import CustomerRegistryError
from customer_registry.core.models import Customer
from customer_registry.core.ports import CustomerRegistryPort, CustomerRow


class FakeCustomerRegistryPort(CustomerRegistryPort):
    """In-memory registry port for testing.

    Stores customers without enforcing uniqueness and tracks every
    operation for test assertions. Set ``add_error`` to make the next
    ``add_customer`` calls raise it.
    """

    def __init__(self) -> None:
        """Initialize with empty operation tracking."""
        self.customers: list[Customer] = []
        self.add_calls: list[tuple[str, str, date]] = []
        self.search_by_name_calls: list[tuple[str, str]] = []
        self.search_customer_calls: list[tuple[str, str]] = []
        self.search_all_call_count = 0
        self.add_error: CustomerRegistryError | None = None

    def add_customer(
        self, first_name: str, last_name: str, birth_date: date
    ) -> Customer:
        """Record the add and store the customer unless add_error is set."""
        self.add_calls.append((first_name, last_name, birth_date))
        if self.add_error is not None:
            raise self.add_error

        customer = Customer(
            first_name=first_name, last_name=last_name, birth_date=birth_date
        )
        self.customers.append(customer)
        return customer

    def add_customers(
        self, rows: Iterable[CustomerRow]
    ) -> list[CustomerRegistryError]:
        errors: list[CustomerRegistryError] = []
        for first_name, last_name, birth_date in rows:
            try:
                self.add_customer(first_name, last_name, birth_date)
            except CustomerRegistryError as e:
                errors.append(e)
        return errors

    def search_customers(self) -> list[Customer]:
        self.search_all_call_count += 1
        return list(self.customers)

    def search_customers_by_name(
        self, first_name: str, last_name: str
    ) -> list[Customer]:
        self.search_by_name_calls.append((first_name, last_name))
        return [c for c in self.customers if c.matches(first_name, last_name)]

    def search_customer(self, first_name: str, last_name: str) -> Customer | None:
        self.search_customer_calls.append((first_name, last_name))
        for customer in self.customers:
            if customer.matches(first_name, last_name):
                return customer
        return None

    def reset(self) -> None:
        """Reset all collected data."""
        self.customers.clear()
        self.add_calls.clear()
        self.search_by_name_calls.clear()
        self.search_customer_calls.clear()
        self.search_all_call_count = 0
        self.add_error = None
