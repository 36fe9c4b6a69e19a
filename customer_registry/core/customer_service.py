"""Customer service: implements CustomerRegistryPort in memory.

The service is the single source of truth for customer records. It
enforces name presence and name-pair uniqueness at write time and
answers listing and lookup queries. Each instance owns its own
collection; nothing is shared between instances.
"""

import logging
import threading
from collections.abc import Iterable
from datetime import date

from .errors import CustomerRegistryError, DuplicateCustomerError
from .models import Customer
from .ports import CustomerRegistryPort, CustomerRow

logger = logging.getLogger(__name__)


class CustomerService(CustomerRegistryPort):
    """Core implementation of CustomerRegistryPort.

    Reads and writes are serialized by a lock so the uniqueness check
    and the insert happen atomically.
    """

    def __init__(self) -> None:
        """Initialize with an empty registry."""
        self._customers: list[Customer] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._customers)

    def add_customer(
        self, first_name: str, last_name: str, birth_date: date
    ) -> Customer:
        """Validate and register a new customer.

        Raises:
            MissingNameError: If either name is absent or empty.
            DuplicateCustomerError: If the name pair is already registered.
        """
        customer = Customer(
            first_name=first_name, last_name=last_name, birth_date=birth_date
        )

        with self._lock:
            if any(existing.name_pair == customer.name_pair for existing in self._customers):
                logger.debug(
                    f"Rejected duplicate customer {first_name} {last_name}",
                    extra={"first_name": first_name, "last_name": last_name},
                )
                raise DuplicateCustomerError(first_name, last_name)

            self._customers.append(customer)
            total = len(self._customers)

        logger.info(
            f"Customer {first_name} {last_name} added",
            extra={
                "first_name": first_name,
                "last_name": last_name,
                "total_customers": total,
            },
        )
        return customer

    def add_customers(
        self, rows: Iterable[CustomerRow]
    ) -> list[CustomerRegistryError]:
        """Register each row, collecting the errors of rejected rows."""
        errors: list[CustomerRegistryError] = []
        for first_name, last_name, birth_date in rows:
            try:
                self.add_customer(first_name, last_name, birth_date)
            except CustomerRegistryError as e:
                logger.warning(
                    f"Skipped customer row ({first_name!r}, {last_name!r}): {e}",
                    extra={"first_name": first_name, "last_name": last_name},
                )
                errors.append(e)
        return errors

    def search_customers(self) -> list[Customer]:
        """Return every registered customer in insertion order."""
        with self._lock:
            return list(self._customers)

    def search_customers_by_name(
        self, first_name: str, last_name: str
    ) -> list[Customer]:
        """Return all customers whose names match exactly."""
        with self._lock:
            return [
                customer
                for customer in self._customers
                if customer.matches(first_name, last_name)
            ]

    def search_customer(self, first_name: str, last_name: str) -> Customer | None:
        """Return the first customer with the given names, or None."""
        matches = self.search_customers_by_name(first_name, last_name)
        if not matches:
            logger.debug(
                f"Customer {first_name} {last_name} not found",
                extra={"first_name": first_name, "last_name": last_name},
            )
            return None
        return matches[0]
