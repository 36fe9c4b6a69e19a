"""Tests for the fake port implementations."""

from datetime import date

import pytest

from customer_registry.core.errors import DuplicateCustomerError, MissingNameError
from customer_registry.tests.fakes import FakeCustomerRegistryPort


@pytest.fixture
def registry() -> FakeCustomerRegistryPort:
    return FakeCustomerRegistryPort()


def test_fake_records_operations(registry: FakeCustomerRegistryPort) -> None:
    registry.add_customer("Sabine", "Mustermann", date(1995, 1, 1))
    registry.search_customers()
    registry.search_customers_by_name("Sabine", "Mustermann")
    registry.search_customer("Max", "Mustermann")

    assert registry.add_calls == [("Sabine", "Mustermann", date(1995, 1, 1))]
    assert registry.search_all_call_count == 1
    assert registry.search_by_name_calls == [("Sabine", "Mustermann")]
    assert registry.search_customer_calls == [("Max", "Mustermann")]


def test_fake_raises_configured_error(registry: FakeCustomerRegistryPort) -> None:
    registry.add_error = DuplicateCustomerError("Max", "Mustermann")

    with pytest.raises(DuplicateCustomerError):
        registry.add_customer("Max", "Mustermann", date(1995, 1, 1))
    assert registry.customers == []


def test_fake_bulk_add_collects_errors(registry: FakeCustomerRegistryPort) -> None:
    errors = registry.add_customers(
        [("", "Mustermann", date(1995, 1, 1)), ("Max", "Mustermann", date(1995, 1, 1))]
    )

    assert len(errors) == 1
    assert isinstance(errors[0], MissingNameError)
    assert len(registry.customers) == 1


def test_fake_reset(registry: FakeCustomerRegistryPort) -> None:
    registry.add_customer("Max", "Mustermann", date(1995, 1, 1))
    registry.add_error = DuplicateCustomerError("Max", "Mustermann")

    registry.reset()

    assert registry.customers == []
    assert registry.add_calls == []
    assert registry.add_error is None
