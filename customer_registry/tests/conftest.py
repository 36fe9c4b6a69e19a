"""Shared pytest fixtures.

Feature files in features/ serve as living documentation of the
registry's behavior; their step definitions are in
test_customer_features.py.
"""

import pytest

from customer_registry.core.customer_service import CustomerService


class ScenarioContext:
    """Step data for one scenario, holding a fresh CustomerService."""

    def __init__(self) -> None:
        self.service = CustomerService()
        self.error: Exception | None = None
        self.count = 0


@pytest.fixture
def context() -> ScenarioContext:
    """Shared context for passing data between steps."""
    return ScenarioContext()
