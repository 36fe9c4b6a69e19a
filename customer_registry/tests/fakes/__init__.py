"""Fake implementations of core ports for testing.

- FakeCustomerRegistryPort: In-memory registry that records calls
"""

from .registry import FakeCustomerRegistryPort

__all__ = ["FakeCustomerRegistryPort"]
