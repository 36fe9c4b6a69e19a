"""Test suite for the customer registry.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No external dependencies, fast execution

2. fakes/: Port implementations for testing
   - In-memory CustomerRegistryPort that records calls
   - Used by adapter tests

3. features/: Gherkin acceptance scenarios
   - Bound to step definitions in test_customer_features.py via pytest-bdd
   - Each scenario drives a fresh CustomerService
"""
