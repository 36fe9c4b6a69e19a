"""Command-line interface adapters.

Provides CLI commands for the customer registry:
- add: Register a customer
- list: List all customers
- search: List customers matching a name pair
- find: Look up a single customer by name pair
"""
