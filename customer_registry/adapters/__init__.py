"""External adapters for the customer registry.

Adapters drive the core through its port interfaces.

Adapter Organization:

- cli/: Command-line interface for registering and searching customers
"""
