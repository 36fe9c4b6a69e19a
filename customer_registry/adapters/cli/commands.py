"""CLI command implementations for the customer registry.

This adapter maps CLI commands (add, list, search, find) to
CustomerRegistryPort operations. It handles CLI-specific argument
parsing, formatting, and error reporting.
"""

import json
import logging
from datetime import date
from typing import Any

from customer_registry.core.errors import CustomerRegistryError
from customer_registry.core.models import Customer
from customer_registry.core.ports import CustomerRegistryPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to CustomerRegistryPort."""

    def __init__(
        self,
        registry: CustomerRegistryPort,
        default_birth_date: date = date(1995, 1, 1),
    ):
        """Initialize the CLI command handler.

        Args:
            registry: CustomerRegistryPort implementation to execute commands.
            default_birth_date: Birth date used when an add omits one.
        """
        self.registry = registry
        self.default_birth_date = default_birth_date

    def add_customer(
        self,
        first_name: str,
        last_name: str,
        birth_date: str | None = None,
        verbose: bool = False,
    ) -> dict[str, Any]:
        """Register a customer via CLI.

        Args:
            first_name: First name of the customer.
            last_name: Last name of the customer.
            birth_date: Optional ISO date (YYYY-MM-DD).
            verbose: If True, log additional information.

        Returns:
            Dictionary with status and message.
        """
        try:
            parsed_date = self._parse_birth_date(birth_date)
        except ValueError as e:
            logger.error(f"Invalid birth date {birth_date!r}: {e}")
            return {
                "status": "error",
                "operation": "add",
                "message": f"Invalid birth date: {birth_date}",
            }

        try:
            customer = self.registry.add_customer(first_name, last_name, parsed_date)
        except CustomerRegistryError as e:
            logger.error(f"Failed to add customer: {e}")
            return {
                "status": "error",
                "operation": "add",
                "message": str(e),
            }

        if verbose:
            logger.info(
                f"Added customer {first_name} {last_name}",
                extra={"birth_date": parsed_date.isoformat(), "verbose": True},
            )

        return {
            "status": "success",
            "operation": "add",
            "message": f"Customer {first_name} {last_name} added",
            "data": _customer_to_dict(customer),
        }

    def list_customers(self, output_format: str = "json") -> dict[str, Any]:
        """List all registered customers.

        Args:
            output_format: 'json' or 'text'. Default 'json'.

        Returns:
            Dictionary with the customers and their count.
        """
        return self._format_customers(
            "list", self.registry.search_customers(), output_format
        )

    def search_customers(
        self, first_name: str, last_name: str, output_format: str = "json"
    ) -> dict[str, Any]:
        """List all customers matching a name pair."""
        return self._format_customers(
            "search",
            self.registry.search_customers_by_name(first_name, last_name),
            output_format,
        )

    def find_customer(self, first_name: str, last_name: str) -> dict[str, Any]:
        """Look up a single customer by name pair.

        Returns:
            Dictionary with status 'success' and the customer, or
            status 'not_found'.
        """
        customer = self.registry.search_customer(first_name, last_name)
        if customer is None:
            return {
                "status": "not_found",
                "operation": "find",
                "message": f"Customer {first_name} {last_name} not found",
            }
        return {
            "status": "success",
            "operation": "find",
            "data": _customer_to_dict(customer),
        }

    def _parse_birth_date(self, birth_date: Any) -> date:
        """Parse an ISO birth date, falling back to the default when absent.

        Raises:
            ValueError: If birth_date is not an ISO date string.
        """
        if birth_date is None or birth_date == "":
            return self.default_birth_date
        if not isinstance(birth_date, str):
            raise ValueError(f"expected an ISO date string, got {type(birth_date).__name__}")
        return date.fromisoformat(birth_date)

    def _format_customers(
        self, operation: str, customers: list[Customer], output_format: str
    ) -> dict[str, Any]:
        if output_format == "json":
            data: Any = [_customer_to_dict(c) for c in customers]
        elif output_format == "text":
            data = _format_customers_as_text(customers)
        else:
            return {
                "status": "error",
                "operation": operation,
                "message": f"Unsupported format: {output_format}",
            }

        return {
            "status": "success",
            "operation": operation,
            "count": len(customers),
            "data": data,
        }


def _customer_to_dict(customer: Customer) -> dict[str, str]:
    return {
        "first_name": customer.first_name,
        "last_name": customer.last_name,
        "birth_date": customer.birth_date.isoformat(),
    }


def _format_customers_as_text(customers: list[Customer]) -> str:
    """Format customers as a human-readable table."""
    if not customers:
        return "No customers found."

    lines = [f"{'FIRST NAME':<20} {'LAST NAME':<20} BIRTH DATE", "-" * 52]
    for customer in customers:
        lines.append(
            f"{customer.first_name:<20} {customer.last_name:<20} "
            f"{customer.birth_date.isoformat()}"
        )
    return "\n".join(lines)


def run_command(
    handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        handler: CLICommandHandler bound to a registry.
        command: Command name ('add', 'list', 'search', 'find').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized, or a required
            argument is missing or not a string.
    """
    if command in ("add", "search", "find"):
        for name in ("first_name", "last_name"):
            if name not in args:
                raise ValueError(f"Missing required parameter: {name}")
            if args[name] is not None and not isinstance(args[name], str):
                raise ValueError(f"Parameter {name} must be a string")

    if command == "add":
        return handler.add_customer(
            args["first_name"],
            args["last_name"],
            args.get("birth_date"),
            args.get("verbose", False),
        )

    elif command == "list":
        return handler.list_customers(args.get("format", "json"))

    elif command == "search":
        return handler.search_customers(
            args["first_name"],
            args["last_name"],
            args.get("format", "json"),
        )

    elif command == "find":
        return handler.find_customer(args["first_name"], args["last_name"])

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")


def parse_command_line(command_line: str) -> tuple[str, dict[str, Any]]:
    """Split a line such as ``add {"first_name": "Max"}`` into name and arguments.

    Raises:
        ValueError: If the arguments are not a JSON object.
    """
    command, _, args_str = command_line.strip().partition(" ")
    if not args_str.strip():
        return command.lower(), {}

    try:
        args = json.loads(args_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON arguments: {e.msg}") from e

    if not isinstance(args, dict):
        raise ValueError("Arguments must be a JSON object")
    return command.lower(), args
