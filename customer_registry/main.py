"""Composition root for the customer registry.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Core service initialization
- Adapter instantiation
- Interactive CLI loop
"""

import json
import logging
import sys

from customer_registry.adapters.cli.commands import (
    CLICommandHandler,
    parse_command_line,
    run_command,
)
from customer_registry.config import Settings, load_settings
from customer_registry.core.customer_service import CustomerService

logger = logging.getLogger(__name__)


CLI_HELP = """\
Commands take their arguments as one JSON object on the same line.

  add     {"first_name", "last_name", ["birth_date": YYYY-MM-DD], ["verbose"]}
          Register a customer.
  list    [{"format": "json" | "text"}]
          All customers in registration order.
  search  {"first_name", "last_name", ["format"]}
          All customers with exactly these names.
  find    {"first_name", "last_name"}
          The customer with exactly these names, or not_found.
  help    Show this message.
  exit    Leave the CLI.

Example:
  add {"first_name": "Sabine", "last_name": "Mustermann", "birth_date": "1995-01-01"}
"""


def run_cli_interactive(cli_handler: CLICommandHandler, prompt: str) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for registry commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
        prompt: Prompt printed before each command.
    """
    logger.info("Registry CLI ready; 'help' lists commands, 'exit' quits.")

    while True:
        try:
            command_line = input(prompt)
        except EOFError:
            logger.info("End of input, leaving CLI")
            return
        except KeyboardInterrupt:
            continue

        if not command_line.strip():
            continue

        try:
            command, args = parse_command_line(command_line)
            if command == "exit":
                return
            if command == "help":
                print(CLI_HELP)
                continue
            result = run_command(cli_handler, command, args)
        except ValueError as e:
            logger.warning(f"Rejected command {command_line!r}: {e}")
            result = {"status": "error", "message": str(e)}

        print(json.dumps(result, indent=2, default=str))


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_cli_handler(settings: Settings) -> CLICommandHandler:
    """Wire a fresh CustomerService into a CLI command handler."""
    registry = CustomerService()
    return CLICommandHandler(registry, default_birth_date=settings.default_birth_date)


def bootstrap() -> None:
    """Load configuration, wire the registry, and start the CLI.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Initialize the core service and the CLI adapter
    4. Run the interactive CLI loop
    """
    settings = load_settings()

    log_level = "DEBUG" if settings.debug else settings.log_level
    configure_logging(log_level, settings.log_format)
    logger.info("Loading customer registry...")

    cli_handler = build_cli_handler(settings)

    run_cli_interactive(cli_handler, settings.cli_prompt)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    try:
        bootstrap()
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
