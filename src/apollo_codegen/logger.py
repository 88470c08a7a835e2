"""Unified logging system for apollo-codegen with CLI output support."""

import json
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


class CodegenLogger(logging.Logger):
    """
    Logger that combines Python logging with CLI formatting methods.

    Provides the standard logging levels (debug, info, warning, error, critical)
    and a few CLI output helpers (success, hint, rule, key_value, ...).
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        """
        Initialize the logger.

        Args:
            name: Logger name
            level: Initial log level
        """
        super().__init__(name, level)
        self.console = Console()

        handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.addHandler(handler)

    def print(self, message: str) -> None:
        """
        Print a plain message (with Rich markup support).

        Args:
            message: Message to display
        """
        self.console.print(message)

    def colored(self, message: str, style: str = "bold cyan") -> None:
        """
        Print a message with a specific style/color.

        Args:
            message: Message to display
            style: Rich style string (e.g., "green", "red", "bold cyan", "dim")
        """
        self.print(f"[{style}]{message}[/{style}]")

    def success(self, message: str) -> None:
        """
        Print a success message in green with checkmark icon.

        Args:
            message: Message to display
        """
        self.print(f"[green]✓[/green] {message}")

    def hint(self, message: str) -> None:
        """Print a dimmed hint/secondary message."""
        self.colored(message, "dim")

    def rule(self, title: str, style: str = "bold blue") -> None:
        """
        Print a horizontal rule with a title.

        Args:
            title: Title text for the rule
            style: Rich style string (default: "bold blue")
        """
        self.console.rule(f"[{style}]{title}")

    def print_dict(self, data: dict[str, Any]) -> None:
        """
        Print dictionary data as highlighted JSON.

        Args:
            data: Dictionary to display
        """
        self.console.print_json(json.dumps(data, indent=2))

    def key_value(self, key: str, value: Any, key_style: str = "dim") -> None:
        """
        Print a formatted key-value pair, e.g. "Package: com.example".

        Args:
            key: The key/label to display
            value: The value to display
            key_style: Style for the key (default: "dim")
        """
        self.print(f"[{key_style}]{key}:[/{key_style}] {value}")

    def list_item(self, text: str, prefix: str = "-", style: str = "") -> None:
        """
        Print a list item with optional styling.

        Args:
            text: Text to display
            prefix: Prefix character (default: "-")
            style: Optional style for the entire item
        """
        if style:
            self.colored(f"{prefix} {text}", style)
        else:
            self.print(f"{prefix} {text}")


def get_logger(name: str = "apollo_codegen") -> CodegenLogger:
    """
    Get or create a CodegenLogger instance.

    Args:
        name: Logger name (default: "apollo_codegen")

    Returns:
        CodegenLogger instance
    """
    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(CodegenLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous_class)

    if not isinstance(logger, CodegenLogger):
        raise TypeError(f"Logger '{name}' was created before the codegen logger class was installed")

    logger.propagate = False
    return logger
