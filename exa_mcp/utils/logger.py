# This file is part of the Exa MCP server for logging and console management.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

import logging
import os
from rich.logging import RichHandler
from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

# Define a custom logging level for success messages
SUCCESS_LEVEL_NUM = 25

logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

def success_log(self, message, *args, **kwargs):
    if self.isEnabledFor(SUCCESS_LEVEL_NUM):
        self._log(SUCCESS_LEVEL_NUM, message, args, **kwargs)

# Register the custom success method to the logging.Logger class
if not hasattr(logging.Logger, 'success'):
    setattr(logging.Logger, 'success', success_log)

class ConsoleManager:
    """
    A singleton class that manages diagnostic output for the Exa MCP server.

    Everything goes to stderr: when the server runs on the stdio transport,
    stdout carries protocol messages and must stay clean.
    """
    def __init__(self):
        custom_theme = Theme({
            "logging.level.success": "bold green"
        })
        self._console = Console(theme=custom_theme, stderr=True)
        self._logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger("Exa-MCP")
        if logger.hasHandlers():
            # If logger is already configured, don't add handlers again
            return logger

        level = logging.getLevelName(os.environ.get("LOG_LEVEL", "INFO").upper())
        logger.setLevel(level if isinstance(level, int) else logging.INFO)
        handler = RichHandler(
            console=self._console,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            keywords=["INFO", "SUCCESS", "WARNING", "ERROR", "DEBUG", "CRITICAL"],
            show_path=False
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        logger.propagate = False
        return logger

    def set_level(self, level: str):
        resolved = logging.getLevelName(level.upper())
        if isinstance(resolved, int):
            self._logger.setLevel(resolved)

    # Define logging methods
    def debug(self, message: str):
        self._logger.debug(message)

    def info(self, message: str):
        self._logger.info(message)

    def success(self, message: str):
        self._logger.success(message)

    def warning(self, message: str):
        self._logger.warning(message)

    def error(self, message: str):
        self._logger.error(message)

    def exception(self, message: str):
        self._logger.exception(message)

    # Define higher-level console methods
    def rule(self, title: str, style: str = "cyan"):
        self._console.rule(f"[bold {style}]{title}[/bold {style}]", style=style)


def print_tool_listing(rows: list[dict]):
    """Prints the tool catalogue on stdout, where the user asked for it."""
    out = Console(highlight=False, soft_wrap=True)
    out.print("[bold]Available tools:[/bold]")
    for row in rows:
        out.print(f"[bold cyan]- {escape(row['id'])}[/bold cyan]: {escape(row['name'])}")
        out.print(f"  Description: {escape(row['description'])}")
        out.print(f"  Enabled by default: {'Yes' if row['enabled'] else 'No'}")
        out.print()

# Create a singleton instance for global use
console = ConsoleManager()
