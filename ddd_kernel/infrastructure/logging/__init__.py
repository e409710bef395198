"""Logging adapters (LoggerProtocol implementations)."""

from ddd_kernel.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
