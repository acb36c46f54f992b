"""Structured logging package."""

from account_ledger.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
