"""Shared utilities."""

from schema_descriptor.utils.logging import bind_context, configure_logging, get_logger

__all__ = ["bind_context", "configure_logging", "get_logger"]
