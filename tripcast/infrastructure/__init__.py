"""Infrastructure helpers."""

from tripcast.infrastructure.logging import StructuredLogger, get_logger

__all__ = ["StructuredLogger", "get_logger"]
