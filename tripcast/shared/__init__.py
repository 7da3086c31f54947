"""Shared cross-layer types and exceptions."""

from tripcast.shared.exceptions import KeyMissingError, ToolError

__all__ = ["ToolError", "KeyMissingError"]
