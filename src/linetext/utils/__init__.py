"""Utility helpers shared across linetext."""

from .logging import get_logger

__all__ = ["get_logger"]
