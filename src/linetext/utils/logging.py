"""Logger lookup for linetext modules.

The library only emits records; configuring handlers is left to the
application that imports it.
"""

from __future__ import annotations

import logging

__all__ = ["get_logger"]


def get_logger(name: str) -> logging.Logger:
    """Return a module-specific logger."""

    return logging.getLogger(name)
