"""Immutable, line-addressable text values and positions."""

from __future__ import annotations

from .core import (
    CANONICAL,
    NOT_FOUND,
    RECOGNIZED,
    BeyondText,
    InvalidArgumentError,
    InvalidLineError,
    LineSeparatorPolicy,
    NullInputError,
    Position,
    Text,
    TextError,
    create_text,
    line_joiner,
    line_splitter,
    new_line,
    text,
)
from .settings import TextSettings, get_settings, load_settings

__version__ = "0.1.0"

__all__ = [
    "CANONICAL",
    "RECOGNIZED",
    "LineSeparatorPolicy",
    "new_line",
    "line_joiner",
    "line_splitter",
    "Text",
    "text",
    "create_text",
    "Position",
    "BeyondText",
    "NOT_FOUND",
    "TextError",
    "InvalidLineError",
    "InvalidArgumentError",
    "NullInputError",
    "TextSettings",
    "get_settings",
    "load_settings",
    "__version__",
]
