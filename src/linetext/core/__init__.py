"""Core value types: line separators, texts and positions."""

from .errors import InvalidArgumentError, InvalidLineError, NullInputError, TextError
from .position import NOT_FOUND, BeyondText, Position
from .separators import CANONICAL, RECOGNIZED, LineSeparatorPolicy, line_joiner, line_splitter, new_line
from .text import Text, create_text, text

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
]
