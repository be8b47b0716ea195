"""Line separator definitions shared by every text value.

Input is read tolerantly: ``\\n``, ``\\r\\n`` and ``\\r`` all end a line.
Output is always written with the single canonical separator, regardless of
the host operating system.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from .errors import require

__all__ = [
    "CR",
    "LF",
    "CRLF",
    "CANONICAL",
    "RECOGNIZED",
    "LineSeparatorPolicy",
    "new_line",
    "line_joiner",
    "line_splitter",
]

CR = "\r"
LF = "\n"
CRLF = "\r\n"

CANONICAL = LF
# ``\r\n`` comes first so the regex consumes it as one separator.
RECOGNIZED: tuple[str, ...] = (CRLF, LF, CR)

_SEPARATOR_PATTERN = re.compile("|".join(re.escape(sep) for sep in RECOGNIZED))
_ESCAPES = {CR: "\\r", LF: "\\n"}


class LineSeparatorPolicy:
    """Single source of truth for separator semantics."""

    @staticmethod
    def canonical() -> str:
        """Return the separator used whenever lines are joined."""

        return CANONICAL

    @staticmethod
    def recognized() -> tuple[str, ...]:
        """Return every separator form accepted on input."""

        return RECOGNIZED

    @staticmethod
    def is_separator(value: str) -> bool:
        """Return ``True`` when ``value`` is exactly one recognized separator."""

        require(value, "value")
        return value in RECOGNIZED

    @staticmethod
    def contains_separator(value: str) -> bool:
        """Return ``True`` when ``value`` embeds any recognized separator."""

        require(value, "value")
        return _SEPARATOR_PATTERN.search(value) is not None

    @staticmethod
    def contains_foreign_separator(value: str) -> bool:
        """Return ``True`` when ``value`` uses any separator besides the canonical one."""

        require(value, "value")
        return any(match.group() != CANONICAL for match in _SEPARATOR_PATTERN.finditer(value))

    @staticmethod
    def split(value: str) -> list[str]:
        """Break ``value`` into lines at any recognized separator.

        A trailing separator yields a trailing empty line and an empty string
        yields a single empty line.
        """

        require(value, "value")
        return _SEPARATOR_PATTERN.split(value)

    @staticmethod
    def join(lines: Iterable[str]) -> str:
        """Join ``lines`` with the canonical separator."""

        require(lines, "lines")
        return CANONICAL.join(lines)

    @staticmethod
    def escape(value: str) -> str:
        """Return ``value`` with separator characters rendered visibly."""

        require(value, "value")
        return "".join(_ESCAPES.get(char, char) for char in value)


def new_line() -> str:
    """Shortcut for the canonical separator."""

    return CANONICAL


def line_joiner() -> Callable[[Iterable[str]], str]:
    return LineSeparatorPolicy.join


def line_splitter() -> Callable[[str], list[str]]:
    return LineSeparatorPolicy.split
