"""Immutable, line-addressable text values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ..settings import get_settings
from ..utils.logging import get_logger
from .errors import InvalidArgumentError, InvalidLineError, NullInputError, require
from .separators import LineSeparatorPolicy

__all__ = ["Text", "text", "create_text", "check_no_separator", "check_no_separators"]

LOGGER = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class Text:
    """A string exposed as a sequence of lines.

    ``value`` is the only stored state. Lines are derived by splitting on any
    recognized separator, while every text built from lines is joined with the
    canonical one.
    """

    value: str
    _lines: tuple[str, ...] | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullInputError.for_argument("value")
        if not isinstance(self.value, str):
            raise TypeError(f"Text value must be a string, not {type(self.value).__name__}")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_string(cls, value: str) -> Text:
        """Wrap ``value`` as-is; embedded separators make it multi-line."""

        return cls(value)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Text:
        """Join ``lines`` with the canonical separator.

        Raises:
            InvalidLineError: if any line embeds a line separator.
        """

        require(lines, "lines")
        if isinstance(lines, str):
            raise TypeError("Text.from_lines() expects an iterable of lines, not a string")
        materialized = list(lines)
        check_no_separators(materialized)
        return cls(LineSeparatorPolicy.join(materialized))

    @classmethod
    def from_payload(cls, payload: str) -> Text:
        """Restore a text from its persisted representation."""

        return cls(payload)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def lines(self) -> tuple[str, ...]:
        """Return the lines of this text, split on any recognized separator."""

        cached = self._lines
        if cached is None:
            cached = tuple(LineSeparatorPolicy.split(self.value))
            object.__setattr__(self, "_lines", cached)
        return cached

    def is_empty(self) -> bool:
        """Return ``True`` when the text has no characters at all."""

        return not self.value

    def size(self) -> int:
        """Return the number of characters, separators included."""

        return len(self.value)

    def contains(self, sequence: str) -> bool:
        """Return ``True`` when ``sequence`` occurs within the text.

        Needles spanning lines are not supported.

        Raises:
            InvalidArgumentError: if ``sequence`` embeds a line separator.
        """

        require(sequence, "sequence")
        if LineSeparatorPolicy.contains_separator(sequence):
            raise InvalidArgumentError(
                message=(
                    "The searched sequence contains a line separator: "
                    f"`{LineSeparatorPolicy.escape(sequence)}`"
                ),
                details={"sequence": LineSeparatorPolicy.escape(sequence)},
                argument="sequence",
            )
        return sequence in self.value

    def to_payload(self) -> str:
        """Return the persisted representation, which is just ``value``."""

        return self.value

    # ------------------------------------------------------------------
    # Derived texts
    # ------------------------------------------------------------------
    def ensure_canonical_separators(self) -> Text:
        """Return a text using only the canonical separator.

        The same instance is returned when no rewriting is necessary.
        """

        if not LineSeparatorPolicy.contains_foreign_separator(self.value):
            return self
        LOGGER.debug("Rewriting foreign line separators in a %d-character text", self.size())
        return Text(LineSeparatorPolicy.join(self.lines()))

    def trim_indent(self) -> Text:
        """Remove the indentation shared by all non-blank lines.

        Blank first and last lines are dropped, mirroring triple-quoted
        literals where the opening and closing quotes sit on their own lines.
        """

        lines = list(self.lines())
        margin = _common_indent(lines)
        if lines and not lines[0].strip():
            lines = lines[1:]
        if lines and not lines[-1].strip():
            lines = lines[:-1]
        return Text(LineSeparatorPolicy.join(line[margin:] for line in lines))

    def prepend_indent(self, indent: str | None = None) -> Text:
        """Prefix every non-blank line with ``indent``.

        Blank lines shorter than ``indent`` are padded to it. When ``indent``
        is omitted the configured default indentation is used.
        """

        if indent is None:
            indent = get_settings().default_indent
        if LineSeparatorPolicy.contains_separator(indent):
            raise InvalidArgumentError(
                message=f"Indent contains a line separator: `{LineSeparatorPolicy.escape(indent)}`",
                argument="indent",
            )
        return Text(LineSeparatorPolicy.join(_indent_line(line, indent) for line in self.lines()))

    # ------------------------------------------------------------------
    # Python protocol helpers
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, sequence: object) -> bool:
        if not isinstance(sequence, str):
            return False
        return self.contains(sequence)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines())


def text(value: str | Iterable[str]) -> Text:
    """Create a text from a raw string or from discrete lines."""

    require(value, "value")
    if isinstance(value, str):
        return Text.from_string(value)
    return Text.from_lines(value)


def create_text(*lines: str) -> Text:
    """Create a text from the given lines, e.g. ``create_text("one", "two")``."""

    return Text.from_lines(lines)


def check_no_separator(line: str, *, index: int | None = None) -> None:
    """Ensure ``line`` carries no line separator.

    Raises:
        InvalidLineError: if the line contains a separator.
    """

    require(line, "line")
    if not isinstance(line, str):
        raise TypeError(f"Lines must be strings, not {type(line).__name__}")
    if LineSeparatorPolicy.contains_separator(line):
        escaped = LineSeparatorPolicy.escape(line)
        raise InvalidLineError(
            message=f"The line contains a line separator: `{escaped}`",
            details={"line": escaped},
            line=line,
            index=index,
        )


def check_no_separators(lines: Iterable[str]) -> None:
    """Ensure none of ``lines`` carries a line separator."""

    for index, line in enumerate(lines):
        check_no_separator(line, index=index)


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip())


def _common_indent(lines: list[str]) -> int:
    widths = [_indent_width(line) for line in lines if line.strip()]
    return min(widths, default=0)


def _indent_line(line: str, indent: str) -> str:
    if line.strip():
        return indent + line
    return indent if len(line) < len(indent) else line
