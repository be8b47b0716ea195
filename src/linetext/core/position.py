"""Line/column positions inside a text, with a first-class "not found" value."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import InvalidArgumentError, require

__all__ = ["BeyondText", "Position", "NOT_FOUND", "LOCATED"]

LOCATED = "located"


class BeyondText(Enum):
    """Reasons a position does not point into a text."""

    NOT_IN_TEXT = "not_in_text"


@dataclass(slots=True, frozen=True)
class Position:
    """Either a zero-based ``(line, column)`` location or a sentinel.

    Sentinel positions carry a :class:`BeyondText` reason; their coordinates
    are meaningless and always stored as zero, so equality only depends on
    the reason.
    """

    line: int = 0
    column: int = 0
    beyond: BeyondText | None = None

    def __post_init__(self) -> None:
        if self.beyond is not None:
            if not isinstance(self.beyond, BeyondText):
                raise InvalidArgumentError(
                    message=f"Unsupported sentinel reason: {self.beyond!r}",
                    argument="beyond",
                )
            object.__setattr__(self, "line", 0)
            object.__setattr__(self, "column", 0)
            return
        _check_coordinate(self.line, "line")
        _check_coordinate(self.column, "column")

    @classmethod
    def at(cls, line: int, column: int) -> Position:
        """Return the location at ``line``/``column``.

        Raises:
            InvalidArgumentError: if either coordinate is negative.
        """

        return cls(line=line, column=column)

    @classmethod
    def not_found(cls) -> Position:
        """Return the shared "not found" sentinel."""

        return NOT_FOUND

    def is_found(self) -> bool:
        """Return ``True`` when the position points into a text."""

        return self.beyond is None

    def coordinates(self) -> tuple[int, int]:
        """Return ``(line, column)`` of a located position."""

        if self.beyond is not None:
            raise InvalidArgumentError(
                message="A position beyond the text has no coordinates",
                details={"beyond": self.beyond.value},
                argument="position",
            )
        return (self.line, self.column)

    # ------------------------------------------------------------------
    # Ordering among located positions
    # ------------------------------------------------------------------
    def sort_key(self) -> tuple[int, int]:
        """Return the lexicographic ordering key of a located position."""

        if self.beyond is not None:
            raise TypeError("Positions beyond the text are not ordered")
        return (self.line, self.column)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    @property
    def variant(self) -> str:
        """Return ``"located"`` or the sentinel reason name."""

        return LOCATED if self.beyond is None else self.beyond.value

    def to_tuple(self) -> tuple[str, int, int]:
        """Return the position as a ``(variant, line, column)`` tuple."""

        return (self.variant, self.line, self.column)

    def to_dict(self) -> dict[str, Any]:
        """Return the position as a JSON-friendly mapping."""

        if self.beyond is not None:
            return {"variant": self.variant}
        return {"variant": LOCATED, "line": self.line, "column": self.column}

    @classmethod
    def from_value(cls, value: Any) -> Position:
        """Coerce ``value`` into a :class:`Position`."""

        require(value, "value")
        if isinstance(value, Position):
            return value
        if isinstance(value, Mapping):
            variant = value.get("variant", LOCATED)
            if variant != LOCATED:
                return cls._sentinel(variant)
            if "line" not in value or "column" not in value:
                raise InvalidArgumentError(
                    message="Position mappings require line and column keys",
                    argument="value",
                )
            return cls.at(value["line"], value["column"])
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            seq = list(value)
            if len(seq) != 3:
                raise InvalidArgumentError(
                    message="Position sequences must have exactly three entries",
                    argument="value",
                )
            variant, line, column = seq
            if variant != LOCATED:
                return cls._sentinel(variant)
            return cls.at(line, column)
        raise TypeError("Unsupported Position input")

    @classmethod
    def _sentinel(cls, variant: Any) -> Position:
        try:
            reason = BeyondText(variant)
        except ValueError as exc:
            raise InvalidArgumentError(
                message=f"Unknown position variant: {variant!r}",
                argument="variant",
            ) from exc
        if reason is BeyondText.NOT_IN_TEXT:
            return NOT_FOUND
        return cls(beyond=reason)


def _check_coordinate(value: Any, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            message=f"Position {label} must be an integer, got {value!r}",
            argument=label,
        )
    if value < 0:
        raise InvalidArgumentError(
            message=f"Position {label} must not be negative, got {value}",
            details={label: value},
            argument=label,
        )


NOT_FOUND = Position(beyond=BeyondText.NOT_IN_TEXT)
