"""Tests for line/column positions and the "not found" sentinel."""

from __future__ import annotations

import json

import pytest

from linetext.core.errors import InvalidArgumentError, NullInputError
from linetext.core.position import NOT_FOUND, BeyondText, Position


def test_at_builds_located_position() -> None:
    position = Position.at(3, 7)

    assert position.is_found()
    assert position.coordinates() == (3, 7)
    assert position.beyond is None


@pytest.mark.parametrize("line,column", [(-1, 0), (0, -1), (-5, -5)])
def test_at_rejects_negative_coordinates(line: int, column: int) -> None:
    with pytest.raises(InvalidArgumentError):
        Position.at(line, column)


@pytest.mark.parametrize("value", [1.5, "2", True, None])
def test_at_rejects_non_integer_coordinates(value) -> None:
    with pytest.raises(InvalidArgumentError):
        Position.at(value, 0)


def test_direct_construction_is_validated_too() -> None:
    with pytest.raises(InvalidArgumentError):
        Position(line=-1, column=0)


def test_not_found_is_a_shared_sentinel() -> None:
    assert Position.not_found() is NOT_FOUND
    assert not Position.not_found().is_found()
    assert Position.not_found() == Position.not_found()


def test_sentinels_are_equal_regardless_of_construction() -> None:
    built = Position(line=9, column=4, beyond=BeyondText.NOT_IN_TEXT)

    assert built == NOT_FOUND
    assert hash(built) == hash(NOT_FOUND)
    assert built.line == 0 and built.column == 0


def test_located_never_equals_sentinel() -> None:
    assert Position.at(0, 0) != NOT_FOUND
    assert NOT_FOUND != Position.at(0, 0)


def test_structural_equality_of_located_positions() -> None:
    assert Position.at(1, 2) == Position.at(1, 2)
    assert Position.at(1, 2) != Position.at(2, 1)
    assert len({Position.at(1, 2), Position.at(1, 2), NOT_FOUND}) == 2


def test_sentinel_has_no_coordinates() -> None:
    with pytest.raises(InvalidArgumentError):
        NOT_FOUND.coordinates()


def test_located_positions_order_lexicographically() -> None:
    positions = [Position.at(2, 0), Position.at(0, 5), Position.at(0, 1), Position.at(1, 9)]

    assert sorted(positions) == [
        Position.at(0, 1),
        Position.at(0, 5),
        Position.at(1, 9),
        Position.at(2, 0),
    ]
    assert Position.at(1, 1) <= Position.at(1, 1)
    assert Position.at(3, 0) > Position.at(2, 99)


def test_sentinel_is_not_ordered() -> None:
    with pytest.raises(TypeError):
        _ = NOT_FOUND < Position.at(0, 0)
    with pytest.raises(TypeError):
        _ = Position.at(0, 0) >= NOT_FOUND


def test_to_tuple_exposes_variant_line_and_column() -> None:
    assert Position.at(4, 2).to_tuple() == ("located", 4, 2)
    assert NOT_FOUND.to_tuple() == ("not_in_text", 0, 0)


def test_from_value_restores_serialized_positions() -> None:
    located = Position.at(4, 2)

    assert Position.from_value(located.to_tuple()) == located
    assert Position.from_value(json.loads(json.dumps(located.to_dict()))) == located
    assert Position.from_value(json.loads(json.dumps(NOT_FOUND.to_dict()))) is NOT_FOUND
    assert Position.from_value(list(NOT_FOUND.to_tuple())) is NOT_FOUND
    assert Position.from_value(located) is located


def test_from_value_rejects_malformed_input() -> None:
    with pytest.raises(InvalidArgumentError):
        Position.from_value({"variant": "elsewhere"})
    with pytest.raises(InvalidArgumentError):
        Position.from_value({"line": 1})
    with pytest.raises(InvalidArgumentError):
        Position.from_value(("located", 1))
    with pytest.raises(InvalidArgumentError):
        Position.from_value(("located", -1, 0))
    with pytest.raises(TypeError):
        Position.from_value(12)
    with pytest.raises(NullInputError):
        Position.from_value(None)
