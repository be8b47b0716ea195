"""Smoke tests for the public package surface."""

from __future__ import annotations

import linetext


def test_public_names_are_exported() -> None:
    for name in linetext.__all__:
        assert hasattr(linetext, name), name


def test_public_api_end_to_end() -> None:
    value = linetext.text(["a", "b"])

    assert value.lines() == ("a", "b")
    assert linetext.Position.not_found() is linetext.NOT_FOUND
    assert linetext.new_line() == linetext.CANONICAL
