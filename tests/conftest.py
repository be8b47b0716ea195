"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from linetext import settings as settings_module


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ("LINETEXT_SETTINGS", "LINETEXT_INDENT_SIZE"):
        monkeypatch.delenv(name, raising=False)
    settings_module.reset_settings()
    yield
    settings_module.reset_settings()


@pytest.fixture
def lines_with_separators() -> list[str]:
    return [
        " Fiz \n buz? ",
        " Foo \r bar.",
        "Ka \r\n boom!",
    ]
