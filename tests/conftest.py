"""Shared pytest fixtures and configuration for the tiny-cmdline test suite.

Guidelines
----------
* Tests never spawn processes; exits are asserted via ``SystemExit``.
* Converter registrations made by a test are rolled back afterwards.
* Output is checked through ``capsys``.
"""

from __future__ import annotations

import pytest

from tiny_cmdline.core import conversion
from tiny_cmdline.registry import OptionRegistry


@pytest.fixture(autouse=True)
def _isolated_converters(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(conversion, "_converters", dict(conversion._converters))


@pytest.fixture
def registry() -> OptionRegistry:
    return OptionRegistry()
