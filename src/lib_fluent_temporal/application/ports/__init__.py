"""Ports describing the contracts the assertion engine depends on."""

from __future__ import annotations

from .family import AbsentStyle, ValueFamily

__all__ = ["AbsentStyle", "ValueFamily"]
