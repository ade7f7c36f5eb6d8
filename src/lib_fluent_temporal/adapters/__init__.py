"""Adapters implementing the value-family port and message rendering."""

from __future__ import annotations

from .families import (
    DURATION,
    FAMILIES,
    INSTANT,
    LOCAL_DATE,
    LOCAL_DATE_TIME,
    LOCAL_TIME,
    OFFSET,
    OFFSET_DATE_TIME,
    OFFSET_TIME,
    PERIOD,
    ZONED_DATE_TIME,
)

__all__ = [
    "DURATION",
    "FAMILIES",
    "INSTANT",
    "LOCAL_DATE",
    "LOCAL_DATE_TIME",
    "LOCAL_TIME",
    "OFFSET",
    "OFFSET_DATE_TIME",
    "OFFSET_TIME",
    "PERIOD",
    "ZONED_DATE_TIME",
]
