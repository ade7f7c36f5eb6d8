"""Use cases orchestrating assertion evaluation."""

from __future__ import annotations

from .evaluate import MessageBuilder, Outcome, Predicate, evaluate

__all__ = ["MessageBuilder", "Outcome", "Predicate", "evaluate"]
