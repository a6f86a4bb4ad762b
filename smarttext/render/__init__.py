from __future__ import annotations

from .actions import Affordance, InteractionHost, activate, affordances, perform
from .console import to_rich_text

__all__ = [
    "Affordance",
    "InteractionHost",
    "activate",
    "affordances",
    "perform",
    "to_rich_text",
]
