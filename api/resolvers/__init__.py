"""Resolver bindables, grouped by domain area."""

from .auth import auth_bindables
from .campaigns import campaign_bindables
from .characters import character_bindables
from .gear import gear_bindables

bindables = [
    *auth_bindables,
    *campaign_bindables,
    *character_bindables,
    *gear_bindables,
]

__all__ = ["bindables"]
