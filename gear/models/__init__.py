from .gear import (
    STAT_CHOICES,
    Cybernetic,
    Gear,
    Item,
    SkillBonus,
    StatBonus,
    Vehicle,
    Weapon,
)

__all__ = [
    "STAT_CHOICES",
    "Gear",
    "Cybernetic",
    "StatBonus",
    "SkillBonus",
    "Weapon",
    "Vehicle",
    "Item",
]
