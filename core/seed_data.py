"""
Seed campaigns, catalog entries and characters.

The same records back development databases (``manage.py seed_data``) and the
API tests. Loading is an upsert keyed on the fixed ids, so it can be run
repeatedly.
"""

import logging
from typing import Dict

from django.db import transaction

logger = logging.getLogger(__name__)

CAMPAIGNS = [
    {"id": "camp_1", "name": "Neon Rain"},
    {"id": "camp_2", "name": "Chrome Syndicate"},
    {"id": "camp_3", "name": "Synthetic Dawn"},
]

CYBERNETICS = [
    {
        "id": "cy_1",
        "name": "Reflex Booster",
        "short_description": "Boostes reflex response time.",
        "long_description": "A spinal tap that accelerates motor response under stress.",
        "price": 1200,
        "battery_life": 3,
        "stat_bonuses": [{"stat": "REFLEXES", "amount": 1}],
        "skill_bonuses": [],
    },
]

WEAPONS = [
    {
        "id": "w_1",
        "name": "Mono-Katana",
        "price": 900,
        "weight": 3,
        "max_range": 1,
        "max_ammo_count": 0,
        "weapon_type": "MELEE",
        "condition": 100,
        "short_description": "A molecular-edged blade.",
        "long_description": "A mono-molecular katana with a near-frictionless edge.",
    },
    {
        "id": "w_2",
        "name": "Smartpistol",
        "price": 650,
        "weight": 2,
        "max_range": 40,
        "max_ammo_count": 12,
        "weapon_type": "RANGED",
        "condition": 100,
        "short_description": "A pistol with smart-link.",
        "long_description": "A compact sidearm compatible with smart targeting links.",
    },
]

VEHICLES = [
    {
        "id": "v_1",
        "name": "Street Bike",
        "price": 2200,
        "short_description": "A loud, fast street bike.",
        "long_description": "A stripped-down bike built for speed in tight alleys.",
        "speed": 80,
        "armor": 1,
    },
]

ITEMS = [
    {
        "id": "i_1",
        "name": "Cyberdeck (Starter)",
        "price": 1500,
        "weight": 2,
        "short_description": "A starter-grade cyberdeck.",
        "long_description": "A basic cyberdeck with limited RAM and disk space.",
        "item_type": "CYBERDECK",
    },
]

CHARACTERS = [
    {
        "id": "c_1",
        "name": "Nova",
        "is_public": False,
        "speed": 30,
        "hit_points": 5,
        "campaign_id": "camp_1",
        "stats": {
            "brawn": 2,
            "charm": 4,
            "intelligence": 6,
            "reflexes": 7,
            "tech": 5,
            "luck": 1,
        },
        "skills": [
            {"name": "Hacking", "level": 6},
            {"name": "Awareness", "level": 4},
        ],
        "gear_ids": ["cy_1", "w_1", "w_2", "v_1", "i_1"],
    },
    {
        "id": "c_2",
        "name": "Street Thug",
        "is_public": True,
        "speed": 30,
        "hit_points": 3,
        "campaign_id": None,
        "stats": {
            "brawn": 3,
            "charm": 1,
            "intelligence": 1,
            "reflexes": 3,
            "tech": 0,
            "luck": 0,
        },
        "skills": [{"name": "Intimidation", "level": 2}],
        "gear_ids": [],
    },
    {
        "id": "c_3",
        "name": "Ghost",
        "is_public": False,
        "speed": 30,
        "hit_points": 5,
        "campaign_id": "camp_2",
        "stats": {
            "brawn": 1,
            "charm": 2,
            "intelligence": 7,
            "reflexes": 6,
            "tech": 8,
            "luck": 1,
        },
        "skills": [{"name": "Hacking", "level": 8}],
        "gear_ids": [],
    },
]


def seed_counts() -> Dict[str, int]:
    return {
        "campaigns": len(CAMPAIGNS),
        "cybernetics": len(CYBERNETICS),
        "weapons": len(WEAPONS),
        "vehicles": len(VEHICLES),
        "items": len(ITEMS),
        "characters": len(CHARACTERS),
    }


def _upsert(model, record):
    data = dict(record)
    pk = data.pop("id")
    obj, _ = model.objects.update_or_create(id=pk, defaults=data)
    return obj


@transaction.atomic
def load_seed_data() -> Dict[str, int]:
    """Create or refresh every seed record and return the counts per kind."""
    from campaigns.models import Campaign
    from characters.models import Character, CharacterGear, CharacterSkill
    from gear.models import Cybernetic, Item, SkillBonus, StatBonus, Vehicle, Weapon

    for record in CAMPAIGNS:
        _upsert(Campaign, record)

    for record in CYBERNETICS:
        record = dict(record)
        stat_bonuses = record.pop("stat_bonuses")
        skill_bonuses = record.pop("skill_bonuses")
        cybernetic = _upsert(Cybernetic, record)
        cybernetic.stat_bonuses.all().delete()
        cybernetic.skill_bonuses.all().delete()
        for bonus in stat_bonuses:
            StatBonus.objects.create(cybernetic=cybernetic, **bonus)
        for bonus in skill_bonuses:
            SkillBonus.objects.create(cybernetic=cybernetic, **bonus)

    for model, records in ((Weapon, WEAPONS), (Vehicle, VEHICLES), (Item, ITEMS)):
        for record in records:
            _upsert(model, record)

    for record in CHARACTERS:
        record = dict(record)
        stats = record.pop("stats")
        skills = record.pop("skills")
        gear_ids = record.pop("gear_ids")
        character = _upsert(Character, {**record, **stats})

        character.skills.all().delete()
        for skill in skills:
            CharacterSkill.objects.create(character=character, **skill)
        character.gear_links.all().delete()
        for gear_id in gear_ids:
            CharacterGear.objects.create(character=character, gear_id=gear_id)

    counts = seed_counts()
    logger.info(f"Seed data loaded: {counts}")
    return counts
