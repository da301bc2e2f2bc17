"""
Character creation.

Validates the campaign, the creator's membership and every referenced
catalog id before anything is written.
"""

import logging
from typing import Dict, Iterable, List, Optional

from django.contrib.auth.models import AbstractUser
from django.db import transaction

from campaigns.exceptions import NotAuthorizedError
from campaigns.services import get_campaign
from gear.models import Cybernetic, Item, Vehicle, Weapon

from .exceptions import UnknownGearError
from .models import STAT_FIELDS, Character, CharacterGear, CharacterSkill

logger = logging.getLogger(__name__)

GEAR_KINDS = [
    ("cybernetic", Cybernetic),
    ("weapon", Weapon),
    ("item", Item),
    ("vehicle", Vehicle),
]


def _unique(ids: Optional[Iterable]) -> List[str]:
    seen: Dict[str, None] = {}
    for gear_id in ids or []:
        seen.setdefault(str(gear_id), None)
    return list(seen)


def _resolve_gear(kind: str, model, ids: List[str]) -> List[str]:
    found = set(model.objects.filter(pk__in=ids).values_list("pk", flat=True))
    for gear_id in ids:
        if gear_id not in found:
            raise UnknownGearError(kind, gear_id)
    return ids


def create_character(
    owner: AbstractUser,
    name: str,
    campaign_id=None,
    stats: Optional[Dict[str, int]] = None,
    skills: Optional[List[Dict]] = None,
    cybernetic_ids=None,
    weapon_ids=None,
    item_ids=None,
    vehicle_ids=None,
) -> Character:
    """
    Create a private character owned by ``owner``.

    Args:
        owner: The creating user
        name: Character name
        campaign_id: Optional campaign; the owner must be a member
        stats: Partial stat block; missing stats are 0
        skills: List of ``{"name", "level"}`` dicts, kept in order
        cybernetic_ids, weapon_ids, item_ids, vehicle_ids: Catalog ids to attach

    Returns:
        Character: The saved character

    Raises:
        CampaignNotFoundError: If ``campaign_id`` does not exist
        NotAuthorizedError: If the owner is not a member of the campaign
        UnknownGearError: If any id is missing or of another kind
    """
    campaign = None
    if campaign_id:
        campaign = get_campaign(campaign_id)
        if not campaign.is_member(owner):
            raise NotAuthorizedError()

    requested = {
        "cybernetic": cybernetic_ids,
        "weapon": weapon_ids,
        "item": item_ids,
        "vehicle": vehicle_ids,
    }
    gear_ids: List[str] = []
    for kind, model in GEAR_KINDS:
        gear_ids.extend(_resolve_gear(kind, model, _unique(requested[kind])))

    stats = stats or {}
    stat_values = {
        field: stats[field] for field in STAT_FIELDS if stats.get(field) is not None
    }

    with transaction.atomic():
        character = Character.objects.create(
            name=name,
            owner=owner,
            campaign=campaign,
            is_public=False,
            **stat_values,
        )
        for skill in skills or []:
            CharacterSkill.objects.create(
                character=character, name=skill["name"], level=skill["level"]
            )
        for gear_id in _unique(gear_ids):
            CharacterGear.objects.create(character=character, gear_id=gear_id)

    logger.info(f"User {owner.id} created character {character.id}")
    return character
