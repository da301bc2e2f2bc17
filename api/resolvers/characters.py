"""Character resolvers."""

from ariadne import MutationType, ObjectType, QueryType

from api.errors import graphql_errors, require_user, validated_data
from api.serializers import CharacterCreateSerializer
from characters.models import Character
from characters.services import create_character

query = QueryType()
mutation = MutationType()
character_type = ObjectType("Character")


@query.field("characters")
def resolve_characters(_, info):
    user = require_user(info)
    return list(Character.objects.visible_to(user).with_sheet())


@query.field("character")
def resolve_character(_, info, id):
    user = require_user(info)
    return Character.objects.visible_to(user).with_sheet().filter(pk=str(id)).first()


@mutation.field("createCharacter")
@graphql_errors
def resolve_create_character(_, info, name, **kwargs):
    user = require_user(info)
    data = validated_data(CharacterCreateSerializer, {"name": name, **kwargs})
    return create_character(
        owner=user,
        name=data["name"],
        campaign_id=data.get("campaign_id") or None,
        stats=data.get("stats"),
        skills=data.get("skills") or [],
        cybernetic_ids=data.get("cybernetic_ids"),
        weapon_ids=data.get("weapon_ids"),
        item_ids=data.get("item_ids"),
        vehicle_ids=data.get("vehicle_ids"),
    )


@character_type.field("skills")
def resolve_character_skills(character, info):
    return list(character.skills.all())


character_bindables = [query, mutation, character_type]
