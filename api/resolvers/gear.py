"""Public catalog resolvers."""

from ariadne import ObjectType, QueryType

from gear.models import Cybernetic, Item, Vehicle, Weapon

query = QueryType()
cybernetic_type = ObjectType("Cybernetic")
weapon_type = ObjectType("Weapon")
item_type = ObjectType("Item")

weapon_type.set_alias("type", "weapon_type")
item_type.set_alias("type", "item_type")


def _cybernetics():
    return Cybernetic.objects.prefetch_related("stat_bonuses", "skill_bonuses")


@query.field("cybernetics")
def resolve_cybernetics(*_):
    return list(_cybernetics())


@query.field("cybernetic")
def resolve_cybernetic(*_, id):
    return _cybernetics().filter(pk=str(id)).first()


@query.field("weapons")
def resolve_weapons(*_):
    return list(Weapon.objects.all())


@query.field("weapon")
def resolve_weapon(*_, id):
    return Weapon.objects.filter(pk=str(id)).first()


@query.field("items")
def resolve_items(*_):
    return list(Item.objects.all())


@query.field("item")
def resolve_item(*_, id):
    return Item.objects.filter(pk=str(id)).first()


@query.field("vehicles")
def resolve_vehicles(*_):
    return list(Vehicle.objects.all())


@query.field("vehicle")
def resolve_vehicle(*_, id):
    return Vehicle.objects.filter(pk=str(id)).first()


@cybernetic_type.field("statBonuses")
def resolve_stat_bonuses(cybernetic, info):
    return list(cybernetic.stat_bonuses.all())


@cybernetic_type.field("skillBonuses")
def resolve_skill_bonuses(cybernetic, info):
    return list(cybernetic.skill_bonuses.all())


gear_bindables = [query, cybernetic_type, weapon_type, item_type]
