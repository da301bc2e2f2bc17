"""
Shared equipment catalog.

Every catalog entry is a ``Gear`` row; the concrete kind (cybernetic, weapon,
vehicle, item) lives in a child table and comes back from polymorphic
queries as the subclass instance.
"""

from django.core.validators import MinValueValidator
from django.db import models
from polymorphic.managers import PolymorphicManager  # type: ignore[import-untyped]
from polymorphic.models import PolymorphicModel  # type: ignore[import-untyped]
from polymorphic.query import PolymorphicQuerySet  # type: ignore[import-untyped]

from core.models import NamedModelMixin, PrefixedIdMixin, TimestampedMixin

STAT_CHOICES = [
    ("BRAWN", "Brawn"),
    ("CHARM", "Charm"),
    ("INTELLIGENCE", "Intelligence"),
    ("REFLEXES", "Reflexes"),
    ("TECH", "Tech"),
    ("LUCK", "Luck"),
]


class GearQuerySet(PolymorphicQuerySet):
    """Custom QuerySet for Gear with kind filtering."""

    def of_kind(self, model) -> "GearQuerySet":
        """Filter to one concrete gear class, e.g. ``of_kind(Weapon)``."""
        return self.instance_of(model)


class GearManager(PolymorphicManager):
    """Custom manager for Gear with query methods."""

    def get_queryset(self) -> GearQuerySet:
        return GearQuerySet(self.model, using=self._db)

    def of_kind(self, model) -> GearQuerySet:
        return self.get_queryset().of_kind(model)


class Gear(PrefixedIdMixin, NamedModelMixin, TimestampedMixin, PolymorphicModel):
    """Base catalog entry with the fields every kind of gear shares."""

    ID_PREFIX = "g"
    KIND = "gear"

    price: models.IntegerField = models.IntegerField(
        default=0, validators=[MinValueValidator(0)], help_text="Price in eddies"
    )
    short_description: models.CharField = models.CharField(
        max_length=255, blank=True, help_text="One-line summary"
    )
    long_description: models.TextField = models.TextField(
        blank=True, help_text="Full description"
    )

    objects = GearManager()

    class Meta:
        db_table = "gear_gear"
        ordering = ["name", "id"]
        verbose_name = "Gear"
        verbose_name_plural = "Gear"


class Cybernetic(Gear):
    """Implant that can boost stats and skills."""

    ID_PREFIX = "cy"
    KIND = "cybernetic"

    battery_life: models.IntegerField = models.IntegerField(
        default=0, validators=[MinValueValidator(0)], help_text="Battery life in hours"
    )

    class Meta:
        db_table = "gear_cybernetic"
        verbose_name = "Cybernetic"
        verbose_name_plural = "Cybernetics"


class StatBonus(models.Model):
    cybernetic: models.ForeignKey = models.ForeignKey(
        Cybernetic, on_delete=models.CASCADE, related_name="stat_bonuses"
    )
    stat: models.CharField = models.CharField(max_length=20, choices=STAT_CHOICES)
    amount: models.IntegerField = models.IntegerField()

    class Meta:
        db_table = "gear_stat_bonus"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.stat} {self.amount:+d}"


class SkillBonus(models.Model):
    cybernetic: models.ForeignKey = models.ForeignKey(
        Cybernetic, on_delete=models.CASCADE, related_name="skill_bonuses"
    )
    name: models.CharField = models.CharField(max_length=100)
    amount: models.IntegerField = models.IntegerField()

    class Meta:
        db_table = "gear_skill_bonus"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} {self.amount:+d}"


class Weapon(Gear):
    TYPE_CHOICES = [
        ("MELEE", "Melee"),
        ("RANGED", "Ranged"),
    ]

    ID_PREFIX = "w"
    KIND = "weapon"

    weight: models.IntegerField = models.IntegerField(
        default=0, validators=[MinValueValidator(0)]
    )
    max_range: models.IntegerField = models.IntegerField(
        default=0, validators=[MinValueValidator(0)]
    )
    max_ammo_count: models.IntegerField = models.IntegerField(
        default=0, validators=[MinValueValidator(0)]
    )
    weapon_type: models.CharField = models.CharField(
        max_length=10, choices=TYPE_CHOICES, default="MELEE"
    )
    condition: models.IntegerField = models.IntegerField(
        default=100, validators=[MinValueValidator(0)], help_text="Condition in percent"
    )

    class Meta:
        db_table = "gear_weapon"
        verbose_name = "Weapon"
        verbose_name_plural = "Weapons"


class Vehicle(Gear):
    ID_PREFIX = "v"
    KIND = "vehicle"

    speed: models.IntegerField = models.IntegerField(
        default=0, validators=[MinValueValidator(0)]
    )
    armor: models.IntegerField = models.IntegerField(
        default=0, validators=[MinValueValidator(0)]
    )

    class Meta:
        db_table = "gear_vehicle"
        verbose_name = "Vehicle"
        verbose_name_plural = "Vehicles"


class Item(Gear):
    TYPE_CHOICES = [
        ("GENERAL", "General"),
        ("CYBERDECK", "Cyberdeck"),
        ("CONSUMABLE", "Consumable"),
        ("AMMO", "Ammo"),
        ("OTHER", "Other"),
    ]

    ID_PREFIX = "i"
    KIND = "item"

    weight: models.IntegerField = models.IntegerField(
        default=0, validators=[MinValueValidator(0)]
    )
    item_type: models.CharField = models.CharField(
        max_length=20, choices=TYPE_CHOICES, default="GENERAL"
    )

    class Meta:
        db_table = "gear_item"
        verbose_name = "Item"
        verbose_name_plural = "Items"
