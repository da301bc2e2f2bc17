from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q

from campaigns.models import Campaign
from core.models import NamedModelMixin, PrefixedIdMixin, TimestampedMixin
from gear.models import Cybernetic, Gear, Item, Vehicle, Weapon

if TYPE_CHECKING:
    from django.contrib.auth.models import AbstractUser

STAT_FIELDS = ["brawn", "charm", "intelligence", "reflexes", "tech", "luck"]


class CharacterQuerySet(models.QuerySet):
    """Custom QuerySet for Character with visibility filtering."""

    def visible_to(self, user: Optional["AbstractUser"]) -> "CharacterQuerySet":
        """Filter characters a user may see.

        Public characters, the user's own characters, and characters in
        campaigns the user belongs to.

        Args:
            user: The user to check visibility for

        Returns:
            QuerySet of visible characters; public ones only for anonymous users
        """
        if user is None or not user.is_authenticated:
            return self.filter(is_public=True)
        return self.filter(
            Q(is_public=True) | Q(owner=user) | Q(campaign__memberships__user=user)
        ).distinct()

    def for_campaign(self, campaign: Campaign) -> "CharacterQuerySet":
        if campaign is None:
            raise ValueError("Campaign parameter cannot be None")
        return self.filter(campaign=campaign)

    def owned_by(self, user: Optional["AbstractUser"]) -> "CharacterQuerySet":
        if user is None:
            return self.none()
        return self.filter(owner=user)

    def with_sheet(self) -> "CharacterQuerySet":
        """Prefetch skills and gear links used when rendering a sheet."""
        return self.select_related("campaign").prefetch_related("skills", "gear_links")


CharacterManager = models.Manager.from_queryset(CharacterQuerySet)


class Character(PrefixedIdMixin, NamedModelMixin, TimestampedMixin):
    """A player or non-player character with stats, skills and gear."""

    ID_PREFIX = "c"

    owner: models.ForeignKey = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="characters",
        help_text="User who created the character",
    )
    campaign: models.ForeignKey = models.ForeignKey(
        Campaign,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="characters",
        help_text="Campaign the character plays in",
    )
    is_public: models.BooleanField = models.BooleanField(
        default=False, help_text="Visible to every signed-in user"
    )
    speed: models.IntegerField = models.IntegerField(default=30)
    hit_points: models.IntegerField = models.IntegerField(default=5)

    brawn: models.IntegerField = models.IntegerField(
        default=0, validators=[MinValueValidator(0)]
    )
    charm: models.IntegerField = models.IntegerField(
        default=0, validators=[MinValueValidator(0)]
    )
    intelligence: models.IntegerField = models.IntegerField(
        default=0, validators=[MinValueValidator(0)]
    )
    reflexes: models.IntegerField = models.IntegerField(
        default=0, validators=[MinValueValidator(0)]
    )
    tech: models.IntegerField = models.IntegerField(
        default=0, validators=[MinValueValidator(0)]
    )
    luck: models.IntegerField = models.IntegerField(
        default=0, validators=[MinValueValidator(0)]
    )

    gear: models.ManyToManyField = models.ManyToManyField(
        Gear,
        through="CharacterGear",
        related_name="characters",
        blank=True,
    )

    objects = CharacterManager()

    class Meta:
        db_table = "characters_character"
        ordering = ["created_at", "id"]
        verbose_name = "Character"
        verbose_name_plural = "Characters"
        indexes = [
            models.Index(fields=["is_public"], name="characters_public_idx"),
        ]

    @property
    def stats(self) -> Dict[str, int]:
        return {field: getattr(self, field) for field in STAT_FIELDS}

    def gear_of_kind(self, model) -> List[Gear]:
        """Return attached gear of one kind in the order it was attached."""
        ids = [link.gear_id for link in self.gear_links.all()]
        found = model.objects.in_bulk(ids)
        return [found[gear_id] for gear_id in ids if gear_id in found]

    @property
    def cybernetics(self) -> List[Cybernetic]:
        return self.gear_of_kind(Cybernetic)

    @property
    def weapons(self) -> List[Weapon]:
        return self.gear_of_kind(Weapon)

    @property
    def items(self) -> List[Item]:
        return self.gear_of_kind(Item)

    @property
    def vehicles(self) -> List[Vehicle]:
        return self.gear_of_kind(Vehicle)


class CharacterSkill(models.Model):
    character: models.ForeignKey = models.ForeignKey(
        Character, on_delete=models.CASCADE, related_name="skills"
    )
    name: models.CharField = models.CharField(max_length=100)
    level: models.IntegerField = models.IntegerField(default=0)

    class Meta:
        db_table = "characters_skill"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} {self.level}"


class CharacterGear(models.Model):
    """Ordered link between a character and a catalog entry."""

    character: models.ForeignKey = models.ForeignKey(
        Character, on_delete=models.CASCADE, related_name="gear_links"
    )
    gear: models.ForeignKey = models.ForeignKey(
        Gear, on_delete=models.PROTECT, related_name="character_links"
    )

    class Meta:
        db_table = "characters_gear"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["character", "gear"], name="unique_character_gear"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.character_id} -> {self.gear_id}"
