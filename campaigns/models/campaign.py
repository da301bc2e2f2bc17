import secrets
from datetime import timedelta
from typing import Any, Optional

from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models, transaction
from django.db.models import QuerySet
from django.utils import timezone

from core.models import NamedModelMixin, PrefixedIdMixin, TimestampedMixin
from users.models import normalize_email

ROLE_OWNER = "OWNER"
ROLE_MEMBER = "MEMBER"
ROLE_AUTO = "AUTO"


def generate_invite_token() -> str:
    """Return a URL-safe token (24 random bytes, base64url)."""
    return secrets.token_urlsafe(24)


class CampaignManager(models.Manager):
    """Custom manager for Campaign model with membership filtering."""

    def for_member(self, user: Optional[AbstractUser]) -> "QuerySet[Campaign]":
        """Return campaigns the given user belongs to, in any role.

        Args:
            user: The user to filter campaigns for

        Returns:
            QuerySet of campaigns; empty for anonymous users
        """
        if not user or not user.is_authenticated:
            return self.none()
        return self.filter(memberships__user=user).distinct()

    def owned_by(self, user: Optional[AbstractUser]) -> "QuerySet[Campaign]":
        """Return campaigns where the given user holds the OWNER role."""
        if not user or not user.is_authenticated:
            return self.none()
        return self.filter(
            memberships__user=user, memberships__role=ROLE_OWNER
        ).distinct()


class Campaign(PrefixedIdMixin, NamedModelMixin, TimestampedMixin):
    """A tabletop campaign that users join through memberships."""

    ID_PREFIX = "camp"

    objects = CampaignManager()

    class Meta:
        db_table = "campaigns_campaign"
        ordering = ["name"]
        verbose_name = "Campaign"
        verbose_name_plural = "Campaigns"

    def get_user_role(self, user: Optional[AbstractUser]) -> Optional[str]:
        """Get user's role in this campaign.

        Returns:
            'OWNER', 'MEMBER' or None if the user is not a member
        """
        if not user or not user.is_authenticated:
            return None

        membership = self.memberships.filter(user=user).first()
        return membership.role if membership else None

    def is_owner(self, user: Optional[AbstractUser]) -> bool:
        return self.get_user_role(user) == ROLE_OWNER

    def is_member(self, user: Optional[AbstractUser]) -> bool:
        return self.get_user_role(user) is not None

    def has_owner(self) -> bool:
        return self.memberships.filter(role=ROLE_OWNER).exists()

    def add_member(self, user: AbstractUser, role: str = ROLE_AUTO) -> "CampaignMembership":
        """Add ``user`` to the campaign, or upgrade an existing membership.

        ``AUTO`` resolves to OWNER while the campaign has no owner and to
        MEMBER afterwards. An existing membership is only ever upgraded to
        OWNER; it is never downgraded.

        Args:
            user: The user joining the campaign
            role: 'AUTO', 'OWNER' or 'MEMBER'

        Returns:
            CampaignMembership: The user's membership after the change
        """
        if role not in (ROLE_AUTO, ROLE_OWNER, ROLE_MEMBER):
            raise ValueError(f"Unknown campaign role: {role}")

        with transaction.atomic():
            # Serialize concurrent joins on this campaign.
            Campaign.objects.select_for_update().filter(pk=self.pk).first()

            if role == ROLE_AUTO:
                role = ROLE_MEMBER if self.has_owner() else ROLE_OWNER

            membership, created = CampaignMembership.objects.get_or_create(
                campaign=self, user=user, defaults={"role": role}
            )
            if not created and role == ROLE_OWNER and membership.role != ROLE_OWNER:
                membership.role = ROLE_OWNER
                membership.save(update_fields=["role"])
        return membership


class CampaignMembership(models.Model):
    """Membership relationship between users and campaigns."""

    ROLE_CHOICES = [
        (ROLE_OWNER, "Owner"),
        (ROLE_MEMBER, "Member"),
    ]

    campaign = models.ForeignKey(  # type: ignore[var-annotated]
        Campaign,
        on_delete=models.CASCADE,
        related_name="memberships",
        help_text="The campaign",
    )
    user = models.ForeignKey(  # type: ignore[var-annotated]
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="campaign_memberships",
        help_text="The user",
    )
    role = models.CharField(  # type: ignore[var-annotated]
        max_length=10,
        choices=ROLE_CHOICES,
        default=ROLE_MEMBER,
        help_text="The user's role in the campaign",
    )
    joined_at = models.DateTimeField(auto_now_add=True)  # type: ignore[var-annotated]

    class Meta:
        db_table = "campaigns_membership"
        constraints = [
            models.UniqueConstraint(
                fields=["campaign", "user"], name="unique_campaign_user_membership"
            ),
        ]
        ordering = ["campaign", "role", "user__email"]
        verbose_name = "Campaign Membership"
        verbose_name_plural = "Campaign Memberships"

    def __str__(self) -> str:
        """Return a string representation of the membership."""
        return f"{self.user.email} - {self.campaign.name} ({self.role})"


class CampaignInviteManager(models.Manager):
    """Custom manager for CampaignInvite model."""

    def create_for(
        self, campaign: Campaign, email: str, ttl: Optional[timedelta] = None
    ) -> "CampaignInvite":
        """Create an invite for ``email`` that expires after ``ttl``."""
        if ttl is None:
            ttl = timedelta(days=getattr(settings, "CAMPAIGN_INVITE_TTL_DAYS", 7))
        return self.create(
            campaign=campaign,
            email=normalize_email(email),
            expires_at=timezone.now() + ttl,
        )

    def cleanup_expired(self, grace: timedelta = timedelta(days=30)) -> int:
        """Delete unaccepted invites that expired more than ``grace`` ago.

        Returns:
            int: Number of invites deleted
        """
        threshold = timezone.now() - grace
        deleted_count, _ = self.filter(
            accepted_at__isnull=True, expires_at__lt=threshold
        ).delete()
        return deleted_count


class CampaignInvite(PrefixedIdMixin):
    """Single-use, email-bound invitation to join a campaign."""

    ID_PREFIX = "inv"

    token = models.CharField(  # type: ignore[var-annotated]
        max_length=64,
        unique=True,
        default=generate_invite_token,
        editable=False,
        help_text="URL-safe secret sent to the invitee",
    )
    email = models.EmailField(  # type: ignore[var-annotated]
        help_text="Canonical email the invite is bound to"
    )
    campaign = models.ForeignKey(  # type: ignore[var-annotated]
        Campaign,
        on_delete=models.CASCADE,
        related_name="invites",
        help_text="The campaign being invited to",
    )
    expires_at = models.DateTimeField(  # type: ignore[var-annotated]
        help_text="When this invite expires"
    )
    accepted_at = models.DateTimeField(  # type: ignore[var-annotated]
        null=True, blank=True, help_text="When the invite was accepted"
    )
    accepted_by = models.ForeignKey(  # type: ignore[var-annotated]
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="accepted_campaign_invites",
        help_text="The user who accepted the invite",
    )
    created_at = models.DateTimeField(auto_now_add=True)  # type: ignore[var-annotated]

    objects = CampaignInviteManager()

    class Meta:
        db_table = "campaigns_invite"
        ordering = ["-created_at"]
        verbose_name = "Campaign Invite"
        verbose_name_plural = "Campaign Invites"
        indexes = [
            models.Index(fields=["campaign", "email"], name="campaigns_invite_email_idx"),
        ]

    def __str__(self) -> str:
        """Return a string representation of the invite."""
        return f"{self.email} invited to {self.campaign.name}"

    def save(self, *args: Any, **kwargs: Any) -> None:
        self.email = normalize_email(self.email)
        super().save(*args, **kwargs)

    @property
    def is_accepted(self) -> bool:
        return self.accepted_at is not None

    def is_expired(self, now=None) -> bool:
        """An invite is still valid at exactly ``expires_at``."""
        return (now or timezone.now()) > self.expires_at

    def matches_email(self, email: str) -> bool:
        return normalize_email(email) == normalize_email(self.email)
