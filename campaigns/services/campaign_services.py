"""
Service layer for campaign business logic.

Membership changes and the invite lifecycle live here so resolvers only
translate arguments and errors.
"""

import logging
from datetime import datetime, timedelta, timezone as dt_timezone
from typing import Optional
from urllib.parse import quote

from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import transaction
from django.utils import timezone

from users.models import normalize_email
from users.validators import is_valid_email

from ..emails import send_campaign_invite_email
from ..exceptions import (
    CampaignNotFoundError,
    InvalidEmailError,
    InviteAlreadyUsedError,
    InviteEmailMismatchError,
    InviteExpiredError,
    InviteNotFoundError,
    NotAuthorizedError,
)
from ..models import (
    ROLE_AUTO,
    ROLE_MEMBER,
    Campaign,
    CampaignInvite,
    CampaignMembership,
)

logger = logging.getLogger(__name__)


def format_timestamp(moment: datetime) -> str:
    """Format as ISO-8601 UTC with millisecond precision, e.g. ``...T12:00:00.000Z``."""
    moment = moment.astimezone(dt_timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def get_campaign(campaign_id) -> Campaign:
    """Return the campaign or raise CampaignNotFoundError."""
    campaign = Campaign.objects.filter(pk=str(campaign_id)).first()
    if campaign is None:
        raise CampaignNotFoundError()
    return campaign


class MembershipService:
    """Service for handling campaign membership operations."""

    def __init__(self, campaign: Campaign):
        """Initialize service for a specific campaign."""
        self.campaign = campaign

    def join(self, user: AbstractUser, role: str = ROLE_AUTO) -> CampaignMembership:
        """Add ``user`` to the campaign; the first joiner becomes its owner."""
        membership = self.campaign.add_member(user, role=role)
        logger.info(
            f"User {user.id} joined campaign {self.campaign.id} as {membership.role}"
        )
        return membership

    def require_owner(self, user: AbstractUser) -> None:
        """Raise NotAuthorizedError unless ``user`` owns the campaign."""
        if not self.campaign.is_owner(user):
            raise NotAuthorizedError()


class InvitationService:
    """Service for creating and accepting campaign invites."""

    def __init__(self):
        self.base_url = getattr(settings, "APP_BASE_URL", "http://localhost:3000")
        self.ttl = timedelta(days=getattr(settings, "CAMPAIGN_INVITE_TTL_DAYS", 7))

    def build_invite_url(self, token: str) -> str:
        return f"{self.base_url.rstrip('/')}/invite?token={quote(token, safe='')}"

    def create_invite(
        self,
        campaign_id,
        inviter: AbstractUser,
        email: str,
        ttl: Optional[timedelta] = None,
    ) -> CampaignInvite:
        """
        Create an invite for ``email`` and send it.

        Args:
            campaign_id: Campaign to invite into
            inviter: Must own the campaign
            email: Invitee address; stored canonical
            ttl: Lifetime of the invite, defaults to CAMPAIGN_INVITE_TTL_DAYS

        Returns:
            CampaignInvite: The stored invite

        Raises:
            InvalidEmailError: If the email is malformed
            NotAuthorizedError: If the inviter is not the owner, or the
                campaign does not exist
        """
        email = normalize_email(email)
        if not is_valid_email(email):
            raise InvalidEmailError()

        campaign = Campaign.objects.filter(pk=str(campaign_id)).first()
        if campaign is None or not campaign.is_owner(inviter):
            raise NotAuthorizedError()

        invite = CampaignInvite.objects.create_for(campaign, email, ttl=ttl or self.ttl)
        logger.info(
            f"User {inviter.id} created invite {invite.id} for campaign {campaign.id}"
        )

        send_campaign_invite_email(
            to=email,
            campaign_name=campaign.name,
            invite_url=self.build_invite_url(invite.token),
            expires_at=format_timestamp(invite.expires_at),
        )
        return invite

    def accept_invite(
        self, token: str, user: AbstractUser, now: Optional[datetime] = None
    ) -> Campaign:
        """
        Accept an invite on behalf of ``user``.

        Checks run in order: the invite exists, it has not been used, it has
        not expired, and it is bound to the user's email.

        Returns:
            Campaign: The campaign the user now belongs to
        """
        now = now or timezone.now()

        with transaction.atomic():
            invite = (
                CampaignInvite.objects.select_for_update()
                .select_related("campaign")
                .filter(token=str(token))
                .first()
            )
            if invite is None:
                raise InviteNotFoundError()
            if invite.is_accepted:
                raise InviteAlreadyUsedError()
            if invite.is_expired(now):
                raise InviteExpiredError()
            if not invite.matches_email(user.email):
                raise InviteEmailMismatchError()

            CampaignMembership.objects.get_or_create(
                campaign=invite.campaign, user=user, defaults={"role": ROLE_MEMBER}
            )
            invite.accepted_at = now
            invite.accepted_by = user
            invite.save(update_fields=["accepted_at", "accepted_by"])

        logger.info(f"User {user.id} accepted invite {invite.id}")
        return invite.campaign
