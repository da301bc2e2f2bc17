"""Campaign services for business logic."""

from .campaign_services import (
    InvitationService,
    MembershipService,
    format_timestamp,
    get_campaign,
)

__all__ = [
    "InvitationService",
    "MembershipService",
    "format_timestamp",
    "get_campaign",
]
