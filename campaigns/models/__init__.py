from .campaign import (
    ROLE_AUTO,
    ROLE_MEMBER,
    ROLE_OWNER,
    Campaign,
    CampaignInvite,
    CampaignMembership,
    generate_invite_token,
)

__all__ = [
    "Campaign",
    "CampaignMembership",
    "CampaignInvite",
    "generate_invite_token",
    "ROLE_AUTO",
    "ROLE_OWNER",
    "ROLE_MEMBER",
]
