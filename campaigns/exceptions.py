"""Campaign and invite errors; ``message`` is safe to show to clients."""

from core.exceptions import DomainError


class CampaignError(DomainError):
    default_message = "Campaign error"


class CampaignNotFoundError(CampaignError):
    default_message = "Campaign not found"


class NotAuthorizedError(CampaignError):
    default_message = "Not authorized"


class InvalidEmailError(CampaignError):
    default_message = "Invalid email"


class InviteError(CampaignError):
    default_message = "Invite error"


class InviteNotFoundError(InviteError):
    default_message = "Invite not found"


class InviteAlreadyUsedError(InviteError):
    default_message = "Invite has already been used"


class InviteExpiredError(InviteError):
    default_message = "Invite has expired"


class InviteEmailMismatchError(InviteError):
    default_message = "Invite is for a different email"
