"""Campaign resolvers: membership lists, joining and invites."""

from ariadne import MutationType, ObjectType, QueryType

from api.errors import graphql_errors, require_user
from campaigns.models import Campaign
from campaigns.services import (
    InvitationService,
    MembershipService,
    format_timestamp,
    get_campaign,
)
from characters.models import Character

query = QueryType()
mutation = MutationType()
campaign_type = ObjectType("Campaign")


@query.field("campaigns")
def resolve_campaigns(_, info):
    user = require_user(info)
    return list(Campaign.objects.for_member(user))


@query.field("ownerCampaigns")
def resolve_owner_campaigns(_, info):
    user = require_user(info)
    return list(Campaign.objects.owned_by(user))


@mutation.field("joinCampaign")
@graphql_errors
def resolve_join_campaign(_, info, campaign_id):
    user = require_user(info)
    campaign = get_campaign(campaign_id)
    MembershipService(campaign).join(user)
    return campaign


@mutation.field("createCampaignInvite")
@graphql_errors
def resolve_create_campaign_invite(_, info, campaign_id, email):
    user = require_user(info)
    invite = InvitationService().create_invite(campaign_id, user, email)
    return {"token": invite.token, "expires_at": format_timestamp(invite.expires_at)}


@mutation.field("acceptCampaignInvite")
@graphql_errors
def resolve_accept_campaign_invite(_, info, token):
    user = require_user(info)
    return InvitationService().accept_invite(token, user)


@campaign_type.field("characters")
def resolve_campaign_characters(campaign, info):
    user = require_user(info)
    return list(
        Character.objects.visible_to(user).filter(campaign=campaign).with_sheet()
    )


campaign_bindables = [query, mutation, campaign_type]
