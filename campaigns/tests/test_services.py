"""Tests for MembershipService and InvitationService."""

from datetime import datetime, timedelta, timezone as dt_timezone
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.core import mail
from django.test import TestCase, override_settings
from django.utils import timezone

from campaigns.exceptions import (
    CampaignNotFoundError,
    InvalidEmailError,
    InviteAlreadyUsedError,
    InviteEmailMismatchError,
    InviteExpiredError,
    InviteNotFoundError,
    NotAuthorizedError,
)
from campaigns.models import Campaign, CampaignInvite
from campaigns.services import (
    InvitationService,
    MembershipService,
    format_timestamp,
    get_campaign,
)

User = get_user_model()


class FormatTimestampTest(TestCase):
    def test_millisecond_utc(self):
        moment = datetime(2069, 3, 4, 5, 6, 7, 890123, tzinfo=dt_timezone.utc)
        self.assertEqual(format_timestamp(moment), "2069-03-04T05:06:07.890Z")

    def test_converts_to_utc(self):
        offset = dt_timezone(timedelta(hours=-6))
        moment = datetime(2069, 3, 4, 0, 0, 0, tzinfo=offset)
        self.assertEqual(format_timestamp(moment), "2069-03-04T06:00:00.000Z")


class MembershipServiceTest(TestCase):
    def setUp(self):
        self.campaign = Campaign.objects.create(id="camp_1", name="Neon Rain")
        self.owner = User.objects.create_account(
            email="owner@test.com", password="testpass123"
        )
        self.member = User.objects.create_account(
            email="member@test.com", password="testpass123"
        )

    def test_get_campaign(self):
        self.assertEqual(get_campaign("camp_1"), self.campaign)
        with self.assertRaises(CampaignNotFoundError) as ctx:
            get_campaign("camp_missing")
        self.assertEqual(ctx.exception.message, "Campaign not found")

    def test_join_and_require_owner(self):
        service = MembershipService(self.campaign)
        service.join(self.owner)
        service.join(self.member)

        service.require_owner(self.owner)
        with self.assertRaises(NotAuthorizedError):
            service.require_owner(self.member)


@override_settings(APP_BASE_URL="https://cyberdallas.example/")
class CreateInviteTest(TestCase):
    def setUp(self):
        self.campaign = Campaign.objects.create(id="camp_1", name="Neon Rain")
        self.owner = User.objects.create_account(
            email="owner@test.com", password="testpass123"
        )
        self.member = User.objects.create_account(
            email="member@test.com", password="testpass123"
        )
        self.campaign.add_member(self.owner)
        self.campaign.add_member(self.member)
        self.service = InvitationService()

    def test_owner_creates_invite_and_email_is_sent(self):
        invite = self.service.create_invite("camp_1", self.owner, " Friend@Example.com ")

        self.assertEqual(invite.email, "friend@example.com")
        self.assertEqual(invite.campaign, self.campaign)
        self.assertEqual(len(mail.outbox), 1)

        message = mail.outbox[0]
        self.assertEqual(message.to, ["friend@example.com"])
        self.assertEqual(message.subject, "You've been invited to join Neon Rain")
        self.assertIn(
            f"https://cyberdallas.example/invite?token={invite.token}", message.body
        )
        self.assertIn(format_timestamp(invite.expires_at), message.body)

    def test_invalid_email(self):
        with self.assertRaises(InvalidEmailError) as ctx:
            self.service.create_invite("camp_1", self.owner, "not-an-email")
        self.assertEqual(ctx.exception.message, "Invalid email")
        self.assertFalse(CampaignInvite.objects.exists())

    def test_non_owner_is_not_authorized(self):
        with self.assertRaises(NotAuthorizedError) as ctx:
            self.service.create_invite("camp_1", self.member, "friend@example.com")
        self.assertEqual(ctx.exception.message, "Not authorized")
        self.assertEqual(len(mail.outbox), 0)

    def test_missing_campaign_is_not_authorized(self):
        with self.assertRaises(NotAuthorizedError):
            self.service.create_invite("camp_404", self.owner, "friend@example.com")

    def test_invite_url_encodes_token(self):
        self.assertEqual(
            self.service.build_invite_url("a+b/c"),
            "https://cyberdallas.example/invite?token=a%2Bb%2Fc",
        )

    @override_settings(DISABLE_EMAIL=True)
    def test_disabled_email_still_creates_invite(self):
        self.service.create_invite("camp_1", self.owner, "friend@example.com")

        self.assertEqual(CampaignInvite.objects.count(), 1)
        self.assertEqual(len(mail.outbox), 0)

    def test_send_failure_propagates(self):
        with patch(
            "campaigns.services.campaign_services.send_campaign_invite_email",
            side_effect=ConnectionError("smtp down"),
        ):
            with self.assertRaises(ConnectionError):
                self.service.create_invite("camp_1", self.owner, "friend@example.com")


class AcceptInviteTest(TestCase):
    def setUp(self):
        self.campaign = Campaign.objects.create(id="camp_1", name="Neon Rain")
        self.owner = User.objects.create_account(
            email="owner@test.com", password="testpass123"
        )
        self.invitee = User.objects.create_account(
            email="friend@example.com", password="testpass123"
        )
        self.campaign.add_member(self.owner)
        self.invite = CampaignInvite.objects.create_for(
            self.campaign, "FRIEND@example.com", ttl=timedelta(days=7)
        )
        self.service = InvitationService()

    def test_accept_adds_member_and_stamps_invite(self):
        campaign = self.service.accept_invite(self.invite.token, self.invitee)

        self.assertEqual(campaign, self.campaign)
        self.assertEqual(self.campaign.get_user_role(self.invitee), "MEMBER")
        self.invite.refresh_from_db()
        self.assertIsNotNone(self.invite.accepted_at)
        self.assertEqual(self.invite.accepted_by, self.invitee)

    def test_unknown_token(self):
        with self.assertRaises(InviteNotFoundError) as ctx:
            self.service.accept_invite("nope", self.invitee)
        self.assertEqual(ctx.exception.message, "Invite not found")

    def test_single_use(self):
        self.service.accept_invite(self.invite.token, self.invitee)

        with self.assertRaises(InviteAlreadyUsedError) as ctx:
            self.service.accept_invite(self.invite.token, self.invitee)
        self.assertEqual(ctx.exception.message, "Invite has already been used")

    def test_expired(self):
        later = self.invite.expires_at + timedelta(seconds=1)

        with self.assertRaises(InviteExpiredError) as ctx:
            self.service.accept_invite(self.invite.token, self.invitee, now=later)
        self.assertEqual(ctx.exception.message, "Invite has expired")
        self.assertFalse(self.campaign.is_member(self.invitee))

    def test_valid_at_exact_expiry(self):
        self.service.accept_invite(
            self.invite.token, self.invitee, now=self.invite.expires_at
        )
        self.assertTrue(self.campaign.is_member(self.invitee))

    def test_email_mismatch(self):
        stranger = User.objects.create_account(
            email="stranger@example.com", password="testpass123"
        )

        with self.assertRaises(InviteEmailMismatchError) as ctx:
            self.service.accept_invite(self.invite.token, stranger)
        self.assertEqual(ctx.exception.message, "Invite is for a different email")
        self.invite.refresh_from_db()
        self.assertIsNone(self.invite.accepted_at)

    def test_used_check_precedes_expiry_check(self):
        self.service.accept_invite(self.invite.token, self.invitee)
        later = self.invite.expires_at + timedelta(days=1)

        with self.assertRaises(InviteAlreadyUsedError):
            self.service.accept_invite(self.invite.token, self.invitee, now=later)

    def test_existing_owner_keeps_role(self):
        invite = CampaignInvite.objects.create_for(self.campaign, "owner@test.com")

        self.service.accept_invite(invite.token, self.owner, now=timezone.now())

        self.assertEqual(self.campaign.get_user_role(self.owner), "OWNER")
