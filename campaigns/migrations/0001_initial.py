import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import campaigns.models.campaign


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Campaign",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when the object was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        db_index=True,
                        help_text="Timestamp when the object was last modified",
                    ),
                ),
                (
                    "name",
                    models.CharField(help_text="Name of the object", max_length=100),
                ),
                (
                    "id",
                    models.CharField(
                        editable=False, max_length=64, primary_key=True, serialize=False
                    ),
                ),
            ],
            options={
                "verbose_name": "Campaign",
                "verbose_name_plural": "Campaigns",
                "db_table": "campaigns_campaign",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="CampaignMembership",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "role",
                    models.CharField(
                        choices=[("OWNER", "Owner"), ("MEMBER", "Member")],
                        default="MEMBER",
                        help_text="The user's role in the campaign",
                        max_length=10,
                    ),
                ),
                ("joined_at", models.DateTimeField(auto_now_add=True)),
                (
                    "campaign",
                    models.ForeignKey(
                        help_text="The campaign",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="memberships",
                        to="campaigns.campaign",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        help_text="The user",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="campaign_memberships",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Campaign Membership",
                "verbose_name_plural": "Campaign Memberships",
                "db_table": "campaigns_membership",
                "ordering": ["campaign", "role", "user__email"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("campaign", "user"),
                        name="unique_campaign_user_membership",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="CampaignInvite",
            fields=[
                (
                    "id",
                    models.CharField(
                        editable=False, max_length=64, primary_key=True, serialize=False
                    ),
                ),
                (
                    "token",
                    models.CharField(
                        default=campaigns.models.campaign.generate_invite_token,
                        editable=False,
                        help_text="URL-safe secret sent to the invitee",
                        max_length=64,
                        unique=True,
                    ),
                ),
                (
                    "email",
                    models.EmailField(
                        help_text="Canonical email the invite is bound to",
                        max_length=254,
                    ),
                ),
                (
                    "expires_at",
                    models.DateTimeField(help_text="When this invite expires"),
                ),
                (
                    "accepted_at",
                    models.DateTimeField(
                        blank=True, help_text="When the invite was accepted", null=True
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "accepted_by",
                    models.ForeignKey(
                        blank=True,
                        help_text="The user who accepted the invite",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="accepted_campaign_invites",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "campaign",
                    models.ForeignKey(
                        help_text="The campaign being invited to",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="invites",
                        to="campaigns.campaign",
                    ),
                ),
            ],
            options={
                "verbose_name": "Campaign Invite",
                "verbose_name_plural": "Campaign Invites",
                "db_table": "campaigns_invite",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["campaign", "email"], name="campaigns_invite_email_idx"
                    )
                ],
            },
        ),
    ]
