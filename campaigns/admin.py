from django.contrib import admin
from django.db.models import Count, Q
from django.utils.html import format_html

from .models import ROLE_MEMBER, ROLE_OWNER, Campaign, CampaignInvite, CampaignMembership


class CampaignMembershipInline(admin.TabularInline):
    """Inline admin for campaign memberships."""

    model = CampaignMembership
    extra = 0
    fields = ["user", "role", "joined_at"]
    readonly_fields = ["joined_at"]
    raw_id_fields = ["user"]

    def get_queryset(self, request):
        """Optimize inline queryset."""
        return super().get_queryset(request).select_related("user")


class CampaignInviteInline(admin.TabularInline):
    model = CampaignInvite
    extra = 0
    fields = ["email", "expires_at", "accepted_at", "accepted_by"]
    readonly_fields = ["accepted_at", "accepted_by"]


@admin.register(Campaign)
class CampaignAdmin(admin.ModelAdmin):
    """Admin configuration for Campaign model."""

    list_display = ["name", "id", "created_at", "member_count_display"]
    search_fields = ["id", "name", "memberships__user__email"]
    readonly_fields = ["created_at", "updated_at"]
    date_hierarchy = "created_at"
    inlines = [CampaignMembershipInline, CampaignInviteInline]

    def get_queryset(self, request):
        """Annotate member counts by role."""
        return (
            super()
            .get_queryset(request)
            .annotate(
                owner_count=Count("memberships", filter=Q(memberships__role=ROLE_OWNER)),
                member_count=Count(
                    "memberships", filter=Q(memberships__role=ROLE_MEMBER)
                ),
            )
        )

    def member_count_display(self, obj):
        """Display member count breakdown by role."""
        return format_html(
            "<strong>Owners:</strong> {} | <strong>Members:</strong> {}",
            getattr(obj, "owner_count", 0),
            getattr(obj, "member_count", 0),
        )

    member_count_display.short_description = "Member Count"
    member_count_display.admin_order_field = "member_count"


@admin.register(CampaignMembership)
class CampaignMembershipAdmin(admin.ModelAdmin):
    """Admin configuration for CampaignMembership model."""

    list_display = ["user", "campaign", "role", "joined_at"]
    list_filter = ["role", "joined_at"]
    search_fields = ["user__email", "campaign__name"]
    readonly_fields = ["joined_at"]
    date_hierarchy = "joined_at"
    raw_id_fields = ["user", "campaign"]

    def get_queryset(self, request):
        """Optimize queryset with select_related."""
        return super().get_queryset(request).select_related("user", "campaign")


@admin.register(CampaignInvite)
class CampaignInviteAdmin(admin.ModelAdmin):
    list_display = ["email", "campaign", "expires_at", "accepted_at"]
    list_filter = ["accepted_at", "expires_at"]
    search_fields = ["email", "campaign__name"]
    readonly_fields = ["token", "created_at", "accepted_at", "accepted_by"]
    raw_id_fields = ["campaign", "accepted_by"]
