from django.contrib import admin

from .models import Character, CharacterGear, CharacterSkill


class CharacterSkillInline(admin.TabularInline):
    model = CharacterSkill
    extra = 0


class CharacterGearInline(admin.TabularInline):
    model = CharacterGear
    extra = 0
    raw_id_fields = ["gear"]


@admin.register(Character)
class CharacterAdmin(admin.ModelAdmin):
    """Admin interface for Character model."""

    list_display = ["name", "id", "campaign", "owner", "is_public", "created_at"]
    list_filter = ["is_public", "campaign", "created_at"]
    search_fields = ["id", "name", "campaign__name", "owner__email"]
    readonly_fields = ["created_at", "updated_at"]
    raw_id_fields = ["owner", "campaign"]
    inlines = [CharacterSkillInline, CharacterGearInline]
