"""Admin interface for the equipment catalog."""

from django.contrib import admin

from .models import Cybernetic, Item, SkillBonus, StatBonus, Vehicle, Weapon


class GearAdmin(admin.ModelAdmin):
    """Shared configuration for every catalog kind."""

    list_display = ["name", "id", "price", "short_description"]
    search_fields = ["id", "name", "short_description"]
    ordering = ["name"]
    readonly_fields = ["created_at", "updated_at"]


class StatBonusInline(admin.TabularInline):
    model = StatBonus
    extra = 0


class SkillBonusInline(admin.TabularInline):
    model = SkillBonus
    extra = 0


@admin.register(Cybernetic)
class CyberneticAdmin(GearAdmin):
    list_display = GearAdmin.list_display + ["battery_life"]
    inlines = [StatBonusInline, SkillBonusInline]


@admin.register(Weapon)
class WeaponAdmin(GearAdmin):
    list_display = GearAdmin.list_display + ["weapon_type", "condition"]
    list_filter = ["weapon_type"]


@admin.register(Vehicle)
class VehicleAdmin(GearAdmin):
    list_display = GearAdmin.list_display + ["speed", "armor"]


@admin.register(Item)
class ItemAdmin(GearAdmin):
    list_display = GearAdmin.list_display + ["item_type", "weight"]
    list_filter = ["item_type"]
