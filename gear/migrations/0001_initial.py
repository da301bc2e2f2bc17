import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


def _parent_link():
    return models.OneToOneField(
        auto_created=True,
        on_delete=django.db.models.deletion.CASCADE,
        parent_link=True,
        primary_key=True,
        serialize=False,
        to="gear.gear",
    )


def _non_negative(**kwargs):
    return models.IntegerField(
        validators=[django.core.validators.MinValueValidator(0)], **kwargs
    )


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("contenttypes", "0002_remove_content_type_name"),
    ]

    operations = [
        migrations.CreateModel(
            name="Gear",
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
                ("price", _non_negative(default=0, help_text="Price in eddies")),
                (
                    "short_description",
                    models.CharField(
                        blank=True, help_text="One-line summary", max_length=255
                    ),
                ),
                (
                    "long_description",
                    models.TextField(blank=True, help_text="Full description"),
                ),
                (
                    "polymorphic_ctype",
                    models.ForeignKey(
                        editable=False,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="polymorphic_%(app_label)s.%(class)s_set+",
                        to="contenttypes.contenttype",
                    ),
                ),
            ],
            options={
                "verbose_name": "Gear",
                "verbose_name_plural": "Gear",
                "db_table": "gear_gear",
                "ordering": ["name", "id"],
            },
        ),
        migrations.CreateModel(
            name="Cybernetic",
            fields=[
                ("gear_ptr", _parent_link()),
                (
                    "battery_life",
                    _non_negative(default=0, help_text="Battery life in hours"),
                ),
            ],
            options={
                "verbose_name": "Cybernetic",
                "verbose_name_plural": "Cybernetics",
                "db_table": "gear_cybernetic",
            },
            bases=("gear.gear",),
        ),
        migrations.CreateModel(
            name="Weapon",
            fields=[
                ("gear_ptr", _parent_link()),
                ("weight", _non_negative(default=0)),
                ("max_range", _non_negative(default=0)),
                ("max_ammo_count", _non_negative(default=0)),
                (
                    "weapon_type",
                    models.CharField(
                        choices=[("MELEE", "Melee"), ("RANGED", "Ranged")],
                        default="MELEE",
                        max_length=10,
                    ),
                ),
                (
                    "condition",
                    _non_negative(default=100, help_text="Condition in percent"),
                ),
            ],
            options={
                "verbose_name": "Weapon",
                "verbose_name_plural": "Weapons",
                "db_table": "gear_weapon",
            },
            bases=("gear.gear",),
        ),
        migrations.CreateModel(
            name="Vehicle",
            fields=[
                ("gear_ptr", _parent_link()),
                ("speed", _non_negative(default=0)),
                ("armor", _non_negative(default=0)),
            ],
            options={
                "verbose_name": "Vehicle",
                "verbose_name_plural": "Vehicles",
                "db_table": "gear_vehicle",
            },
            bases=("gear.gear",),
        ),
        migrations.CreateModel(
            name="Item",
            fields=[
                ("gear_ptr", _parent_link()),
                ("weight", _non_negative(default=0)),
                (
                    "item_type",
                    models.CharField(
                        choices=[
                            ("GENERAL", "General"),
                            ("CYBERDECK", "Cyberdeck"),
                            ("CONSUMABLE", "Consumable"),
                            ("AMMO", "Ammo"),
                            ("OTHER", "Other"),
                        ],
                        default="GENERAL",
                        max_length=20,
                    ),
                ),
            ],
            options={
                "verbose_name": "Item",
                "verbose_name_plural": "Items",
                "db_table": "gear_item",
            },
            bases=("gear.gear",),
        ),
        migrations.CreateModel(
            name="StatBonus",
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
                    "stat",
                    models.CharField(
                        choices=[
                            ("BRAWN", "Brawn"),
                            ("CHARM", "Charm"),
                            ("INTELLIGENCE", "Intelligence"),
                            ("REFLEXES", "Reflexes"),
                            ("TECH", "Tech"),
                            ("LUCK", "Luck"),
                        ],
                        max_length=20,
                    ),
                ),
                ("amount", models.IntegerField()),
                (
                    "cybernetic",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="stat_bonuses",
                        to="gear.cybernetic",
                    ),
                ),
            ],
            options={
                "db_table": "gear_stat_bonus",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="SkillBonus",
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
                ("name", models.CharField(max_length=100)),
                ("amount", models.IntegerField()),
                (
                    "cybernetic",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="skill_bonuses",
                        to="gear.cybernetic",
                    ),
                ),
            ],
            options={
                "db_table": "gear_skill_bonus",
                "ordering": ["id"],
            },
        ),
    ]
