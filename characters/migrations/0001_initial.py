import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


def _stat():
    return models.IntegerField(
        default=0, validators=[django.core.validators.MinValueValidator(0)]
    )


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("campaigns", "0001_initial"),
        ("gear", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Character",
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
                (
                    "is_public",
                    models.BooleanField(
                        default=False, help_text="Visible to every signed-in user"
                    ),
                ),
                ("speed", models.IntegerField(default=30)),
                ("hit_points", models.IntegerField(default=5)),
                ("brawn", _stat()),
                ("charm", _stat()),
                ("intelligence", _stat()),
                ("reflexes", _stat()),
                ("tech", _stat()),
                ("luck", _stat()),
                (
                    "campaign",
                    models.ForeignKey(
                        blank=True,
                        help_text="Campaign the character plays in",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="characters",
                        to="campaigns.campaign",
                    ),
                ),
                (
                    "owner",
                    models.ForeignKey(
                        blank=True,
                        help_text="User who created the character",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="characters",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Character",
                "verbose_name_plural": "Characters",
                "db_table": "characters_character",
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(fields=["is_public"], name="characters_public_idx")
                ],
            },
        ),
        migrations.CreateModel(
            name="CharacterGear",
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
                    "character",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="gear_links",
                        to="characters.character",
                    ),
                ),
                (
                    "gear",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="character_links",
                        to="gear.gear",
                    ),
                ),
            ],
            options={
                "db_table": "characters_gear",
                "ordering": ["id"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("character", "gear"), name="unique_character_gear"
                    )
                ],
            },
        ),
        migrations.AddField(
            model_name="character",
            name="gear",
            field=models.ManyToManyField(
                blank=True,
                related_name="characters",
                through="characters.CharacterGear",
                to="gear.gear",
            ),
        ),
        migrations.CreateModel(
            name="CharacterSkill",
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
                ("level", models.IntegerField(default=0)),
                (
                    "character",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="skills",
                        to="characters.character",
                    ),
                ),
            ],
            options={
                "db_table": "characters_skill",
                "ordering": ["id"],
            },
        ),
    ]
