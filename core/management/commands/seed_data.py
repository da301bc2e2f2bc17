"""
Django management command to load seed campaigns, catalog and characters.
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError

from core.seed_data import load_seed_data, seed_counts

LABELS = {
    "campaigns": "🎲 Campaigns",
    "cybernetics": "🦾 Cybernetics",
    "weapons": "🔫 Weapons",
    "vehicles": "🏍️ Vehicles",
    "items": "💾 Items",
    "characters": "🎭 Characters",
}


class Command(BaseCommand):
    help = "Create or refresh the seed campaigns, gear catalog and characters."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would be loaded without writing anything",
        )

    def handle(self, *args, **options):
        """Load seed data."""
        if options["dry_run"]:
            self.stdout.write(self.style.WARNING("DRY RUN: Would load seed data:"))
            self.write_counts(seed_counts())
            self.stdout.write(self.style.SUCCESS("✅ Dry run completed!"))
            return

        if options["verbosity"] >= 1:
            self.stdout.write("Loading seed data...")

        try:
            counts = load_seed_data()
        except DatabaseError as e:
            raise CommandError(f"Failed to load seed data: {e}")

        self.stdout.write(self.style.SUCCESS("✅ Seed data loaded successfully!"))
        self.write_counts(counts)

    def write_counts(self, counts):
        for key, label in LABELS.items():
            self.stdout.write(f"  {label}: {counts[key]}")
