"""
Django management command to delete stale campaign invites.
"""

from datetime import timedelta

from django.core.management.base import BaseCommand

from campaigns.models import CampaignInvite


class Command(BaseCommand):
    help = "Delete unaccepted campaign invites that expired long ago"

    def add_arguments(self, parser):
        parser.add_argument(
            "--grace-days",
            type=int,
            default=30,
            help="Keep invites that expired fewer than this many days ago",
        )

    def handle(self, *args, **options):
        grace = timedelta(days=options["grace_days"])
        deleted = CampaignInvite.objects.cleanup_expired(grace=grace)
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} expired invite(s)"))
