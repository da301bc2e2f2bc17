"""
Django management command to test the database connection.
"""

import sys

from django.core.management.base import BaseCommand
from django.db import DatabaseError, connections


class Command(BaseCommand):
    help = "Test the database connection to verify configuration"

    def handle(self, *args, **options):
        """Run the database health check."""
        try:
            connection = connections["default"]
            connection.ensure_connection()
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()
        except DatabaseError as e:
            self.stdout.write(self.style.ERROR(f"❌ Database connection failed: {e}"))
            self.stdout.write(self.style.ERROR("\n❌ Health check failed"))
            sys.exit(1)

        self.stdout.write(self.style.SUCCESS("✅ Database connection: OK"))
        self.stdout.write(self.style.SUCCESS("\n✅ All services OK"))
