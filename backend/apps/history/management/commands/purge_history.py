from django.conf import settings
from django.core.management.base import BaseCommand

from apps.history.recorder import purge_expired


class Command(BaseCommand):
    help = "Delete history entries older than STOCKOPS_HISTORY_RETENTION_DAYS."

    def handle(self, *args, **options):
        deleted = purge_expired()
        self.stdout.write(
            self.style.SUCCESS(
                f"Removed {deleted} history entries older than "
                f"{settings.STOCKOPS_HISTORY_RETENTION_DAYS} days."
            )
        )
