from django.core.management.base import BaseCommand, CommandError

from emojicache.sync import last_summary, run_sync_cycle


class Command(BaseCommand):
    help = "Fetch the emoji catalog and download any missing images"  # noqa: A003

    def handle(self, *args, **kwargs):
        success = run_sync_cycle()
        if not success:
            raise CommandError("❌ Emoji refresh failed")

        summary = last_summary()
        self.stdout.write(
            self.style.SUCCESS(
                f"✅ Emoji refresh complete: {summary.downloaded} downloaded, "
                f"{summary.failed} failed, {summary.skipped} skipped"
            )
        )
