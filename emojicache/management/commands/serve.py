from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Serve emoji images on PORT (default 8006)"  # noqa: A003

    def handle(self, *args, **options):
        self.stdout.write(f"🚀 Server running on port {settings.PORT}")
        call_command("runserver", f"0.0.0.0:{settings.PORT}", use_reloader=False)
