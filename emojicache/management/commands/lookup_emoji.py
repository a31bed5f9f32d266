from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from emojicache.errors import ImageNotFound
from emojicache.lookup import lookup


class Command(BaseCommand):
    help = "Print the local image file served for an item name"  # noqa: A003

    def add_arguments(self, parser):
        parser.add_argument("item_name", type=str)

    def handle(self, *args, **options):
        try:
            path = lookup(options["item_name"], settings.EMOJI_DIR)
        except ImageNotFound as e:
            raise CommandError(str(e)) from e

        self.stdout.write(str(path))
