import os
import socket
import sys

from django.apps import AppConfig
from django.conf import settings

_scheduler_socket = None  # global socket handle

# management commands that should never kick off a background sync
NO_SCHEDULER_COMMANDS = {"refresh_emojis", "lookup_emoji", "test", "check", "shell"}


def should_start_scheduler(argv=None):
    argv = sys.argv if argv is None else argv
    program = argv[0] if argv else ""
    command = argv[1] if len(argv) > 1 else ""

    if not settings.SCHEDULER_ENABLED:
        return False
    if "pytest" in program or command in NO_SCHEDULER_COMMANDS:
        return False
    # Avoid duplicate scheduler starts in dev autoreloader subprocesses
    if command == "runserver":
        return os.environ.get("RUN_MAIN") == "true"
    return True


class EmojiCacheConfig(AppConfig):
    name = "emojicache"

    def ready(self):
        global _scheduler_socket

        if not should_start_scheduler():
            return

        try:
            sock = socket.socket()
            sock.bind(("127.0.0.1", 65433))  # Use a high-numbered loopback port
            _scheduler_socket = sock  # Keep socket open to prevent dupes
            print("🕐️ Starting scheduler (acquired socket lock)")
            from emojicache.tasks import start_scheduler

            start_scheduler()
        except OSError:
            print("🚫 Scheduler already running in another process (socket lock)")
