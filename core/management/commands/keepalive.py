import logging
import time

import httpx
from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import DatabaseError, connection

from core.probes import ping_database, ping_self

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Periodically ping the database (and SELF_URL when configured) to keep them warm."

    def add_arguments(self, parser):
        parser.add_argument(
            "--interval",
            type=int,
            default=None,
            help="Seconds between probes (defaults to KEEPALIVE_INTERVAL_SECONDS).",
        )
        parser.add_argument("--once", action="store_true", help="Run a single probe and exit.")

    def handle(self, *args, **options):
        interval = options["interval"] or getattr(settings, "KEEPALIVE_INTERVAL_SECONDS", 600)
        self_url = getattr(settings, "SELF_URL", "")

        while True:
            self.probe(self_url)
            if options["once"]:
                return
            time.sleep(interval)

    def probe(self, self_url):
        try:
            ping_database()
            logger.info("Database keep-alive OK")
        except DatabaseError as exc:
            logger.error("Database keep-alive failed: %s", exc)
            # Force a fresh connection on the next probe.
            connection.close()

        if not self_url:
            return
        try:
            ping_self(self_url)
            logger.info("Self-ping to %s succeeded", self_url)
        except httpx.HTTPError as exc:
            logger.error("Self-ping to %s failed: %s", self_url, exc)
