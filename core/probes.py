import logging

import httpx
from django.db import connection

logger = logging.getLogger(__name__)


def ping_database():
    with connection.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()


def ping_self(base_url, timeout=10.0):
    response = httpx.get(f"{base_url.rstrip('/')}/", timeout=timeout)
    response.raise_for_status()
    return response.status_code
