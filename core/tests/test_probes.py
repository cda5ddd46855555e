from unittest.mock import patch

import httpx
import pytest
from django.core.management import call_command
from django.db import OperationalError


@pytest.mark.django_db
def test_root_banner(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.content == b"API Running"


@pytest.mark.django_db
def test_health_ok(api_client):
    response = api_client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.django_db
def test_health_reports_database_outage(api_client):
    with patch("core.views.ping_database", side_effect=OperationalError("gone")):
        response = api_client.get("/api/health/")

    assert response.status_code == 503
    assert response.json()["status"] == "unavailable"


@pytest.mark.django_db
def test_keepalive_once_pings_database(settings, caplog):
    settings.SELF_URL = ""
    caplog.set_level("INFO")

    call_command("keepalive", "--once")

    assert "Database keep-alive OK" in caplog.text


def test_keepalive_logs_failures_and_pings_self(settings, caplog):
    settings.SELF_URL = "http://notes.example.com"
    caplog.set_level("INFO")

    with patch("core.management.commands.keepalive.ping_database", side_effect=OperationalError("gone")), patch(
        "core.management.commands.keepalive.ping_self", side_effect=httpx.ConnectError("refused")
    ) as ping_self:
        call_command("keepalive", "--once")

    ping_self.assert_called_once_with("http://notes.example.com")
    assert "Database keep-alive failed" in caplog.text
    assert "Self-ping to http://notes.example.com failed" in caplog.text
