import pytest
from django.contrib.auth.models import User
from rest_framework.test import APIClient

from authapi.tokens import issue_tokens


@pytest.fixture
def user(db):
    return User.objects.create_user(username="ada@example.com", email="ada@example.com", password="s3cret-pass")


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username="bob@example.com", email="bob@example.com", password="s3cret-pass")


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def auth_client(user):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_tokens(user)['accessToken']}")
    return client


@pytest.fixture
def other_client(other_user):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_tokens(other_user)['accessToken']}")
    return client
