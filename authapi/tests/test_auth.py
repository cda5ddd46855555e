from datetime import timedelta

import pytest
from django.contrib.auth.models import User
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken

pytestmark = pytest.mark.django_db


def test_signup_creates_user(api_client):
    response = api_client.post(
        "/api/signup", {"email": " New@Example.com ", "password": "long-enough"}, format="json"
    )

    assert response.status_code == 201
    assert response.json() == {"message": "Signup successful"}
    user = User.objects.get(email="new@example.com")
    assert user.check_password("long-enough")


def test_signup_requires_email_and_password(api_client):
    response = api_client.post("/api/signup", {"email": "a@example.com"}, format="json")

    assert response.status_code == 400
    assert response.json()["message"] == "Email & password required"


def test_signup_duplicate_email_is_conflict(api_client, user):
    response = api_client.post(
        "/api/signup", {"email": "ADA@example.com", "password": "another-pass"}, format="json"
    )

    assert response.status_code == 409
    assert response.json()["message"] == "Email already exists"


def test_signup_rejects_short_password(api_client):
    response = api_client.post("/api/signup", {"email": "c@example.com", "password": "abc"}, format="json")

    assert response.status_code == 400
    assert not User.objects.filter(email="c@example.com").exists()


def test_login_without_remember_me_omits_refresh_token(api_client, user):
    response = api_client.post(
        "/api/login", {"email": "ada@example.com", "password": "s3cret-pass"}, format="json"
    )

    assert response.status_code == 200
    body = response.json()
    assert body["refreshToken"] is None
    assert body["user"] == {"id": user.id, "email": "ada@example.com"}
    assert str(AccessToken(body["accessToken"])["id"]) == str(user.id)


def test_login_with_remember_me_returns_refresh_token(api_client, user):
    response = api_client.post(
        "/api/login",
        {"email": "Ada@Example.com", "password": "s3cret-pass", "rememberMe": True},
        format="json",
    )

    assert response.status_code == 200
    assert str(RefreshToken(response.json()["refreshToken"])["id"]) == str(user.id)


@pytest.mark.parametrize(
    "email, password",
    [("ada@example.com", "wrong"), ("nobody@example.com", "s3cret-pass")],
)
def test_login_invalid_credentials(api_client, user, email, password):
    response = api_client.post("/api/login", {"email": email, "password": password}, format="json")

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials"}


def test_login_requires_fields(api_client):
    response = api_client.post("/api/login", {}, format="json")

    assert response.status_code == 400
    assert response.json()["message"] == "Email & password required"


def test_access_token_lifetime_is_one_day(user):
    token = AccessToken.for_user(user)

    assert token["exp"] - token["iat"] == int(timedelta(days=1).total_seconds())


def test_refresh_issues_new_pair(api_client, user):
    response = api_client.post("/api/refresh", {"token": str(RefreshToken.for_user(user))}, format="json")

    assert response.status_code == 200
    body = response.json()
    assert str(AccessToken(body["accessToken"])["id"]) == str(user.id)
    assert str(RefreshToken(body["refreshToken"])["id"]) == str(user.id)


def test_refresh_requires_token(api_client):
    response = api_client.post("/api/refresh", {}, format="json")

    assert response.status_code == 401
    assert response.json() == {"message": "Refresh token required"}


def test_refresh_rejects_garbage(api_client):
    response = api_client.post("/api/refresh", {"token": "not-a-token"}, format="json")

    assert response.status_code == 403
    assert response.json()["message"] == "Invalid refresh token"


def test_refresh_rejects_expired_token(api_client, user):
    token = RefreshToken.for_user(user)
    token.set_exp(lifetime=-timedelta(seconds=1))

    response = api_client.post("/api/refresh", {"token": str(token)}, format="json")

    assert response.status_code == 403


def test_refresh_rejects_access_token(api_client, user):
    response = api_client.post("/api/refresh", {"token": str(AccessToken.for_user(user))}, format="json")

    assert response.status_code == 403


def test_refresh_rejects_deleted_user(api_client, user):
    token = str(RefreshToken.for_user(user))
    user.delete()

    response = api_client.post("/api/refresh", {"token": token}, format="json")

    assert response.status_code == 403


def test_me_returns_profile(auth_client, user):
    response = auth_client.get("/api/me")

    assert response.status_code == 200
    assert response.json() == {"id": user.id, "email": "ada@example.com"}


def test_me_requires_token(api_client):
    assert api_client.get("/api/me").status_code == 401
