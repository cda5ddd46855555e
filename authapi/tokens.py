from django.contrib.auth.models import User
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import RefreshToken

from core.exceptions import AuthError


def issue_tokens(user):
    refresh = RefreshToken.for_user(user)
    return {
        "accessToken": str(refresh.access_token),
        "refreshToken": str(refresh),
    }


def refresh_tokens(raw_token):
    """
    Exchange a refresh token for a new access/refresh pair.

    Invalid, expired, tampered or wrong-type tokens, and tokens for users
    that no longer exist or are inactive, raise ``AuthError`` (403).
    """
    try:
        refresh = RefreshToken(raw_token)
    except TokenError as exc:
        raise AuthError("Invalid refresh token", error=str(exc), status_code=403) from exc

    user_id = refresh.get(api_settings.USER_ID_CLAIM)
    user = User.objects.filter(pk=user_id, is_active=True).first()
    if user is None:
        raise AuthError("Invalid refresh token", error="User not found", status_code=403)
    return issue_tokens(user)
