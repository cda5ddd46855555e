from django.contrib.auth.models import User
from django.contrib.auth.password_validation import validate_password
from django.db import IntegrityError, transaction
from rest_framework import serializers

from core.exceptions import ConflictError

CREDENTIAL_ERRORS = {
    "required": "Email & password required",
    "blank": "Email & password required",
    "null": "Email & password required",
}


class SignupSerializer(serializers.Serializer):
    email = serializers.EmailField(max_length=150, error_messages=CREDENTIAL_ERRORS)
    password = serializers.CharField(write_only=True, trim_whitespace=False, error_messages=CREDENTIAL_ERRORS)

    def validate_email(self, value):
        return value.strip().lower()

    def validate_password(self, value):
        validate_password(value)
        return value

    def create(self, validated_data):
        email = validated_data["email"]
        if User.objects.filter(email__iexact=email).exists():
            raise ConflictError("Email already exists")
        try:
            with transaction.atomic():
                # The email doubles as the username so Django's ModelBackend can authenticate by it.
                return User.objects.create_user(
                    username=email,
                    email=email,
                    password=validated_data["password"],
                )
        except IntegrityError as exc:
            raise ConflictError("Email already exists", error=str(exc)) from exc


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(error_messages=CREDENTIAL_ERRORS)
    password = serializers.CharField(trim_whitespace=False, error_messages=CREDENTIAL_ERRORS)
    rememberMe = serializers.BooleanField(required=False, default=False)

    def validate_email(self, value):
        return value.strip().lower()


class RefreshSerializer(serializers.Serializer):
    token = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class UserProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "email"]
