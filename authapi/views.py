import logging
from django.contrib.auth import authenticate
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.authentication import JWTAuthentication

from core.exceptions import AuthError
from .serializers import (
    LoginSerializer,
    RefreshSerializer,
    SignupSerializer,
    UserProfileSerializer,
)
from .tokens import issue_tokens, refresh_tokens

logger = logging.getLogger(__name__)


class SignupView(generics.CreateAPIView):
    serializer_class = SignupSerializer
    permission_classes = [AllowAny]
    authentication_classes = []

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("New account created for user %s", user.id)
        return Response({"message": "Signup successful"}, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = serializer.validated_data["email"]

        user = authenticate(request, username=email, password=serializer.validated_data["password"])
        if user is None:
            logger.warning("Failed login attempt for %s", email)
            raise AuthError("Invalid credentials")

        tokens = issue_tokens(user)
        return Response(
            {
                "accessToken": tokens["accessToken"],
                # Only "remember me" sessions get a refresh token.
                "refreshToken": tokens["refreshToken"] if serializer.validated_data["rememberMe"] else None,
                "user": {"id": user.id, "email": user.email},
            }
        )


class RefreshView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = RefreshSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        token = serializer.validated_data.get("token")
        if not token:
            raise AuthError("Refresh token required")
        return Response(refresh_tokens(token))


class UserProfileView(APIView):
    permission_classes = [IsAuthenticated]
    authentication_classes = [JWTAuthentication]

    def get(self, request):
        return Response(UserProfileSerializer(request.user).data)
