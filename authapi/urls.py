from django.urls import path
from .views import SignupView, LoginView, RefreshView, UserProfileView

urlpatterns = [
    path("signup", SignupView.as_view(), name="signup"),
    path("signup/", SignupView.as_view()),
    path("login", LoginView.as_view(), name="login"),
    path("login/", LoginView.as_view()),
    path("refresh", RefreshView.as_view(), name="refresh"),
    path("refresh/", RefreshView.as_view()),
    path("me", UserProfileView.as_view(), name="me"),
    path("me/", UserProfileView.as_view()),
]
