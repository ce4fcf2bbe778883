from django.urls import path
from .views import ChangePasswordView, LoginView, LogoutView, RegisterView

urlpatterns = [
    path("register", RegisterView.as_view(), name="auth-register"),
    path("login", LoginView.as_view(), name="auth-login"),
    path("logout", LogoutView.as_view(), name="auth-logout"),
    path("editProfilePsw", ChangePasswordView.as_view(), name="auth-edit-password"),
]
