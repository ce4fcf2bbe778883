from django.urls import path
from .views import (
    AdminRemoveUserView,
    AdminUserListView,
    ProfilePicView,
    RoleView,
    UsernameView,
)

urlpatterns = [
    path("admin/users", AdminUserListView.as_view(), name="api-admin-users"),
    path("admin/removeUser", AdminRemoveUserView.as_view(), name="api-admin-remove-user"),
    path("getRole", RoleView.as_view(), name="api-get-role"),
    path("getUsername", UsernameView.as_view(), name="api-get-username"),
    path("getProfilePic", ProfilePicView.as_view(), name="api-get-profile-pic"),
]
