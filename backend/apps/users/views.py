from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.api.policy import Action
from apps.api.schemas import ErrorResponseSerializer, MessageSerializer
from apps.api.utils import message_response
from apps.common import get_logger
from .container import build_user_service
from .serializers import (
    ProfilePicResponseSerializer,
    RemoveUserRequestSerializer,
    RoleResponseSerializer,
    UsernameResponseSerializer,
    UserSerializer,
)

logger = get_logger(__name__).bind(component="users", layer="view")


@extend_schema(tags=["Admin"])
class AdminUserListView(APIView):
    access = {"GET": Action.LIST_USERS}
    service = build_user_service()
    log = logger.bind(view="AdminUserListView")

    @extend_schema(
        summary="List users (admin)",
        responses={
            200: UserSerializer(many=True),
            403: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        self.log.debug("Listing users via API", actor_id=request.identity.id)
        data = self.service.list_users()
        return Response(UserSerializer(data, many=True).data)


@extend_schema(tags=["Admin"])
class AdminRemoveUserView(APIView):
    access = {"POST": Action.REMOVE_USER}
    service = build_user_service()
    log = logger.bind(view="AdminRemoveUserView")

    @extend_schema(
        summary="Remove user (admin)",
        request=RemoveUserRequestSerializer,
        responses={
            200: MessageSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            403: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = RemoveUserRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user_id = serializer.validated_data["user_id"]
        self.log.info("Removing user via API", user_id=user_id, actor_id=request.identity.id)
        self.service.remove_user(user_id)
        return message_response("User removed successfully")


@extend_schema(tags=["Profile"])
class RoleView(APIView):
    access = {"GET": Action.READ_PROFILE}
    service = build_user_service()

    @extend_schema(
        summary="Role of the current session",
        responses={
            200: RoleResponseSerializer,
            403: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        role = self.service.get_role(request.identity)
        return Response({"role": role})


@extend_schema(tags=["Profile"])
class UsernameView(APIView):
    access = {"GET": Action.READ_PROFILE}
    service = build_user_service()

    @extend_schema(
        summary="Display name of the current user",
        responses={
            200: UsernameResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        name = self.service.get_username(request.identity.id)
        return Response({"name": name})


@extend_schema(tags=["Profile"])
class ProfilePicView(APIView):
    access = {"GET": Action.READ_PROFILE}
    service = build_user_service()

    @extend_schema(
        summary="Profile picture of the current user",
        responses={
            200: ProfilePicResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        pic = self.service.get_profile_pic(request.identity.id)
        return Response({"profile_pic": pic})
