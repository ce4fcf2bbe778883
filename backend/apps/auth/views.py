from django.conf import settings
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.api.gate import cookie_name
from apps.api.policy import Action
from apps.api.schemas import ErrorResponseSerializer, MessageSerializer
from apps.api.utils import message_response
from apps.common import get_logger
from .container import build_credential_service, build_registration_service
from .serializers import (
    ChangePasswordRequestSerializer,
    LoginRequestSerializer,
    RegisterRequestSerializer,
    RegisterResponseSerializer,
)
from .tokens import session_lifetime

logger = get_logger(__name__).bind(component="auth", layer="view")


def _cookie_secure() -> bool:
    return bool(getattr(settings, "SESSION_COOKIE_SECURE_TOKEN", True))


@extend_schema(tags=["Auth"])
class RegisterView(APIView):
    service = build_registration_service()
    log = logger.bind(view="RegisterView")

    @extend_schema(
        summary="Register user",
        request=RegisterRequestSerializer,
        responses={
            201: RegisterResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = RegisterRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info(
            "Processing registration request",
            email=serializer.validated_data.get("email"),
        )
        result = self.service.register(serializer.validated_data)
        payload = {"message": "Registration successful", **result}
        return Response(
            RegisterResponseSerializer(payload).data, status=status.HTTP_201_CREATED
        )


@extend_schema(tags=["Auth"])
class LoginView(APIView):
    service = build_credential_service()
    log = logger.bind(view="LoginView")

    @extend_schema(
        summary="Login (sets the session cookie)",
        request=LoginRequestSerializer,
        responses={
            200: MessageSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        token, user = self.service.login(
            serializer.validated_data["email"], serializer.validated_data["psw"]
        )
        response = message_response("Login successful")
        response.set_cookie(
            cookie_name(),
            token,
            max_age=int(session_lifetime().total_seconds()),
            httponly=True,
            secure=_cookie_secure(),
            samesite="None",
        )
        self.log.info("Session cookie issued", user_id=user.id)
        return response


@extend_schema(tags=["Auth"])
class LogoutView(APIView):
    log = logger.bind(view="LogoutView")

    @extend_schema(
        summary="Logout (clears the session cookie)",
        request=None,
        responses={200: MessageSerializer},
    )
    def post(self, request):
        response = message_response("Logged out successfully")
        response.delete_cookie(cookie_name(), samesite="None")
        self.log.info("Session cookie cleared")
        return response


@extend_schema(tags=["Auth"])
class ChangePasswordView(APIView):
    access = {"PUT": Action.UPDATE_PASSWORD}
    service = build_credential_service()
    log = logger.bind(view="ChangePasswordView")

    @extend_schema(
        summary="Change the current user's password",
        request=ChangePasswordRequestSerializer,
        responses={
            200: MessageSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            403: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request):
        serializer = ChangePasswordRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.service.change_password(
            request.identity.id, serializer.validated_data["psw"]
        )
        return message_response("Password changed, please log in again")
