from rest_framework import serializers

PASSWORD_MIN_LENGTH = 6
_PASSWORD_ERRORS = {
    "min_length": f"Password must be at least {PASSWORD_MIN_LENGTH} characters long.",
    "blank": f"Password must be at least {PASSWORD_MIN_LENGTH} characters long.",
}


class RegisterRequestSerializer(serializers.Serializer):
    name = serializers.CharField(
        max_length=150, error_messages={"blank": "Name is required."}
    )
    email = serializers.EmailField(error_messages={"invalid": "Enter a valid email address."})
    psw = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        min_length=PASSWORD_MIN_LENGTH,
        error_messages=_PASSWORD_ERRORS,
    )


class RegisterResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.EmailField()


class LoginRequestSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages={"invalid": "Enter a valid email address."})
    psw = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        error_messages={"blank": "Password is required."},
    )


class ChangePasswordRequestSerializer(serializers.Serializer):
    psw = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        min_length=PASSWORD_MIN_LENGTH,
        error_messages=_PASSWORD_ERRORS,
    )
