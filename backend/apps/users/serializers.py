from rest_framework import serializers


class UserSerializer(serializers.Serializer):
    """Admin listing row. The password hash is never part of it."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField()
    email = serializers.EmailField()
    role = serializers.CharField()
    profile_pic = serializers.CharField(allow_blank=True)
    date_joined = serializers.CharField(allow_null=True)


class RemoveUserRequestSerializer(serializers.Serializer):
    user_id = serializers.IntegerField(min_value=1)


class RoleResponseSerializer(serializers.Serializer):
    role = serializers.CharField()


class UsernameResponseSerializer(serializers.Serializer):
    name = serializers.CharField()


class ProfilePicResponseSerializer(serializers.Serializer):
    profile_pic = serializers.CharField(allow_blank=True)
