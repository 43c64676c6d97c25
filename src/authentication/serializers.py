"""Serializers for API login and the current-user profile."""

from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed

User = get_user_model()


class LoginSerializer(serializers.Serializer):
    """Authenticate a user via email/password."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        """Check credentials and attach the user to validated_data."""
        try:
            user = User.objects.with_roles().get(email__iexact=attrs["email"])
        except User.DoesNotExist:
            raise AuthenticationFailed("Invalid credentials")

        if not user.is_active:
            raise AuthenticationFailed("User is inactive")

        if not user.check_password(attrs["password"]):
            raise AuthenticationFailed("Invalid credentials")

        attrs["user"] = user
        return attrs


class UserDetailSerializer(serializers.ModelSerializer):
    """Read-only profile payload: identity plus role tags."""

    roles = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["id", "email", "roles"]
        read_only_fields = fields

    def get_roles(self, obj) -> list[str]:
        return sorted(obj.get_roles())


__all__ = ["LoginSerializer", "UserDetailSerializer"]
