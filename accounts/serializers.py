"""
Accounts app serializers

Serializers for users, signup and preferences.
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from .models import User, UserPreferences
from .validators import normalize_username

PASSWORD_MIN_LENGTH = 8


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for User model.

    Used for signup as well as the ``me`` endpoint. Password is write-only
    and hashed on create/update.
    """

    email = serializers.EmailField(max_length=254)

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'first_name',
            'last_name',
            'role',
            'has_completed_onboarding',
            'onboarding_completed_at',
            'password',
        ]
        read_only_fields = ['id', 'role', 'has_completed_onboarding', 'onboarding_completed_at']
        extra_kwargs = {
            'password': {'write_only': True, 'min_length': PASSWORD_MIN_LENGTH},
        }

    def validate_username(self, value):
        try:
            username = normalize_username(value)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages)

        taken = User.objects.filter(username=username)
        if self.instance is not None:
            taken = taken.exclude(pk=self.instance.pk)
        if taken.exists():
            raise serializers.ValidationError("This username is already taken.")
        return username

    def validate_email(self, value):
        return value.strip().lower()

    def create(self, validated_data):
        """Create user with hashed password."""
        password = validated_data.pop('password', None)
        user = User(**validated_data)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save()
        UserPreferences.for_user(user)
        return user

    def update(self, instance, validated_data):
        """Update user, handling password properly."""
        password = validated_data.pop('password', None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if password:
            instance.set_password(password)
        instance.save()
        return instance


class PalettePreferencesSerializer(serializers.ModelSerializer):
    """
    Palette and banner color only, for the lightweight preferences endpoint.
    """

    class Meta:
        model = UserPreferences
        fields = ['palette', 'banner_color']


class UserPreferencesSerializer(serializers.ModelSerializer):
    """
    Every preference field. PATCH requests are partial updates.
    """

    class Meta:
        model = UserPreferences
        fields = [
            'theme',
            'palette',
            'banner_color',
            'language',
            'date_format',
            'timezone',
            'email_notifications',
            'profile_visibility',
            'show_email',
            'default_export_format',
            'updated_at',
        ]
        read_only_fields = ['updated_at']
