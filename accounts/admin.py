from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User, UserPreferences


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for custom User model."""

    list_display = [
        'username',
        'email',
        'role',
        'is_staff',
        'date_joined',
    ]
    list_filter = ['role', 'is_staff', 'is_superuser']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Custom Fields', {'fields': ('role', 'has_completed_onboarding', 'onboarding_completed_at')}),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Custom Fields', {'fields': ('role',)}),
    )


@admin.register(UserPreferences)
class UserPreferencesAdmin(admin.ModelAdmin):
    """Admin interface for UserPreferences."""

    list_display = ['user', 'palette', 'banner_color', 'theme', 'language', 'profile_visibility', 'updated_at']
    list_filter = ['palette', 'banner_color', 'theme', 'profile_visibility']
    search_fields = ['user__username', 'user__email']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Appearance', {
            'fields': ('user', 'theme', 'palette', 'banner_color')
        }),
        ('Localization', {
            'fields': ('language', 'date_format', 'timezone')
        }),
        ('Privacy & Export', {
            'fields': ('profile_visibility', 'show_email', 'email_notifications', 'default_export_format')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at')
        }),
    )
