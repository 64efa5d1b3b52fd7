"""
Accounts app models

Custom User model with role-based access, and the per-user preference record
that holds palette, banner color and other settings.
"""
from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models

from .themes import DEFAULT_BANNER_COLOR, DEFAULT_PALETTE, BannerColor, Palette


class User(AbstractUser):
    """
    Custom user model with role tracking.

    - role: Distinguish between admins and regular members. Admins may read
      other users' resumes and preferences.
    - has_completed_onboarding / onboarding_completed_at: Set once the
      onboarding wizard has created the first resume.
    """

    ADMIN = 'ADMIN'
    MEMBER = 'MEMBER'

    ROLE_CHOICES = [
        (ADMIN, 'Admin'),
        (MEMBER, 'Member'),
    ]

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=MEMBER,
    )
    has_completed_onboarding = models.BooleanField(default=False)
    onboarding_completed_at = models.DateTimeField(null=True, blank=True)

    def __str__(self):
        return f"{self.username} ({self.role})"

    @property
    def is_admin_role(self) -> bool:
        return self.role == self.ADMIN

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'


class UserPreferences(models.Model):
    """
    Appearance, localization, privacy and export preferences for a user.

    This is the single authoritative record for palette and banner color;
    clients read it on mount and write through on change (last write wins).
    """

    class Theme(models.TextChoices):
        LIGHT = 'light', 'Light'
        DARK = 'dark', 'Dark'
        AUTO = 'auto', 'Auto'

    class Language(models.TextChoices):
        ENGLISH = 'en', 'English'
        PORTUGUESE = 'pt-br', 'Português (Brasil)'
        SPANISH = 'es', 'Español'

    class DateFormat(models.TextChoices):
        US = 'MM/DD/YYYY', 'MM/DD/YYYY'
        EU = 'DD/MM/YYYY', 'DD/MM/YYYY'
        ISO = 'YYYY-MM-DD', 'YYYY-MM-DD'

    class Visibility(models.TextChoices):
        PUBLIC = 'public', 'Public'
        PRIVATE = 'private', 'Private'

    class ExportFormat(models.TextChoices):
        PDF = 'pdf', 'PDF'
        DOCX = 'docx', 'DOCX'

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='preferences',
    )
    theme = models.CharField(max_length=10, choices=Theme.choices, default=Theme.DARK)
    palette = models.CharField(max_length=32, choices=Palette.choices, default=DEFAULT_PALETTE)
    banner_color = models.CharField(
        max_length=32,
        choices=BannerColor.choices,
        default=DEFAULT_BANNER_COLOR,
    )
    language = models.CharField(max_length=8, choices=Language.choices, default=Language.ENGLISH)
    date_format = models.CharField(max_length=10, choices=DateFormat.choices, default=DateFormat.US)
    timezone = models.CharField(max_length=64, default='UTC')
    email_notifications = models.BooleanField(default=True)
    profile_visibility = models.CharField(
        max_length=10,
        choices=Visibility.choices,
        default=Visibility.PRIVATE,
    )
    show_email = models.BooleanField(default=False)
    default_export_format = models.CharField(
        max_length=8,
        choices=ExportFormat.choices,
        default=ExportFormat.PDF,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Preferences for {self.user.username}"

    @classmethod
    def for_user(cls, user) -> 'UserPreferences':
        """Get or lazily create the preference record for a user."""
        preferences, _ = cls.objects.get_or_create(user=user)
        return preferences

    @property
    def is_public(self) -> bool:
        return self.profile_visibility == self.Visibility.PUBLIC

    class Meta:
        verbose_name = 'User Preferences'
        verbose_name_plural = 'User Preferences'
