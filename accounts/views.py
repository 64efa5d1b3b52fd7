"""
Accounts app views

User management, signup and preference endpoints.
"""
import logging

from rest_framework import generics, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from .models import User, UserPreferences
from .permissions import IsAdminOrSelf, IsAdminRole
from .serializers import (
    PalettePreferencesSerializer,
    UserPreferencesSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)


class UserViewSet(viewsets.ModelViewSet):
    """
    ViewSet for User management.

    - List/create: ADMIN role only
    - Retrieve/update/delete: Admin or self only (delete cascades to resumes)
    - Special 'me' endpoint for current user
    """

    queryset = User.objects.all()
    serializer_class = UserSerializer

    def get_permissions(self):
        """
        Instantiate and return the list of permissions that this view requires.
        """
        if self.action in ['list', 'create']:
            permission_classes = [IsAdminRole]
        elif self.action == 'me':
            permission_classes = [IsAuthenticated]
        else:
            permission_classes = [IsAdminOrSelf]
        return [permission() for permission in permission_classes]

    def perform_destroy(self, instance):
        logger.info("Deleting account %s and its resumes", instance.pk)
        instance.delete()

    @action(detail=False, methods=['get'])
    def me(self, request):
        """
        Return the current authenticated user's data.

        GET /api/users/me/
        """
        serializer = self.get_serializer(request.user)
        return Response(serializer.data)


class SignupView(generics.CreateAPIView):
    """
    Create an account.

    POST /api/auth/signup/ - username, email, password
    """

    serializer_class = UserSerializer
    permission_classes = [AllowAny]
    authentication_classes = []

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("Created account %s", user.username)
        return Response(self.get_serializer(user).data, status=status.HTTP_201_CREATED)


class PreferencesView(generics.RetrieveUpdateAPIView):
    """
    Retrieve or update the authenticated user's palette and banner color.

    GET /api/user/preferences/
    PATCH /api/user/preferences/
    """

    serializer_class = PalettePreferencesSerializer
    permission_classes = [IsAuthenticated]
    http_method_names = ['get', 'patch', 'head', 'options']

    def get_object(self):
        """
        Get or create the preference record for the current user.
        """
        return UserPreferences.for_user(self.request.user)

    def perform_update(self, serializer):
        preferences = serializer.save()
        logger.info(
            "Preferences updated for user %s: palette=%s banner_color=%s",
            self.request.user.pk,
            preferences.palette,
            preferences.banner_color,
        )


class FullPreferencesView(PreferencesView):
    """
    Retrieve or update every preference field.

    GET /api/user/preferences/full/
    PATCH /api/user/preferences/full/
    """

    serializer_class = UserPreferencesSerializer
