"""
Resumes app views

ViewSet for resume snapshots, the public resume endpoint and onboarding.
"""
import logging

from django.http import Http404
from django.shortcuts import get_object_or_404
from rest_framework import serializers, status, viewsets
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.models import User, UserPreferences
from accounts.permissions import IsOwnerOrAdmin

from .models import Resume
from .serializers import OnboardingSerializer, ResumeSerializer, ResumeSnapshotSerializer
from .services import OnboardingService, ResumeRepository, SnapshotError

logger = logging.getLogger(__name__)


class ResumeViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Resume.

    - GET: List current user's resumes, most recent first, sections nested
    - POST: Create a resume from a full snapshot
    - GET {id}: Retrieve one resume
    - PUT {id}: Replace the resume with a full snapshot
    - DELETE {id}: Delete the resume and its sections
    """

    serializer_class = ResumeSerializer
    permission_classes = [IsAuthenticated, IsOwnerOrAdmin]
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']

    def _chronological(self) -> bool:
        return self.request.query_params.get('ordering') == 'chronological'

    def get_queryset(self):
        """
        Filter to the current user's resumes.
        Admins see everything and may narrow with ?user_id=.
        """
        user = self.request.user
        if user.role == 'ADMIN':
            queryset = ResumeRepository.queryset(chronological=self._chronological())
            user_id = self.request.query_params.get('user_id')
            if user_id:
                try:
                    queryset = queryset.filter(user_id=int(user_id))
                except ValueError:
                    raise serializers.ValidationError({'user_id': 'A valid integer is required.'})
            return queryset
        return ResumeRepository.queryset(user, chronological=self._chronological())

    def create(self, request, *args, **kwargs):
        snapshot = ResumeSnapshotSerializer(data=request.data)
        snapshot.is_valid(raise_exception=True)

        try:
            resume = ResumeRepository.apply_snapshot(request.user, snapshot.validated_data)
        except SnapshotError as exc:
            return Response({'error': str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        serializer = self.get_serializer(resume)
        return Response(serializer.data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        resume = self.get_object()
        snapshot = ResumeSnapshotSerializer(data=request.data)
        snapshot.is_valid(raise_exception=True)

        try:
            resume = ResumeRepository.apply_snapshot(
                resume.user,
                snapshot.validated_data,
                resume=resume,
            )
        except SnapshotError as exc:
            return Response({'error': str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        serializer = self.get_serializer(resume)
        return Response(serializer.data)

    def perform_destroy(self, instance):
        logger.info("Deleting resume %s for user %s", instance.pk, instance.user_id)
        instance.delete()


@api_view(['GET'])
@permission_classes([AllowAny])
def public_resume(request, username):
    """
    Latest resume for a user whose profile visibility is public.

    GET /api/public/{username}/
    """
    user = get_object_or_404(User, username=username.lower())
    preferences = UserPreferences.for_user(user)
    if not preferences.is_public:
        raise Http404("Profile is private")

    try:
        resume = ResumeRepository.latest_for_user(user)
    except Resume.DoesNotExist:
        raise Http404("No resume found")

    data = ResumeSerializer(resume).data
    if not preferences.show_email:
        data['header']['email'] = ''
    data['palette'] = preferences.palette
    data['banner_color'] = preferences.banner_color
    return Response(data)


class OnboardingView(APIView):
    """
    POST /api/onboarding/

    Store the onboarding wizard's resume and palette, and mark the user as
    onboarded.
    """

    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = OnboardingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            resume = OnboardingService.complete(request.user, serializer.validated_data)
        except SnapshotError as exc:
            return Response({'error': str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'success': True,
            'resume_id': resume.pk,
            'message': 'Onboarding completed successfully',
        })


class OnboardingStatusView(APIView):
    """
    GET /api/onboarding/status/
    """

    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(OnboardingService.status(request.user))
