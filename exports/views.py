"""
Exports app views

Binary download endpoints for resume documents and the banner image, plus
the export history list.
"""
import logging

from django.http import HttpResponse
from rest_framework import generics, serializers, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.models import User
from resumes.models import Resume

from .models import ExportRecord
from .serializers import ExportRecordSerializer
from .services import ExportError, ExportOrchestrator, ExportResult

logger = logging.getLogger(__name__)

DISPOSITIONS = ('attachment', 'inline')


def _file_response(result: ExportResult, disposition=None) -> HttpResponse:
    if disposition not in DISPOSITIONS:
        disposition = 'attachment'
    response = HttpResponse(result.content, content_type=result.content_type)
    response['Content-Disposition'] = f'{disposition}; filename="{result.filename}"'
    response['Content-Length'] = str(result.size)
    return response


def _export_failed() -> Response:
    return Response({'error': 'Export failed'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class ExportView(APIView):
    """
    Base for export endpoints.

    Admins may export for another user with ?userId=.
    """

    permission_classes = [IsAuthenticated]

    def target_user(self, request):
        user_id = request.query_params.get('userId')
        if user_id and request.user.role == 'ADMIN':
            try:
                user_id = int(user_id)
            except ValueError:
                raise serializers.ValidationError({'userId': 'A valid integer is required.'})
            return generics.get_object_or_404(User, pk=user_id)
        return request.user


class ResumeExportView(ExportView):
    export_format = None

    def get(self, request):
        params = request.query_params
        try:
            result = ExportOrchestrator().export_resume(
                self.target_user(request),
                fmt=self.export_format,
                template=params.get('template'),
                palette=params.get('palette'),
                language=params.get('language'),
                banner_color=params.get('bannerColor'),
            )
        except Resume.DoesNotExist:
            return Response({'error': 'Resume not found'}, status=status.HTTP_404_NOT_FOUND)
        except ExportError:
            return _export_failed()

        return _file_response(result, params.get('disposition'))


class ResumePDFExportView(ResumeExportView):
    """
    GET /api/export/resume/pdf/?template=&palette=&language=&disposition=
    """

    export_format = ExportRecord.Kind.PDF


class ResumeDOCXExportView(ResumeExportView):
    """
    GET /api/export/resume/docx/?palette=&language=&disposition=
    """

    export_format = ExportRecord.Kind.DOCX


class BannerExportView(ExportView):
    """
    GET /api/export/banner/?palette=&bannerColor=&logo=&disposition=
    """

    def get(self, request):
        params = request.query_params
        try:
            result = ExportOrchestrator().export_banner(
                self.target_user(request),
                palette=params.get('palette'),
                banner_color=params.get('bannerColor'),
                logo=params.get('logo', ''),
            )
        except ExportError:
            return _export_failed()

        return _file_response(result, params.get('disposition'))


class ExportHistoryView(generics.ListAPIView):
    """
    GET /api/export/history/

    The caller's export records, newest first. Admins see every record.
    """

    serializer_class = ExportRecordSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        user = self.request.user
        queryset = ExportRecord.objects.select_related('user')
        if user.role == 'ADMIN':
            return queryset
        return queryset.filter(user=user)
