"""
Exports app URLs
"""
from django.urls import path

from .views import BannerExportView, ExportHistoryView, ResumeDOCXExportView, ResumePDFExportView

urlpatterns = [
    path('export/resume/pdf/', ResumePDFExportView.as_view(), name='export-resume-pdf'),
    path('export/resume/docx/', ResumeDOCXExportView.as_view(), name='export-resume-docx'),
    path('export/banner/', BannerExportView.as_view(), name='export-banner'),
    path('export/history/', ExportHistoryView.as_view(), name='export-history'),
]
