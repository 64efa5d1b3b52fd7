"""
Exports app serializers
"""
from rest_framework import serializers

from .models import ExportRecord


class ExportRecordSerializer(serializers.ModelSerializer):
    """
    Read-only view of an export attempt for the history endpoint.
    """

    class Meta:
        model = ExportRecord
        fields = [
            'id',
            'user',
            'resume',
            'kind',
            'template',
            'palette',
            'banner_color',
            'language',
            'status',
            'byte_size',
            'error_message',
            'started_at',
            'completed_at',
            'created_at',
        ]
        read_only_fields = fields
