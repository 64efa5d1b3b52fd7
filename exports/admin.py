from django.contrib import admin

from .models import ExportRecord


@admin.register(ExportRecord)
class ExportRecordAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'kind', 'template', 'palette', 'status', 'byte_size', 'created_at']
    list_filter = ['kind', 'status', 'template', 'created_at']
    search_fields = ['user__username', 'user__email', 'error_message']
    readonly_fields = ['started_at', 'completed_at', 'created_at', 'updated_at']

    fieldsets = (
        ('Request', {
            'fields': ('user', 'resume', 'kind', 'template', 'palette', 'banner_color', 'language')
        }),
        ('Result', {
            'fields': ('status', 'byte_size', 'error_message')
        }),
        ('Timestamps', {
            'fields': ('started_at', 'completed_at', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
