from django.contrib import admin
from .models import (
    Award,
    Certification,
    Education,
    Experience,
    Language,
    Project,
    Recommendation,
    Resume,
    Skill,
)


class SectionInline(admin.TabularInline):
    extra = 0
    ordering = ['order']
    readonly_fields = ['client_id']


class ExperienceInline(SectionInline):
    model = Experience


class EducationInline(SectionInline):
    model = Education


class SkillInline(SectionInline):
    model = Skill


class LanguageInline(SectionInline):
    model = Language


class ProjectInline(SectionInline):
    model = Project


class CertificationInline(SectionInline):
    model = Certification


class AwardInline(SectionInline):
    model = Award


class RecommendationInline(SectionInline):
    model = Recommendation


@admin.register(Resume)
class ResumeAdmin(admin.ModelAdmin):
    """Admin interface for Resume with every section inline."""

    list_display = ['id', 'user', 'title', 'full_name', 'template', 'updated_at']
    list_filter = ['template', 'created_at', 'updated_at']
    search_fields = ['user__username', 'title', 'full_name', 'headline', 'email']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Basic Info', {
            'fields': ('user', 'title', 'template')
        }),
        ('Header', {
            'fields': ('full_name', 'headline', 'email')
        }),
        ('Profile', {
            'fields': ('bio', 'location', 'phone', 'website', 'linkedin', 'github', 'interests'),
            'classes': ('collapse',),
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at')
        }),
    )

    inlines = [
        ExperienceInline,
        EducationInline,
        SkillInline,
        LanguageInline,
        ProjectInline,
        CertificationInline,
        AwardInline,
        RecommendationInline,
    ]
