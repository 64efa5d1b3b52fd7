"""
Resumes app serializers

Section item serializers are used both to validate incoming snapshots and to
render stored resumes. Incoming snapshots are validated once here; the
persistence layer trusts ``validated_data``.
"""
import re

from rest_framework import serializers

from accounts.themes import Palette

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

MONTH_PATTERN = re.compile(r'^\d{4}-(0[1-9]|1[0-2])$')


def validate_month(value: str) -> str:
    """Accept an empty string or a YYYY-MM date."""
    if not value:
        return ''
    if not MONTH_PATTERN.match(value):
        raise serializers.ValidationError("Date must be in YYYY-MM format")
    return value


class SectionItemSerializer(serializers.ModelSerializer):
    """
    Base serializer for ordered section items.

    ``id`` is the server primary key (absent for new items); ``client_id`` is
    the stable client-generated identity. ``order`` is assigned from list
    position on save and is read-only.
    """

    id = serializers.IntegerField(required=False, allow_null=True)
    client_id = serializers.UUIDField(required=False, allow_null=True)

    base_fields = ['id', 'client_id', 'order']
    date_fields = ()

    class Meta:
        read_only_fields = ['order']

    def validate(self, attrs):
        errors = {}
        for name in self.date_fields:
            if name in attrs:
                try:
                    attrs[name] = validate_month(attrs[name])
                except serializers.ValidationError as exc:
                    errors[name] = exc.detail
        if errors:
            raise serializers.ValidationError(errors)
        return attrs


class ExperienceSerializer(SectionItemSerializer):
    technologies = serializers.ListField(child=serializers.CharField(max_length=100), required=False)

    date_fields = ('start_date', 'end_date')

    class Meta(SectionItemSerializer.Meta):
        model = Experience
        fields = SectionItemSerializer.base_fields + [
            'company',
            'role',
            'location',
            'start_date',
            'end_date',
            'is_current',
            'description',
            'technologies',
        ]

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if attrs.get('is_current') and attrs.get('end_date'):
            raise serializers.ValidationError(
                {'end_date': "end_date should be empty when is_current is true"}
            )
        return attrs


class EducationSerializer(SectionItemSerializer):
    date_fields = ('start_date', 'end_date')

    class Meta(SectionItemSerializer.Meta):
        model = Education
        fields = SectionItemSerializer.base_fields + [
            'institution',
            'degree',
            'field',
            'start_date',
            'end_date',
            'description',
        ]


class SkillSerializer(SectionItemSerializer):
    class Meta(SectionItemSerializer.Meta):
        model = Skill
        fields = SectionItemSerializer.base_fields + ['category', 'name']


class LanguageSerializer(SectionItemSerializer):
    class Meta(SectionItemSerializer.Meta):
        model = Language
        fields = SectionItemSerializer.base_fields + ['name', 'proficiency']


class ProjectSerializer(SectionItemSerializer):
    technologies = serializers.ListField(child=serializers.CharField(max_length=100), required=False)

    date_fields = ('start_date', 'end_date')

    class Meta(SectionItemSerializer.Meta):
        model = Project
        fields = SectionItemSerializer.base_fields + [
            'name',
            'description',
            'technologies',
            'url',
            'start_date',
            'end_date',
        ]


class CertificationSerializer(SectionItemSerializer):
    date_fields = ('date',)

    class Meta(SectionItemSerializer.Meta):
        model = Certification
        fields = SectionItemSerializer.base_fields + ['name', 'issuer', 'date', 'url']


class AwardSerializer(SectionItemSerializer):
    date_fields = ('date',)

    class Meta(SectionItemSerializer.Meta):
        model = Award
        fields = SectionItemSerializer.base_fields + ['title', 'issuer', 'date', 'description']


class RecommendationSerializer(SectionItemSerializer):
    date_fields = ('date',)

    class Meta(SectionItemSerializer.Meta):
        model = Recommendation
        fields = SectionItemSerializer.base_fields + [
            'recommender_name',
            'relationship',
            'text',
            'date',
        ]


SECTION_SERIALIZERS = {
    'experiences': ExperienceSerializer,
    'education': EducationSerializer,
    'skills': SkillSerializer,
    'languages': LanguageSerializer,
    'projects': ProjectSerializer,
    'certifications': CertificationSerializer,
    'awards': AwardSerializer,
    'recommendations': RecommendationSerializer,
}


class HeaderSerializer(serializers.Serializer):
    full_name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    headline = serializers.CharField(max_length=255, required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)


class ProfileSerializer(serializers.Serializer):
    bio = serializers.CharField(required=False, allow_blank=True, max_length=5000)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=32, required=False, allow_blank=True)
    website = serializers.URLField(max_length=2048, required=False, allow_blank=True)
    linkedin = serializers.URLField(max_length=2048, required=False, allow_blank=True)
    github = serializers.URLField(max_length=2048, required=False, allow_blank=True)


class ResumeSnapshotSerializer(serializers.Serializer):
    """
    Validates the full resume shape submitted by the editor.

    Header and profile are optional nested objects; omitted sections are
    treated as empty lists.
    """

    id = serializers.IntegerField(required=False, allow_null=True)
    title = serializers.CharField(max_length=255, required=False, allow_blank=True)
    template = serializers.ChoiceField(choices=Resume.Template.choices, required=False)
    header = HeaderSerializer(required=False, allow_null=True)
    profile = ProfileSerializer(required=False, allow_null=True)
    interests = serializers.ListField(
        child=serializers.CharField(max_length=100),
        required=False,
    )
    experiences = ExperienceSerializer(many=True, required=False)
    education = EducationSerializer(many=True, required=False)
    skills = SkillSerializer(many=True, required=False)
    languages = LanguageSerializer(many=True, required=False)
    projects = ProjectSerializer(many=True, required=False)
    certifications = CertificationSerializer(many=True, required=False)
    awards = AwardSerializer(many=True, required=False)
    recommendations = RecommendationSerializer(many=True, required=False)

    def validate(self, attrs):
        for section in SECTION_SERIALIZERS:
            seen = set()
            for item in attrs.get(section, []):
                client_id = item.get('client_id')
                if client_id is None:
                    continue
                if client_id in seen:
                    raise serializers.ValidationError(
                        {section: f"Duplicate client_id {client_id}"}
                    )
                seen.add(client_id)
        return attrs


class OnboardingSerializer(ResumeSnapshotSerializer):
    """
    First resume plus the palette picked in the onboarding wizard.

    Same shape as a snapshot, but the header must carry a name.
    """

    palette = serializers.ChoiceField(choices=Palette.choices, required=False)

    def validate(self, attrs):
        attrs = super().validate(attrs)
        header = attrs.get('header') or {}
        if not header.get('full_name', '').strip():
            raise serializers.ValidationError({'header': 'Full name is required.'})
        return attrs


class ResumeSerializer(serializers.ModelSerializer):
    """
    Read representation of a stored resume with every section nested.
    """

    header = HeaderSerializer(source='*', read_only=True)
    profile = ProfileSerializer(source='*', read_only=True)
    experiences = ExperienceSerializer(many=True, read_only=True)
    education = EducationSerializer(many=True, read_only=True)
    skills = SkillSerializer(many=True, read_only=True)
    languages = LanguageSerializer(many=True, read_only=True)
    projects = ProjectSerializer(many=True, read_only=True)
    certifications = CertificationSerializer(many=True, read_only=True)
    awards = AwardSerializer(many=True, read_only=True)
    recommendations = RecommendationSerializer(many=True, read_only=True)

    class Meta:
        model = Resume
        fields = [
            'id',
            'user',
            'title',
            'template',
            'header',
            'profile',
            'interests',
            'experiences',
            'education',
            'skills',
            'languages',
            'projects',
            'certifications',
            'awards',
            'recommendations',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'user', 'title', 'template', 'interests', 'created_at', 'updated_at']
