"""
Resumes app models

A Resume aggregates a header, a profile and ordered section collections.
Every section item carries a client-generated UUID (``client_id``) so its
identity survives reordering before the server assigns a primary key, and an
``order`` that defines render sequence.
"""
import uuid

from django.conf import settings
from django.db import models


class Resume(models.Model):
    """
    The aggregate document a user builds.

    Header fields (full_name, headline, email) and profile fields (bio and
    contact links) are stored inline; sections are separate ordered tables.
    """

    class Template(models.TextChoices):
        CLASSIC = 'classic', 'Classic'
        MODERN = 'modern', 'Modern'
        CREATIVE = 'creative', 'Creative'

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='resumes',
    )
    title = models.CharField(max_length=255, blank=True)
    template = models.CharField(
        max_length=20,
        choices=Template.choices,
        default=Template.MODERN,
    )

    # Header
    full_name = models.CharField(max_length=255, blank=True)
    headline = models.CharField(max_length=255, blank=True)
    email = models.EmailField(blank=True)

    # Profile
    bio = models.TextField(blank=True)
    location = models.CharField(max_length=255, blank=True)
    phone = models.CharField(max_length=32, blank=True)
    website = models.URLField(max_length=2048, blank=True)
    linkedin = models.URLField(max_length=2048, blank=True)
    github = models.URLField(max_length=2048, blank=True)

    interests = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        name = self.full_name or self.user.username
        return f"Resume {self.title or self.pk} for {name}"

    class Meta:
        verbose_name = 'Resume'
        verbose_name_plural = 'Resumes'
        ordering = ['-updated_at', '-id']


class SectionItem(models.Model):
    """
    Base for ordered section records.
    """

    client_id = models.UUIDField(default=uuid.uuid4, editable=False)
    order = models.PositiveIntegerField(default=0)

    class Meta:
        abstract = True
        ordering = ['order', 'id']


class Experience(SectionItem):
    resume = models.ForeignKey(Resume, on_delete=models.CASCADE, related_name='experiences')
    company = models.CharField(max_length=255)
    role = models.CharField(max_length=255)
    location = models.CharField(max_length=255, blank=True)
    start_date = models.CharField(max_length=7, blank=True)
    end_date = models.CharField(max_length=7, blank=True)
    is_current = models.BooleanField(default=False)
    description = models.TextField(blank=True)
    technologies = models.JSONField(default=list, blank=True)

    def __str__(self):
        return f"{self.role} at {self.company}"

    class Meta(SectionItem.Meta):
        verbose_name = 'Experience'
        verbose_name_plural = 'Experiences'


class Education(SectionItem):
    resume = models.ForeignKey(Resume, on_delete=models.CASCADE, related_name='education')
    institution = models.CharField(max_length=255)
    degree = models.CharField(max_length=255, blank=True)
    field = models.CharField(max_length=255, blank=True)
    start_date = models.CharField(max_length=7, blank=True)
    end_date = models.CharField(max_length=7, blank=True)
    description = models.TextField(blank=True)

    def __str__(self):
        return f"{self.degree} at {self.institution}".strip()

    class Meta(SectionItem.Meta):
        verbose_name = 'Education'
        verbose_name_plural = 'Education'


class Skill(SectionItem):
    resume = models.ForeignKey(Resume, on_delete=models.CASCADE, related_name='skills')
    category = models.CharField(max_length=100, blank=True)
    name = models.CharField(max_length=100)

    def __str__(self):
        return self.name


class Language(SectionItem):
    resume = models.ForeignKey(Resume, on_delete=models.CASCADE, related_name='languages')
    name = models.CharField(max_length=100)
    proficiency = models.CharField(max_length=100, blank=True)

    def __str__(self):
        return self.name


class Project(SectionItem):
    resume = models.ForeignKey(Resume, on_delete=models.CASCADE, related_name='projects')
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    technologies = models.JSONField(default=list, blank=True)
    url = models.URLField(max_length=2048, blank=True)
    start_date = models.CharField(max_length=7, blank=True)
    end_date = models.CharField(max_length=7, blank=True)

    def __str__(self):
        return self.name


class Certification(SectionItem):
    resume = models.ForeignKey(Resume, on_delete=models.CASCADE, related_name='certifications')
    name = models.CharField(max_length=255)
    issuer = models.CharField(max_length=255, blank=True)
    date = models.CharField(max_length=7, blank=True)
    url = models.URLField(max_length=2048, blank=True)

    def __str__(self):
        return self.name


class Award(SectionItem):
    resume = models.ForeignKey(Resume, on_delete=models.CASCADE, related_name='awards')
    title = models.CharField(max_length=255)
    issuer = models.CharField(max_length=255, blank=True)
    date = models.CharField(max_length=7, blank=True)
    description = models.TextField(blank=True)

    def __str__(self):
        return self.title


class Recommendation(SectionItem):
    resume = models.ForeignKey(Resume, on_delete=models.CASCADE, related_name='recommendations')
    recommender_name = models.CharField(max_length=255)
    relationship = models.CharField(max_length=255, blank=True)
    text = models.TextField()
    date = models.CharField(max_length=7, blank=True)

    def __str__(self):
        return f"Recommendation from {self.recommender_name}"


# Section name -> model, in render order.
SECTION_MODELS = {
    'experiences': Experience,
    'education': Education,
    'skills': Skill,
    'languages': Language,
    'projects': Project,
    'certifications': Certification,
    'awards': Award,
    'recommendations': Recommendation,
}
