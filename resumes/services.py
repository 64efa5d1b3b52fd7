"""
Resume Service Layer
Persistence boundary for resumes: listing with ordered sections and applying
full editor snapshots to the database.
"""
import logging
import uuid
from typing import Dict, List, Optional

from django.db import transaction
from django.db.models import Prefetch, QuerySet
from django.utils import timezone

from accounts.models import UserPreferences

from .models import SECTION_MODELS, Resume

logger = logging.getLogger(__name__)


class SnapshotError(Exception):
    """
    Raised when a submitted snapshot cannot be reconciled with stored rows.
    """


class ResumeRepository:
    """Data access for resumes and their ordered sections."""

    HEADER_FIELDS = ('full_name', 'headline', 'email')
    PROFILE_FIELDS = ('bio', 'location', 'phone', 'website', 'linkedin', 'github')

    # Alternative orderings used when a caller asks for chronological output.
    # Skills and languages always keep the user's order.
    CHRONOLOGICAL_ORDERING = {
        'experiences': ('-is_current', '-start_date', 'order', 'id'),
        'education': ('-start_date', 'order', 'id'),
    }

    @staticmethod
    def queryset(user=None, chronological: bool = False) -> QuerySet:
        """
        Resumes with every section prefetched in render order.
        """
        prefetches = []
        for section, model in SECTION_MODELS.items():
            ordering = ('order', 'id')
            if chronological:
                ordering = ResumeRepository.CHRONOLOGICAL_ORDERING.get(section, ordering)
            prefetches.append(
                Prefetch(section, queryset=model.objects.order_by(*ordering))
            )

        queryset = Resume.objects.select_related('user').prefetch_related(*prefetches)
        if user is not None:
            queryset = queryset.filter(user=user)
        return queryset

    @staticmethod
    def list_for_user(user, chronological: bool = False) -> List[Resume]:
        """
        All resumes for a user, most recently updated first.
        """
        return list(ResumeRepository.queryset(user, chronological=chronological))

    @staticmethod
    def latest_for_user(user) -> Resume:
        """
        Most recently updated resume for a user.

        Raises:
            Resume.DoesNotExist: If the user has no resume yet.
        """
        resume = ResumeRepository.queryset(user).first()
        if resume is None:
            raise Resume.DoesNotExist(f"No resume found for user {user.pk}")
        return resume

    @staticmethod
    def apply_snapshot(user, data: Dict, resume: Optional[Resume] = None) -> Resume:
        """
        Make the stored resume match a validated snapshot.

        Creates the resume when ``resume`` is None. Section items are matched
        by server ``id`` first, then by ``client_id``; matches are updated,
        unmatched items created, and stored rows missing from the snapshot
        deleted. ``order`` becomes the item's index in the submitted list.

        Args:
            user: Owner of the resume
            data: ``ResumeSnapshotSerializer.validated_data``
            resume: Existing resume to update, if any

        Returns:
            The stored resume, re-read with sections prefetched.

        Raises:
            SnapshotError: If an item id belongs to another resume or two
                items resolve to the same stored row.
        """
        with transaction.atomic():
            created = resume is None
            if created:
                resume = Resume(user=user)

            if 'title' in data:
                resume.title = data['title']
            if data.get('template'):
                resume.template = data['template']

            header = data.get('header') or {}
            for field in ResumeRepository.HEADER_FIELDS:
                setattr(resume, field, header.get(field, ''))

            profile = data.get('profile') or {}
            for field in ResumeRepository.PROFILE_FIELDS:
                setattr(resume, field, profile.get(field, ''))

            resume.interests = list(data.get('interests') or [])
            resume.save()

            for section in SECTION_MODELS:
                ResumeRepository._sync_section(resume, section, data.get(section) or [])

        logger.info(
            "%s resume %s for user %s",
            "Created" if created else "Updated",
            resume.pk,
            user.pk,
        )
        return ResumeRepository.queryset(user).get(pk=resume.pk)

    @staticmethod
    def _sync_section(resume: Resume, section: str, items: List[Dict]) -> None:
        model = SECTION_MODELS[section]
        existing = {obj.pk: obj for obj in model.objects.filter(resume=resume)}
        by_client_id = {obj.client_id: obj for obj in existing.values()}

        kept = set()
        for index, item in enumerate(items):
            values = dict(item)
            pk = values.pop('id', None)
            client_id = values.pop('client_id', None)
            values.pop('order', None)

            obj = None
            if pk is not None:
                obj = existing.get(pk)
                if obj is None:
                    raise SnapshotError(
                        f"{section} item {pk} does not belong to resume {resume.pk}"
                    )
            elif client_id is not None:
                obj = by_client_id.get(client_id)

            if obj is None:
                obj = model(resume=resume, client_id=client_id or uuid.uuid4())
            elif obj.pk in kept:
                raise SnapshotError(f"{section} item {obj.pk} submitted more than once")

            changed = obj._state.adding or obj.order != index
            if client_id is not None and obj.client_id != client_id:
                obj.client_id = client_id
                changed = True
            for attr, value in values.items():
                if getattr(obj, attr) != value:
                    setattr(obj, attr, value)
                    changed = True
            obj.order = index

            if changed:
                obj.save()
            kept.add(obj.pk)

        stale = [pk for pk in existing if pk not in kept]
        if stale:
            model.objects.filter(pk__in=stale).delete()


class OnboardingService:
    """
    First-run flow: store the wizard's resume, apply the chosen palette and
    mark the user as onboarded, all in one transaction.
    """

    @staticmethod
    def complete(user, data: Dict) -> Resume:
        """
        Complete onboarding for ``user``.

        Running it again replaces the user's latest resume instead of adding
        another one.

        Args:
            user: The authenticated user
            data: ``OnboardingSerializer.validated_data``

        Returns:
            The stored resume.

        Raises:
            SnapshotError: If the resume data cannot be applied.
        """
        logger.info("Onboarding started for user %s", user.pk)
        data = dict(data)
        palette = data.pop('palette', None)

        with transaction.atomic():
            try:
                existing = ResumeRepository.latest_for_user(user)
            except Resume.DoesNotExist:
                existing = None
            resume = ResumeRepository.apply_snapshot(user, data, resume=existing)

            if palette:
                preferences = UserPreferences.for_user(user)
                preferences.palette = palette
                preferences.save(update_fields=['palette', 'updated_at'])

            user.has_completed_onboarding = True
            user.onboarding_completed_at = timezone.now()
            user.save(update_fields=['has_completed_onboarding', 'onboarding_completed_at'])

        logger.info("Onboarding completed for user %s (resume %s)", user.pk, resume.pk)
        return resume

    @staticmethod
    def status(user) -> Dict:
        return {
            'has_completed_onboarding': user.has_completed_onboarding,
            'onboarding_completed_at': user.onboarding_completed_at,
        }
