"""
Export Orchestrator
Turns a user's latest resume into a PDF or DOCX document, or captures the
banner as a PNG. Every attempt is tracked by an ExportRecord moving through
IDLE -> RENDERING -> DONE | FAILED.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from django.conf import settings
from django.core import signing
from django.utils.text import slugify

from accounts.models import UserPreferences
from accounts.themes import resolve_banner_color, resolve_palette
from resumes.models import Resume
from resumes.services import ResumeRepository

from .banner import BannerCaptureService
from .content import resolve_language, resume_content
from .documents import build_docx
from .layouts import get_layout
from .models import ExportRecord

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    ExportRecord.Kind.PDF: 'application/pdf',
    ExportRecord.Kind.DOCX: 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    ExportRecord.Kind.PNG: 'image/png',
}

BANNER_TOKEN_SALT = 'exports.banner'


class ExportError(Exception):
    """
    Raised when rendering fails. The record is already marked FAILED.
    """


@dataclass
class ExportResult:
    content: bytes
    content_type: str
    filename: str

    @property
    def size(self) -> int:
        return len(self.content)


def make_banner_token(user) -> str:
    """Signed token that lets the render page load this user's data."""
    return signing.dumps({'user_id': user.pk}, salt=BANNER_TOKEN_SALT)


def user_id_from_banner_token(token: str) -> Optional[int]:
    """User id carried by a banner token, or None if it is invalid or expired."""
    if not token:
        return None
    try:
        payload = signing.loads(
            token,
            salt=BANNER_TOKEN_SALT,
            max_age=settings.EXPORT_BANNER_TOKEN_MAX_AGE,
        )
    except signing.BadSignature:
        logger.warning("Rejected invalid or expired banner token")
        return None
    return payload.get('user_id')


class ExportOrchestrator:
    """
    Entry point for all exports.

    Query options fall back to the user's stored preferences, then to the
    catalogue defaults.
    """

    def __init__(self, banner_service: Optional[BannerCaptureService] = None):
        self.banner_service = banner_service or BannerCaptureService()

    def export_resume(
        self,
        user,
        fmt: str = ExportRecord.Kind.PDF,
        template: Optional[str] = None,
        palette: Optional[str] = None,
        language: Optional[str] = None,
        banner_color: Optional[str] = None,
    ) -> ExportResult:
        """
        Render the user's most recent resume.

        Raises:
            Resume.DoesNotExist: If the user has no resume.
            ExportError: If rendering fails.
        """
        if fmt not in (ExportRecord.Kind.PDF, ExportRecord.Kind.DOCX):
            raise ValueError(f"Unsupported resume export format: {fmt}")

        resume = ResumeRepository.latest_for_user(user)
        preferences = UserPreferences.for_user(user)
        palette = resolve_palette(palette or preferences.palette)
        banner_color = resolve_banner_color(banner_color or preferences.banner_color)
        language = resolve_language(language or preferences.language)
        data = resume_content(resume)

        if fmt == ExportRecord.Kind.PDF:
            layout_class = get_layout(template or resume.template)
            template_id = layout_class.template_id

            def render():
                return layout_class(palette, language, banner_color).render(data)
        else:
            template_id = ''

            def render():
                return build_docx(data, palette, language)

        record = ExportRecord.objects.create(
            user=user,
            resume=resume,
            kind=fmt,
            template=template_id,
            palette=palette,
            banner_color=banner_color,
            language=language,
        )
        content = self._run(record, render)

        name = slugify(data['header']['full_name']) or slugify(user.username) or 'resume'
        return ExportResult(
            content=content,
            content_type=CONTENT_TYPES[fmt],
            filename=f"{name}-resume.{fmt}",
        )

    def export_banner(
        self,
        user,
        palette: Optional[str] = None,
        banner_color: Optional[str] = None,
        logo: str = '',
    ) -> ExportResult:
        """
        Capture the banner for a user as a PNG.

        Raises:
            ExportError: If the browser capture fails.
        """
        preferences = UserPreferences.for_user(user)
        palette = resolve_palette(palette or preferences.palette)
        banner_color = resolve_banner_color(banner_color or preferences.banner_color)

        try:
            resume = ResumeRepository.latest_for_user(user)
        except Resume.DoesNotExist:
            resume = None

        record = ExportRecord.objects.create(
            user=user,
            resume=resume,
            kind=ExportRecord.Kind.PNG,
            palette=palette,
            banner_color=banner_color,
        )
        token = make_banner_token(user)
        content = self._run(
            record,
            lambda: self.banner_service.capture(palette, banner_color, logo, token),
        )
        return ExportResult(
            content=content,
            content_type=CONTENT_TYPES[ExportRecord.Kind.PNG],
            filename=f"{slugify(user.username) or 'developer'}-banner.png",
        )

    @staticmethod
    def _run(record: ExportRecord, render: Callable[[], bytes]) -> bytes:
        record.start()
        logger.info("Export %s started (%s)", record.pk, record.kind)
        try:
            content = render()
        except Exception as exc:
            logger.exception("Export %s (%s) failed", record.pk, record.kind)
            record.fail(str(exc) or exc.__class__.__name__)
            raise ExportError(f"{record.kind} export failed") from exc

        record.finish(len(content))
        logger.info("Export %s finished (%d bytes)", record.pk, len(content))
        return content
