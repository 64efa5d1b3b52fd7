"""
Exports app models

ExportRecord keeps the history of export requests and tracks each one
through IDLE -> RENDERING -> DONE | FAILED.
"""
from django.conf import settings
from django.db import models
from django.utils import timezone


class InvalidTransition(Exception):
    """
    Raised when an export record is moved to a state it cannot reach.
    """


class ExportRecord(models.Model):
    """
    One export attempt (PDF, DOCX or banner PNG).
    """

    class Status(models.TextChoices):
        IDLE = 'IDLE', 'Idle'
        RENDERING = 'RENDERING', 'Rendering'
        DONE = 'DONE', 'Done'
        FAILED = 'FAILED', 'Failed'

    class Kind(models.TextChoices):
        PDF = 'pdf', 'PDF'
        DOCX = 'docx', 'DOCX'
        PNG = 'png', 'PNG banner'

    TRANSITIONS = {
        Status.IDLE: {Status.RENDERING},
        Status.RENDERING: {Status.DONE, Status.FAILED},
        Status.DONE: set(),
        Status.FAILED: set(),
    }

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='exports',
    )
    resume = models.ForeignKey(
        'resumes.Resume',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='exports',
    )
    kind = models.CharField(max_length=8, choices=Kind.choices)
    template = models.CharField(max_length=20, blank=True)
    palette = models.CharField(max_length=32, blank=True)
    banner_color = models.CharField(max_length=32, blank=True)
    language = models.CharField(max_length=8, blank=True)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.IDLE,
    )
    byte_size = models.PositiveIntegerField(default=0)
    error_message = models.TextField(blank=True)
    started_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.get_kind_display()} export for {self.user.username} ({self.status})"

    def _transition(self, target: str) -> None:
        allowed = self.TRANSITIONS[self.Status(self.status)]
        if target not in allowed:
            raise InvalidTransition(f"Cannot move export {self.pk} from {self.status} to {target}")
        self.status = target

    def start(self) -> None:
        self._transition(self.Status.RENDERING)
        self.started_at = timezone.now()
        self.save(update_fields=['status', 'started_at', 'updated_at'])

    def finish(self, byte_size: int) -> None:
        self._transition(self.Status.DONE)
        self.byte_size = byte_size
        self.completed_at = timezone.now()
        self.save(update_fields=['status', 'byte_size', 'completed_at', 'updated_at'])

    def fail(self, message: str) -> None:
        self._transition(self.Status.FAILED)
        self.error_message = message
        self.completed_at = timezone.now()
        self.save(update_fields=['status', 'error_message', 'completed_at', 'updated_at'])

    class Meta:
        verbose_name = 'Export Record'
        verbose_name_plural = 'Export Records'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['status', 'created_at'], name='export_status_created_idx'),
        ]
