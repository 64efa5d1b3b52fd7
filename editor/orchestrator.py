"""
Save Orchestrator
Sends the full draft snapshot to the server: POST for a new resume, PUT for
an existing one. No retries.
"""
import copy
import logging
import uuid
from typing import Dict, Optional

from .client import ResumeApiClient, ResumeApiError
from .snapshot import SECTIONS

logger = logging.getLogger(__name__)


class SaveError(Exception):
    """
    Save failed. ``message`` is the server's message when there was one.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SaveOrchestrator:
    def __init__(self, client: ResumeApiClient):
        self.client = client

    @staticmethod
    def prepare(snapshot: Dict) -> Dict:
        """
        Copy of ``snapshot`` ready to send. Items without a ``client_id``
        get one; ``order`` is dropped since list position is the order.
        """
        payload = copy.deepcopy(snapshot)
        for section in SECTIONS:
            items = payload.get(section) or []
            for item in items:
                if not item.get('client_id'):
                    item['client_id'] = str(uuid.uuid4())
                item.pop('order', None)
            payload[section] = items
        return payload

    def save(self, user_id, snapshot: Dict) -> Dict:
        """
        Persist ``snapshot`` and return the server's copy of the resume.

        The server assigns the owner from the authenticated session;
        ``user_id`` is only used for logging.

        Raises:
            SaveError: On any transport or validation failure.
        """
        payload = self.prepare(snapshot)
        resume_id = payload.pop('id', None)

        try:
            if resume_id is None:
                saved = self.client.create_resume(payload)
            else:
                saved = self.client.update_resume(resume_id, payload)
        except ResumeApiError as exc:
            logger.error("Saving resume %s for user %s failed: %s", resume_id, user_id, exc.message)
            raise SaveError(exc.message, exc.status_code) from exc

        logger.info("Saved resume %s for user %s", saved.get('id'), user_id)
        return saved
