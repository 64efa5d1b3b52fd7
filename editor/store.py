"""
Client-side draft store for the resume editor.

Holds the in-progress resume, the last saved baseline, and the loading/error
flags. One store per editing session; only its owner mutates it. Concurrent
saves are not serialized here, so callers debounce.
"""
import copy
import logging
import uuid
from functools import partialmethod
from typing import Dict, List, Optional

from .client import ResumeApiClient, ResumeApiError
from .orchestrator import SaveError, SaveOrchestrator
from .snapshot import HEADER_FIELDS, PROFILE_FIELDS, SECTIONS, empty_snapshot, snapshot_from_resume

logger = logging.getLogger(__name__)


class ResumeDraftStore:
    """
    Editable resume draft.

    Mutations are synchronous and local; only ``load`` and ``save`` touch
    the network.
    """

    def __init__(self, client: ResumeApiClient, orchestrator: Optional[SaveOrchestrator] = None):
        self.client = client
        self.orchestrator = orchestrator or SaveOrchestrator(client)
        self.is_loading = False
        self.is_saving = False
        self.error: Optional[str] = None
        self._draft = empty_snapshot()
        self._baseline = empty_snapshot()

    # Reading

    @property
    def snapshot(self) -> Dict:
        return copy.deepcopy(self._draft)

    @property
    def resume_id(self) -> Optional[int]:
        return self._draft['id']

    @property
    def header(self) -> Dict:
        return dict(self._draft['header'])

    @property
    def profile(self) -> Dict:
        return dict(self._draft['profile'])

    @property
    def interests(self) -> List[str]:
        return list(self._draft['interests'])

    def section(self, section: str) -> List[Dict]:
        return copy.deepcopy(self._items(section))

    @property
    def has_changes(self) -> bool:
        """True when the draft differs from the last loaded or saved snapshot."""
        return self._draft != self._baseline

    def _items(self, section: str) -> List[Dict]:
        if section not in SECTIONS:
            raise ValueError(f"Unknown resume section: {section}")
        return self._draft[section]

    def _reset(self, snapshot: Dict) -> None:
        self._draft = snapshot
        self._baseline = copy.deepcopy(snapshot)

    # Network

    def load(self, user_id: Optional[int] = None) -> bool:
        """
        Replace the draft with the user's most recent resume.

        On failure ``error`` is set, the current draft is kept and False is
        returned. An empty list leaves an empty draft; the first save creates
        the resume.
        """
        self.is_loading = True
        self.error = None
        try:
            resumes = self.client.list_resumes(user_id=user_id)
        except ResumeApiError as exc:
            logger.warning("Loading resume for user %s failed: %s", user_id, exc.message)
            self.error = f"Could not load your resume: {exc.message}"
            return False
        finally:
            self.is_loading = False

        if resumes:
            latest = max(resumes, key=lambda resume: resume.get('updated_at') or '')
            self._reset(snapshot_from_resume(latest))
        else:
            self._reset(empty_snapshot())
        return True

    def save(self, user_id: Optional[int] = None) -> Dict:
        """
        Persist the draft. On success the draft becomes the server copy
        (server ids filled in) and ``has_changes`` is False.

        Raises:
            SaveError: After recording the message in ``error``.
        """
        self.is_saving = True
        self.error = None
        try:
            saved = self.orchestrator.save(user_id, self.snapshot)
        except SaveError as exc:
            self.error = f"Could not save your resume: {exc.message}"
            raise
        finally:
            self.is_saving = False

        self._reset(snapshot_from_resume(saved))
        return self.snapshot

    def discard_changes(self) -> None:
        self._draft = copy.deepcopy(self._baseline)

    # Editing

    def update_header(self, header: Dict) -> None:
        self._draft['header'] = {field: header.get(field) or '' for field in HEADER_FIELDS}

    def update_profile(self, profile: Dict) -> None:
        self._draft['profile'] = {field: profile.get(field) or '' for field in PROFILE_FIELDS}

    def update_interests(self, interests: List[str]) -> None:
        self._draft['interests'] = list(interests)

    def update_template(self, template: str) -> None:
        self._draft['template'] = template

    def update_section(self, section: str, items: List[Dict]) -> None:
        """Replace a whole section."""
        self._items(section)
        self._draft[section] = copy.deepcopy(list(items))

    update_experiences = partialmethod(update_section, 'experiences')
    update_education = partialmethod(update_section, 'education')
    update_skills = partialmethod(update_section, 'skills')
    update_languages = partialmethod(update_section, 'languages')
    update_projects = partialmethod(update_section, 'projects')
    update_certifications = partialmethod(update_section, 'certifications')
    update_awards = partialmethod(update_section, 'awards')
    update_recommendations = partialmethod(update_section, 'recommendations')

    def add_item(self, section: str, **fields) -> Dict:
        """Append an item with a fresh ``client_id`` and return a copy of it."""
        item = {'client_id': str(uuid.uuid4())}
        item.update(fields)
        self._items(section).append(item)
        return dict(item)

    def remove_item(self, section: str, index: int) -> Dict:
        return self._items(section).pop(index)

    def move_item(self, section: str, from_index: int, to_index: int) -> None:
        """Drag-and-drop reorder: ``[A, B, C]`` moving 2 to 0 gives ``[C, A, B]``."""
        items = self._items(section)
        item = items.pop(from_index)
        items.insert(to_index, item)
