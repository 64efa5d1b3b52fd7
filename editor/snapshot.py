"""
Shape of a resume snapshot as exchanged with the API.
"""
import copy
from typing import Dict

SECTIONS = (
    'experiences',
    'education',
    'skills',
    'languages',
    'projects',
    'certifications',
    'awards',
    'recommendations',
)

HEADER_FIELDS = ('full_name', 'headline', 'email')
PROFILE_FIELDS = ('bio', 'location', 'phone', 'website', 'linkedin', 'github')


def empty_snapshot() -> Dict:
    snapshot = {
        'id': None,
        'title': '',
        'template': 'modern',
        'header': {field: '' for field in HEADER_FIELDS},
        'profile': {field: '' for field in PROFILE_FIELDS},
        'interests': [],
    }
    for section in SECTIONS:
        snapshot[section] = []
    return snapshot


def snapshot_from_resume(resume: Dict) -> Dict:
    """Keep only the editable parts of a resume returned by the API."""
    snapshot = empty_snapshot()
    snapshot['id'] = resume.get('id')
    snapshot['title'] = resume.get('title') or ''
    snapshot['template'] = resume.get('template') or snapshot['template']
    header = resume.get('header') or {}
    snapshot['header'] = {field: header.get(field) or '' for field in HEADER_FIELDS}
    profile = resume.get('profile') or {}
    snapshot['profile'] = {field: profile.get(field) or '' for field in PROFILE_FIELDS}
    snapshot['interests'] = list(resume.get('interests') or [])
    for section in SECTIONS:
        snapshot[section] = copy.deepcopy(list(resume.get(section) or []))
    return snapshot
