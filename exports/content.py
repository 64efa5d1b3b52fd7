"""
Document content shared by the PDF and DOCX renderers.

Turns a stored Resume into a plain dictionary and flattens each section into
display entries so every layout renders the same text.
"""
import re
from dataclasses import dataclass, field
from typing import Dict, List

from resumes.models import SECTION_MODELS, Resume

DEFAULT_LANGUAGE = 'en'

# Characters XML 1.0 cannot carry; python-docx refuses them.
XML_ILLEGAL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")

HEADINGS = {
    'en': {
        'profile': 'Profile',
        'experiences': 'Experience',
        'education': 'Education',
        'skills': 'Skills',
        'languages': 'Languages',
        'projects': 'Projects',
        'certifications': 'Certifications',
        'awards': 'Awards',
        'recommendations': 'Recommendations',
        'interests': 'Interests',
        'present': 'Present',
    },
    'pt-br': {
        'profile': 'Perfil',
        'experiences': 'Experiência',
        'education': 'Formação',
        'skills': 'Habilidades',
        'languages': 'Idiomas',
        'projects': 'Projetos',
        'certifications': 'Certificações',
        'awards': 'Prêmios',
        'recommendations': 'Recomendações',
        'interests': 'Interesses',
        'present': 'Atual',
    },
    'es': {
        'profile': 'Perfil',
        'experiences': 'Experiencia',
        'education': 'Educación',
        'skills': 'Habilidades',
        'languages': 'Idiomas',
        'projects': 'Proyectos',
        'certifications': 'Certificaciones',
        'awards': 'Premios',
        'recommendations': 'Recomendaciones',
        'interests': 'Intereses',
        'present': 'Actualidad',
    },
}


def resolve_language(language) -> str:
    language = (language or '').lower()
    if language in HEADINGS:
        return language
    return DEFAULT_LANGUAGE


def headings_for(language) -> Dict[str, str]:
    return HEADINGS[resolve_language(language)]


@dataclass
class Entry:
    """One displayable item of a section."""

    title: str
    subtitle: str = ''
    period: str = ''
    body: str = ''
    tags: List[str] = field(default_factory=list)


def resume_content(resume: Resume) -> Dict:
    """
    Snapshot a stored resume into plain data for rendering.

    Every string is passed through ``xml_safe`` so both renderers accept it.
    """
    data = {
        'header': {
            'full_name': resume.full_name or resume.user.get_full_name() or resume.user.username,
            'headline': resume.headline,
            'email': resume.email,
        },
        'profile': {
            'bio': resume.bio,
            'location': resume.location,
            'phone': resume.phone,
            'website': resume.website,
            'linkedin': resume.linkedin,
            'github': resume.github,
        },
        'interests': list(resume.interests or []),
    }
    for section in SECTION_MODELS:
        data[section] = [_item_dict(obj) for obj in getattr(resume, section).all()]
    return clean_content(data)


def xml_safe(text: str) -> str:
    """Drop control characters that XML documents cannot contain."""
    return XML_ILLEGAL_CHARS.sub('', text)


def clean_content(value):
    """Apply ``xml_safe`` to every string in nested dicts and lists."""
    if isinstance(value, str):
        return xml_safe(value)
    if isinstance(value, dict):
        return {key: clean_content(item) for key, item in value.items()}
    if isinstance(value, list):
        return [clean_content(item) for item in value]
    return value


def _item_dict(obj) -> Dict:
    values = {}
    for model_field in obj._meta.concrete_fields:
        if model_field.name in ('id', 'resume', 'client_id'):
            continue
        values[model_field.name] = getattr(obj, model_field.name)
    return values


def format_month(value: str) -> str:
    """'2024-03' -> '03/2024'."""
    if not value or '-' not in value:
        return value or ''
    year, month = value.split('-', 1)
    return f"{month}/{year}"


def format_period(start: str, end: str, current: bool, language) -> str:
    start_text = format_month(start)
    if current:
        end_text = headings_for(language)['present']
    else:
        end_text = format_month(end)
    if start_text and end_text:
        return f"{start_text} - {end_text}"
    return start_text or end_text


def section_entries(section: str, items: List[Dict], language) -> List[Entry]:
    """
    Flatten a section's items into entries. Skills are grouped by category.
    """
    if section == 'skills':
        groups: Dict[str, List[str]] = {}
        for item in items:
            groups.setdefault(item.get('category') or '', []).append(item['name'])
        return [Entry(title=category, body=', '.join(names)) for category, names in groups.items()]

    if section == 'languages':
        return [
            Entry(title=item['name'], subtitle=item.get('proficiency', ''))
            for item in items
        ]

    entries = []
    for item in items:
        if section == 'experiences':
            subtitle = ', '.join(part for part in (item['company'], item.get('location', '')) if part)
            entries.append(Entry(
                title=item['role'],
                subtitle=subtitle,
                period=format_period(item['start_date'], item['end_date'], item['is_current'], language),
                body=item.get('description', ''),
                tags=list(item.get('technologies') or []),
            ))
        elif section == 'education':
            title = ' - '.join(part for part in (item.get('degree', ''), item.get('field', '')) if part)
            entries.append(Entry(
                title=title or item['institution'],
                subtitle=item['institution'] if title else '',
                period=format_period(item['start_date'], item['end_date'], False, language),
                body=item.get('description', ''),
            ))
        elif section == 'projects':
            entries.append(Entry(
                title=item['name'],
                subtitle=item.get('url', ''),
                period=format_period(item.get('start_date', ''), item.get('end_date', ''), False, language),
                body=item.get('description', ''),
                tags=list(item.get('technologies') or []),
            ))
        elif section == 'certifications':
            entries.append(Entry(
                title=item['name'],
                subtitle=item.get('issuer', ''),
                period=format_month(item.get('date', '')),
                body=item.get('url', ''),
            ))
        elif section == 'awards':
            entries.append(Entry(
                title=item['title'],
                subtitle=item.get('issuer', ''),
                period=format_month(item.get('date', '')),
                body=item.get('description', ''),
            ))
        elif section == 'recommendations':
            entries.append(Entry(
                title=item['recommender_name'],
                subtitle=item.get('relationship', ''),
                period=format_month(item.get('date', '')),
                body=item['text'],
            ))
    return entries


def contact_line(data: Dict) -> str:
    profile = data.get('profile') or {}
    parts = [
        data['header'].get('email', ''),
        profile.get('phone', ''),
        profile.get('location', ''),
        profile.get('website', ''),
        profile.get('linkedin', ''),
        profile.get('github', ''),
    ]
    return ' | '.join(part for part in parts if part)
