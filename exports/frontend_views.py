"""
Frontend views for exports app.
"""
import logging

from django.shortcuts import render

from accounts.models import User
from accounts.themes import banner_colors, palette_colors, resolve_banner_color, resolve_palette
from resumes.models import Resume
from resumes.services import ResumeRepository

from .formatting import SAMPLE_DEV, format_developer_card
from .services import user_id_from_banner_token

logger = logging.getLogger(__name__)

STACK_SIZE = 5


def developer_card(user) -> dict:
    """Card data for a user, built from their latest resume."""
    name = user.get_full_name() or user.username
    try:
        resume = ResumeRepository.latest_for_user(user)
    except Resume.DoesNotExist:
        return {'name': name}

    experiences = list(resume.experiences.all())
    current = next((exp for exp in experiences if exp.is_current), None)
    if current is None and experiences:
        current = experiences[0]

    dev = {'name': resume.full_name or name}
    role = resume.headline or (current.role if current else '')
    if role:
        dev['role'] = role
    stack = [skill.name for skill in list(resume.skills.all())[:STACK_SIZE]]
    if stack:
        dev['stack'] = stack
    if current is not None:
        dev['company'] = current.company
    return dev


def _banner_user(request):
    user_id = user_id_from_banner_token(request.GET.get('token', ''))
    if user_id is not None:
        return User.objects.filter(pk=user_id).first()
    if request.user.is_authenticated:
        return request.user
    return None


def banner_page(request):
    """
    Render-ready banner page captured by the banner export.

    The headless browser has no session, so the user comes from a signed
    ``token``; without one the page shows a sample card.
    """
    palette = resolve_palette(request.GET.get('palette'))
    banner_color = resolve_banner_color(request.GET.get('bannerColor'))
    banner = banner_colors(banner_color)

    user = _banner_user(request)
    dev = developer_card(user) if user is not None else SAMPLE_DEV

    context = {
        'palette': palette,
        'banner_color': banner_color,
        'colors': palette_colors(palette),
        'banner': banner,
        'logo': request.GET.get('logo', ''),
        'code': format_developer_card(dev, palette, banner['text']),
    }
    return render(request, 'exports/banner.html', context)
