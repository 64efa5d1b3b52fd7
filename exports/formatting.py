"""
Developer card rendered as syntax-colored code for the banner page.
"""
from typing import Dict, List, Optional

from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString, mark_safe

from accounts.themes import palette_colors

SAMPLE_DEV = {
    'name': 'Ada Lovelace',
    'role': 'Software Engineer',
    'stack': ['Python', 'Django', 'PostgreSQL'],
    'company': 'Analytical Engines',
}


def _indent(level: int) -> SafeString:
    return mark_safe('&nbsp;' * (level * 2))


def _format_array(key: str, values: List[str], accent: str, text_color: str) -> SafeString:
    lines = [format_html("{}<span style='color:{}'>{}</span>: [", _indent(1), text_color, key)]
    for index, value in enumerate(values):
        lines.append(format_html(
            "{}<span style='color:{}'>&quot;{}&quot;</span>{}",
            _indent(2),
            accent,
            value,
            ',' if index < len(values) - 1 else '',
        ))
    lines.append(format_html("{}],", _indent(1)))
    return mark_safe('<br>'.join(lines))


def format_developer_card(dev: Dict, palette=None, text_color: Optional[str] = None) -> SafeString:
    """
    Render ``dev`` as a ``const dev = {...};`` block of colored spans.

    Keys use ``text_color`` (the palette key color by default), values the
    palette accent. Values are HTML-escaped.
    """
    colors = palette_colors(palette)
    accent = colors['accent']
    secondary = colors['secondary']
    text_color = text_color or colors['key']

    lines = [format_html(
        "<span style='color:{0};font-weight:bold;text-shadow:0 0 1px {0},0 0 12px {0}99;'>const</span> "
        "<span style='color:{1};font-weight:bold;'>dev</span> "
        "<span style='color:{1}'>=</span> {{",
        secondary,
        text_color,
    )]
    for key, value in dev.items():
        if isinstance(value, (list, tuple)):
            lines.append(_format_array(key, [str(item) for item in value], accent, text_color))
        else:
            lines.append(format_html(
                "{}<span style='color:{}'>{}</span>: <span style='color:{}'>&quot;{}&quot;</span>,",
                _indent(1),
                text_color,
                key,
                accent,
                value,
            ))
    lines.append(mark_safe('};'))
    return format_html_join(mark_safe('<br>'), '{}', ((line,) for line in lines))
