"""
PDF layouts for resume export, rendered with reportlab.

``get_layout`` maps a template id to a layout class and falls back to the
modern layout for anything it does not know.
"""
import io
import logging
from typing import Dict, List
from xml.sax.saxutils import escape

from django.conf import settings
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import HRFlowable, KeepTogether, Paragraph, SimpleDocTemplate, Spacer

from accounts.themes import banner_colors, palette_colors

from .content import Entry, contact_line, headings_for, resolve_language, section_entries

logger = logging.getLogger(__name__)

SECTION_ORDER = [
    'experiences',
    'education',
    'projects',
    'skills',
    'languages',
    'certifications',
    'awards',
    'recommendations',
]


def _text(value) -> str:
    return escape(str(value or ''))


class PDFLayout:
    """
    Base layout. Subclasses tune styles and page decoration.
    """

    template_id = ''
    font = 'Helvetica'
    bold_font = 'Helvetica-Bold'
    italic_font = 'Helvetica-Oblique'
    header_alignment = TA_LEFT
    margin = 18 * mm
    top_margin = 18 * mm

    def __init__(self, palette=None, language=None, banner_color=None):
        self.palette = palette_colors(palette)
        self.banner = banner_colors(banner_color)
        self.language = resolve_language(language)
        self.headings = headings_for(self.language)
        self.accent = colors.HexColor(self.palette['accent'])
        self.styles = self.build_styles()

    def build_styles(self) -> Dict[str, ParagraphStyle]:
        return {
            'name': ParagraphStyle(
                'name', fontName=self.bold_font, fontSize=22, leading=26,
                alignment=self.header_alignment, textColor=colors.black,
            ),
            'headline': ParagraphStyle(
                'headline', fontName=self.font, fontSize=12, leading=15,
                alignment=self.header_alignment, textColor=colors.HexColor('#444444'),
            ),
            'contact': ParagraphStyle(
                'contact', fontName=self.font, fontSize=8.5, leading=11,
                alignment=self.header_alignment, textColor=colors.HexColor('#555555'),
            ),
            'heading': ParagraphStyle(
                'heading', fontName=self.bold_font, fontSize=12, leading=15,
                spaceBefore=8, spaceAfter=2, textColor=colors.black,
            ),
            'entry_title': ParagraphStyle(
                'entry_title', fontName=self.bold_font, fontSize=10, leading=13,
            ),
            'entry_meta': ParagraphStyle(
                'entry_meta', fontName=self.italic_font, fontSize=8.5, leading=11,
                textColor=colors.HexColor('#555555'),
            ),
            'body': ParagraphStyle(
                'body', fontName=self.font, fontSize=9.5, leading=12.5, spaceAfter=4,
            ),
        }

    def render(self, data: Dict) -> bytes:
        """
        Render resume data to PDF bytes.
        """
        buffer = io.BytesIO()
        name = data['header'].get('full_name') or 'Resume'
        document = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=self.margin,
            rightMargin=self.margin,
            topMargin=self.top_margin,
            bottomMargin=self.margin,
            title=f"{name} - Resume",
            author=name,
        )
        document.build(
            self.build_story(data),
            onFirstPage=self.decorate_first_page,
            onLaterPages=self.decorate_later_pages,
        )
        content = buffer.getvalue()
        logger.debug("Rendered %s PDF (%d bytes)", self.template_id, len(content))
        return content

    def build_story(self, data: Dict) -> List:
        story = self.header_flowables(data)

        bio = (data.get('profile') or {}).get('bio')
        if bio:
            story += self.heading_flowables(self.headings['profile'])
            story.append(Paragraph(_text(bio), self.styles['body']))

        for section in SECTION_ORDER:
            entries = section_entries(section, data.get(section) or [], self.language)
            if not entries:
                continue
            story += self.heading_flowables(self.headings[section])
            for entry in entries:
                story.append(KeepTogether(self.entry_flowables(section, entry)))

        interests = data.get('interests') or []
        if interests:
            story += self.heading_flowables(self.headings['interests'])
            story.append(Paragraph(_text(', '.join(interests)), self.styles['body']))
        return story

    def header_flowables(self, data: Dict) -> List:
        header = data['header']
        flowables = [Paragraph(_text(header.get('full_name')), self.styles['name'])]
        if header.get('headline'):
            flowables.append(Paragraph(_text(header['headline']), self.styles['headline']))
        contacts = contact_line(data)
        if contacts:
            flowables.append(Paragraph(_text(contacts), self.styles['contact']))
        flowables.append(Spacer(1, 4 * mm))
        return flowables

    def heading_flowables(self, title: str) -> List:
        return [
            Paragraph(_text(title.upper()), self.styles['heading']),
            HRFlowable(width='100%', thickness=0.6, color=colors.black, spaceAfter=4),
        ]

    def entry_flowables(self, section: str, entry: Entry) -> List:
        if section in ('skills', 'languages'):
            label = f"<b>{_text(entry.title)}</b>" if entry.title else ''
            detail = entry.body or entry.subtitle
            if label and detail:
                text = f"{label}: {_text(detail)}"
            else:
                text = label or _text(detail)
            return [Paragraph(text, self.styles['body'])]

        flowables = [Paragraph(_text(entry.title), self.styles['entry_title'])]
        meta = ' | '.join(part for part in (entry.subtitle, entry.period) if part)
        if meta:
            flowables.append(Paragraph(_text(meta), self.styles['entry_meta']))
        if entry.body:
            body = _text(entry.body).replace('\n', '<br/>')
            if section == 'recommendations':
                body = f'<i>"{body}"</i>'
            flowables.append(Paragraph(body, self.styles['body']))
        if entry.tags:
            flowables.append(Paragraph(_text(', '.join(entry.tags)), self.styles['entry_meta']))
        flowables.append(Spacer(1, 2 * mm))
        return flowables

    def decorate_first_page(self, canvas, document) -> None:
        pass

    def decorate_later_pages(self, canvas, document) -> None:
        pass


class ClassicLayout(PDFLayout):
    """Centered, monochrome, serif."""

    template_id = 'classic'
    font = 'Times-Roman'
    bold_font = 'Times-Bold'
    italic_font = 'Times-Italic'
    header_alignment = TA_CENTER


class ModernLayout(PDFLayout):
    """Accent-colored name, headings and rules."""

    template_id = 'modern'

    def build_styles(self):
        styles = super().build_styles()
        styles['name'].textColor = self.accent
        styles['heading'].textColor = self.accent
        return styles

    def heading_flowables(self, title):
        return [
            Paragraph(_text(title), self.styles['heading']),
            HRFlowable(width='100%', thickness=1.2, color=self.accent, spaceAfter=4),
        ]


class CreativeLayout(ModernLayout):
    """Banner-colored band behind the header and an accent stripe on every page."""

    template_id = 'creative'
    band_height = 42 * mm
    top_margin = 12 * mm

    def build_styles(self):
        styles = super().build_styles()
        banner_text = colors.HexColor(self.banner['text'])
        styles['name'].textColor = banner_text
        styles['headline'].textColor = self.accent
        styles['contact'].textColor = banner_text
        return styles

    def decorate_first_page(self, canvas, document):
        width, height = document.pagesize
        canvas.saveState()
        canvas.setFillColor(colors.HexColor(self.banner['bg']))
        canvas.rect(0, height - self.band_height, width, self.band_height, stroke=0, fill=1)
        canvas.restoreState()
        self.decorate_later_pages(canvas, document)

    def decorate_later_pages(self, canvas, document):
        width, height = document.pagesize
        canvas.saveState()
        canvas.setFillColor(self.accent)
        canvas.rect(0, 0, 4 * mm, height, stroke=0, fill=1)
        canvas.restoreState()


LAYOUTS = {
    ClassicLayout.template_id: ClassicLayout,
    ModernLayout.template_id: ModernLayout,
    CreativeLayout.template_id: CreativeLayout,
}


def default_layout() -> type:
    return LAYOUTS.get(settings.EXPORT_DEFAULT_TEMPLATE, ModernLayout)


def get_layout(template_id) -> type:
    """
    Layout class for a template id; unknown ids get the default layout.
    """
    layout = LAYOUTS.get((template_id or '').lower())
    if layout is None:
        fallback = default_layout()
        logger.warning("Unknown resume template %r. Using '%s'", template_id, fallback.template_id)
        return fallback
    return layout
