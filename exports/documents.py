"""
DOCX export built with python-docx.

Uses the same section content as the PDF layouts; the palette accent colors
the name and section headings.
"""
import io
import logging
from typing import Dict

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt, RGBColor

from accounts.themes import palette_colors

from .content import clean_content, contact_line, headings_for, resolve_language, section_entries
from .layouts import SECTION_ORDER

logger = logging.getLogger(__name__)

GREY = RGBColor(0x55, 0x55, 0x55)


def _rgb(hex_color: str) -> RGBColor:
    return RGBColor.from_string(hex_color.lstrip('#').upper())


def _add_heading(doc, text: str, accent: RGBColor) -> None:
    paragraph = doc.add_paragraph()
    paragraph.paragraph_format.space_before = Pt(10)
    paragraph.paragraph_format.space_after = Pt(3)
    run = paragraph.add_run(text.upper())
    run.bold = True
    run.font.size = Pt(12)
    run.font.color.rgb = accent


def build_docx(data: Dict, palette=None, language=None) -> bytes:
    """
    Render resume data to DOCX bytes.

    Args:
        data: Output of ``content.resume_content``
        palette: Palette name; unknown names use the default palette
        language: Heading language (en, pt-br, es)

    Returns:
        The .docx file contents.
    """
    data = clean_content(data)
    language = resolve_language(language)
    headings = headings_for(language)
    accent = _rgb(palette_colors(palette)['accent'])

    doc = Document()
    for section in doc.sections:
        section.top_margin = Inches(0.6)
        section.bottom_margin = Inches(0.6)
        section.left_margin = Inches(0.7)
        section.right_margin = Inches(0.7)

    style = doc.styles['Normal']
    style.font.name = 'Calibri'
    style.font.size = Pt(10)

    header = data['header']
    name_para = doc.add_paragraph()
    name_para.alignment = WD_ALIGN_PARAGRAPH.LEFT
    name_run = name_para.add_run(header.get('full_name') or '')
    name_run.bold = True
    name_run.font.size = Pt(22)
    name_run.font.color.rgb = accent
    name_para.paragraph_format.space_after = Pt(2)

    if header.get('headline'):
        headline_para = doc.add_paragraph()
        headline_run = headline_para.add_run(header['headline'])
        headline_run.font.size = Pt(12)
        headline_para.paragraph_format.space_after = Pt(2)

    contacts = contact_line(data)
    if contacts:
        contact_para = doc.add_paragraph()
        contact_run = contact_para.add_run(contacts)
        contact_run.font.size = Pt(9)
        contact_run.font.color.rgb = GREY

    bio = (data.get('profile') or {}).get('bio')
    if bio:
        _add_heading(doc, headings['profile'], accent)
        doc.add_paragraph(bio)

    for section in SECTION_ORDER:
        entries = section_entries(section, data.get(section) or [], language)
        if not entries:
            continue
        _add_heading(doc, headings[section], accent)

        for entry in entries:
            if section in ('skills', 'languages'):
                paragraph = doc.add_paragraph()
                paragraph.paragraph_format.space_after = Pt(1)
                detail = entry.body or entry.subtitle
                if entry.title:
                    paragraph.add_run(entry.title).bold = True
                    if detail:
                        paragraph.add_run(f": {detail}")
                else:
                    paragraph.add_run(detail)
                continue

            title_para = doc.add_paragraph()
            title_para.paragraph_format.space_after = Pt(0)
            title_para.add_run(entry.title).bold = True

            meta = ' | '.join(part for part in (entry.subtitle, entry.period) if part)
            if meta:
                meta_para = doc.add_paragraph()
                meta_para.paragraph_format.space_after = Pt(1)
                meta_run = meta_para.add_run(meta)
                meta_run.italic = True
                meta_run.font.size = Pt(9)
                meta_run.font.color.rgb = GREY

            if entry.body:
                body_para = doc.add_paragraph()
                body_run = body_para.add_run(entry.body)
                if section == 'recommendations':
                    body_run.italic = True

            if entry.tags:
                tags_para = doc.add_paragraph()
                tags_run = tags_para.add_run(', '.join(entry.tags))
                tags_run.font.size = Pt(9)
                tags_run.font.color.rgb = GREY

    interests = data.get('interests') or []
    if interests:
        _add_heading(doc, headings['interests'], accent)
        doc.add_paragraph(', '.join(interests))

    buffer = io.BytesIO()
    doc.save(buffer)
    content = buffer.getvalue()
    logger.debug("Rendered DOCX (%d bytes)", len(content))
    return content
