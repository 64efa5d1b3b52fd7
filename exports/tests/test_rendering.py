import io

from django.test import SimpleTestCase
from docx import Document

from exports.content import clean_content, format_month, format_period, section_entries, xml_safe
from exports.documents import build_docx
from exports.layouts import ClassicLayout, CreativeLayout, ModernLayout, get_layout


def sample_data() -> dict:
    return {
        "header": {"full_name": "Ada Lovelace", "headline": "Software Engineer", "email": "ada@example.com"},
        "profile": {"bio": "Writes <careful> & correct code.", "location": "London", "github": "https://github.com/ada"},
        "interests": ["mathematics", "poetry"],
        "experiences": [
            {
                "company": "Analytical Engines",
                "role": "Engineer",
                "location": "London",
                "start_date": "2020-01",
                "end_date": "",
                "is_current": True,
                "description": "Built the first program.\nDocumented it.",
                "technologies": ["Python", "Django"],
            },
        ],
        "education": [
            {"institution": "Home", "degree": "BSc", "field": "Mathematics", "start_date": "2010-09", "end_date": "2014-06"},
        ],
        "skills": [
            {"category": "Languages", "name": "Python"},
            {"category": "Languages", "name": "SQL"},
            {"category": "Tools", "name": "Docker"},
        ],
        "languages": [{"name": "English", "proficiency": "Native"}],
        "projects": [{"name": "Notes", "url": "https://example.com", "description": "Annotated paper", "technologies": []}],
        "certifications": [{"name": "AWS SA", "issuer": "AWS", "date": "2022-05", "url": ""}],
        "awards": [{"title": "Best Paper", "issuer": "RS", "date": "2021-11", "description": ""}],
        "recommendations": [{"recommender_name": "Charles", "relationship": "Colleague", "text": "Brilliant.", "date": ""}],
    }


class LayoutLookupTests(SimpleTestCase):
    def test_known_templates(self) -> None:
        self.assertIs(get_layout("classic"), ClassicLayout)
        self.assertIs(get_layout("MODERN"), ModernLayout)
        self.assertIs(get_layout("creative"), CreativeLayout)

    def test_unknown_template_falls_back_to_modern(self) -> None:
        with self.assertLogs("exports.layouts", level="WARNING"):
            self.assertIs(get_layout("baroque"), ModernLayout)
        with self.assertLogs("exports.layouts", level="WARNING"):
            self.assertIs(get_layout(None), ModernLayout)


class PDFRenderingTests(SimpleTestCase):
    def test_every_layout_renders_a_pdf(self) -> None:
        for layout_class in (ClassicLayout, ModernLayout, CreativeLayout):
            content = layout_class(palette="hotPink", language="es", banner_color="onyx").render(sample_data())
            self.assertTrue(content.startswith(b"%PDF"), layout_class.template_id)

    def test_unknown_template_still_yields_pdf(self) -> None:
        with self.assertLogs("exports.layouts", level="WARNING"):
            layout_class = get_layout("does-not-exist")
        content = layout_class(palette="not-a-palette").render(sample_data())
        self.assertTrue(content.startswith(b"%PDF"))

    def test_empty_resume_renders(self) -> None:
        data = {"header": {"full_name": ""}, "profile": {}, "interests": []}
        content = ModernLayout().render(data)
        self.assertTrue(content.startswith(b"%PDF"))


class DocxRenderingTests(SimpleTestCase):
    def test_docx_contains_name_and_localized_headings(self) -> None:
        content = build_docx(sample_data(), palette="teal", language="pt-br")

        self.assertTrue(content.startswith(b"PK"))
        document = Document(io.BytesIO(content))
        texts = [paragraph.text for paragraph in document.paragraphs]
        self.assertIn("Ada Lovelace", texts)
        self.assertIn("EXPERIÊNCIA", texts)
        self.assertIn("Languages: Python, SQL", texts)
        self.assertIn("Engineer", texts)

    def test_docx_tolerates_control_characters(self) -> None:
        data = sample_data()
        data["profile"]["bio"] = "Line one\x0bline two\x0c"
        data["experiences"][0]["role"] = "Eng\x01ineer"

        content = build_docx(data)

        texts = [paragraph.text for paragraph in Document(io.BytesIO(content)).paragraphs]
        self.assertIn("Line oneline two", texts)
        self.assertIn("Engineer", texts)


class ContentFormattingTests(SimpleTestCase):
    def test_xml_safe_strips_control_characters(self) -> None:
        self.assertEqual(xml_safe("a\x00b\x0bc\x1fd"), "abcd")
        self.assertEqual(xml_safe("tab\tnew\nline\r"), "tab\tnew\nline\r")

    def test_clean_content_walks_nested_data(self) -> None:
        cleaned = clean_content({"a": ["x\x0c", {"b": "y\x0b"}], "n": 3, "flag": True})
        self.assertEqual(cleaned, {"a": ["x", {"b": "y"}], "n": 3, "flag": True})

    def test_format_month(self) -> None:
        self.assertEqual(format_month("2024-03"), "03/2024")
        self.assertEqual(format_month(""), "")

    def test_format_period_localizes_present(self) -> None:
        self.assertEqual(format_period("2020-01", "", True, "pt-br"), "01/2020 - Atual")
        self.assertEqual(format_period("2020-01", "2021-02", False, "en"), "01/2020 - 02/2021")
        self.assertEqual(format_period("", "", False, "en"), "")

    def test_skills_grouped_by_category_in_order(self) -> None:
        entries = section_entries("skills", sample_data()["skills"], "en")
        self.assertEqual([(entry.title, entry.body) for entry in entries], [
            ("Languages", "Python, SQL"),
            ("Tools", "Docker"),
        ])
