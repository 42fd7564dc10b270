"""
Unit tests for to_dict(), to_json() and to_xml().
"""

import json

from nitf_text import Document


class TestToDict:
    """Test document dictionary conversion."""

    def test_top_level_keys(self, doc):
        data = doc.to_dict()

        assert data["title"] == "Tech Industry Transformation"
        assert data["doc_id"] == "TECH-2024-001"
        assert data["issue_date"] == "2024-01-15"
        assert data["version"] == "-//IPTC//DTD NITF 3.6//EN"
        assert set(data) >= {"head", "body"}

    def test_body_section(self, doc):
        body = doc.to_dict()["body"]

        assert body["headline"]["primary"] == "Revolutionary Technology Changes Industry"
        assert body["byline"]["person"] == "Jane Smith"
        assert len(body["paragraphs"]) == 4
        assert body["media"][0]["width"] == 800
        assert body["block_quotes"] == ["Innovation distinguishes between a leader and a follower."]
        assert "footnotes" not in body

    def test_head_section(self, doc):
        head = doc.to_dict()["head"]

        assert head["docdata"]["release_date"] == "2024-01-15"
        assert head["docdata"]["series"]["total"] == 5
        assert head["keywords"] == ["technology", "innovation"]

    def test_missing_sections_are_omitted(self, head_only_doc):
        data = head_only_doc.to_dict()

        assert "body" not in data
        assert "issue_date" not in data
        assert data["head"] == {"title": "Head Only"}

    def test_footnotes_included(self, footnotes_doc):
        footnotes = footnotes_doc.to_dict()["body"]["footnotes"]
        assert [fn.get("label") for fn in footnotes] == ["1", "2", None]


class TestToJson:
    """Test JSON serialization."""

    def test_round_trips_through_json(self, doc):
        assert json.loads(doc.to_json()) == doc.to_dict()

    def test_unicode_not_escaped_by_default(self, unicode_doc):
        assert "José García" in unicode_doc.to_json()

    def test_kwargs_forwarded(self, unicode_doc):
        assert "\\u00e9" in unicode_doc.to_json(ensure_ascii=True)
        assert "\n" in unicode_doc.to_json(indent=2)


class TestToXml:
    """Test XML serialization."""

    def test_reparses_to_same_content(self, doc):
        reparsed = Document(doc.to_xml())

        assert reparsed.text == doc.text
        assert reparsed.all_people == doc.all_people

    def test_keeps_wrapper_root(self):
        doc = Document("<wrap><nitf><body/></nitf></wrap>")
        assert doc.to_xml().startswith("<wrap>")
