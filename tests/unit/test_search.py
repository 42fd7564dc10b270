"""
Unit tests for search pattern building and the query layer.

Covers literal escaping, flag handling, match reporting, excerpts and
entity-based paragraph filtering over the sample article.
"""

import re
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from nitf_text import Document, MediaType, NITFError, SearchPatternError
from nitf_text.config import reset_config
from nitf_text.search import build_search_pattern
from nitf_text.search.query import count_occurrences, excerpt, search


class TestBuildSearchPattern:
    """Test the single pattern chokepoint."""

    def test_literal_is_escaped(self):
        pattern = build_search_pattern("tech.")
        assert pattern.search("techX") is None
        assert pattern.search("TECH.") is not None

    def test_literal_case_sensitive(self):
        pattern = build_search_pattern("Tech", case_sensitive=True)
        assert pattern.search("tech") is None
        assert pattern.flags & re.IGNORECASE == 0

    def test_compiled_pattern_passes_through_when_case_sensitive(self):
        original = re.compile(r"^tech", re.MULTILINE)
        assert build_search_pattern(original, case_sensitive=True) is original

    def test_compiled_pattern_gains_ignorecase(self):
        original = re.compile(r"^tech", re.MULTILINE)
        pattern = build_search_pattern(original)

        assert pattern.flags & re.IGNORECASE
        assert pattern.flags & re.MULTILINE
        assert pattern.search("intro\nTECH") is not None

    def test_recompile_failure_raises_search_pattern_error(self):
        original = re.compile(r"x", re.MULTILINE)

        with patch.object(re, 'compile', side_effect=re.error("conflicting flags")):
            with pytest.raises(SearchPatternError) as exc_info:
                build_search_pattern(original)

        assert exc_info.value.pattern == "x"
        assert exc_info.value.flags == re.MULTILINE | re.IGNORECASE | re.UNICODE
        assert isinstance(exc_info.value.__cause__, re.error)

    def test_recompile_failure_is_an_nitf_error(self):
        with patch.object(re, 'compile', side_effect=re.error("boom")):
            with pytest.raises(NITFError):
                build_search_pattern(re.compile("x"))

    def test_non_string_query_is_stringified(self):
        assert build_search_pattern(2024).search("in 2024") is not None


class TestSearch:
    """Test paragraph-level match reporting."""

    def test_matches_in_document_order(self, doc):
        matches = doc.search("technology")

        assert [(m.paragraph_index, m.position) for m in matches] == [
            (0, doc.paragraphs[0].text.lower().index("technology")),
            (3, doc.paragraphs[3].text.lower().index("technology")),
        ]
        assert all(m.match == "technology" for m in matches)
        assert matches[1].paragraph is doc.paragraphs[3]

    def test_case_sensitive(self, doc):
        assert doc.search("Technology", case_sensitive=True) == []

    def test_compiled_pattern(self, doc):
        matches = doc.search(re.compile(r"San \w+"))
        assert [m.match for m in matches] == ["San Francisco", "San Francisco"]

    def test_multiple_matches_in_one_paragraph(self):
        doc = Document("<nitf><body><body.content><p>ab ab ab</p></body.content></body></nitf>")
        assert [m.position for m in doc.search("ab")] == [0, 3, 6]

    def test_empty_query_matches_every_position(self):
        doc = Document("<nitf><body><body.content><p>abc</p></body.content></body></nitf>")
        matches = doc.search("")

        assert len(matches) == 4
        assert [m.position for m in matches] == [0, 1, 2, 3]

    def test_count_equals_sum_of_paragraph_matches(self, doc):
        for query in ("the", "san francisco", "o", "TechCorp"):
            assert doc.count_occurrences(query) == len(doc.search(query))

    def test_search_match_is_immutable(self, doc):
        match = doc.search("technology")[0]
        with pytest.raises(ValidationError):
            match.position = 1


class TestContainsAndCount:
    """Test whole-document text queries."""

    def test_contains(self, doc):
        assert doc.contains("TECHCORP")
        assert not doc.contains("TECHCORP", case_sensitive=True)
        assert not doc.contains("blockchain")

    def test_count(self, doc):
        assert doc.count_occurrences("technology") == 2
        assert doc.count_occurrences("San Francisco") == 2
        assert doc.count_occurrences("zebra") == 0

    def test_count_function_on_plain_text(self):
        assert count_occurrences("aaaa", "aa") == 2

    def test_paragraphs_containing(self, doc):
        paras = doc.paragraphs_containing("san francisco")
        assert [p.id for p in paras] == ["p2", "p4"]


class TestExcerpt:
    """Test the context window around the first match."""

    def test_window_with_both_ellipses(self):
        text = ("x" * 50) + "technology" + ("y" * 140)
        assert len(text) == 200

        result = excerpt(text, "technology", context_chars=10)

        assert result == "..." + ("x" * 10) + "technology" + ("y" * 10) + "..."

    def test_zero_context_returns_match(self):
        assert excerpt("one two three", "TWO", context_chars=0) == "...two..."

    def test_large_context_returns_whole_text(self):
        assert excerpt("one two three", "two", context_chars=1000) == "one two three"

    def test_match_at_start(self):
        assert excerpt("one two three", "one", context_chars=4) == "one two..."

    def test_match_at_end(self):
        assert excerpt("one two three", "three", context_chars=4) == "...two three"

    def test_no_match(self):
        assert excerpt("one two three", "four") is None

    def test_negative_context_raises(self):
        with pytest.raises(ValueError):
            excerpt("text", "t", context_chars=-1)

    def test_document_excerpt_uses_configured_default(self, doc, monkeypatch):
        monkeypatch.setenv("NITF_EXCERPT_CONTEXT_CHARS", "5")
        reset_config()

        result = doc.excerpt("TechCorp")

        assert result == "...from TechCorp Inc ..."

    def test_document_excerpt_spans_paragraph_separator(self, doc):
        result = doc.excerpt("The announcement", context_chars=3)
        assert result == "....\n\nThe announcement wa..."


class TestParagraphsMentioning:
    """Test entity-based paragraph filtering."""

    def test_no_filter_returns_all(self, doc):
        assert doc.paragraphs_mentioning() == doc.paragraphs

    def test_person_partial_match(self, doc):
        paras = doc.paragraphs_mentioning(person="doe")
        assert [p.id for p in paras] == ["p1", "p3"]

    def test_first_people_entry(self, doc):
        assert doc.paragraphs_mentioning(person="john")[0].people == ("John Doe",)

    def test_or_by_default(self, doc):
        paras = doc.paragraphs_mentioning(person="Jane", location="New York")
        assert [p.id for p in paras] == ["p3", "p4"]

    def test_match_all(self, doc):
        assert doc.paragraphs_mentioning(person="John", org="TechCorp", match_all=True) == [
            doc.paragraphs[0]
        ]
        assert doc.paragraphs_mentioning(person="John", location="New York", match_all=True) == []

    def test_byline_person_is_not_a_paragraph_mention(self, doc):
        assert doc.paragraphs_mentioning(person="Jane Smith") == []


class TestPredicates:
    """Test predicate and type filters."""

    def test_paragraphs_where(self, doc):
        assert doc.paragraphs_where(lambda p: p.has_links) == [doc.paragraphs[3]]
        assert doc.paragraphs_where() == doc.paragraphs

    def test_find_paragraph(self, doc):
        assert doc.find_paragraph(lambda p: p.is_lead) is doc.paragraphs[0]
        assert doc.find_paragraph(lambda p: p.word_count > 1000) is None
        assert doc.find_paragraph() is None

    def test_find_media(self, doc):
        assert len(doc.find_media()) == 2
        assert doc.find_media(MediaType.VIDEO)[0].caption == "Product demonstration"
        assert doc.find_media("image") == doc.images
        assert doc.find_media("audio") == []


class TestSearchFunctions:
    """The query functions also work on any paragraph subset."""

    def test_search_on_subset(self, doc):
        matches = search(doc.paragraphs[2:], "doe")
        assert [m.paragraph_index for m in matches] == [0]
