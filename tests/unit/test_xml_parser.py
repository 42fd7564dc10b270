"""
Unit tests for XML loading and node helpers.

Lookups match local tag names, so the same helpers work on plain and
namespaced NITF.
"""

import logging

import pytest
from lxml import etree

from nitf_text.errors import InvalidDocumentError, ParseError
from nitf_text.parsers.xml_parser import (
    attr,
    build_parser,
    child_text,
    children,
    compact,
    descendants,
    find_nitf_root,
    first_child,
    first_descendant,
    first_text,
    load_xml,
    local_name,
)


NS_XML = (
    '<nitf xmlns="http://iptc.org/std/NITF/2006-10-18/">'
    '<head><title>T</title></head>'
    '<body><body.content><p>one</p><div><p>two</p></div></body.content></body>'
    '</nitf>'
)


@pytest.fixture(scope="module")
def ns_root():
    return etree.fromstring(NS_XML)


class TestLoadXml:
    """Test raw XML loading."""

    def test_load_string_with_declaration(self):
        root = load_xml('<?xml version="1.0" encoding="UTF-8"?><nitf/>')
        assert root.tag == "nitf"

    def test_load_bytes(self):
        assert load_xml(b"<nitf><head/></nitf>")[0].tag == "head"

    def test_empty_input(self):
        with pytest.raises(InvalidDocumentError):
            load_xml("")

    def test_syntax_error_carries_lxml_message(self):
        with pytest.raises(ParseError, match="Failed to parse XML") as exc_info:
            load_xml("<nitf><p></nitf>")

        assert isinstance(exc_info.value.__cause__, etree.XMLSyntaxError)

    def test_logs_parse_timing(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="nitf_text.parsers.xml_parser"):
            load_xml("<nitf/>")

        assert "Parsed" in caplog.text

    def test_custom_parser(self):
        parser = build_parser(recover=True)
        root = load_xml("<nitf><p>open</nitf>", parser=parser)

        assert root.tag == "nitf"


class TestBuildParser:
    """Test the hardened parser settings."""

    def test_network_and_dtd_loading_disabled(self):
        xml = (
            b'<!DOCTYPE nitf SYSTEM "http://example.invalid/nitf.dtd">'
            b'<nitf><p>ok</p></nitf>'
        )
        root = etree.fromstring(xml, build_parser())

        assert root[0].text == "ok"

    def test_huge_tree_accepts_deep_input(self):
        deep = "<a>" * 300 + "</a>" * 300
        root = etree.fromstring(deep.encode(), build_parser(huge_tree=True))

        assert root.tag == "a"


class TestFindNitfRoot:
    """Test locating the <nitf> element."""

    def test_root_is_nitf(self, ns_root):
        assert find_nitf_root(ns_root) is ns_root

    def test_nested(self):
        root = etree.fromstring("<feed><item><nitf/></item></feed>")
        assert local_name(find_nitf_root(root)) == "nitf"

    def test_missing(self):
        with pytest.raises(InvalidDocumentError, match="missing <nitf>"):
            find_nitf_root(etree.fromstring("<rss/>"))


class TestNodeHelpers:
    """Test local-name lookups and text helpers."""

    def test_first_child_and_children(self, ns_root):
        head = first_child(ns_root, 'head')

        assert local_name(head) == "head"
        assert first_child(ns_root, 'missing') is None
        assert first_child(None, 'head') is None
        assert len(children(ns_root, 'body')) == 1
        assert children(None, 'body') == []

    def test_descendants_in_document_order(self, ns_root):
        paras = descendants(ns_root, 'p')

        assert [p.text for p in paras] == ["one", "two"]
        assert len(descendants(ns_root, 'p', 'title')) == 3
        assert descendants(None, 'p') == []

    def test_first_descendant(self, ns_root):
        assert first_descendant(ns_root, 'p').text == "one"
        assert first_descendant(ns_root, 'table') is None

    def test_first_text_uses_first_direct_node(self):
        el = etree.fromstring('<hl1><!-- note --> Real text <em>x</em> more</hl1>')
        assert first_text(el) == "Real text"

    def test_first_text_missing(self):
        assert first_text(None) is None
        assert first_text(etree.fromstring('<hl1><em>x</em></hl1>')) is None

    def test_child_text(self, ns_root):
        assert child_text(first_child(ns_root, 'head'), 'title') == "T"
        assert child_text(ns_root, 'title') is None

    def test_attr(self):
        el = etree.fromstring('<doc-id id-string="42"/>')

        assert attr(el, 'id-string') == "42"
        assert attr(el, 'missing') is None
        assert attr(None, 'id-string') is None

    def test_compact(self):
        assert compact({"a": 1, "b": None, "c": [], "d": 0}) == {"a": 1, "c": [], "d": 0}
