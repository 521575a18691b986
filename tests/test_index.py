# SPDX-License-Identifier: MIT
"""Tests for the one-time text index."""

import logging

import pytest

from pagelang.index import build_index


def test_indexes_tagged_slots_in_order(make_root):
    root = make_root(
        "<h1>[[ca]]Títol[[en]]Title</h1>"
        "<p>Untouched</p>"
        "<p>[[ca]]Cos[[en]]Body</p>"
    )
    nodes = build_index(root, "ca")
    assert [dict(n.entry) for n in nodes] == [
        {"ca": "Títol", "en": "Title"},
        {"ca": "Cos", "en": "Body"},
    ]
    assert not any(n.synthesized for n in nodes)


def test_untagged_text_not_indexed(make_root):
    root = make_root("<p>Plain</p><p>[[EN]]Upper</p>")
    assert build_index(root, "ca") == []


def test_missing_default_is_synthesized(make_root, caplog):
    root = make_root("<p>[[en]]Hello</p>")
    with caplog.at_level(logging.WARNING):
        nodes = build_index(root, "ca")
    assert dict(nodes[0].entry) == {"en": "Hello", "ca": "Hello"}
    assert nodes[0].synthesized
    assert "Missing default language (ca)" in caplog.text


def test_first_segment_is_the_fallback(make_root):
    root = make_root("<p>[[fr]]Bonjour[[en]]Hello</p>")
    assert build_index(root, "ca")[0].entry["ca"] == "Bonjour"


def test_entry_is_read_only(make_root):
    root = make_root("<p>[[ca]]Hola</p>")
    entry = build_index(root, "ca")[0].entry
    with pytest.raises(TypeError):
        entry["en"] = "Hello"


def test_tail_text_indexed(make_root):
    root = make_root("<p><br>[[ca]]Sí[[en]]Yes</p>")
    (node,) = build_index(root, "ca")
    assert node.slot.field == "tail"
    assert node.slot.element.tag == "br"


def test_skip_tags(make_root):
    root = make_root("<script>var s = '[[ca]]x';</script><p>[[ca]]y</p>")
    nodes = build_index(root, "ca", frozenset({"script"}))
    assert [n.entry["ca"] for n in nodes] == ["y"]
