# SPDX-License-Identifier: MIT
"""Shared fixtures for localizer tests."""

from dataclasses import replace

import lxml.html
import pytest

from pagelang.config import StorageConfig, default_config
from pagelang.store import MemoryStore


@pytest.fixture
def config():
    """Default config with file persistence turned off."""
    return replace(default_config(), storage=StorageConfig(path=None, key="lang"))


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def make_root():
    def _make(body: str):
        return lxml.html.document_fromstring(f"<html><body>{body}</body></html>")
    return _make


@pytest.fixture
def bilingual_page():
    """The end-to-end page: one tagged paragraph and one English-only banner."""
    return (
        '<p id="greeting">[[ca]]Hola[[en]]Hello</p>'
        '<div id="banner" autolang="en">English only</div>'
        '<a id="switch-en" whenClick="setLang(\'en\')"><span>EN</span></a>'
    )
