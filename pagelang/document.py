# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""HTML page access on top of lxml.html.

The localizer never owns the page tree; it only reads and rewrites text
slots and toggles inline ``display`` on marked elements. lxml keeps text
in two places per element (``text`` before the first child, ``tail``
after the closing tag), so a text-bearing location is addressed as an
(element, field) pair.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import lxml.html
from lxml import etree

from pagelang.config import FetchConfig
from pagelang.fetcher import fetch_page
from pagelang.logger import get_logger
from pagelang.result import Fail, Ok, Result

log = get_logger(__name__)

HtmlElement = lxml.html.HtmlElement


@dataclass(slots=True)
class TextSlot:
    """Non-owning handle on one text-bearing location of the page."""

    element: etree._Element
    field: Literal["text", "tail"]

    @property
    def value(self) -> str:
        return getattr(self.element, self.field) or ""

    @value.setter
    def value(self, text: str) -> None:
        setattr(self.element, self.field, text)


# ── Loading / writing ─────────────────────────────────────────

def _is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def parse_html(data: bytes | str) -> Result[HtmlElement]:
    try:
        root = lxml.html.document_fromstring(data)
    except (etree.ParserError, etree.XMLSyntaxError, ValueError) as exc:
        return Fail(error=f"HTML parse error: {exc}")
    return Ok(data=root)


def load_page(source: str | Path, fetch: FetchConfig | None = None) -> Result[HtmlElement]:
    """Load a page from a local path or an http(s) URL."""
    if _is_url(source):
        fetched = fetch_page(str(source), fetch or FetchConfig())
        if not fetched.ok:
            return fetched  # type: ignore[return-value]
        data: bytes = fetched.data
    else:
        path = Path(source)
        if not path.exists():
            return Fail(error=f"Page not found: {path}")
        try:
            data = path.read_bytes()
        except OSError as exc:
            return Fail(error=f"Cannot read page: {exc}", context=str(path))

    result = parse_html(data)
    if result.ok:
        log.info("Loaded page: %s", source)
    return result


def serialize(root: HtmlElement) -> str:
    """Serialize the page, keeping the doctype of the input."""
    doctype = root.getroottree().docinfo.doctype or None
    return lxml.html.tostring(root, doctype=doctype, encoding="unicode")


def _declare_utf8(root: HtmlElement) -> None:
    """Point charset declarations at UTF-8, the encoding pages are written in."""
    for meta in root.iter("meta"):
        if meta.get("charset") is not None:
            meta.set("charset", "utf-8")
        elif (meta.get("http-equiv") or "").lower() == "content-type":
            meta.set("content", "text/html; charset=utf-8")


def write_page(root: HtmlElement, path: Path) -> Result[Path]:
    _declare_utf8(root)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(serialize(root), encoding="utf-8")
    except OSError as exc:
        return Fail(error=f"Cannot write page: {exc}", context=str(path))
    log.info("Wrote page: %s", path)
    return Ok(data=path)


# ── Text traversal ────────────────────────────────────────────

def _walk(element: etree._Element, skip_tags: frozenset[str]) -> Iterator[TextSlot]:
    # Comments and processing instructions have non-string tags; their own
    # text is not page content.
    if not isinstance(element.tag, str) or element.tag in skip_tags:
        return
    if element.text:
        yield TextSlot(element, "text")
    for child in element:
        yield from _walk(child, skip_tags)
        if child.tail:
            yield TextSlot(child, "tail")


def iter_text_slots(
    root: etree._Element,
    skip_tags: frozenset[str] = frozenset(),
) -> Iterator[TextSlot]:
    """Yield every non-empty text slot under ``root`` in document order."""
    yield from _walk(root, skip_tags)


# ── Visibility ────────────────────────────────────────────────

def find_marked(root: etree._Element, attribute: str) -> list[etree._Element]:
    """All elements (root included) carrying ``attribute``.

    The HTML parser lowercases attribute names, so the lookup does too.
    """
    name = attribute.lower()
    return [
        el for el in root.iter()
        if isinstance(el.tag, str) and name in el.attrib
    ]


def _declarations(element: etree._Element) -> list[tuple[str, str]]:
    decls: list[tuple[str, str]] = []
    for part in (element.get("style") or "").split(";"):
        prop, sep, value = part.partition(":")
        if sep and prop.strip():
            decls.append((prop.strip().lower(), value.strip()))
    return decls


def is_hidden(element: etree._Element) -> bool:
    return any(
        prop == "display" and value.lower() == "none"
        for prop, value in _declarations(element)
    )


def set_hidden(element: etree._Element, hidden: bool) -> None:
    """Add or remove an inline ``display: none``, keeping other declarations."""
    decls = [(p, v) for p, v in _declarations(element) if p != "display"]
    if hidden:
        decls.append(("display", "none"))
    style = "; ".join(f"{p}: {v}" for p, v in decls)
    if style:
        element.set("style", style)
    elif "style" in element.attrib:
        del element.attrib["style"]
