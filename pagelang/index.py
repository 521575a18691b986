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

"""Text index: one-time scan of the page for tagged text slots."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from lxml import etree

from pagelang.document import TextSlot, iter_text_slots
from pagelang.logger import get_logger
from pagelang.markup import has_tags, parse

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class IndexedNode:
    slot: TextSlot
    entry: Mapping[str, str]
    synthesized: bool = False


def _with_default(entry: dict[str, str], default_lang: str, text: str) -> bool:
    """Copy the first segment into the default-language slot when missing."""
    if default_lang in entry:
        return False
    first = next(iter(entry))
    entry[default_lang] = entry[first]
    log.warning(
        "Missing default language (%s) text. Using first available (%s) as fallback for: %.50s...",
        default_lang, first, text,
    )
    return True


def build_index(
    root: etree._Element,
    default_lang: str,
    skip_tags: frozenset[str] = frozenset(),
) -> list[IndexedNode]:
    """Scan ``root`` in document order and index every tagged text slot."""
    nodes: list[IndexedNode] = []
    for slot in iter_text_slots(root, skip_tags):
        text = slot.value
        if not has_tags(text):
            continue
        entry = parse(text)
        if not entry:
            continue
        synthesized = _with_default(entry, default_lang, text)
        nodes.append(IndexedNode(slot, MappingProxyType(entry), synthesized))

    log.info(
        "Indexed %d text nodes (%d with synthesized %s fallback)",
        len(nodes), sum(n.synthesized for n in nodes), default_lang,
    )
    return nodes
