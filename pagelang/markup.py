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

"""Language markup parser: ``[[xx]]text`` segments to a dictionary.

A text blob carries one segment per language:

    [[ca]]Hola[[en]]Hello

Each tag is two lowercase ASCII letters in double brackets; its content
runs up to the next ``[[`` or the end of the string and is kept verbatim.
Pure string in, dict out: no tree access here.
"""

from __future__ import annotations

import re

from pagelang.logger import get_logger

log = get_logger(__name__)

TAG_PATTERN = re.compile(r"\[\[([a-z]{2})\]\]((?:(?!\[\[).)+)", re.DOTALL)


def has_tags(text: str) -> bool:
    """True when the text holds at least one tag with content."""
    return TAG_PATTERN.search(text) is not None


def parse(text: str) -> dict[str, str]:
    """Map each language code in ``text`` to its content segment.

    Text before the first valid tag, malformed tags such as ``[[EN]]`` and
    a dangling ``[[`` are not part of any segment and are dropped. When a
    code repeats, the later segment wins.
    """
    entry: dict[str, str] = {}
    for match in TAG_PATTERN.finditer(text):
        code, content = match.group(1), match.group(2)
        if code in entry:
            log.warning(
                "Duplicate language tag [[%s]]; keeping last segment in: %.50s",
                code, text,
            )
        entry[code] = content
    return entry
