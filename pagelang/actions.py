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

"""Action-marker adapter: ``whenClick="setLang('en')"`` → engine switch.

Only the literal ``setLang('xx')`` call is recognized (single or double
quotes). Nothing in an attribute is ever evaluated.
"""

from __future__ import annotations

import re
from itertools import chain

from lxml import etree

from pagelang.engine import LocalizationEngine
from pagelang.logger import get_logger

log = get_logger(__name__)

_SET_LANG = re.compile(r"""setLang\(\s*(['"])([a-z]{2})\1\s*\)""")


def parse_action(value: str | None) -> str | None:
    """Language code named by an action value, or None if unrecognized."""
    if not value:
        return None
    match = _SET_LANG.search(value)
    return match.group(2) if match else None


class ActionRouter:
    """Routes clicks on marked elements to ``engine.set_language``."""

    def __init__(self, engine: LocalizationEngine, attribute: str = "whenClick") -> None:
        self.engine = engine
        self.attribute = attribute.lower()

    def _target(self, element: etree._Element) -> etree._Element | None:
        for el in chain([element], element.iterancestors()):
            if self.attribute in el.attrib:
                return el
        return None

    def click(self, element: etree._Element) -> bool:
        """Handle a click on ``element``; True when it switched language."""
        target = self._target(element)
        if target is None:
            return False

        action = target.get(self.attribute)
        code = parse_action(action)
        if code is None:
            log.warning("Unrecognized action in %s attribute: %r", self.attribute, action)
            return False

        self.engine.set_language(code)
        return True

    def click_xpath(self, root: etree._Element, expression: str) -> int:
        """Click every element matched by an XPath expression, in order."""
        try:
            matched = root.xpath(expression)
        except etree.XPathError as exc:
            log.warning("Invalid click expression %r: %s", expression, exc)
            return 0

        if not isinstance(matched, list):
            log.warning("Click expression %r does not select elements", expression)
            return 0

        handled = 0
        for el in matched:
            if isinstance(el, etree._Element) and self.click(el):
                handled += 1
        if not handled:
            log.warning("No action handled for %r", expression)
        return handled
