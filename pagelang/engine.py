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

"""Localization engine: applies the active language to a page tree.

One engine per page. It owns the text index and the active language;
nothing else writes either. Typical use:

    engine = LocalizationEngine(root, config, store)
    engine.start(Environment(location=url))
    engine.set_language("en")
"""

from __future__ import annotations

from collections.abc import Callable

from lxml import etree

from pagelang.config import LocalizerConfig
from pagelang.document import find_marked, set_hidden
from pagelang.index import IndexedNode, build_index
from pagelang.logger import get_logger
from pagelang.resolver import Environment, resolve_initial
from pagelang.store import LanguageStore, NullStore

log = get_logger(__name__)

ChangeListener = Callable[[str], None]


def valid_code(lang: object) -> str | None:
    if isinstance(lang, str) and len(lang) == 2 and lang.isascii() and lang.isalpha():
        return lang.lower()
    return None


class LocalizationEngine:
    def __init__(
        self,
        root: etree._Element,
        config: LocalizerConfig,
        store: LanguageStore | None = None,
    ) -> None:
        self._root = root
        self._config = config
        self._store: LanguageStore = store if store is not None else NullStore()
        self._index: list[IndexedNode] | None = None
        self._language: str | None = None
        self._listeners: list[ChangeListener] = []

    @property
    def language(self) -> str | None:
        return self._language

    @property
    def default_language(self) -> str:
        return self._config.language.default

    @property
    def index(self) -> tuple[IndexedNode, ...]:
        return tuple(self._index or ())

    def build_index(self) -> tuple[IndexedNode, ...]:
        """Scan the page once; later calls return the retained index."""
        if self._index is None:
            self._index = build_index(
                self._root,
                self.default_language,
                self._config.scan.skip_tags,
            )
        return self.index

    def resolve_initial(self, env: Environment) -> str:
        return resolve_initial(env, self._store, self._config)

    def start(self, env: Environment) -> str:
        """Index the page, pick the initial language and paint it."""
        self.build_index()
        self._language = self.resolve_initial(env)
        self.apply(self._language)
        return self._language

    def apply(self, lang: str) -> None:
        """Render ``lang`` into every indexed slot and marked element.

        Missing translations fall back to the default language, then to
        an empty string. Safe to call repeatedly with the same code.
        """
        default = self.default_language
        changed = 0
        for node in self._index or ():
            text = node.entry.get(lang) or node.entry.get(default) or ""
            if node.slot.value != text:
                node.slot.value = text
                changed += 1

        marker = self._config.markers.visibility
        marked = find_marked(self._root, marker)
        for el in marked:
            set_hidden(el, True)
        shown = 0
        for el in marked:
            if el.get(marker.lower()) == lang:
                set_hidden(el, False)
                shown += 1

        log.info(
            "Applied '%s': %d text nodes updated, %d/%d marked elements shown",
            lang, changed, shown, len(marked),
        )

    def set_language(self, lang: object) -> None:
        """Switch to ``lang``, remember it, and re-apply the page.

        Invalid codes are reported and ignored; the page stays as it was.
        """
        code = valid_code(lang)
        if code is None:
            log.warning("Invalid language code provided to set_language: %r", lang)
            return

        self._language = code
        self._store.set(self._config.storage.key, code)
        self.apply(code)

        for listener in list(self._listeners):
            try:
                listener(code)
            except Exception:
                log.exception("Language change listener failed for '%s'", code)

    def on_change(self, listener: ChangeListener) -> None:
        """Register a callback invoked with the new code after each switch."""
        self._listeners.append(listener)
