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

"""Localization run orchestrator.

Executes one page through the engine:
  1. Load: read the page from disk or download it
  2. Start: build the text index, resolve the initial language, apply it
  3. Switch: replay requested language switches and action clicks
  4. Write: serialize the localized page

Every phase reports through Result; the run summary is logged at the end.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from lxml import etree

from pagelang.actions import ActionRouter
from pagelang.config import LocalizerConfig
from pagelang.document import load_page, write_page
from pagelang.engine import LocalizationEngine, valid_code
from pagelang.logger import RunSummary, get_logger
from pagelang.resolver import Environment
from pagelang.result import Fail, Ok, Result
from pagelang.store import LanguageStore, open_store

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RunReport:
    language: str
    indexed: int
    fallbacks: int
    output: Path


def _run_switches(
    engine: LocalizationEngine,
    switches: Sequence[str],
    summary: RunSummary,
) -> None:
    counter = summary.counter("switch")
    for code in switches:
        engine.set_language(code)
        if valid_code(code) is None:
            counter.failed += 1
        else:
            counter.ok += 1


def _run_clicks(
    router: ActionRouter,
    root: etree._Element,
    clicks: Sequence[str],
    summary: RunSummary,
) -> None:
    counter = summary.counter("click")
    for expression in clicks:
        if router.click_xpath(root, expression):
            counter.ok += 1
        else:
            counter.failed += 1


def run_localization(
    config: LocalizerConfig,
    page: str | Path,
    output: Path,
    env: Environment,
    switches: Sequence[str] = (),
    clicks: Sequence[str] = (),
    store: LanguageStore | None = None,
) -> Result[RunReport]:
    """Localize ``page`` and write it to ``output``.

    Args:
        config: Loaded localizer configuration.
        page: Local path or http(s) URL of the page.
        output: Where the localized HTML is written.
        env: Startup environment (location URL, reported language).
        switches: Language codes applied in order after startup.
        clicks: XPath expressions whose matched elements are clicked in order.
        store: Persisted-choice store; opened from config when omitted.
    """
    summary = RunSummary()

    # 1. Load
    page_result = load_page(page, config.fetch)
    if not page_result.ok:
        summary.counter("load").failed += 1
        log.error("Load failed: %s", page_result.error)
        log.info(summary.report())
        return page_result  # type: ignore[return-value]
    summary.counter("load").ok += 1
    root = page_result.data

    # 2. Start
    if store is None:
        store = open_store(config.storage.path)
    engine = LocalizationEngine(root, config, store)
    initial = engine.start(env)
    fallbacks = sum(1 for node in engine.index if node.synthesized)
    index_counter = summary.counter("index")
    index_counter.ok = len(engine.index)
    index_counter.failed = fallbacks
    log.info("Initial language: %s", initial)

    # 3. Switch
    _run_switches(engine, switches, summary)
    _run_clicks(ActionRouter(engine, config.markers.action), root, clicks, summary)

    # 4. Write
    write_result = write_page(root, output)
    if not write_result.ok:
        summary.counter("write").failed += 1
        log.error("Write failed: %s", write_result.error)
        log.info(summary.report())
        return Fail(error=write_result.error, context=write_result.context)
    summary.counter("write").ok += 1

    log.info(summary.report())
    return Ok(data=RunReport(
        language=engine.language or initial,
        indexed=len(engine.index),
        fallbacks=fallbacks,
        output=output,
    ))
