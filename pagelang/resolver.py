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

"""Initial language resolution.

Priority: request parameter > persisted choice > environment language >
configured default. Reads only; nothing is written back.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from urllib.parse import parse_qs, urlsplit

from pagelang.config import LANG_CODE, LocalizerConfig
from pagelang.logger import get_logger
from pagelang.store import LanguageStore

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Environment:
    """What the page sees at startup: its URL and the reported language."""

    location: str | None = None
    language: str | None = None


def request_language(location: str | None, param: str) -> str | None:
    """Two-letter code from ``?param=xx`` in the location, if present."""
    if not location:
        return None
    values = parse_qs(urlsplit(location).query).get(param, [])
    if values and LANG_CODE.fullmatch(values[0]):
        return values[0]
    return None


def environment_language(
    var_names: Iterable[str],
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """First usable locale variable, e.g. ``de_DE.UTF-8``."""
    env = os.environ if environ is None else environ
    for var in var_names:
        val = env.get(var, "")
        if val and val not in ("C", "POSIX"):
            return val
    return None


def resolve_initial(env: Environment, store: LanguageStore, config: LocalizerConfig) -> str:
    lang_cfg = config.language

    requested = request_language(env.location, lang_cfg.request_param)
    if requested:
        log.info("Language from request parameter: %s", requested)
        return requested

    persisted = store.get(config.storage.key)
    if persisted and LANG_CODE.fullmatch(persisted):
        log.info("Language from persisted choice: %s", persisted)
        return persisted

    if env.language:
        reported = env.language[:2].lower()
        if LANG_CODE.fullmatch(reported):
            log.info("Language from environment: %s", reported)
            return reported
        log.info("Ignoring environment language %r", env.language)

    log.info("Language from default: %s", lang_cfg.default)
    return lang_cfg.default
