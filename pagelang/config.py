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

"""Loads localize.yaml into typed dataclasses.

Pure loader. Every section is optional; missing keys fall back to the
defaults below so a page can be localized without any config file.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from pagelang.result import Fail, Ok, Result

LANG_CODE = re.compile(r"[a-z]{2}")


# ── Language ──────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class LanguageConfig:
    default: str = "ca"
    request_param: str = "lang"
    environment_vars: tuple[str, ...] = ("PAGELANG_LANG", "LC_ALL", "LC_MESSAGES", "LANG")


# ── Markers ───────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class MarkerConfig:
    """Attribute names the engine and the action adapter look for."""
    visibility: str = "autolang"
    action: str = "whenClick"


# ── Storage ───────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class StorageConfig:
    path: Path | None = Path(".pagelang.json")
    key: str = "lang"


# ── Scan ──────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class ScanConfig:
    skip_tags: frozenset[str] = frozenset({"script", "style", "noscript", "template"})


# ── Fetch ─────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class RetryConfig:
    attempts: int = 3
    delay_seconds: int = 2


@dataclass(frozen=True, slots=True)
class FetchConfig:
    timeout: int = 30
    retry: RetryConfig = RetryConfig()


# ── Top-level ─────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class LocalizerConfig:
    language: LanguageConfig = LanguageConfig()
    markers: MarkerConfig = MarkerConfig()
    storage: StorageConfig = StorageConfig()
    scan: ScanConfig = ScanConfig()
    fetch: FetchConfig = FetchConfig()


# ── Loader ────────────────────────────────────────────────────

def default_config() -> LocalizerConfig:
    return LocalizerConfig()


def _string_list(raw: dict[str, Any], key: str, default: Iterable[str]) -> list[str]:
    value = raw.get(key)
    if value is None:
        return list(default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TypeError(f"'{key}' must be a list of strings, got {value!r}")
    return value


def _build_language(raw: dict[str, Any]) -> LanguageConfig:
    base = LanguageConfig()
    return LanguageConfig(
        default=raw.get("default", base.default),
        request_param=raw.get("request_param", base.request_param),
        environment_vars=tuple(_string_list(raw, "environment_vars", base.environment_vars)),
    )


def _build_storage(raw: dict[str, Any]) -> StorageConfig:
    base = StorageConfig()
    path = raw.get("path", base.path)
    return StorageConfig(
        path=Path(path) if path is not None else None,
        key=raw.get("key", base.key),
    )


def _build_fetch(raw: dict[str, Any]) -> FetchConfig:
    base = FetchConfig()
    retry = raw.get("retry", {})
    return FetchConfig(
        timeout=raw.get("timeout", base.timeout),
        retry=RetryConfig(
            attempts=retry.get("attempts", base.retry.attempts),
            delay_seconds=retry.get("delay_seconds", base.retry.delay_seconds),
        ),
    )


def load_config(path: Path) -> Result[LocalizerConfig]:
    """Load localize.yaml into LocalizerConfig."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}")

    try:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=str(path))

    try:
        markers = raw.get("markers", {})
        scan = raw.get("scan", {})
        config = LocalizerConfig(
            language=_build_language(raw.get("language", {})),
            markers=MarkerConfig(**markers),
            storage=_build_storage(raw.get("storage", {})),
            scan=ScanConfig(
                skip_tags=frozenset(_string_list(scan, "skip_tags", ScanConfig().skip_tags)),
            ),
            fetch=_build_fetch(raw.get("fetch", {})),
        )
    except (AttributeError, KeyError, TypeError) as exc:
        return Fail(error=f"Config structure error: {exc}", context=str(path))

    default = config.language.default
    if not isinstance(default, str) or not LANG_CODE.fullmatch(default):
        return Fail(
            error=f"language.default must be two lowercase letters, got {default!r}",
            context=str(path),
        )

    return Ok(data=config)
