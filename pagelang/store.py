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

"""Persisted language choice: a tiny key-value store.

Persistence is best-effort. When the backing file cannot be used the
localizer gets a NullStore, so the engine never checks availability
itself and no store call ever raises.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

from pagelang.logger import get_logger

log = get_logger(__name__)

_PROBE_KEY = "__probe__"


class LanguageStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class NullStore:
    """Storage disabled: every read is absent, every write is dropped."""

    def get(self, key: str) -> str | None:
        return None

    def set(self, key: str, value: str) -> None:
        return None


class MemoryStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """Flat JSON object on disk, one string value per key."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> dict[str, str]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return raw if isinstance(raw, dict) else {}

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) and value else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def _write(self, data: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            log.debug("Store write skipped (%s): %s", self.path, exc)


def _usable(path: Path) -> bool:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        existing = path.read_text(encoding="utf-8") if path.exists() else None
        data = json.loads(existing) if existing else {}
        if not isinstance(data, dict):
            return False
        data[_PROBE_KEY] = _PROBE_KEY
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    except (OSError, ValueError):
        return False
    return True


def open_store(path: Path | None) -> LanguageStore:
    """Return a file-backed store, or a NullStore when it is not usable."""
    if path is None:
        log.info("Language persistence disabled")
        return NullStore()
    if not _usable(path):
        log.info("Language store unavailable at %s; persistence disabled", path)
        return NullStore()
    store = JsonFileStore(path)
    store.remove(_PROBE_KEY)
    return store
