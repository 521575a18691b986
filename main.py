#!/usr/bin/env python3
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
"""Localize a static HTML page.

Reads ``[[xx]]text`` markup from the page, resolves the active language
(?lang= parameter > remembered choice > environment > default), applies
it, optionally replays language switches, and writes the result.

Usage:
    python main.py --page site/index.html --output dist/index.html
    python main.py --page site/index.html --output dist/index.html \\
        --url "https://example.org/?lang=es" --set-language en
    python main.py --page https://example.org/ --output out.html \\
        --click "//a[@id='lang-en']"
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pagelang.config import default_config, load_config
from pagelang.logger import get_logger
from pagelang.pipeline import run_localization
from pagelang.resolver import Environment, environment_language

log = get_logger("main")

DEFAULT_CONFIG = Path("localize.yaml")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pagelang",
        description="Apply [[xx]] language markup to a static HTML page",
    )
    parser.add_argument("--page", required=True, help="Page path or http(s) URL")
    parser.add_argument("--output", type=Path, required=True, help="Localized HTML output path")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Localizer YAML config (default: {DEFAULT_CONFIG} if present)",
    )
    parser.add_argument("--url", default=None, help="Page location, for the ?lang= parameter")
    parser.add_argument(
        "--lang-env",
        default=None,
        help="Environment-reported language (default: read from locale variables)",
    )
    parser.add_argument(
        "--set-language",
        action="append",
        default=[],
        metavar="CODE",
        help="Switch to CODE after startup (repeatable, applied in order)",
    )
    parser.add_argument(
        "--click",
        action="append",
        default=[],
        metavar="XPATH",
        help="Click elements matched by XPATH after switches (repeatable)",
    )
    args = parser.parse_args(argv)

    config_path: Path | None = args.config
    if config_path is None and DEFAULT_CONFIG.exists():
        config_path = DEFAULT_CONFIG

    if config_path is None:
        config = default_config()
    else:
        cfg_result = load_config(config_path.resolve())
        if not cfg_result.ok:
            log.error(cfg_result.error)
            return 1
        config = cfg_result.data
        log.info("Config: %s", config_path)

    env = Environment(
        location=args.url,
        language=args.lang_env or environment_language(config.language.environment_vars),
    )

    result = run_localization(
        config,
        page=args.page,
        output=args.output.resolve(),
        env=env,
        switches=args.set_language,
        clicks=args.click,
    )
    if not result.ok:
        log.error("Localization failed: %s", result.error)
        return 1

    log.info("Done: %s (%s)", result.data.output, result.data.language)
    return 0


if __name__ == "__main__":
    sys.exit(main())
