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

"""Page fetcher: downloads a published page for localization.

Used when the page source is an http(s) URL instead of a local file.
"""

from __future__ import annotations

import ssl
import time
import urllib.error
import urllib.request

import certifi

from pagelang.config import FetchConfig
from pagelang.logger import get_logger
from pagelang.result import Fail, Ok, Result

log = get_logger(__name__)

_ssl_ctx = ssl.create_default_context(cafile=certifi.where())

ACCEPT_HTML = "text/html,application/xhtml+xml"


def _download(url: str, timeout: int) -> Result[bytes]:
    """Single download attempt."""
    req = urllib.request.Request(
        url,
        headers={"Accept": ACCEPT_HTML},
        method="GET",
    )
    try:
        with urllib.request.urlopen(req, timeout=timeout, context=_ssl_ctx) as resp:
            return Ok(data=resp.read())
    except urllib.error.HTTPError as exc:
        return Fail(error=f"HTTP {exc.code}: {exc.reason}", context=url)
    except urllib.error.URLError as exc:
        return Fail(error=f"Connection error: {exc.reason}", context=url)
    except TimeoutError:
        return Fail(error=f"Timeout after {timeout}s", context=url)


def fetch_page(url: str, config: FetchConfig) -> Result[bytes]:
    """Download a page with retry."""
    last_error = ""

    for attempt in range(1, config.retry.attempts + 1):
        log.info("Download attempt %d/%d: %s", attempt, config.retry.attempts, url)
        result = _download(url, config.timeout)
        if result.ok:
            log.info("Downloaded %d bytes", len(result.data))
            return result
        last_error = result.error
        log.warning("Attempt %d failed: %s", attempt, last_error)
        if attempt < config.retry.attempts:
            time.sleep(config.retry.delay_seconds)

    return Fail(
        error=f"All {config.retry.attempts} download attempts failed: {last_error}",
        context=url,
    )
