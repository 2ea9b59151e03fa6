from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def download_file(
    url: str,
    dest: str,
    *,
    client: Optional[httpx.Client] = None,
    timeout: float = DEFAULT_TIMEOUT,
    dry_run: bool = False,
) -> int:
    """Fetch `url` and write the body verbatim to `dest`, overwriting it.

    Returns the number of bytes written.
    """

    if dry_run:
        logger.info("Would download %s -> %s", url, dest)
        return 0

    logger.info("GET %s -> %s", url, dest)
    try:
        if client is None:
            with httpx.Client(timeout=timeout, follow_redirects=True) as c:
                resp = c.get(url)
        else:
            resp = client.get(url, follow_redirects=True)
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise RuntimeError(f"Download failed ({e.response.status_code}): {url}") from e
    except httpx.RequestError as e:
        raise RuntimeError(f"Download failed: {url}: {e}") from e

    p = Path(dest)
    p.write_bytes(resp.content)
    return len(resp.content)
