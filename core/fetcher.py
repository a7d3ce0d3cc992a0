import asyncio
import logging
from typing import Dict, Iterable
from urllib.parse import urlparse

import aiohttp
from bs4 import UnicodeDammit

from core.errors import FetchError

log = logging.getLogger("rubenrss.fetcher")


async def fetch_html(session: aiohttp.ClientSession, url: str,
                     timeout: float = 30, user_agent: str = "RubenRSS/1.0") -> str:
    """GET the listing page. No retry: any failure is a FetchError."""
    headers = {"User-Agent": user_agent, "Accept": "text/html,application/xhtml+xml"}
    try:
        async with session.get(url, headers=headers,
                               timeout=aiohttp.ClientTimeout(total=timeout)) as resp:
            if resp.status != 200:
                log.warning("GET %s -> %d", url, resp.status)
                raise FetchError(url, status=resp.status)
            body = await resp.read()
            try:
                return await resp.text()
            except (UnicodeDecodeError, LookupError) as e:
                # Charset absent ou faux: detection sur les octets
                dammit = UnicodeDammit(body, is_html=True)
                if dammit.unicode_markup is None:
                    raise FetchError(url, cause=e) from e
                log.info("GET %s: charset deduit (%s).", url, dammit.original_encoding)
                return dammit.unicode_markup
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        log.warning("GET %s echec: %s", url, e)
        raise FetchError(url, cause=e) from e


async def fetch_content_length(session: aiohttp.ClientSession, url: str,
                               timeout: float = 10, user_agent: str = "RubenRSS/1.0") -> int:
    """HEAD an image for its byte size. Returns 0 when unknown, never raises."""
    if urlparse(url).scheme not in ("http", "https"):
        return 0
    try:
        async with session.head(url, headers={"User-Agent": user_agent},
                                allow_redirects=True,
                                timeout=aiohttp.ClientTimeout(total=timeout)) as resp:
            if resp.status != 200:
                log.debug("HEAD %s -> %d", url, resp.status)
                return 0
            raw = resp.headers.get("Content-Length", "")
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        log.debug("HEAD %s echec: %s", url, e)
        return 0
    try:
        return max(0, int(raw))
    except ValueError:
        return 0


async def fetch_image_lengths(session: aiohttp.ClientSession, urls: Iterable[str],
                              timeout: float = 10, user_agent: str = "RubenRSS/1.0") -> Dict[str, int]:
    lengths: Dict[str, int] = {}
    for url in urls:
        if url in lengths:
            continue
        lengths[url] = await fetch_content_length(session, url, timeout, user_agent)
    return lengths
