import logging
import time
from datetime import datetime

import aiohttp

from core.extract import extract_articles
from core.feed import build_feed, render_rss
from core.fetcher import fetch_html, fetch_image_lengths
from core.models import FeedSettings

log = logging.getLogger("rubenrss.service")


class FeedService:
    """Fetch -> extract -> build -> serialize, once per call. Keeps no state between calls."""

    def __init__(self, settings: FeedSettings, session: aiohttp.ClientSession):
        self.settings = settings
        self.session = session

    async def build_rss(self) -> str:
        s = self.settings
        started = time.monotonic()
        now = datetime.now(s.tz)

        page = await fetch_html(self.session, s.blog_url, s.fetch_timeout, s.user_agent)
        articles = extract_articles(page, s, now=now)

        lengths = {}
        if s.fetch_image_lengths and not s.inline_images:
            lengths = await fetch_image_lengths(
                self.session, (a.image for a in articles), s.head_timeout, s.user_agent
            )

        xml = render_rss(build_feed(articles, s, created=now, image_lengths=lengths))
        log.info("Flux RSS genere: %d article(s) en %.2fs.", len(articles), time.monotonic() - started)
        return xml
