"""HTTP surface: one route serving the RSS feed."""

import logging
from typing import AsyncIterator

import aiohttp
from aiohttp import web

from core.errors import FetchError, ParseError, SerializationError
from core.models import FeedSettings
from core.service import FeedService

log = logging.getLogger("rubenrss.server")

SESSION_KEY = web.AppKey("client_session", aiohttp.ClientSession)


class RssServer:
    """Owns the aiohttp application and its route table."""

    def __init__(self, settings: FeedSettings):
        self.settings = settings
        self.app = web.Application()
        self.app.cleanup_ctx.append(self._client_session)
        self.app.router.add_get(settings.route, self.handle_rss)

    async def _client_session(self, app: web.Application) -> AsyncIterator[None]:
        app[SESSION_KEY] = aiohttp.ClientSession()
        yield
        await app[SESSION_KEY].close()

    def service(self, session: aiohttp.ClientSession) -> FeedService:
        return FeedService(self.settings, session)

    async def handle_rss(self, request: web.Request) -> web.Response:
        try:
            xml = await self.service(request.app[SESSION_KEY]).build_rss()
        except (FetchError, ParseError) as e:
            log.warning("Recuperation des articles impossible: %s", e)
            return web.Response(status=500, text=f"Unable to fetch articles: {e}")
        except SerializationError as e:
            log.error("Creation du flux RSS impossible: %s", e)
            return web.Response(status=500, text=f"Unable to create RSS: {e}")
        return web.Response(text=xml, content_type="application/rss+xml", charset="utf-8")

    def run(self, host: str = "0.0.0.0", port: int = 8080) -> None:
        web.run_app(self.app, host=host, port=port, print=None)
