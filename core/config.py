"""Centralized configuration for the Ruben RSS bridge."""

import os
import logging
from typing import Optional
from zoneinfo import ZoneInfo

from core.models import AnchorMatcher, FeedSettings

log = logging.getLogger("rubenrss.config")

# =========================
# Source blog
# =========================
BLOG_URL: str = os.getenv("BLOG_URL", "https://ruben.care/blog")
SITE_ORIGIN: str = os.getenv("SITE_ORIGIN", "https://ruben.care")
ARTICLE_BASE_URL: str = os.getenv("ARTICLE_BASE_URL", "https://ruben.care/")

# =========================
# Article card selection (markup of the source changes over time)
# =========================
ARTICLE_HREF_FRAGMENT: str = os.getenv("ARTICLE_HREF_FRAGMENT", "blogs-articles")
ARTICLE_ANCHOR_CLASSES: str = os.getenv("ARTICLE_ANCHOR_CLASSES", "")
ARTICLE_TITLE_TAGS: str = os.getenv("ARTICLE_TITLE_TAGS", "h5")

# =========================
# Images
# =========================
IMAGE_MODES = ("enclosure", "inline")
IMAGE_MODE: str = os.getenv("IMAGE_MODE", "enclosure").strip().lower()
FETCH_IMAGE_LENGTHS: bool = os.getenv("FETCH_IMAGE_LENGTHS", "1") not in ("0", "false", "no", "")

# =========================
# HTTP
# =========================
LISTEN_HOST: str = os.getenv("LISTEN_HOST", "0.0.0.0")
LISTEN_PORT: int = int(os.getenv("LISTEN_PORT", "8080"))
RSS_ROUTE: str = os.getenv("RSS_ROUTE", "/rss.xml")
FETCH_TIMEOUT: float = float(os.getenv("FETCH_TIMEOUT", "30"))
HEAD_TIMEOUT: float = float(os.getenv("HEAD_TIMEOUT", "10"))
USER_AGENT: str = os.getenv("USER_AGENT", "RubenRSS/1.0")

# =========================
# Feed metadata
# =========================
FEED_TITLE: str = os.getenv("FEED_TITLE", "Le blog Ruben")
FEED_DESCRIPTION: str = os.getenv("FEED_DESCRIPTION", "Actualités et conseils pour les pets parents.")
FEED_LANGUAGE: str = os.getenv("FEED_LANGUAGE", "fr")
TZ: ZoneInfo = ZoneInfo(os.getenv("BOT_TIMEZONE", "Europe/Paris"))

# =========================
# Logging
# =========================
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


def _split_list(raw: str, sep: Optional[str] = None) -> tuple:
    return tuple(p.strip().lower() for p in (raw or "").split(sep) if p.strip())


def validate_config() -> None:
    """Validate settings read from the environment. Call at startup."""
    global IMAGE_MODE
    if not 0 < LISTEN_PORT < 65536:
        raise EnvironmentError(f"LISTEN_PORT invalide: {LISTEN_PORT}")
    if IMAGE_MODE not in IMAGE_MODES:
        log.warning("IMAGE_MODE=%r inconnu, utilisation de 'enclosure'.", IMAGE_MODE)
        IMAGE_MODE = "enclosure"
    if not ARTICLE_HREF_FRAGMENT and not ARTICLE_ANCHOR_CLASSES:
        log.warning("Aucun filtre de lien article: tous les <a> avec titre et image seront retenus.")
    if not RSS_ROUTE.startswith("/"):
        raise EnvironmentError(f"RSS_ROUTE doit commencer par '/': {RSS_ROUTE}")


def build_settings() -> FeedSettings:
    """Bundle the module constants into the settings passed to the service."""
    return FeedSettings(
        blog_url=BLOG_URL,
        site_origin=SITE_ORIGIN,
        article_base=ARTICLE_BASE_URL,
        matcher=AnchorMatcher(
            href_fragment=ARTICLE_HREF_FRAGMENT,
            anchor_classes=_split_list(ARTICLE_ANCHOR_CLASSES),
        ),
        title_tags=_split_list(ARTICLE_TITLE_TAGS, ",") or ("h5",),
        image_mode=IMAGE_MODE if IMAGE_MODE in IMAGE_MODES else "enclosure",
        fetch_image_lengths=FETCH_IMAGE_LENGTHS,
        fetch_timeout=FETCH_TIMEOUT,
        head_timeout=HEAD_TIMEOUT,
        user_agent=USER_AGENT,
        route=RSS_ROUTE,
        feed_title=FEED_TITLE,
        feed_description=FEED_DESCRIPTION,
        feed_language=FEED_LANGUAGE,
        tz=TZ,
    )
