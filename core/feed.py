"""RSS 2.0 feed construction and serialization."""

import html as htmlmod
import logging
import re
import xml.etree.ElementTree as ET
from datetime import datetime
from email.utils import format_datetime
from typing import Dict, Iterable, Optional
from urllib.parse import urlparse

from core.errors import SerializationError
from core.models import Article, Enclosure, Feed, FeedItem, FeedSettings
from core.utils import canonical_link

log = logging.getLogger("rubenrss.feed")

GENERATOR = "RubenRSS"
_XML_ILLEGAL_RE = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def compose_info_line(category: str, date_text: str, reading_time: str) -> str:
    # Format : "Garde d'animaux — 19 mai 2025 (6 min)"
    if category and date_text and reading_time:
        return f"{category} — {date_text} ({reading_time})"
    if category and date_text:
        return f"{category} — {date_text}"
    if category:
        return category
    return date_text


def build_item_description(article: Article, inline_image: bool = False) -> str:
    info = htmlmod.escape(
        compose_info_line(article.category, article.date_text, article.reading_time),
        quote=False,
    )
    if article.short_description:
        desc = htmlmod.escape(article.short_description, quote=False)
        body = f"{desc}<br><i>{info}</i>" if info else desc
    else:
        body = info
    if inline_image and article.image:
        img = f'<img src="{htmlmod.escape(article.image)}" alt="{htmlmod.escape(article.title)}">'
        return f"{img}<br>{body}" if body else img
    return body


def enclosure_type(url: str) -> str:
    path = urlparse(url).path.lower()
    if path.endswith((".jpg", ".jpeg")):
        return "image/jpeg"
    return "image/png"


def build_feed(articles: Iterable[Article], settings: FeedSettings, created: datetime,
               image_lengths: Optional[Dict[str, int]] = None) -> Feed:
    image_lengths = image_lengths or {}
    items = []
    for a in articles:
        enclosure = None
        if not settings.inline_images:
            enclosure = Enclosure(
                url=a.image,
                length=image_lengths.get(a.image, 0),
                type=enclosure_type(a.image),
            )
        items.append(FeedItem(
            title=a.title,
            link=a.url,
            description=build_item_description(a, inline_image=settings.inline_images),
            created=a.published_at,
            enclosure=enclosure,
        ))
    return Feed(
        title=settings.feed_title,
        link=canonical_link(settings.blog_url),
        description=settings.feed_description,
        created=created,
        items=tuple(items),
        language=settings.feed_language,
    )


def _text(parent: ET.Element, tag: str, value: str) -> ET.Element:
    if _XML_ILLEGAL_RE.search(value):
        raise SerializationError(f"<{tag}> contains characters not allowed in XML")
    el = ET.SubElement(parent, tag)
    el.text = value
    return el


def render_rss(feed: Feed) -> str:
    """Serialize a feed to an RSS 2.0 document."""
    if not feed.title or not feed.link:
        raise SerializationError("channel title and link are required")

    rss = ET.Element("rss", {"version": "2.0"})
    channel = ET.SubElement(rss, "channel")
    _text(channel, "title", feed.title)
    _text(channel, "link", canonical_link(feed.link))
    _text(channel, "description", feed.description or "")
    if feed.language:
        _text(channel, "language", feed.language)
    _text(channel, "pubDate", format_datetime(feed.created))
    _text(channel, "lastBuildDate", format_datetime(feed.created))
    _text(channel, "generator", GENERATOR)

    for i, item in enumerate(feed.items):
        if not item.title or not item.link:
            raise SerializationError(f"item #{i} has no title or link")
        node = ET.SubElement(channel, "item")
        _text(node, "title", item.title)
        _text(node, "link", item.link)
        _text(node, "guid", item.link).set("isPermaLink", "true")
        _text(node, "description", item.description or "")
        _text(node, "pubDate", format_datetime(item.created))
        if item.enclosure is not None:
            ET.SubElement(node, "enclosure", {
                "url": item.enclosure.url,
                "length": str(item.enclosure.length),
                "type": item.enclosure.type,
            })

    try:
        body = ET.tostring(rss, encoding="unicode")
    except (TypeError, ValueError) as e:
        log.error("Serialisation RSS impossible: %s", e)
        raise SerializationError(str(e)) from e
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body
