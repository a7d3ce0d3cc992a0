from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import Iterable, Optional, Tuple
from zoneinfo import ZoneInfo


@dataclass(frozen=True)
class Article:
    url: str  # absolue, unique dans une recuperation
    title: str
    image: str
    published_at: datetime
    category: str = ""
    date_text: str = ""  # ex: "19 mai 2025"
    reading_time: str = ""  # ex: "6 min"
    short_description: str = ""  # la petite description sous le titre


@dataclass(frozen=True)
class AnchorMatcher:
    """Decides whether an <a> element is an article card link."""
    href_fragment: str = "blogs-articles"
    anchor_classes: Tuple[str, ...] = ()

    def matches(self, href: str, classes: Iterable[str] = ()) -> bool:
        if not href:
            return False
        if self.href_fragment and self.href_fragment not in href:
            return False
        if self.anchor_classes:
            present = {c.lower() for c in classes}
            if not all(c.lower() in present for c in self.anchor_classes):
                return False
        return True


@dataclass(frozen=True)
class FeedSettings:
    blog_url: str = "https://ruben.care/blog"
    site_origin: str = "https://ruben.care"
    article_base: str = "https://ruben.care/"
    matcher: AnchorMatcher = field(default_factory=AnchorMatcher)
    title_tags: Tuple[str, ...] = ("h5",)
    image_mode: str = "enclosure"  # ou "inline"
    fetch_image_lengths: bool = True
    fetch_timeout: float = 30.0
    head_timeout: float = 10.0
    user_agent: str = "RubenRSS/1.0"
    route: str = "/rss.xml"
    feed_title: str = "Le blog Ruben"
    feed_description: str = "Actualités et conseils pour les pets parents."
    feed_language: str = "fr"
    tz: tzinfo = ZoneInfo("Europe/Paris")

    @property
    def inline_images(self) -> bool:
        return self.image_mode == "inline"


@dataclass(frozen=True)
class Enclosure:
    url: str
    length: int
    type: str


@dataclass(frozen=True)
class FeedItem:
    title: str
    link: str
    description: str
    created: datetime
    enclosure: Optional[Enclosure] = None


@dataclass(frozen=True)
class Feed:
    title: str
    link: str
    description: str
    created: datetime
    items: Tuple[FeedItem, ...] = ()
    language: str = ""
