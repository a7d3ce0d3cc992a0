"""Article card extraction from the blog listing page.

The page has no semantic markup for metadata: category, date and reading
time are sibling ``<p>`` elements inside each card link. They are told
apart by a small ordered set of predicates over their text.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup

from core.dates import published_at_from
from core.errors import ParseError
from core.models import Article, FeedSettings
from core.utils import clean_text, resolve_article_url

log = logging.getLogger("rubenrss.extract")

SEPARATOR = "|"
_READING_TIME_RE = re.compile(r"\d\s*min|\bmin(?:ute)?s?\b", re.IGNORECASE)
_YEAR_RE = re.compile(r"(?<!\d)\d{4}(?!\d)")


def is_separator(text: str) -> bool:
    return text == SEPARATOR


def is_reading_time(text: str) -> bool:
    return bool(_READING_TIME_RE.search(text))


def is_date_text(text: str) -> bool:
    return bool(_YEAR_RE.search(text))


@dataclass(frozen=True)
class CardTexts:
    category: str = ""
    date_text: str = ""
    reading_time: str = ""
    short_description: str = ""


def classify_texts(texts: Iterable[str]) -> CardTexts:
    """Split the paragraph texts of one card into its metadata fields.

    Texts are taken in document order. Reading time and date keep the last
    match; the first other text is the category. The short description is
    the first remaining text that is none of the above.
    """
    texts = [clean_text(t) for t in texts]
    texts = [t for t in texts if t and not is_separator(t)]

    category = date_text = reading_time = ""
    for text in texts:
        if is_reading_time(text):
            reading_time = text
        elif is_date_text(text):
            date_text = text
        elif not category:
            category = text

    short_description = ""
    for text in texts:
        if is_reading_time(text) or is_date_text(text):
            continue
        if text in (category, date_text, reading_time):
            continue
        short_description = text
        break

    return CardTexts(
        category=category,
        date_text=date_text,
        reading_time=reading_time,
        short_description=short_description,
    )


def _first_text(anchor, tags) -> str:
    el = anchor.find(list(tags))
    if el is None:
        return ""
    return clean_text(el.get_text(" "))


def _image_src(anchor) -> str:
    img = anchor.find("img")
    if img is None:
        return ""
    return (img.get("src") or img.get("data-src") or "").strip()


def parse_html(html: str) -> BeautifulSoup:
    if not isinstance(html, str):
        raise ParseError(f"expected HTML text, got {type(html).__name__}")
    try:
        return BeautifulSoup(html, "html.parser")
    except Exception as e:
        raise ParseError(f"cannot parse HTML: {e}") from e


def extract_articles(html: str, settings: FeedSettings,
                     now: Optional[datetime] = None) -> List[Article]:
    """Return the article cards of the page, in document order, without duplicates."""
    soup = parse_html(html)
    if now is None:
        now = datetime.now(settings.tz)

    articles: List[Article] = []
    seen = set()

    for a in soup.find_all("a"):
        href = a.get("href")
        if not href or not settings.matcher.matches(href, a.get("class") or []):
            continue

        url = resolve_article_url(href, settings.site_origin, settings.article_base)
        if url in seen:
            continue

        # Un titre et une image: sinon ce n'est pas une carte article
        title = _first_text(a, settings.title_tags)
        image = _image_src(a)
        if not title or not image:
            log.debug("Lien ignore (titre ou image manquant): %s", url)
            continue
        image = resolve_article_url(image, settings.site_origin, settings.site_origin)

        texts = classify_texts(p.get_text(" ") for p in a.find_all("p"))

        articles.append(Article(
            url=url,
            title=title,
            image=image,
            category=texts.category,
            date_text=texts.date_text,
            reading_time=texts.reading_time,
            short_description=texts.short_description,
            published_at=published_at_from(texts.date_text, settings.tz, now),
        ))
        seen.add(url)

    return articles
