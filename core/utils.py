import re
from urllib.parse import urlparse, urlunparse


def clean_text(text: str) -> str:
    return re.sub(r"\s+", " ", text or "").strip()


def resolve_article_url(href: str, site_origin: str, article_base: str) -> str:
    """Turn an href found on the listing page into an absolute URL.

    ``./x`` resolves against ``article_base``, ``/x`` and bare ``x``
    against ``site_origin``; absolute URLs are returned unchanged.
    """
    href = (href or "").strip()
    origin = site_origin.rstrip("/")
    if href.startswith("//"):
        return "https:" + href
    if urlparse(href).scheme:
        return href
    if href.startswith("./"):
        base = article_base if article_base.endswith("/") else article_base + "/"
        return base + href[2:]
    if href.startswith("/"):
        return origin + href
    return f"{origin}/{href}"


def canonical_link(url: str) -> str:
    """Drop trailing slashes from the path so the same page has one spelling."""
    try:
        u = urlparse(url)
        return urlunparse((u.scheme, u.netloc, u.path.rstrip("/"), u.params, u.query, u.fragment))
    except ValueError:
        return url.rstrip("/")
