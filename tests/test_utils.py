from core.utils import clean_text, resolve_article_url, canonical_link

ORIGIN = "https://site"
BASE = "https://site/blogs-articles/"


# ── resolve_article_url ───────────────────────────────────────

class TestResolveArticleUrl:
    def test_dot_slash_uses_article_base(self):
        assert resolve_article_url("./foo", ORIGIN, BASE) == "https://site/blogs-articles/foo"

    def test_dot_slash_base_without_trailing_slash(self):
        assert resolve_article_url("./foo", ORIGIN, "https://site/blogs-articles") == \
            "https://site/blogs-articles/foo"

    def test_root_relative_uses_origin(self):
        assert resolve_article_url("/foo", ORIGIN, BASE) == "https://site/foo"

    def test_absolute_unchanged(self):
        assert resolve_article_url("http://x/foo", ORIGIN, BASE) == "http://x/foo"

    def test_bare_relative_uses_origin(self):
        assert resolve_article_url("blogs-articles/foo", ORIGIN, BASE) == "https://site/blogs-articles/foo"

    def test_origin_with_trailing_slash(self):
        assert resolve_article_url("/foo", "https://site/", BASE) == "https://site/foo"

    def test_scheme_relative(self):
        assert resolve_article_url("//cdn.site/img.png", ORIGIN, BASE) == "https://cdn.site/img.png"

    def test_other_schemes_unchanged(self):
        assert resolve_article_url("data:image/png;base64,AAAA", ORIGIN, BASE) == "data:image/png;base64,AAAA"
        assert resolve_article_url("mailto:contact@site", ORIGIN, BASE) == "mailto:contact@site"

    def test_live_site_layout(self):
        url = resolve_article_url("./blogs-articles/chien", "https://ruben.care", "https://ruben.care/")
        assert url == "https://ruben.care/blogs-articles/chien"


# ── canonical_link ────────────────────────────────────────────

class TestCanonicalLink:
    def test_strips_trailing_slash(self):
        assert canonical_link("https://ruben.care/blog/") == "https://ruben.care/blog"

    def test_unchanged_without_slash(self):
        assert canonical_link("https://ruben.care/blog") == "https://ruben.care/blog"

    def test_root(self):
        assert canonical_link("https://ruben.care/") == "https://ruben.care"

    def test_keeps_query(self):
        assert canonical_link("https://ruben.care/blog/?page=1") == "https://ruben.care/blog?page=1"


# ── clean_text ────────────────────────────────────────────────

class TestCleanText:
    def test_collapses_whitespace(self):
        assert clean_text("  Garde \n d'animaux\xa0 ") == "Garde d'animaux"

    def test_none(self):
        assert clean_text(None) == ""
