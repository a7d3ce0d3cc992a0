import pytest

from core import config
from core.config import build_settings, validate_config
from core.models import AnchorMatcher


class TestBuildSettings:
    def test_defaults(self):
        s = build_settings()
        assert s.blog_url == config.BLOG_URL
        assert s.route == config.RSS_ROUTE
        assert s.matcher.href_fragment == config.ARTICLE_HREF_FRAGMENT

    def test_anchor_classes_split(self, monkeypatch):
        monkeypatch.setattr(config, "ARTICLE_ANCHOR_CLASSES", "framer-Card  Framer-Link")
        s = build_settings()
        assert s.matcher.anchor_classes == ("framer-card", "framer-link")

    def test_title_tags_split(self, monkeypatch):
        monkeypatch.setattr(config, "ARTICLE_TITLE_TAGS", "h3, H5")
        assert build_settings().title_tags == ("h3", "h5")

    def test_empty_title_tags_fall_back(self, monkeypatch):
        monkeypatch.setattr(config, "ARTICLE_TITLE_TAGS", " ")
        assert build_settings().title_tags == ("h5",)


class TestValidateConfig:
    def test_unknown_image_mode_falls_back(self, monkeypatch):
        monkeypatch.setattr(config, "IMAGE_MODE", "gallery")
        validate_config()
        assert config.IMAGE_MODE == "enclosure"

    def test_bad_port(self, monkeypatch):
        monkeypatch.setattr(config, "LISTEN_PORT", 70000)
        with pytest.raises(EnvironmentError):
            validate_config()

    def test_bad_route(self, monkeypatch):
        monkeypatch.setattr(config, "RSS_ROUTE", "rss.xml")
        with pytest.raises(EnvironmentError):
            validate_config()


class TestAnchorMatcher:
    def test_fragment(self):
        m = AnchorMatcher(href_fragment="blogs-articles")
        assert m.matches("./blogs-articles/x")
        assert not m.matches("/a-propos")
        assert not m.matches("")

    def test_classes_case_insensitive(self):
        m = AnchorMatcher(href_fragment="", anchor_classes=("card",))
        assert m.matches("/post/1", ["Card", "other"])
        assert not m.matches("/post/1", ["other"])

    def test_fragment_and_classes(self):
        m = AnchorMatcher(href_fragment="blogs-articles", anchor_classes=("card",))
        assert not m.matches("/post/1", ["card"])
        assert m.matches("/blogs-articles/1", ["card"])
