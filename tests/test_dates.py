import pytest
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from core.dates import parse_french_date, published_at_from
from core.errors import ParseError

PARIS = ZoneInfo("Europe/Paris")


# ── parse_french_date ─────────────────────────────────────────

class TestParseFrenchDate:
    def test_basic(self):
        assert parse_french_date("19 mai 2025") == date(2025, 5, 19)

    def test_accented_month(self):
        assert parse_french_date("3 février 2024") == date(2024, 2, 3)

    def test_unaccented_alias(self):
        assert parse_french_date("15 aout 2023") == date(2023, 8, 15)

    def test_month_case_insensitive(self):
        assert parse_french_date("1 DÉCEMBRE 2024") == date(2024, 12, 1)

    def test_extra_whitespace(self):
        assert parse_french_date("  19   mai\t2025 ") == date(2025, 5, 19)

    def test_invalid_text(self):
        with pytest.raises(ParseError):
            parse_french_date("invalid text")

    def test_two_tokens(self):
        with pytest.raises(ParseError):
            parse_french_date("mai 2025")

    def test_unknown_month(self):
        with pytest.raises(ParseError):
            parse_french_date("19 may 2025")

    def test_impossible_day(self):
        with pytest.raises(ParseError):
            parse_french_date("31 avril 2025")

    def test_non_numeric_year(self):
        with pytest.raises(ParseError):
            parse_french_date("19 mai deux-mille")

    def test_empty(self):
        with pytest.raises(ParseError):
            parse_french_date("")


# ── published_at_from ─────────────────────────────────────────

class TestPublishedAtFrom:
    NOW = datetime(2026, 1, 2, 9, 30, tzinfo=PARIS)

    def test_parsed_date_at_midnight(self):
        dt = published_at_from("19 mai 2025", PARIS, now=self.NOW)
        assert dt == datetime(2025, 5, 19, tzinfo=PARIS)

    def test_invalid_falls_back_to_now(self):
        assert published_at_from("bientot", PARIS, now=self.NOW) == self.NOW

    def test_empty_falls_back_to_now(self):
        assert published_at_from("", PARIS, now=self.NOW) == self.NOW

    def test_default_now_is_aware(self):
        dt = published_at_from("", timezone.utc)
        assert dt.tzinfo is not None
