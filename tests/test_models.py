"""
Tests for the Quote model.

Covers construction, validation, payload mapping, and share formatting.
"""

import dataclasses

import pytest

from daily_quotes.models.quote import Quote
from tests.test_config import EXPECTED, get_sample_quote


class TestQuoteConstruction:
    """Tests for creating Quote instances."""

    def test_minimal_quote(self):
        quote = Quote(content="Stay hungry.", author="Steve Jobs")

        assert quote.content == "Stay hungry."
        assert quote.author == "Steve Jobs"
        assert quote.tags == ()

    def test_list_tags_become_tuple(self):
        quote = Quote(content="A", author="B", tags=["life", "love"])

        assert quote.tags == ("life", "love")

    def test_quote_is_immutable(self):
        quote = Quote(content="A", author="B")

        with pytest.raises(dataclasses.FrozenInstanceError):
            quote.content = "changed"

    def test_equal_quotes_compare_equal(self):
        """Quotes are values: same fields means equal and same hash."""
        a = Quote(content="A", author="B", tags=["life"])
        b = Quote(content="A", author="B", tags=("life",))

        assert a == b
        assert hash(a) == hash(b)


class TestQuoteValidation:
    """Tests for Quote.validate()."""

    def test_empty_content_rejected(self):
        with pytest.raises(ValueError, match="content"):
            Quote(content="", author="Someone")

    def test_whitespace_content_rejected(self):
        with pytest.raises(ValueError, match="content"):
            Quote(content="   ", author="Someone")

    def test_non_string_author_rejected(self):
        with pytest.raises(ValueError, match="author"):
            Quote(content="Text", author=None)

    def test_non_string_tags_rejected(self):
        with pytest.raises(ValueError, match="tags"):
            Quote(content="Text", author="Someone", tags=[1, 2])

    def test_empty_author_allowed(self):
        quote = Quote(content="Text", author="")

        assert quote.author == ""


class TestQuoteSerialization:
    """Tests for from_dict / to_dict."""

    def test_from_dict_ignores_extra_fields(self):
        quote = Quote.from_dict(get_sample_quote(0))

        assert quote.content == "Be yourself; everyone else is already taken."
        assert quote.author == "Oscar Wilde"
        assert quote.tags == ("inspiration", "life")

    def test_from_dict_missing_tags(self):
        quote = Quote.from_dict({"content": "A", "author": "B"})

        assert quote.tags == ()

    def test_from_dict_null_tags(self):
        quote = Quote.from_dict({"content": "A", "author": "B", "tags": None})

        assert quote.tags == ()

    def test_from_dict_missing_content_raises_key_error(self):
        with pytest.raises(KeyError):
            Quote.from_dict({"author": "B"})

    def test_to_dict(self):
        quote = Quote(content="A", author="B", tags=("life",))

        assert quote.to_dict() == {"content": "A", "author": "B", "tags": ["life"]}


class TestShareText:
    """Tests for the share formatting rule."""

    def test_share_text_format(self):
        share = EXPECTED["share"]
        quote = Quote(content=share["content"], author=share["author"])

        assert quote.share_text == share["text"]

    def test_share_text_excludes_tags(self):
        quote = Quote(content="Be yourself.", author="Oscar Wilde", tags=("life",))

        assert quote.share_text == '"Be yourself." - Oscar Wilde'
        assert "life" not in quote.share_text

    def test_str_is_share_text(self):
        quote = Quote(content="A", author="B")

        assert str(quote) == '"A" - B'
