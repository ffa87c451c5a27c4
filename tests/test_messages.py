"""Tests for the message template loader."""

import pytest

from prosecheck.errors import ConfigurationError
from prosecheck.validators.messages import MessageCatalog, get_all_locales, load_messages


class TestLoader:
    def test_bundled_locales(self):
        assert {"en", "ja"} <= set(get_all_locales())

    def test_unknown_locale(self):
        with pytest.raises(ConfigurationError, match="fr"):
            load_messages("fr")

    def test_locales_define_same_keys(self):
        """Every English template has a Japanese counterpart."""
        en, ja = load_messages("en"), load_messages("ja")
        keys = [k for k in en._templates]
        assert ja.missing(keys) == []


class TestFormat:
    def test_positional_arguments(self):
        messages = load_messages("en")
        text = messages.format("SentenceLength", 31, 30)
        assert "31" in text
        assert "30" in text

    def test_arity_selects_template(self):
        catalog = MessageCatalog("t", {"Rule.0": "no args", "Rule.1": "one {0}"})
        assert catalog.format("Rule") == "no args"
        assert catalog.format("Rule", "x") == "one x"

    def test_unknown_key_raises(self):
        """A missing template is an error, never an empty message."""
        catalog = MessageCatalog("t", {"Rule.0": "no args"})
        with pytest.raises(ConfigurationError, match="Rule.2"):
            catalog.format("Rule", 1, 2)

    def test_contains(self):
        catalog = MessageCatalog("t", {"Rule.0": "x"})
        assert "Rule.0" in catalog
        assert "Rule.1" not in catalog
