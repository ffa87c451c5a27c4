"""Shared fixtures for the prosecheck test suite."""

from __future__ import annotations

import pytest

from prosecheck.config import Configuration
from prosecheck.models.builder import DocumentCollectionBuilder
from prosecheck.models.validation import Finding, Granularity
from prosecheck.services.sinks import CollectingSink
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import register_validator

# =============================================================================
# Document fixtures
# =============================================================================


@pytest.fixture
def builder() -> DocumentCollectionBuilder:
    """A fresh builder."""
    return DocumentCollectionBuilder()


def paragraph_collection(*sentences: str, file_name: str = "sample.md"):
    """Build a one-document, one-section, one-paragraph collection."""
    builder = DocumentCollectionBuilder().add_document(file_name).add_section(0).add_paragraph()
    for line, content in enumerate(sentences, start=1):
        builder.add_sentence(content, line)
    return builder.build()


@pytest.fixture
def english_config() -> Configuration:
    """An empty English configuration."""
    return Configuration(lang="en")


@pytest.fixture
def collecting_sink() -> CollectingSink:
    return CollectingSink()


# =============================================================================
# Test-only validators, registered into a private catalog
# =============================================================================


def _finding(validator: BaseValidator, label: str, sentence=None) -> Finding:
    return Finding(validator=validator.name, message=label, sentence=sentence)


def make_catalog() -> dict:
    """Catalog of small validators that record which block they saw.

    Each one emits exactly one finding per block, so the order of the
    returned findings mirrors the order the engine visited the blocks.
    """
    catalog: dict = {}

    @register_validator("EchoDocument", granularity=Granularity.DOCUMENT, catalog=catalog)
    class EchoDocument(BaseValidator):
        def validate(self, document):
            return [_finding(self, f"doc:{document.file_name}")]

    @register_validator("EchoSection", granularity=Granularity.SECTION, catalog=catalog)
    class EchoSection(BaseValidator):
        def validate(self, section):
            return [_finding(self, f"section:{section.level}")]

    @register_validator("EchoSentence", granularity=Granularity.SENTENCE, catalog=catalog)
    class EchoSentence(BaseValidator):
        def validate(self, sentence):
            return [_finding(self, f"sentence:{sentence.content}", sentence)]

    @register_validator("Tokens", granularity=Granularity.SENTENCE, preprocessor=True, catalog=catalog)
    class Tokens(BaseValidator):
        def __init__(self):
            super().__init__()
            self.seen = 0

        def reset(self):
            self.seen = 0

        def preprocess(self, sentence):
            sentence.ensure_tokens(self.tokenizer)
            self.seen += 1

        def validate(self, sentence):
            # Every sentence of the collection is pre-processed before any validation.
            return [_finding(self, f"tokens:{len(sentence.tokens)}:seen:{self.seen}", sentence)]

    @register_validator("Boom", granularity=Granularity.SENTENCE, catalog=catalog)
    class Boom(BaseValidator):
        def validate(self, sentence):
            raise RuntimeError("kaboom")

    @register_validator("BadGranularity", granularity="paragraph", catalog=catalog)
    class BadGranularity(BaseValidator):
        def validate(self, block):
            return []

    @register_validator("NoPreprocess", granularity=Granularity.SENTENCE, preprocessor=True, catalog=catalog)
    class NoPreprocess(BaseValidator):
        def validate(self, sentence):
            return []

    @register_validator("NeedsTemplate", granularity=Granularity.SENTENCE, messages=(3,), catalog=catalog)
    class NeedsTemplate(BaseValidator):
        def validate(self, sentence):
            return []

    return catalog


@pytest.fixture
def catalog() -> dict:
    return make_catalog()


@pytest.fixture
def make_paragraph():
    """Factory for single-paragraph collections."""
    return paragraph_collection
