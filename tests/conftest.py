"""Pytest configuration and fixtures."""

import logging

import pytest

from es_analysis.config import get_settings
from es_analysis.filters.token import (
    ASCIIFoldingFilter,
    BuiltinTokenFilter,
    EdgeNGramFilter,
    GermanNormalizationFilter,
    LengthFilter,
    LowercaseFilter,
    NGramFilter,
    StemmerFilter,
    SynonymFilter,
    TOKEN_FILTER_REGISTRY,
)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def package_logger():
    """Package logger, restored to its prior handlers and level afterwards."""
    logger = logging.getLogger("es_analysis")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def sample_filters():
    """One representative instance per token filter kind."""
    custom = [
        ASCIIFoldingFilter(name="folding", preserve_original=True),
        LengthFilter(name="short_words", min=3, max=10),
        LowercaseFilter(name="greek_lowercase", language="greek"),
        NGramFilter(name="trigrams", min_gram=3, max_gram=3),
        EdgeNGramFilter(name="autocomplete", min_gram=1, max_gram=20),
        SynonymFilter(
            name="product_synonyms",
            synonyms=["i-pod, i pod => ipod", "universe, cosmos"],
            expand=False,
        ),
        StemmerFilter(name="en_stem", language="light_english"),
        GermanNormalizationFilter(name="de_norm"),
    ]
    covered = {f.type_key for f in custom}
    for key, filter_class in TOKEN_FILTER_REGISTRY.items():
        if key in covered:
            continue
        if issubclass(filter_class, BuiltinTokenFilter):
            custom.append(filter_class())
        else:
            custom.append(filter_class(name=f"my_{key.value}"))
    return custom


@pytest.fixture
def filter_block():
    """Sample `analysis.filter` settings block."""
    return {
        "short_words": {"type": "length", "min": 3, "max": 10},
        "en_stem": {"type": "stemmer", "language": "english"},
        "rules": {"type": "synonym", "synonyms_path": "analysis/synonyms.txt"},
        "lowercase": {"type": "lowercase"},
    }
