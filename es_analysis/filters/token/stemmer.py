"""Language stemmer token filter."""

from pydantic import Field, StrictStr

from es_analysis.filters.token.base import TokenFilter, TokenFilterType


class StemmerFilter(TokenFilter):
    """Algorithmic stemming for the given language (e.g. "english", "light_german")."""

    type_key = TokenFilterType.STEMMER

    language: StrictStr = Field(min_length=1)
