"""N-gram token filters."""

from pydantic import Field, StrictInt, model_validator

from es_analysis.filters.token.base import TokenFilter, TokenFilterType


class _GramRangeFilter(TokenFilter):
    """Shared gram size bounds of the n-gram filters."""

    min_gram: StrictInt = Field(default=1, ge=1)
    max_gram: StrictInt = Field(default=2, ge=1)

    @model_validator(mode="after")
    def check_gram_range(self) -> "_GramRangeFilter":
        if self.min_gram > self.max_gram:
            raise ValueError(
                f"min_gram ({self.min_gram}) must not exceed max_gram ({self.max_gram})"
            )
        return self


class NGramFilter(_GramRangeFilter):
    """Splits each token into n-grams of `min_gram` to `max_gram` characters."""

    type_key = TokenFilterType.NGRAM


class EdgeNGramFilter(_GramRangeFilter):
    """Like NGramFilter, but only n-grams anchored at the start of the token."""

    type_key = TokenFilterType.EDGE_NGRAM
