"""Synonym token filter."""

from typing import Annotated, Literal, Optional, Tuple

from pydantic import Field, StrictBool, StrictStr, model_validator

from es_analysis.filters.token.base import TokenFilter, TokenFilterType


class SynonymFilter(TokenFilter):
    """Expands or replaces tokens using synonym rules.

    Rules are either inline (`synonyms`, one rule per entry such as
    "i-pod, i pod => ipod") or read by the search service from a file
    (`synonyms_path`). Exactly one of the two must be set, and inline rules
    must not be empty.
    """

    type_key = TokenFilterType.SYNONYM

    synonyms: Optional[Annotated[Tuple[StrictStr, ...], Field(min_length=1)]] = None
    synonyms_path: Optional[Annotated[StrictStr, Field(min_length=1)]] = None
    format: Optional[Literal["solr", "wordnet"]] = None
    expand: Optional[StrictBool] = None
    lenient: Optional[StrictBool] = None

    @model_validator(mode="after")
    def check_rule_source(self) -> "SynonymFilter":
        if (self.synonyms is None) == (self.synonyms_path is None):
            raise ValueError("exactly one of 'synonyms' or 'synonyms_path' is required")
        return self
