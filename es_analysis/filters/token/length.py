"""Length token filter."""

from pydantic import Field, StrictInt, model_validator

from es_analysis.filters.token.base import TokenFilter, TokenFilterType


class LengthFilter(TokenFilter):
    """Removes tokens shorter than `min` or longer than `max` characters."""

    type_key = TokenFilterType.LENGTH

    min: StrictInt = Field(ge=0)
    max: StrictInt = Field(ge=0)

    @model_validator(mode="after")
    def check_bounds(self) -> "LengthFilter":
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self
