"""Type-erased holder for a single token filter of any kind."""

from typing import Any, Dict

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from es_analysis.filters.token.base import TokenFilter
from es_analysis.filters.token.registry import TokenFilterRegistry


class AnyTokenFilter:
    """Wraps exactly one token filter behind a uniform decode/encode contract.

    Usable as a pydantic field type, so aggregates can hold heterogeneous
    filter lists:

        class FilterChain(BaseModel):
            filters: list[AnyTokenFilter]

        chain = FilterChain.model_validate(
            {"filters": ["lowercase", {"type": "stemmer", "name": "en", "language": "english"}]}
        )
    """

    __slots__ = ("base",)

    def __init__(self, base: TokenFilter):
        if not isinstance(base, TokenFilter):
            raise TypeError(f"Expected a TokenFilter, got {type(base).__name__}")
        self.base = base

    @classmethod
    def from_json(cls, node: Any) -> "AnyTokenFilter":
        """Decode any registered token filter from its wire form."""
        return cls(TokenFilterRegistry.decode(node))

    def to_json(self) -> Dict[str, Any]:
        """Encode the wrapped filter as a flat JSON object."""
        return self.base.to_json()

    @property
    def type(self) -> str:
        return self.base.type

    @property
    def name(self) -> str:
        return self.base.name

    @classmethod
    def _validate(cls, value: Any) -> "AnyTokenFilter":
        if isinstance(value, cls):
            return value
        if isinstance(value, TokenFilter):
            return cls(value)
        return cls.from_json(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_json()
            ),
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AnyTokenFilter):
            return self.base == other.base
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.base)

    def __repr__(self) -> str:
        return f"AnyTokenFilter({self.base!r})"
