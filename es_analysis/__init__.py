"""Typed models for search index analysis configuration."""

from es_analysis.errors import (
    AmbiguousWireShape,
    MalformedFields,
    TokenFilterDecodeError,
    UnknownDiscriminator,
)
from es_analysis.filters.token import (
    AnyTokenFilter,
    TokenFilter,
    TokenFilterRegistry,
    TokenFilterType,
    decode_token_filter,
    encode_token_filter,
)

__all__ = [
    "AmbiguousWireShape",
    "AnyTokenFilter",
    "MalformedFields",
    "TokenFilter",
    "TokenFilterDecodeError",
    "TokenFilterRegistry",
    "TokenFilterType",
    "UnknownDiscriminator",
    "decode_token_filter",
    "encode_token_filter",
]
