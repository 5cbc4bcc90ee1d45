"""Codec for the `analysis.filter` block of index settings.

Index settings declare custom token filters as an object keyed by filter
name, for example:

    "analysis": {
        "filter": {
            "short_words": {"type": "length", "min": 3, "max": 10},
            "en_stem": {"type": "stemmer", "language": "english"}
        }
    }
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from es_analysis.errors import MalformedFields, TokenFilterDecodeError
from es_analysis.filters.token.base import BuiltinTokenFilter, TokenFilter
from es_analysis.filters.token.registry import TokenFilterRegistry

logger = logging.getLogger(__name__)


def encode_filter_block(
    filters: Iterable[TokenFilter],
    skip_builtin_defaults: bool = False,
) -> Dict[str, Dict[str, Any]]:
    """Encode token filters into a name-keyed settings block.

    Args:
        filters: Token filters to declare
        skip_builtin_defaults: Leave out builtin filters with default
            parameters, which analyzers can reference by bare name

    Returns:
        Mapping of filter name to its flat body without `name`

    Raises:
        ValueError: If two filters share a name
    """
    block: Dict[str, Dict[str, Any]] = {}
    for token_filter in filters:
        if (
            skip_builtin_defaults
            and isinstance(token_filter, BuiltinTokenFilter)
            and token_filter.is_default()
        ):
            continue
        if token_filter.name in block:
            raise ValueError(f"Duplicate token filter name: {token_filter.name}")
        body = token_filter.to_json()
        body.pop("name")
        block[token_filter.name] = body
    return block


def decode_filter_block(
    block: Mapping[str, Any],
    strict: Optional[bool] = None,
) -> List[TokenFilter]:
    """Decode a name-keyed settings block into token filters.

    Args:
        block: Mapping of filter name to filter body
        strict: Fail on unknown fields. Defaults to Settings.strict_fields

    Returns:
        Token filters in block order, each named after its key

    Raises:
        MalformedFields: If an entry is not an object or has bad fields
        UnknownDiscriminator: If an entry has an unknown `type`

    Every error is located under its entry key.
    """
    if not isinstance(block, Mapping):
        raise MalformedFields(
            None,
            [{"path": "", "message": f"expected object, got {type(block).__name__}"}],
        )

    filters = []
    for name, body in block.items():
        if not isinstance(body, Mapping):
            raise MalformedFields(
                None,
                [{"path": name, "message": f"expected object, got {type(body).__name__}"}],
                path=name,
            )
        if "name" in body and body["name"] != name:
            logger.warning(f"Token filter '{name}' carries a conflicting name '{body['name']}'")
        try:
            filters.append(TokenFilterRegistry.decode({**body, "name": name}, strict=strict))
        except TokenFilterDecodeError as e:
            raise e.with_prefix(name) from e
    return filters
