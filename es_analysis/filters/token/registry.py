"""Registry mapping token filter discriminators to their variant classes."""

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, Union

from es_analysis.errors import (
    AmbiguousWireShape,
    MalformedFields,
    TokenFilterDecodeError,
    UnknownDiscriminator,
)
from es_analysis.filters.token.base import BuiltinTokenFilter, TokenFilter, TokenFilterType
from es_analysis.filters.token.basic import (
    ApostropheFilter,
    ASCIIFoldingFilter,
    ClassicFilter,
    DecimalDigitFilter,
    KStemFilter,
    LowercaseFilter,
    PorterStemFilter,
    ReverseFilter,
    StandardFilter,
    TrimFilter,
    UppercaseFilter,
)
from es_analysis.filters.token.length import LengthFilter
from es_analysis.filters.token.ngram import EdgeNGramFilter, NGramFilter
from es_analysis.filters.token.normalization import (
    ArabicNormalizationFilter,
    GermanNormalizationFilter,
    HindiNormalizationFilter,
    IndicNormalizationFilter,
    PersianNormalizationFilter,
    ScandinavianFoldingFilter,
    ScandinavianNormalizationFilter,
    SerbianNormalizationFilter,
    SoraniNormalizationFilter,
)
from es_analysis.filters.token.stemmer import StemmerFilter
from es_analysis.filters.token.synonym import SynonymFilter

logger = logging.getLogger(__name__)

TOKEN_FILTER_CLASSES: tuple = (
    StandardFilter,
    ASCIIFoldingFilter,
    LengthFilter,
    UppercaseFilter,
    LowercaseFilter,
    NGramFilter,
    EdgeNGramFilter,
    PorterStemFilter,
    KStemFilter,
    ReverseFilter,
    SynonymFilter,
    TrimFilter,
    ClassicFilter,
    ApostropheFilter,
    DecimalDigitFilter,
    ArabicNormalizationFilter,
    GermanNormalizationFilter,
    HindiNormalizationFilter,
    IndicNormalizationFilter,
    SoraniNormalizationFilter,
    PersianNormalizationFilter,
    ScandinavianNormalizationFilter,
    ScandinavianFoldingFilter,
    SerbianNormalizationFilter,
    StemmerFilter,
)


def build_registry(
    classes: Iterable[Type[TokenFilter]],
) -> Mapping[TokenFilterType, Type[TokenFilter]]:
    """Build a read-only discriminator lookup table.

    Args:
        classes: Variant classes to register

    Returns:
        Mapping of discriminator to variant class

    Raises:
        ValueError: If two classes share a discriminator, or the builtin
            classes disagree with TokenFilterType.builtins()
    """
    registry: Dict[TokenFilterType, Type[TokenFilter]] = {}
    for filter_class in classes:
        key = filter_class.type_key
        if key in registry:
            raise ValueError(
                f"Duplicate token filter type '{key.value}': "
                f"{registry[key].__name__} and {filter_class.__name__}"
            )
        registry[key] = filter_class

    builtins = {key for key, cls in registry.items() if issubclass(cls, BuiltinTokenFilter)}
    expected = {key for key in TokenFilterType.builtins() if key in registry}
    if builtins != expected:
        mismatched = sorted(key.value for key in builtins ^ expected)
        raise ValueError(f"Builtin token filter classes do not match builtin types: {mismatched}")

    return MappingProxyType(registry)


TOKEN_FILTER_REGISTRY: Mapping[TokenFilterType, Type[TokenFilter]] = build_registry(
    TOKEN_FILTER_CLASSES
)

_BY_NAME: Mapping[str, Type[TokenFilter]] = MappingProxyType(
    {key.value: cls for key, cls in TOKEN_FILTER_REGISTRY.items()}
)


class TokenFilterRegistry:
    """Decode and encode token filters of any registered kind.

    Usage:
        # Full object form
        length = TokenFilterRegistry.decode(
            {"type": "length", "name": "short_words", "min": 3, "max": 10}
        )

        # Builtin kinds may also be given by bare name
        lowercase = TokenFilterRegistry.decode("lowercase")

        # Encoding always produces the flat object form
        body = TokenFilterRegistry.encode(length)
    """

    _registry: Mapping[str, Type[TokenFilter]] = _BY_NAME

    @classmethod
    def get(cls, filter_type: Union[str, TokenFilterType]) -> Type[TokenFilter]:
        """Get the variant class for a discriminator.

        Raises:
            UnknownDiscriminator: If the discriminator is not registered
        """
        key = filter_type.value if isinstance(filter_type, TokenFilterType) else filter_type
        if key not in cls._registry:
            raise UnknownDiscriminator(key, available=cls.list_names())
        return cls._registry[key]

    @classmethod
    def has(cls, filter_type: Union[str, TokenFilterType]) -> bool:
        key = filter_type.value if isinstance(filter_type, TokenFilterType) else filter_type
        return key in cls._registry

    @classmethod
    def list_names(cls) -> List[str]:
        """List all registered discriminators."""
        return list(cls._registry.keys())

    @classmethod
    def list_builtins(cls) -> List[str]:
        """List discriminators accepted as bare strings."""
        return [
            name for name, filter_class in cls._registry.items()
            if issubclass(filter_class, BuiltinTokenFilter)
        ]

    @classmethod
    def create(cls, filter_type: Union[str, TokenFilterType], **fields) -> TokenFilter:
        """Construct a variant programmatically by discriminator.

        Args:
            filter_type: Discriminator of the variant
            **fields: Variant fields

        Returns:
            Instance of the requested variant
        """
        return cls.get(filter_type)(**fields)

    @classmethod
    def decode(cls, node: Any, strict: Optional[bool] = None) -> TokenFilter:
        """Decode a token filter from either of its wire shapes.

        Args:
            node: Bare discriminator string (builtin kinds only) or a flat
                JSON object carrying `type`
            strict: Fail on unknown fields. Defaults to Settings.strict_fields

        Returns:
            The decoded variant

        Raises:
            UnknownDiscriminator: If the discriminator is not registered
            AmbiguousWireShape: If a non-builtin kind is given as a bare string
            MalformedFields: If the node or its fields have the wrong shape
        """
        try:
            if isinstance(node, str):
                return cls._decode_name(node)
            if isinstance(node, dict):
                return cls._decode_object(node, strict)
            raise MalformedFields(
                None,
                [{"path": "", "message": f"expected string or object, got {type(node).__name__}"}],
            )
        except TokenFilterDecodeError as e:
            logger.debug(f"Token filter decode failed: {e}")
            raise

    @classmethod
    def decode_many(cls, nodes: Iterable[Any], strict: Optional[bool] = None) -> List[TokenFilter]:
        """Decode a list of token filters, failing on the first bad entry.

        The error is located under the entry index, e.g. "[2]" or "[2].max".
        """
        filters = []
        for index, node in enumerate(nodes):
            try:
                filters.append(cls.decode(node, strict=strict))
            except TokenFilterDecodeError as e:
                raise e.with_prefix(f"[{index}]") from e
        return filters

    @classmethod
    def encode(cls, token_filter: TokenFilter) -> Dict[str, Any]:
        """Encode a token filter as a flat JSON object with `type` first."""
        return token_filter.to_json()

    @classmethod
    def encode_many(cls, token_filters: Iterable[TokenFilter]) -> List[Dict[str, Any]]:
        return [cls.encode(f) for f in token_filters]

    @classmethod
    def _decode_name(cls, name: str) -> TokenFilter:
        filter_class = cls.get(name)
        if not issubclass(filter_class, BuiltinTokenFilter):
            raise AmbiguousWireShape(name)
        return filter_class.default()

    @classmethod
    def _decode_object(cls, obj: Dict[str, Any], strict: Optional[bool]) -> TokenFilter:
        if "type" not in obj:
            raise MalformedFields(None, [{"path": "type", "message": "Field required"}])
        filter_type = obj["type"]
        if not isinstance(filter_type, str):
            raise MalformedFields(
                None,
                [{"path": "type", "message": f"expected string, got {type(filter_type).__name__}"}],
            )
        return cls.get(filter_type).from_json(obj, strict=strict)


def decode_token_filter(node: Any, strict: Optional[bool] = None) -> TokenFilter:
    """Decode a token filter from a bare string or a flat JSON object."""
    return TokenFilterRegistry.decode(node, strict=strict)


def encode_token_filter(token_filter: TokenFilter) -> Dict[str, Any]:
    """Encode a token filter as a flat JSON object."""
    return TokenFilterRegistry.encode(token_filter)
