"""Token filter configuration models."""

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
from es_analysis.filters.token.container import AnyTokenFilter
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
from es_analysis.filters.token.registry import (
    TOKEN_FILTER_REGISTRY,
    TokenFilterRegistry,
    decode_token_filter,
    encode_token_filter,
)
from es_analysis.filters.token.settings import decode_filter_block, encode_filter_block
from es_analysis.filters.token.stemmer import StemmerFilter
from es_analysis.filters.token.synonym import SynonymFilter

__all__ = [
    # Core
    "TokenFilter",
    "BuiltinTokenFilter",
    "TokenFilterType",
    "TokenFilterRegistry",
    "TOKEN_FILTER_REGISTRY",
    "AnyTokenFilter",
    "decode_token_filter",
    "encode_token_filter",
    "decode_filter_block",
    "encode_filter_block",
    # Builtin filters
    "StandardFilter",
    "ASCIIFoldingFilter",
    "UppercaseFilter",
    "LowercaseFilter",
    "PorterStemFilter",
    "KStemFilter",
    "ReverseFilter",
    "TrimFilter",
    "ClassicFilter",
    "ApostropheFilter",
    "DecimalDigitFilter",
    # Configurable filters
    "LengthFilter",
    "NGramFilter",
    "EdgeNGramFilter",
    "SynonymFilter",
    "StemmerFilter",
    # Language normalization
    "ArabicNormalizationFilter",
    "GermanNormalizationFilter",
    "HindiNormalizationFilter",
    "IndicNormalizationFilter",
    "SoraniNormalizationFilter",
    "PersianNormalizationFilter",
    "ScandinavianNormalizationFilter",
    "ScandinavianFoldingFilter",
    "SerbianNormalizationFilter",
]
