"""Language-specific normalization token filters.

None of these take parameters, but they are not usable by bare name and
must be declared as objects.
"""

from es_analysis.filters.token.base import TokenFilter, TokenFilterType


class ArabicNormalizationFilter(TokenFilter):
    type_key = TokenFilterType.ARABIC_NORMALIZATION


class GermanNormalizationFilter(TokenFilter):
    type_key = TokenFilterType.GERMAN_NORMALIZATION


class HindiNormalizationFilter(TokenFilter):
    type_key = TokenFilterType.HINDI_NORMALIZATION


class IndicNormalizationFilter(TokenFilter):
    type_key = TokenFilterType.INDIC_NORMALIZATION


class SoraniNormalizationFilter(TokenFilter):
    type_key = TokenFilterType.SORANI_NORMALIZATION


class PersianNormalizationFilter(TokenFilter):
    type_key = TokenFilterType.PERSIAN_NORMALIZATION


class ScandinavianNormalizationFilter(TokenFilter):
    type_key = TokenFilterType.SCANDINAVIAN_NORMALIZATION


class ScandinavianFoldingFilter(TokenFilter):
    type_key = TokenFilterType.SCANDINAVIAN_FOLDING


class SerbianNormalizationFilter(TokenFilter):
    type_key = TokenFilterType.SERBIAN_NORMALIZATION
