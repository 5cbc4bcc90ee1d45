"""Builtin token filters that need no configuration to be used."""

from typing import Literal, Optional

from pydantic import StrictBool

from es_analysis.filters.token.base import BuiltinTokenFilter, TokenFilterType


class StandardFilter(BuiltinTokenFilter):
    """No-op filter kept for older index definitions."""

    type_key = TokenFilterType.STANDARD


class ASCIIFoldingFilter(BuiltinTokenFilter):
    """Folds non-ASCII characters to their ASCII equivalents."""

    type_key = TokenFilterType.ASCII_FOLDING

    preserve_original: StrictBool = False


class UppercaseFilter(BuiltinTokenFilter):
    type_key = TokenFilterType.UPPERCASE


class LowercaseFilter(BuiltinTokenFilter):
    """Lowercases token text, optionally with language-specific rules."""

    type_key = TokenFilterType.LOWERCASE

    language: Optional[Literal["greek", "irish", "turkish"]] = None


class PorterStemFilter(BuiltinTokenFilter):
    type_key = TokenFilterType.PORTER_STEM


class KStemFilter(BuiltinTokenFilter):
    type_key = TokenFilterType.KSTEM


class ReverseFilter(BuiltinTokenFilter):
    type_key = TokenFilterType.REVERSE


class TrimFilter(BuiltinTokenFilter):
    type_key = TokenFilterType.TRIM


class ClassicFilter(BuiltinTokenFilter):
    """Strips possessives and dots from acronyms produced by the classic tokenizer."""

    type_key = TokenFilterType.CLASSIC


class ApostropheFilter(BuiltinTokenFilter):
    type_key = TokenFilterType.APOSTROPHE


class DecimalDigitFilter(BuiltinTokenFilter):
    type_key = TokenFilterType.DECIMAL_DIGIT
