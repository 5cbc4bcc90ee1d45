"""Tests for token filter variants."""

import pytest
from pydantic import ValidationError

from es_analysis.errors import MalformedFields
from es_analysis.filters.token import (
    ASCIIFoldingFilter,
    EdgeNGramFilter,
    LengthFilter,
    LowercaseFilter,
    NGramFilter,
    PersianNormalizationFilter,
    StandardFilter,
    StemmerFilter,
    SynonymFilter,
    TrimFilter,
)


class TestBuiltinFilters:
    """Tests for filters usable without parameters."""

    def test_default_name_is_discriminator(self):
        """Test that builtin filters are named after their type by default."""
        assert LowercaseFilter().name == "lowercase"
        assert ASCIIFoldingFilter().name == "ascii_folding"
        assert TrimFilter().name == "trim"

    def test_default_instance(self):
        """Test default() builds the parameterless instance."""
        lowercase = LowercaseFilter.default()
        assert lowercase == LowercaseFilter(name="lowercase")
        assert lowercase.language is None
        assert lowercase.is_default()

    def test_custom_parameters_are_not_default(self):
        """Test is_default() is false for renamed or configured filters."""
        assert not LowercaseFilter(language="turkish").is_default()
        assert not StandardFilter(name="my_standard").is_default()
        assert not ASCIIFoldingFilter(preserve_original=True).is_default()

    def test_to_json_puts_type_first(self):
        """Test encoded object starts with the discriminator."""
        body = ASCIIFoldingFilter(name="folding", preserve_original=True).to_json()
        assert list(body) == ["type", "name", "preserve_original"]
        assert body == {"type": "ascii_folding", "name": "folding", "preserve_original": True}

    def test_lowercase_rejects_unknown_language(self):
        """Test language is restricted to supported values."""
        with pytest.raises(ValidationError):
            LowercaseFilter(language="klingon")


class TestLengthFilter:
    """Tests for LengthFilter."""

    def test_to_json(self):
        """Test flat wire shape."""
        length = LengthFilter(name="my_filter_name", min=3, max=10)
        assert length.to_json() == {"type": "length", "name": "my_filter_name", "min": 3, "max": 10}

    def test_from_json(self):
        """Test decoding kind-specific fields from the same object."""
        length = LengthFilter.from_json({"type": "length", "name": "short", "min": 2, "max": 5})
        assert length.min == 2
        assert length.max == 5
        assert length.type == "length"

    def test_missing_field(self):
        """Test missing required field is reported by path."""
        with pytest.raises(MalformedFields) as exc_info:
            LengthFilter.from_json({"type": "length", "name": "short", "min": 2})

        assert exc_info.value.variant == "length"
        assert exc_info.value.details == [{"path": "max", "message": "Field required"}]

    def test_wrong_kind(self):
        """Test string numbers are not coerced."""
        with pytest.raises(MalformedFields) as exc_info:
            LengthFilter.from_json({"type": "length", "name": "short", "min": "2", "max": 5})

        assert [d["path"] for d in exc_info.value.details] == ["min"]

    def test_min_greater_than_max(self):
        """Test bounds are checked against each other."""
        with pytest.raises(MalformedFields) as exc_info:
            LengthFilter.from_json({"type": "length", "name": "short", "min": 8, "max": 5})

        assert "must not exceed" in str(exc_info.value)

    def test_mismatched_type(self):
        """Test decoding with another variant's discriminator fails."""
        with pytest.raises(MalformedFields) as exc_info:
            LengthFilter.from_json({"type": "trim", "name": "short", "min": 1, "max": 2})

        assert exc_info.value.details[0]["path"] == "type"

    @pytest.mark.parametrize("obj", [["x"], "length", None, 3])
    def test_from_json_rejects_non_object(self, obj):
        """Test per-variant decoding reports non-objects as malformed."""
        with pytest.raises(MalformedFields) as exc_info:
            LengthFilter.from_json(obj)

        assert exc_info.value.variant == "length"

    def test_is_immutable(self):
        """Test variants cannot be modified after construction."""
        length = LengthFilter(name="short", min=1, max=2)
        with pytest.raises(ValidationError):
            length.min = 5


class TestNGramFilters:
    """Tests for NGramFilter and EdgeNGramFilter."""

    def test_defaults(self):
        """Test default gram sizes."""
        ngram = NGramFilter(name="grams")
        assert ngram.min_gram == 1
        assert ngram.max_gram == 2

    def test_discriminators(self):
        """Test wire discriminators."""
        assert NGramFilter(name="a").to_json()["type"] == "nGram"
        assert EdgeNGramFilter(name="b").to_json()["type"] == "edgeNGram"

    def test_invalid_range(self):
        """Test min_gram larger than max_gram is rejected."""
        with pytest.raises(MalformedFields):
            EdgeNGramFilter.from_json(
                {"type": "edgeNGram", "name": "ac", "min_gram": 4, "max_gram": 2}
            )

    def test_zero_gram_rejected(self):
        """Test gram sizes must be positive."""
        with pytest.raises(ValidationError):
            NGramFilter(name="grams", min_gram=0)


class TestSynonymFilter:
    """Tests for SynonymFilter."""

    def test_inline_rules(self):
        """Test inline rules round-trip as a list."""
        body = {
            "type": "synonym",
            "name": "syn",
            "synonyms": ["universe, cosmos", "i-pod, i pod => ipod"],
            "lenient": True,
        }
        synonym = SynonymFilter.from_json(body)
        assert synonym.synonyms == ("universe, cosmos", "i-pod, i pod => ipod")
        assert synonym.to_json() == body

    def test_file_rules(self):
        """Test file-referenced rules."""
        synonym = SynonymFilter.from_json(
            {"type": "synonym", "name": "syn", "synonyms_path": "analysis/synonyms.txt", "format": "wordnet"}
        )
        assert synonym.synonyms is None
        assert synonym.synonyms_path == "analysis/synonyms.txt"
        assert "synonyms" not in synonym.to_json()

    def test_requires_rules(self):
        """Test that a rule source is required."""
        with pytest.raises(MalformedFields):
            SynonymFilter.from_json({"type": "synonym", "name": "syn"})

    def test_rejects_both_rule_sources(self):
        """Test inline and file rules are mutually exclusive."""
        with pytest.raises(MalformedFields):
            SynonymFilter.from_json(
                {"type": "synonym", "name": "syn", "synonyms": ["a, b"], "synonyms_path": "x.txt"}
            )

    def test_rejects_empty_inline_rules(self):
        """Test an empty rule list is not a usable rule source."""
        with pytest.raises(MalformedFields) as exc_info:
            SynonymFilter.from_json({"type": "synonym", "name": "syn", "synonyms": []})

        assert exc_info.value.details[0]["path"].startswith("synonyms")

    def test_rejects_empty_rules_path(self):
        with pytest.raises(MalformedFields):
            SynonymFilter.from_json({"type": "synonym", "name": "syn", "synonyms_path": ""})

    def test_hashable(self):
        """Test synonym filters can be used in sets."""
        synonym = SynonymFilter(name="syn", synonyms=["a, b"])
        assert len({synonym, SynonymFilter(name="syn", synonyms=["a, b"])}) == 1


class TestOtherFilters:
    """Tests for stemmer and normalization filters."""

    def test_stemmer_requires_language(self):
        """Test stemmer needs a language."""
        with pytest.raises(MalformedFields) as exc_info:
            StemmerFilter.from_json({"type": "stemmer", "name": "stem"})

        assert exc_info.value.details[0]["path"] == "language"

    def test_normalization_requires_name(self):
        """Test normalization filters have no default name."""
        with pytest.raises(ValidationError):
            PersianNormalizationFilter()

    def test_normalization_to_json(self):
        """Test normalization filters encode only type and name."""
        body = PersianNormalizationFilter(name="fa").to_json()
        assert body == {"type": "persian_normalization", "name": "fa"}

    def test_as_reference(self):
        """Test analyzers reference filters by name."""
        assert StemmerFilter(name="en_stem", language="english").as_reference() == "en_stem"
