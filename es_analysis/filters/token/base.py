"""Base classes for token filter configuration models."""

import enum
import logging
from typing import Any, ClassVar, Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, model_validator

from es_analysis.config import get_settings
from es_analysis.errors import MalformedFields

logger = logging.getLogger(__name__)


@enum.unique
class TokenFilterType(str, enum.Enum):
    """Discriminator values of the supported token filter kinds."""

    STANDARD = "standard"
    ASCII_FOLDING = "ascii_folding"
    LENGTH = "length"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NGRAM = "nGram"
    EDGE_NGRAM = "edgeNGram"
    PORTER_STEM = "porter_stem"
    KSTEM = "kstem"
    REVERSE = "reverse"
    SYNONYM = "synonym"
    TRIM = "trim"
    CLASSIC = "classic"
    APOSTROPHE = "apostrophe"
    DECIMAL_DIGIT = "decimal_digit"

    # Language normalization
    ARABIC_NORMALIZATION = "arabic_normalization"
    GERMAN_NORMALIZATION = "german_normalization"
    HINDI_NORMALIZATION = "hindi_normalization"
    INDIC_NORMALIZATION = "indic_normalization"
    SORANI_NORMALIZATION = "sorani_normalization"
    PERSIAN_NORMALIZATION = "persian_normalization"
    SCANDINAVIAN_NORMALIZATION = "scandinavian_normalization"
    SCANDINAVIAN_FOLDING = "scandinavian_folding"
    SERBIAN_NORMALIZATION = "serbian_normalization"

    STEMMER = "stemmer"

    @classmethod
    def builtins(cls) -> FrozenSet["TokenFilterType"]:
        """Kinds that may be referenced on the wire by their bare name."""
        return _BUILTINS


_BUILTINS = frozenset({
    TokenFilterType.STANDARD,
    TokenFilterType.ASCII_FOLDING,
    TokenFilterType.UPPERCASE,
    TokenFilterType.LOWERCASE,
    TokenFilterType.PORTER_STEM,
    TokenFilterType.KSTEM,
    TokenFilterType.REVERSE,
    TokenFilterType.TRIM,
    TokenFilterType.CLASSIC,
    TokenFilterType.APOSTROPHE,
    TokenFilterType.DECIMAL_DIGIT,
})


def _error_details(error: ValidationError) -> list:
    return [
        {
            "path": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
        }
        for err in error.errors()
    ]


class TokenFilter(BaseModel):
    """Abstract base class for all token filter variants.

    Each variant binds a discriminator through `type_key` and declares its
    own parameters as fields. The wire form is a flat JSON object holding
    the variant's fields plus `type`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type_key: ClassVar[TokenFilterType]

    name: StrictStr = Field(min_length=1)

    @property
    def type(self) -> str:
        """Discriminator string of this variant."""
        return self.type_key.value

    @classmethod
    def from_json(
        cls,
        obj: Dict[str, Any],
        strict: Optional[bool] = None,
    ) -> "TokenFilter":
        """Decode this variant from a flat filter object.

        Args:
            obj: JSON object including the `type` field
            strict: Fail on unknown fields. Defaults to Settings.strict_fields

        Returns:
            The decoded variant

        Raises:
            MalformedFields: If fields are missing, unknown or of the wrong kind
        """
        variant = cls.type_key.value
        if not isinstance(obj, dict):
            raise MalformedFields(
                variant,
                [{"path": "", "message": f"expected object, got {type(obj).__name__}"}],
            )
        if obj.get("type") != variant:
            raise MalformedFields(
                variant,
                [{"path": "type", "message": f"expected '{variant}', got {obj.get('type')!r}"}],
            )

        fields = {key: value for key, value in obj.items() if key != "type"}
        if strict is None:
            strict = get_settings().strict_fields

        unknown = sorted(set(fields) - set(cls.model_fields))
        if unknown and not strict:
            logger.warning(f"Dropping unknown fields {unknown} from token filter '{variant}'")
            for key in unknown:
                fields.pop(key)

        try:
            return cls.model_validate(fields)
        except ValidationError as e:
            raise MalformedFields(variant, _error_details(e)) from e

    def to_json(self) -> Dict[str, Any]:
        """Encode as a flat JSON object with `type` first."""
        return {"type": self.type, **self.model_dump(mode="json", exclude_none=True)}

    def as_reference(self) -> str:
        """Name used to reference this filter from an analyzer filter chain."""
        return self.name

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name='{self.name}', type='{self.type}')>"


class BuiltinTokenFilter(TokenFilter):
    """Token filter that can be constructed with no parameters.

    The default instance is named after its discriminator, which is also the
    bare-string wire form accepted for these kinds.
    """

    @model_validator(mode="before")
    @classmethod
    def fill_default_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and "name" not in data:
            data = {**data, "name": cls.type_key.value}
        return data

    @classmethod
    def default(cls) -> "BuiltinTokenFilter":
        """Create the parameterless instance."""
        return cls()

    def is_default(self) -> bool:
        """True if this instance is indistinguishable from its bare name."""
        return self == self.default()
