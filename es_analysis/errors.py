"""Errors raised while decoding analysis configuration objects."""

from typing import Any, Dict, List, Optional


def join_path(prefix: str, path: str) -> str:
    """Join a location prefix (list index or entry key) with a field path."""
    if not path:
        return prefix
    if path.startswith("["):
        return f"{prefix}{path}"
    return f"{prefix}.{path}"


class TokenFilterDecodeError(ValueError):
    """Base class for token filter decode failures.

    Attributes:
        path: Location of the failing node inside an enclosing list or
            settings block, empty for a top-level node
    """

    path: str = ""

    def with_prefix(self, prefix: str) -> "TokenFilterDecodeError":
        """Return a copy located under `prefix`."""
        raise NotImplementedError


class UnknownDiscriminator(TokenFilterDecodeError):
    """Raised when a `type` value does not name a known token filter."""

    def __init__(self, value: Any, available: List[str] = None, path: str = ""):
        self.value = value
        self.available = available or []
        self.path = path
        available_str = ", ".join(self.available) if self.available else "none"
        location = f" at {path}" if path else ""
        super().__init__(
            f"Unknown token filter type '{value}'{location}. Available: {available_str}"
        )

    def with_prefix(self, prefix: str) -> "UnknownDiscriminator":
        return UnknownDiscriminator(self.value, self.available, join_path(prefix, self.path))


class MalformedFields(TokenFilterDecodeError):
    """Raised when a filter object is missing fields or has the wrong shape.

    Attributes:
        variant: Discriminator of the variant being decoded, or None when the
            failure happened before dispatch (missing `type`, wrong node kind)
        details: List of {"path": ..., "message": ...} entries
    """

    def __init__(
        self,
        variant: Optional[str],
        details: List[Dict[str, str]],
        path: str = "",
    ):
        self.variant = variant
        self.details = details
        self.path = path
        target = f"token filter '{variant}'" if variant else "token filter"
        summary = "; ".join(
            f"{d['path']}: {d['message']}" if d["path"] else d["message"]
            for d in details
        )
        super().__init__(f"Malformed {target}: {summary}")

    def with_prefix(self, prefix: str) -> "MalformedFields":
        """Return a copy with `prefix` prepended to every field path."""
        details = [
            {"path": join_path(prefix, d["path"]), "message": d["message"]}
            for d in self.details
        ]
        return MalformedFields(self.variant, details, join_path(prefix, self.path))


class AmbiguousWireShape(TokenFilterDecodeError):
    """Raised when a non-builtin filter is given as a bare string."""

    def __init__(self, value: str, path: str = ""):
        self.value = value
        self.path = path
        location = f" at {path}" if path else ""
        super().__init__(
            f"Token filter '{value}'{location} cannot be referenced by name alone; "
            f"an object with its parameters is required"
        )

    def with_prefix(self, prefix: str) -> "AmbiguousWireShape":
        return AmbiguousWireShape(self.value, join_path(prefix, self.path))
