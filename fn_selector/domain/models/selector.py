"""
Selector value model.
Holds a normalized function signature and derives its 4-byte selector on demand.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fn_selector.domain.normalizer import is_sentinel, normalize, normalize_strict
from fn_selector.infrastructure.blockchain.selectors import selector_hex


class SelectorValue(BaseModel):
    """Normalized function signature.

    Whatever is passed as ``signature`` is run through :func:`normalize`, so
    malformed declarations are stored as their sentinel string rather than
    rejected.
    """

    model_config = ConfigDict(frozen=True)

    signature: str = Field(..., description="Canonical function signature")

    @field_validator("signature", mode="before")
    @classmethod
    def normalize_signature(cls, v):
        """Normalize the raw declaration."""
        if isinstance(v, str):
            return normalize(v)
        return v

    @classmethod
    def from_signature(cls, raw: str) -> "SelectorValue":
        """Build a value from a raw declaration, storing a sentinel if malformed."""
        return cls(signature=raw)

    @classmethod
    def strict(cls, raw: str) -> "SelectorValue":
        """
        Build a value from a raw declaration, raising if it is malformed.

        Raises:
            InvalidSignatureError: The declaration has no ``(``
            MissingClosingParenthesisError: The parameter list has no ``)``
        """
        # normalize() is idempotent on canonical signatures, so the validator
        # leaves the strict result untouched.
        return cls(signature=normalize_strict(raw))

    @property
    def is_valid(self) -> bool:
        """False when the stored signature is a sentinel."""
        return not is_sentinel(self.signature)

    def to_selector_bytes(self) -> str:
        """
        Compute the selector of the stored signature.

        Returns:
            str: 8 lowercase hex characters, no ``0x`` prefix

        Raises:
            InvalidInputError: The stored signature is empty
        """
        return selector_hex(self.signature)

    def __str__(self) -> str:
        return self.signature
