"""
fn_selector: Ethereum-style function selectors.
Normalizes function declarations and derives their 4-byte Keccak-256 selectors.
"""

from .core.exceptions import (
    InvalidInputError,
    InvalidSignatureError,
    MissingClosingParenthesisError,
    SelectorError,
    Utf8ConversionError,
)
from .domain.models.selector import SelectorValue
from .domain.normalizer import (
    INVALID_SIGNATURE_SENTINEL,
    MISSING_CLOSING_PAREN_SENTINEL,
    UNKNOWN_PARAM_TYPE,
    is_sentinel,
    normalize,
    normalize_strict,
)
from .infrastructure.blockchain.selectors import (
    selector_for,
    selector_hex,
    to_selector_bytes,
)

__all__ = [
    "SelectorValue",
    "normalize",
    "normalize_strict",
    "is_sentinel",
    "selector_hex",
    "selector_for",
    "to_selector_bytes",
    "INVALID_SIGNATURE_SENTINEL",
    "MISSING_CLOSING_PAREN_SENTINEL",
    "UNKNOWN_PARAM_TYPE",
    "SelectorError",
    "InvalidInputError",
    "Utf8ConversionError",
    "InvalidSignatureError",
    "MissingClosingParenthesisError",
]
