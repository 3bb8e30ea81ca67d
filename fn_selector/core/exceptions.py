"""
Custom exceptions for fn_selector.
Provides structured error handling for signature parsing and selector hashing.
"""

from typing import Any, Dict, Optional


class SelectorError(Exception):
    """Base exception for selector computation."""

    display_prefix = "Selector error"

    def __init__(
        self,
        message: str,
        error_code: str = "SELECTOR_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.display_prefix}: {self.message}"


# Hashing
class InvalidInputError(SelectorError):
    """Raised when the signature handed to the hasher is unusable."""

    display_prefix = "Invalid input"

    def __init__(
        self,
        message: str = "Function name is empty.",
        error_code: str = "INVALID_INPUT",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code, details)


class Utf8ConversionError(SelectorError):
    """Raised when signature text cannot be encoded as UTF-8."""

    display_prefix = "UTF-8 conversion error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "UTF8_ERROR", details)


# Strict parsing
class InvalidSignatureError(InvalidInputError):
    """Raised by strict parsing when the declaration has no opening parenthesis."""

    def __init__(self, signature: str, details: Optional[Dict[str, Any]] = None):
        details = {"signature": signature, **(details or {})}
        super().__init__("Invalid function signature.", "INVALID_SIGNATURE", details)


class MissingClosingParenthesisError(InvalidInputError):
    """Raised by strict parsing when the parameter list is never closed."""

    def __init__(self, signature: str, details: Optional[Dict[str, Any]] = None):
        details = {"signature": signature, **(details or {})}
        super().__init__("Missing closing parenthesis.", "MISSING_CLOSING_PAREN", details)
