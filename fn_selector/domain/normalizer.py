"""
Signature normalizer.

Reduces a free-form Solidity-style declaration such as
``function transfer(address recipient, uint256 amount)`` to the canonical
``transfer(address,uint256)`` form that selectors are computed from.
"""

from typing import List, Optional, Tuple

from fn_selector.core.config import settings
from fn_selector.core.exceptions import (
    InvalidSignatureError,
    MissingClosingParenthesisError,
)
from fn_selector.core.logging import log_selector_operation


INVALID_SIGNATURE_SENTINEL = "Error: Invalid function signature."
MISSING_CLOSING_PAREN_SENTINEL = "Error: Missing closing parenthesis."
UNKNOWN_PARAM_TYPE = "unknown"

# First token of MISSING_CLOSING_PAREN_SENTINEL once it has gone through
# parameter splitting, e.g. "foo(uint256" -> "foo(Error:)".
_MANGLED_SENTINEL_TYPE = MISSING_CLOSING_PAREN_SENTINEL.split()[0]


def _function_name(head: str) -> str:
    # Keeps only the last token: drops "function" and any return type before it.
    tokens = head.split()
    return tokens[-1] if tokens else ""


def _param_types(params: str) -> List[str]:
    types = []
    for param in params.split(","):
        tokens = param.strip().split()
        types.append(tokens[0] if tokens else UNKNOWN_PARAM_TYPE)
    return types


def _split_declaration(raw: str) -> Optional[Tuple[str, Optional[str]]]:
    """Return (head, params), params being None when ``)`` is missing."""
    parts = raw.strip().split("(", 1)
    if len(parts) < 2:
        return None
    head, tail = parts
    end = tail.find(")")
    params: Optional[str] = tail[:end] if end != -1 else None
    return head, params


def normalize(raw: str) -> str:
    """
    Normalize a function declaration to its canonical signature.

    Never raises on malformed input: a declaration without ``(`` becomes
    ``INVALID_SIGNATURE_SENTINEL`` and an unclosed parameter list is replaced
    by ``MISSING_CLOSING_PAREN_SENTINEL`` before parameter splitting.

    An empty parameter list yields ``unknown`` as its only type, so
    ``normalize("foo()") == "foo(unknown)"``.

    Args:
        raw: Declaration text, with or without keywords and parameter names

    Returns:
        str: Canonical ``name(type,type,...)`` signature or a sentinel string
    """
    split = _split_declaration(raw)
    if split is None:
        if settings.LOG_SENTINELS:
            log_selector_operation(
                "normalize",
                signature=raw,
                status="sentinel",
                sentinel=INVALID_SIGNATURE_SENTINEL,
            )
        return INVALID_SIGNATURE_SENTINEL

    head, params = split
    if params is None:
        if settings.LOG_SENTINELS:
            log_selector_operation(
                "normalize",
                signature=raw,
                status="sentinel",
                sentinel=MISSING_CLOSING_PAREN_SENTINEL,
            )
        params = MISSING_CLOSING_PAREN_SENTINEL

    return f"{_function_name(head)}({','.join(_param_types(params))})"


def normalize_strict(raw: str) -> str:
    """
    Normalize a declaration, raising instead of substituting a sentinel.

    Agrees with :func:`normalize` on every input that has both parentheses.

    Raises:
        InvalidSignatureError: The declaration has no ``(``
        MissingClosingParenthesisError: The parameter list has no ``)``
    """
    split = _split_declaration(raw)
    if split is None:
        raise InvalidSignatureError(raw)

    head, params = split
    if params is None:
        raise MissingClosingParenthesisError(raw)

    return f"{_function_name(head)}({','.join(_param_types(params))})"


def is_sentinel(signature: str) -> bool:
    """
    Check whether a normalized signature came from malformed input.

    A missing closing parenthesis always normalizes to ``name(Error:)``, so a
    declaration that literally reads ``foo(Error:)`` is reported as malformed
    too, and ``SelectorValue.is_valid`` is False for it.
    """
    if signature == INVALID_SIGNATURE_SENTINEL:
        return True
    return signature.endswith(f"({_MANGLED_SENTINEL_TYPE})")
