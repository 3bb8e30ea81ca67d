"""
Function selector hashing.

A selector is the first 4 bytes of the Keccak-256 hash of a canonical
signature, e.g. ``transfer(address,uint256)`` -> ``a9059cbb``.
"""

from typing import TYPE_CHECKING

from web3 import Web3

from fn_selector.core.exceptions import InvalidInputError, Utf8ConversionError
from fn_selector.core.logging import log_error
from fn_selector.domain.normalizer import normalize

if TYPE_CHECKING:
    from fn_selector.domain.models.selector import SelectorValue


SELECTOR_SIZE = 4


def selector_hex(signature: str) -> str:
    """
    Hash a canonical signature and return its selector.

    Args:
        signature: Normalized signature, hashed as-is

    Returns:
        str: 8 lowercase hex characters, no ``0x`` prefix

    Raises:
        InvalidInputError: The signature is empty
        Utf8ConversionError: The signature holds text UTF-8 cannot encode
    """
    if not signature:
        error = InvalidInputError("Function name is empty.")
        log_error(error, {"operation": "hash"})
        raise error

    try:
        payload = signature.encode("utf-8")
    except UnicodeEncodeError as e:
        error = Utf8ConversionError(str(e), {"signature": repr(signature)})
        log_error(error, {"operation": "hash"})
        raise error from e

    digest = Web3.keccak(payload)
    return bytes(digest[:SELECTOR_SIZE]).hex()


def to_selector_bytes(value: "SelectorValue") -> str:
    """Return the selector hex for a selector value's stored signature."""
    return selector_hex(value.signature)


def selector_for(signature: str, prefixed: bool = True) -> str:
    """Return the selector for a raw declaration, 0x-prefixed by default.

    Malformed declarations hash their sentinel signature, same as
    ``SelectorValue``.
    """
    selector = selector_hex(normalize(signature))
    return "0x" + selector if prefixed else selector
