import pytest
from pydantic import ValidationError

from fn_selector import SelectorValue
from fn_selector.core.exceptions import (
    InvalidInputError,
    InvalidSignatureError,
    MissingClosingParenthesisError,
)
from fn_selector.domain.normalizer import INVALID_SIGNATURE_SENTINEL


def test_construction_stores_normalized_signature(transfer_value):
    assert transfer_value.signature == "transfer(address,uint256)"
    assert str(transfer_value) == "transfer(address,uint256)"
    assert transfer_value.is_valid


def test_direct_construction_also_normalizes():
    value = SelectorValue(signature="function balanceOf(address owner)")
    assert value.signature == "balanceOf(address)"


def test_to_selector_bytes(transfer_value):
    assert transfer_value.to_selector_bytes() == "a9059cbb"
    assert transfer_value.to_selector_bytes() == transfer_value.to_selector_bytes()


def test_malformed_input_stores_sentinel_instead_of_raising(quiet_sentinels):
    value = SelectorValue.from_signature("not a function")

    assert value.signature == INVALID_SIGNATURE_SENTINEL
    assert not value.is_valid
    assert len(value.to_selector_bytes()) == 8


def test_unclosed_parameter_list_stores_mangled_sentinel(quiet_sentinels):
    value = SelectorValue.from_signature("foo(uint256 a")

    assert value.signature == "foo(Error:)"
    assert not value.is_valid


def test_empty_parameter_list_quirk():
    assert SelectorValue.from_signature("foo()").signature == "foo(unknown)"


def test_empty_stored_signature_fails_to_hash():
    value = SelectorValue.model_construct(signature="")

    with pytest.raises(InvalidInputError) as exc_info:
        value.to_selector_bytes()

    assert exc_info.value.message == "Function name is empty."


def test_strict_constructor():
    value = SelectorValue.strict("function approve(address spender, uint256 amount)")

    assert value.signature == "approve(address,uint256)"
    assert value.to_selector_bytes() == "095ea7b3"


@pytest.mark.parametrize(
    "raw, error",
    [
        ("", InvalidSignatureError),
        ("function approve", InvalidSignatureError),
        ("approve(address spender", MissingClosingParenthesisError),
    ],
)
def test_strict_constructor_raises_on_malformed_input(raw, error):
    with pytest.raises(error):
        SelectorValue.strict(raw)


def test_value_is_frozen(transfer_value):
    with pytest.raises(ValidationError):
        transfer_value.signature = "approve(address,uint256)"


def test_equal_inputs_give_equal_values():
    a = SelectorValue.from_signature("transfer(address to, uint256 amount)")
    b = SelectorValue.from_signature("function transfer(address,uint256)")

    assert a == b
    assert a.to_selector_bytes() == b.to_selector_bytes()
