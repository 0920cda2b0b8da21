"""Unsigned Integer Type Tests."""

from typing import Any, Type

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError, create_model

from eth_amount.types.uint import BaseUint, Uint64, Uint256

ALL_UINT_TYPES = (Uint64, Uint256)
"""A collection of all Uint types to test against."""

U256_MAX = 2**256 - 1


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
def test_pydantic_validation_accepts_valid_int(uint_class: Type[BaseUint]) -> None:
    """Tests that Pydantic validation correctly accepts a valid integer."""
    model = create_model("Model", value=(uint_class, ...))

    instance: Any = model(value=10)
    assert isinstance(instance.value, uint_class)
    assert instance.value == uint_class(10)


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
@pytest.mark.parametrize("invalid_value", [1.0, "1", True, False, -1])
def test_pydantic_rejects_invalid_values(uint_class: Type[BaseUint], invalid_value: Any) -> None:
    """Tests that Pydantic validation rejects non-int and out-of-range inputs."""
    model = create_model("Model", value=(uint_class, ...))

    with pytest.raises(ValidationError):
        model(value=invalid_value)


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
def test_pydantic_serializes_to_plain_int(uint_class: Type[BaseUint]) -> None:
    """Tests that serialization produces a plain integer and a uint JSON format."""
    model = create_model("Model", value=(uint_class, ...))

    dumped = model(value=7).model_dump()
    assert dumped == {"value": 7}
    assert type(dumped["value"]) is int

    schema = model.model_json_schema()
    assert schema["properties"]["value"]["format"] == f"uint{uint_class.BITS}"


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
@pytest.mark.parametrize(
    "invalid_value, expected_type_name",
    [
        (1.0, "float"),
        ("1", "str"),
        (True, "bool"),
        (b"1", "bytes"),
        (None, "NoneType"),
    ],
)
def test_instantiation_from_invalid_types_raises_error(
    uint_class: Type[BaseUint], invalid_value: Any, expected_type_name: str
) -> None:
    """Tests that instantiating with non-integer types raises a TypeError."""
    with pytest.raises(TypeError, match=f"Expected int, got {expected_type_name}"):
        uint_class(invalid_value)


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
def test_instantiation_out_of_range(uint_class: Type[BaseUint]) -> None:
    """Tests that negative and too-large values raise OverflowError."""
    with pytest.raises(OverflowError):
        uint_class(-5)
    with pytest.raises(OverflowError):
        uint_class(2**uint_class.BITS)


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
def test_max_value(uint_class: Type[BaseUint]) -> None:
    """Tests that max_value() is 2**BITS - 1 and of the right type."""
    max_value = uint_class.max_value()
    assert isinstance(max_value, uint_class)
    assert int(max_value) == 2**uint_class.BITS - 1


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
def test_operators(uint_class: Type[BaseUint]) -> None:
    """Tests the arithmetic operators and their overflow behaviour."""
    a = uint_class(100)
    b = uint_class(3)
    max_val = uint_class.max_value()

    assert a + b == uint_class(103)
    assert a - b == uint_class(97)
    assert a * b == uint_class(300)
    assert a // b == uint_class(33)

    with pytest.raises(OverflowError):
        _ = max_val + b
    with pytest.raises(OverflowError):
        _ = b - a
    with pytest.raises(OverflowError):
        _ = max_val * b
    with pytest.raises(ZeroDivisionError):
        _ = a // uint_class(0)


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
def test_operators_reject_other_types(uint_class: Type[BaseUint]) -> None:
    """Tests that mixing with raw ints or other widths raises TypeError."""
    other_class = Uint64 if uint_class is Uint256 else Uint256
    with pytest.raises(TypeError):
        _ = uint_class(3) + 1
    with pytest.raises(TypeError):
        _ = 100 - uint_class(3)
    with pytest.raises(TypeError):
        _ = uint_class(3) * other_class(3)
    with pytest.raises(TypeError):
        _ = uint_class(10) == 10
    with pytest.raises(TypeError):
        _ = uint_class(10) < 11


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
def test_checked_operations(uint_class: Type[BaseUint]) -> None:
    """Tests that checked operations return None instead of raising."""
    a = uint_class(100)
    b = uint_class(3)
    zero = uint_class(0)
    max_val = uint_class.max_value()

    assert a.checked_add(b) == uint_class(103)
    assert a.checked_sub(b) == uint_class(97)
    assert a.checked_mul(b) == uint_class(300)
    assert a.checked_div(b) == uint_class(33)

    assert max_val.checked_add(uint_class(1)) is None
    assert b.checked_sub(a) is None
    assert max_val.checked_mul(uint_class(2)) is None
    assert a.checked_div(zero) is None

    assert max_val.checked_add(zero) == max_val
    assert a.checked_sub(a) == zero


def test_checked_operations_reject_other_types() -> None:
    """Tests that checked operations also enforce the operand type."""
    with pytest.raises(TypeError):
        Uint256(1).checked_add(1)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Uint256(1).checked_div(Uint64(1))  # type: ignore[arg-type]


def test_low_u64() -> None:
    """Tests truncation of a 256-bit value to its low 64 bits."""
    assert Uint256(5).low_u64() == Uint64(5)
    assert Uint256(2**64).low_u64() == Uint64(0)
    assert Uint256(2**64 + 7).low_u64() == Uint64(7)
    assert Uint256.max_value().low_u64() == Uint64.max_value()


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
def test_repr_str_and_hash(uint_class: Type[BaseUint]) -> None:
    """Tests the string representations and that the hash is distinct from a raw int."""
    value = uint_class(42)
    assert str(value) == "42"
    assert repr(value) == f"{uint_class.__name__}(42)"
    assert hash(uint_class(1)) != hash(1)
    assert hash(uint_class(1)) == hash(uint_class(1))


@given(
    st.integers(min_value=0, max_value=U256_MAX),
    st.integers(min_value=0, max_value=U256_MAX),
)
def test_checked_add_matches_exact_sum(a: int, b: int) -> None:
    """checked_add succeeds exactly when the true sum fits."""
    result = Uint256(a).checked_add(Uint256(b))
    if a + b <= U256_MAX:
        assert result is not None
        assert int(result) == a + b
    else:
        assert result is None


@given(
    st.integers(min_value=0, max_value=U256_MAX),
    st.integers(min_value=0, max_value=U256_MAX),
)
def test_checked_mul_matches_exact_product(a: int, b: int) -> None:
    """checked_mul succeeds exactly when the true product fits."""
    result = Uint256(a).checked_mul(Uint256(b))
    if a * b <= U256_MAX:
        assert result is not None
        assert int(result) == a * b
    else:
        assert result is None
