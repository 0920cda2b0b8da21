"""Fixed-width unsigned integer primitives."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self


class BaseUint(int):
    """
    An unsigned integer of fixed bit width, stored as a Python `int`.

    Operators raise `OverflowError` when a result leaves the representable range.
    The `checked_*` methods report the same condition by returning `None`.
    """

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    def __new__(cls, value: int) -> Self:
        """
        Create and validate a new Uint instance.

        Raises:
            TypeError: If `value` is not an `int` (booleans are rejected).
            OverflowError: If `value` is outside the allowed range [0, 2**BITS - 1].
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        int_value = int(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def max_value(cls) -> Self:
        """Return the largest representable value, `2**BITS - 1`."""
        return cls(2**cls.BITS - 1)

    @classmethod
    def fits(cls, value: int) -> bool:
        """Return whether a plain integer lies in the representable range."""
        return 0 <= int(value) < 2**cls.BITS

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        python_schema = core_schema.no_info_plain_validator_function(validate)

        return core_schema.json_or_python_schema(
            # JSON input is parsed as an int first, then wrapped in the Uint type.
            json_schema=core_schema.chain_schema([core_schema.int_schema(ge=0), python_schema]),
            python_schema=python_schema,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Hook into Pydantic's JSON Schema generation system."""
        json_schema = handler(core_schema)
        json_schema.update(format=f"uint{cls.BITS}")
        return json_schema

    def _require_same_type(self, other: Any, op_symbol: str) -> None:
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Unsupported operand type(s) for {op_symbol}: "
                f"'{type(self).__name__}' and '{type(other).__name__}'"
            )

    # -----------------------------------------------------------------
    # Checked arithmetic
    #
    # Each returns None when the exact result is not representable.
    # -----------------------------------------------------------------

    def _checked(self, result: int) -> Self | None:
        return type(self)(result) if self.fits(result) else None

    def checked_add(self, other: Self) -> Self | None:
        """Add, or return `None` on overflow."""
        self._require_same_type(other, "checked_add")
        return self._checked(int(self) + int(other))

    def checked_sub(self, other: Self) -> Self | None:
        """Subtract, or return `None` when `other` is larger than `self`."""
        self._require_same_type(other, "checked_sub")
        return self._checked(int(self) - int(other))

    def checked_mul(self, other: Self) -> Self | None:
        """Multiply, or return `None` on overflow."""
        self._require_same_type(other, "checked_mul")
        return self._checked(int(self) * int(other))

    def checked_div(self, other: Self) -> Self | None:
        """Floor-divide, or return `None` when `other` is zero."""
        self._require_same_type(other, "checked_div")
        if int(other) == 0:
            return None
        return type(self)(int(self) // int(other))

    def low_u64(self) -> Uint64:
        """Truncate to the low 64 bits."""
        return Uint64(int(self) & (2**64 - 1))

    # -----------------------------------------------------------------
    # Operators
    # -----------------------------------------------------------------

    def __add__(self, other: Any) -> Self:
        """Handle the addition operator (`+`)."""
        self._require_same_type(other, "+")
        return type(self)(super().__add__(other))

    def __radd__(self, other: Any) -> Self:
        """Handle the reverse addition operator (`+`)."""
        self._require_same_type(other, "+")
        return type(self)(int(other) + int(self))

    def __sub__(self, other: Any) -> Self:
        """Handle the subtraction operator (`-`)."""
        self._require_same_type(other, "-")
        return type(self)(super().__sub__(other))

    def __rsub__(self, other: Any) -> Self:
        """Handle the reverse subtraction operator (`-`)."""
        self._require_same_type(other, "-")
        return type(self)(int(other) - int(self))

    def __mul__(self, other: Any) -> Self:
        """Handle the multiplication operator (`*`)."""
        self._require_same_type(other, "*")
        return type(self)(super().__mul__(other))

    def __rmul__(self, other: Any) -> Self:
        """Handle the reverse multiplication operator (`*`)."""
        self._require_same_type(other, "*")
        return type(self)(int(other) * int(self))

    def __floordiv__(self, other: Any) -> Self:
        """Handle the floor division operator (`//`)."""
        self._require_same_type(other, "//")
        return type(self)(super().__floordiv__(other))

    def __rfloordiv__(self, other: Any) -> Self:
        """Handle the reverse floor division operator (`//`)."""
        self._require_same_type(other, "//")
        return type(self)(int(other) // int(self))

    def __eq__(self, other: object) -> bool:
        """Handle the equality operator (`==`)."""
        self._require_same_type(other, "==")
        return super().__eq__(other)

    def __ne__(self, other: object) -> bool:
        """Handle the inequality operator (`!=`)."""
        self._require_same_type(other, "!=")
        return super().__ne__(other)

    def __lt__(self, other: Any) -> bool:
        """Handle the less-than operator (`<`)."""
        self._require_same_type(other, "<")
        return super().__lt__(other)

    def __le__(self, other: Any) -> bool:
        """Handle the less-than-or-equal-to operator (`<=`)."""
        self._require_same_type(other, "<=")
        return super().__le__(other)

    def __gt__(self, other: Any) -> bool:
        """Handle the greater-than operator (`>`)."""
        self._require_same_type(other, ">")
        return super().__gt__(other)

    def __ge__(self, other: Any) -> bool:
        """Handle the greater-than-or-equal-to operator (`>=`)."""
        self._require_same_type(other, ">=")
        return super().__ge__(other)

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        """Return the informal, user-friendly string representation."""
        return str(int(self))

    def __hash__(self) -> int:
        """Return a hash distinct from the equivalent raw `int`."""
        return hash((type(self), int(self)))


class Uint64(BaseUint):
    """A type representing a 64-bit unsigned integer (uint64)."""

    BITS = 64


class Uint256(BaseUint):
    """A type representing a 256-bit unsigned integer (uint256)."""

    BITS = 256
