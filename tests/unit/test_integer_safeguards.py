"""
Тесты для модуля Integer Safeguards

Проверяет:
1. Границы u64/u128
2. Проверки диапазона (is_uint, validate_u64)
3. Checked-умножение и сложение
4. Явное сужение до u64
"""

import pytest

from meme_launcher.core.math.integer_safeguards import (
    U64_MAX,
    U128_MAX,
    checked_add,
    checked_mul,
    is_uint,
    narrow_to_u64,
    validate_u64,
)


class TestBounds:
    """Тесты констант границ"""

    def test_u64_max(self) -> None:
        assert U64_MAX == 18_446_744_073_709_551_615

    def test_u128_max(self) -> None:
        assert U128_MAX == 2**128 - 1
        assert U128_MAX > U64_MAX * U64_MAX


class TestIsUint:
    """Тесты для is_uint"""

    def test_valid_values(self) -> None:
        assert is_uint(0)
        assert is_uint(42)
        assert is_uint(U64_MAX)

    def test_out_of_range(self) -> None:
        assert not is_uint(-1)
        assert not is_uint(U64_MAX + 1)

    def test_custom_bound(self) -> None:
        assert is_uint(U64_MAX + 1, U128_MAX)
        assert not is_uint(10, 9)

    def test_bool_rejected(self) -> None:
        """bool не считается целым"""
        assert not is_uint(True)
        assert not is_uint(False)

    def test_non_int_rejected(self) -> None:
        assert not is_uint(1.0)
        assert not is_uint("1")
        assert not is_uint(None)


class TestValidateU64:
    """Тесты для validate_u64"""

    def test_returns_value(self) -> None:
        assert validate_u64(100, "amount") == 100
        assert validate_u64(U64_MAX, "amount") == U64_MAX

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="amount must be non-negative"):
            validate_u64(-5, "amount")

    def test_too_large_raises(self) -> None:
        with pytest.raises(ValueError, match="exceeds u64 range"):
            validate_u64(U64_MAX + 1, "amount")

    def test_wrong_type_raises(self) -> None:
        with pytest.raises(ValueError, match="must be an integer"):
            validate_u64(1.5, "amount")

        with pytest.raises(ValueError, match="must be an integer"):
            validate_u64(True, "amount")


class TestCheckedMul:
    """Тесты для checked_mul"""

    def test_simple_product(self) -> None:
        assert checked_mul(10, 20) == 200
        assert checked_mul(0, U128_MAX) == 0

    def test_u64_squared_fits_u128(self) -> None:
        """Произведение двух u64 всегда помещается в u128"""
        assert checked_mul(U64_MAX, U64_MAX) == U64_MAX * U64_MAX

    def test_overflow_returns_none(self) -> None:
        assert checked_mul(2**64, 2**64) is None
        assert checked_mul(U128_MAX, 2) is None

    def test_boundary(self) -> None:
        assert checked_mul(U128_MAX, 1) == U128_MAX

    def test_custom_bound(self) -> None:
        assert checked_mul(2**32, 2**32, max_value=U64_MAX) is None
        assert checked_mul(2**32, 2**31, max_value=U64_MAX) == 2**63

    def test_invalid_operands_raise(self) -> None:
        with pytest.raises(ValueError, match="operands must be within"):
            checked_mul(-1, 5)

        with pytest.raises(ValueError, match="operands must be within"):
            checked_mul(U128_MAX + 1, 1)


class TestCheckedAdd:
    """Тесты для checked_add"""

    def test_simple_sum(self) -> None:
        assert checked_add(1_000_000, 100) == 1_000_100

    def test_boundary(self) -> None:
        assert checked_add(U64_MAX - 1, 1) == U64_MAX

    def test_overflow_returns_none(self) -> None:
        assert checked_add(U64_MAX, 1) is None

    def test_invalid_operands_raise(self) -> None:
        with pytest.raises(ValueError):
            checked_add(-1, 1)


class TestNarrowToU64:
    """Тесты для narrow_to_u64"""

    def test_fits(self) -> None:
        assert narrow_to_u64(0) == 0
        assert narrow_to_u64(U64_MAX) == U64_MAX

    def test_does_not_fit(self) -> None:
        """Никакого усечения старших битов"""
        assert narrow_to_u64(U64_MAX + 1) is None
        assert narrow_to_u64(U128_MAX) is None

    def test_outside_u128_raises(self) -> None:
        with pytest.raises(ValueError, match="u128 range"):
            narrow_to_u64(U128_MAX + 1)
