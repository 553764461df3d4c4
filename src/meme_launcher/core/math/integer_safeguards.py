"""
Integer Safeguards — Checked Integer Arithmetic

Модуль обеспечивает безопасную целочисленную арифметику для фиксированных
беззнаковых типов (u64/u128):
- Проверка диапазона входных значений
- Checked-умножение и сложение в широком аккумуляторе (u128)
- Явное сужение (narrowing) результата до u64 с проверкой диапазона

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не происходит молча (wraparound запрещён)
2. Сужение до u64 всегда сопровождается явной проверкой диапазона
3. bool не считается целым числом (True/False отклоняются)
4. Все операции детерминированы и не имеют побочных эффектов

Python int имеет произвольную точность, поэтому "ширина" аккумулятора
моделируется явными границами U64_MAX / U128_MAX.
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ ТИПОВ
# =============================================================================

# Максимальное значение беззнакового 64-битного целого
U64_MAX: Final[int] = 2**64 - 1

# Максимальное значение беззнакового 128-битного целого (широкий аккумулятор)
U128_MAX: Final[int] = 2**128 - 1


# =============================================================================
# ПРОВЕРКИ ДИАПАЗОНА
# =============================================================================


def is_uint(value: object, max_value: int = U64_MAX) -> bool:
    """
    Проверка, является ли значение беззнаковым целым в пределах max_value.

    Args:
        value: Проверяемое значение
        max_value: Верхняя граница включительно (default: U64_MAX)

    Returns:
        True если value является int (не bool) и 0 <= value <= max_value

    Examples:
        >>> is_uint(10)
        True
        >>> is_uint(-1)
        False
        >>> is_uint(True)
        False
        >>> is_uint(2**64)
        False
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= max_value


def validate_u64(value: object, name: str) -> int:
    """
    Валидация, что значение представимо как u64.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value (как int)

    Raises:
        ValueError: Если value не int, отрицательное или больше U64_MAX
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    if value > U64_MAX:
        raise ValueError(f"{name} exceeds u64 range, got {value}")

    return value


# =============================================================================
# CHECKED-АРИФМЕТИКА
# =============================================================================


def checked_mul(a: int, b: int, max_value: int = U128_MAX) -> int | None:
    """
    Checked-умножение: a * b, если результат не превышает max_value.

    Args:
        a: Первый множитель (неотрицательный)
        b: Второй множитель (неотрицательный)
        max_value: Граница аккумулятора (default: U128_MAX)

    Returns:
        Произведение или None при переполнении

    Raises:
        ValueError: Если множители вне диапазона аккумулятора

    Examples:
        >>> checked_mul(10, 20)
        200
        >>> checked_mul(2**64, 2**64) is None
        True
    """
    if not is_uint(a, max_value) or not is_uint(b, max_value):
        raise ValueError(f"operands must be within [0, {max_value}], got {a!r}, {b!r}")

    result = a * b
    if result > max_value:
        return None
    return result


def checked_add(a: int, b: int, max_value: int = U64_MAX) -> int | None:
    """
    Checked-сложение: a + b, если результат не превышает max_value.

    Args:
        a: Первое слагаемое (неотрицательное)
        b: Второе слагаемое (неотрицательное)
        max_value: Граница результата (default: U64_MAX)

    Returns:
        Сумма или None при переполнении

    Raises:
        ValueError: Если слагаемые вне диапазона
    """
    if not is_uint(a, max_value) or not is_uint(b, max_value):
        raise ValueError(f"operands must be within [0, {max_value}], got {a!r}, {b!r}")

    result = a + b
    if result > max_value:
        return None
    return result


def narrow_to_u64(value: int) -> int | None:
    """
    Сужение значения широкого аккумулятора до u64.

    Аналог try_into(): значение возвращается без изменений, только если
    оно представимо в u64. Никакого усечения старших битов.

    Args:
        value: Значение в диапазоне u128

    Returns:
        value или None, если value не помещается в u64

    Examples:
        >>> narrow_to_u64(42)
        42
        >>> narrow_to_u64(2**64) is None
        True
    """
    if not is_uint(value, U128_MAX):
        raise ValueError(f"value must be within u128 range, got {value!r}")

    if value > U64_MAX:
        return None
    return value
