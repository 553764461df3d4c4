"""
Bonding Curve — Линейное ценообразование покупки

Модуль вычисляет цену покупки по линейной кривой:

    price = current_supply × curve_ratio × amount

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждое промежуточное произведение проверяется против U128_MAX
2. Итог явно сужается до u64 с проверкой диапазона
3. Любое переполнение → InvalidPriceCalculation (никакого wraparound)
4. Чистая функция: детерминирована, без побочных эффектов

Цена считается от supply ДО покупки, поэтому при curve_ratio > 0 более
ранний покупатель платит не больше более позднего за тот же amount.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from meme_launcher.core.domain.errors import InvalidPriceCalculation
from meme_launcher.core.math.integer_safeguards import (
    U64_MAX,
    checked_add,
    checked_mul,
    is_uint,
    narrow_to_u64,
)

if TYPE_CHECKING:
    from meme_launcher.core.domain.launch import Launch


@dataclass(frozen=True)
class PriceQuote:
    """Спекулятивная котировка покупки."""

    supply_before: int
    supply_after: int
    amount: int
    curve_ratio: int
    price: int


def calculate_price(current_supply: int, amount: int, curve_ratio: int) -> int:
    """
    Цена покупки amount единиц при текущем supply.

    Args:
        current_supply: Circulating supply до покупки (u64)
        amount: Покупаемое количество (u64)
        curve_ratio: Коэффициент кривой (u64)

    Returns:
        Цена в lamports (u64)

    Raises:
        InvalidPriceCalculation: Если входы вне u64, произведение
            переполняет u128 или результат не помещается в u64

    Examples:
        >>> calculate_price(1_000_000, 100, 10)
        1000000000
        >>> calculate_price(0, 100, 10)
        0
    """
    for name, value in (
        ("current_supply", current_supply),
        ("amount", amount),
        ("curve_ratio", curve_ratio),
    ):
        if not is_uint(value, U64_MAX):
            raise InvalidPriceCalculation(f"{name} is not a valid u64: {value!r}")

    # Widened multiply: supply × ratio, затем × amount
    partial = checked_mul(current_supply, curve_ratio)
    if partial is None:
        raise InvalidPriceCalculation("current_supply × curve_ratio overflows u128")

    wide = checked_mul(partial, amount)
    if wide is None:
        raise InvalidPriceCalculation("price overflows u128")

    # Narrow: явная проверка диапазона перед сужением
    price = narrow_to_u64(wide)
    if price is None:
        raise InvalidPriceCalculation(f"price {wide} does not fit u64")

    return price


def quote_buy(launch: "Launch", amount: int) -> PriceQuote:
    """
    Котировка покупки для Launch без изменения состояния.

    Args:
        launch: Запись Launch
        amount: Покупаемое количество (u64)

    Returns:
        PriceQuote с ценой и supply до/после

    Raises:
        InvalidPriceCalculation: Если цена или supply после покупки
            не помещаются в u64
    """
    price = calculate_price(launch.total_supply, amount, launch.curve_ratio)

    supply_after = checked_add(launch.total_supply, amount)
    if supply_after is None:
        raise InvalidPriceCalculation(
            f"supply after purchase overflows u64: {launch.total_supply} + {amount}"
        )

    return PriceQuote(
        supply_before=launch.total_supply,
        supply_after=supply_after,
        amount=amount,
        curve_ratio=launch.curve_ratio,
        price=price,
    )
