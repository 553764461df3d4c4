"""
Тесты для модуля Bonding Curve

Проверяет:
1. Формулу price = supply × ratio × amount
2. Детерминированность (чистая функция)
3. Переполнение → InvalidPriceCalculation
4. Монотонность по amount и supply
5. Котировку quote_buy
"""

import pytest

from meme_launcher.core.domain import InvalidPriceCalculation, Launch
from meme_launcher.core.math import (
    U64_MAX,
    PriceQuote,
    calculate_price,
    quote_buy,
)


@pytest.fixture
def launch() -> Launch:
    return Launch(
        launch_id="launch-1",
        creator="creator",
        mint="mint-1",
        name="Doge2",
        symbol="DOGE2",
        initial_supply=1_000_000,
        total_supply=1_000_000,
        curve_ratio=10,
        is_active=True,
    )


class TestCalculatePrice:
    """Тесты для calculate_price"""

    def test_reference_price(self) -> None:
        """1_000_000 × 10 × 100 = 1_000_000_000"""
        assert calculate_price(1_000_000, 100, 10) == 1_000_000_000

    def test_second_buy_price(self) -> None:
        assert calculate_price(1_000_100, 100, 10) == 1_000_100_000

    def test_zero_factors(self) -> None:
        assert calculate_price(0, 100, 10) == 0
        assert calculate_price(1_000, 0, 10) == 0
        assert calculate_price(1_000, 100, 0) == 0

    def test_deterministic(self) -> None:
        """Повторные вызовы с одинаковыми входами дают одинаковый результат"""
        results = {calculate_price(123_456, 789, 3) for _ in range(10)}
        assert results == {123_456 * 789 * 3}

    def test_max_representable_price(self) -> None:
        assert calculate_price(U64_MAX, 1, 1) == U64_MAX

    def test_price_exceeding_u64_raises(self) -> None:
        with pytest.raises(InvalidPriceCalculation):
            calculate_price(U64_MAX, 2, 1)

    def test_product_exceeding_u128_raises(self) -> None:
        """supply × ratio помещается в u128, но × amount — нет"""
        with pytest.raises(InvalidPriceCalculation, match="overflows u128"):
            calculate_price(U64_MAX, U64_MAX, U64_MAX)

    def test_invalid_inputs_raise(self) -> None:
        with pytest.raises(InvalidPriceCalculation, match="amount"):
            calculate_price(1_000, -1, 10)

        with pytest.raises(InvalidPriceCalculation, match="current_supply"):
            calculate_price(U64_MAX + 1, 1, 1)

        with pytest.raises(InvalidPriceCalculation, match="curve_ratio"):
            calculate_price(1_000, 1, True)

    def test_error_code(self) -> None:
        with pytest.raises(InvalidPriceCalculation) as exc_info:
            calculate_price(U64_MAX, 2, 1)
        assert exc_info.value.code == "invalid_price_calculation"


class TestMonotonicity:
    """Монотонность цены при curve_ratio > 0"""

    def test_strictly_increasing_in_amount(self) -> None:
        prices = [calculate_price(1_000, amount, 5) for amount in range(1, 50)]
        assert all(a < b for a, b in zip(prices, prices[1:]))

    def test_non_decreasing_across_successive_buys(self) -> None:
        supply = 1_000
        amount = 25
        previous = -1
        for _ in range(20):
            price = calculate_price(supply, amount, 7)
            assert price >= previous
            previous = price
            supply += amount


class TestQuoteBuy:
    """Тесты для quote_buy"""

    def test_quote(self, launch: Launch) -> None:
        quote = quote_buy(launch, 100)

        assert quote == PriceQuote(
            supply_before=1_000_000,
            supply_after=1_000_100,
            amount=100,
            curve_ratio=10,
            price=1_000_000_000,
        )

    def test_quote_does_not_mutate(self, launch: Launch) -> None:
        quote_buy(launch, 100)
        assert launch.total_supply == 1_000_000

    def test_supply_overflow_raises(self, launch: Launch) -> None:
        saturated = launch.model_copy(update={"total_supply": U64_MAX, "curve_ratio": 0})
        with pytest.raises(InvalidPriceCalculation, match="supply after purchase"):
            quote_buy(saturated, 1)
