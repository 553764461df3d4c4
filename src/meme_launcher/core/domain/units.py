"""
Units — Единицы платёжной валюты и выпущенных активов

Все суммы внутри системы — целые базовые единицы:
- Платёжная валюта: lamports (1 SOL = 10^9 lamports)
- Выпущенный актив: базовые единицы mint с фиксированными MINT_DECIMALS

Конверсии в "человеческие" величины нужны только для диагностики
(details в результатах операций) и никогда не участвуют в расчётах.
"""

from decimal import Decimal
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество lamports в одном SOL
LAMPORTS_PER_SOL: Final[int] = 1_000_000_000

# Десятичные знаки выпускаемого актива (не конфигурируется)
MINT_DECIMALS: Final[int] = 9


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def lamports_to_sol(lamports: int) -> Decimal:
    """
    Конверсия: lamports → SOL

    Args:
        lamports: Сумма в lamports

    Returns:
        Сумма в SOL (точный Decimal, без потерь float)

    Examples:
        >>> lamports_to_sol(1_500_000_000)
        Decimal('1.5')
    """
    return (Decimal(lamports) / Decimal(LAMPORTS_PER_SOL)).normalize()


def base_units_to_ui(amount: int, decimals: int = MINT_DECIMALS) -> Decimal:
    """
    Конверсия: базовые единицы актива → UI amount

    Args:
        amount: Количество в базовых единицах
        decimals: Десятичные знаки mint (default: MINT_DECIMALS)

    Returns:
        UI amount (Decimal)
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    return (Decimal(amount) / (Decimal(10) ** decimals)).normalize()
