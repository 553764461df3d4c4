"""Launch — жизненный цикл token sale.

- LaunchInitializer: создание Launch и начальный выпуск
- SettlementCoordinator: покупка по bonding curve
- MemeLauncher: внешний интерфейс с валидацией и аутентификацией
"""

from .initializer import InitializeLaunchResult, LaunchInitializer
from .program import MemeLauncher, buy_tokens_message, initialize_launch_message
from .settlement import BuyResult, SettlementCoordinator

__all__ = [
    "InitializeLaunchResult",
    "LaunchInitializer",
    "BuyResult",
    "SettlementCoordinator",
    "MemeLauncher",
    "initialize_launch_message",
    "buy_tokens_message",
]
