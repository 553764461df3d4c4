"""
meme-launcher — token sale по линейной bonding curve.

Создатель регистрирует актив с линейной кривой; покупатели платят
создателю цену, детерминированно вычисленную из текущего supply.
"""

from meme_launcher.config import LauncherConfig
from meme_launcher.launch import (
    BuyResult,
    InitializeLaunchResult,
    MemeLauncher,
    buy_tokens_message,
    initialize_launch_message,
)

__version__ = "0.1.0"

__all__ = [
    "LauncherConfig",
    "MemeLauncher",
    "InitializeLaunchResult",
    "BuyResult",
    "initialize_launch_message",
    "buy_tokens_message",
]
