"""Конфигурация meme-launcher."""

from dataclasses import dataclass

from meme_launcher.core.domain.units import MINT_DECIMALS


@dataclass(frozen=True)
class LauncherConfig:
    """Конфигурация MemeLauncher.

    - payment_currency: код платёжной валюты (только для диагностики)
    - mint_decimals: десятичные знаки актива, зафиксированы MINT_DECIMALS
    - require_authentication: проверять подпись вызова перед мутацией
    """
    payment_currency: str = "SOL"
    mint_decimals: int = MINT_DECIMALS
    require_authentication: bool = True

    def __post_init__(self):
        if self.mint_decimals != MINT_DECIMALS:
            raise ValueError(
                f"mint_decimals is fixed at {MINT_DECIMALS}, got {self.mint_decimals}"
            )
        if not self.payment_currency:
            raise ValueError("payment_currency must be non-empty")
