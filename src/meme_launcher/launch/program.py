"""MemeLauncher — внешний интерфейс: initialize_launch и buy_tokens.

Каждый вызов проходит:
1. Валидацию payload по JSON Schema (InvalidInstruction)
2. Проверку подписи вызывающего (AuthenticationError)
3. Делегирование LaunchInitializer / SettlementCoordinator

Подписывается сообщение {"instruction": <имя>, **payload}; клиенты строят
его через initialize_launch_message() / buy_tokens_message().
"""

from typing import Any, Dict, Optional

from meme_launcher.config import LauncherConfig
from meme_launcher.core.contracts import validate_buy_tokens, validate_initialize_launch
from meme_launcher.core.domain.launch import Launch
from meme_launcher.core.math.bonding_curve import PriceQuote, quote_buy
from meme_launcher.launch.initializer import InitializeLaunchResult, LaunchInitializer
from meme_launcher.launch.settlement import BuyResult, SettlementCoordinator
from meme_launcher.platform.auth import Authenticator, SignedCall, new_identity
from meme_launcher.platform.ledger import AssetLedger, InMemoryLedger
from meme_launcher.registry.store import InMemoryLaunchStore, LaunchStore


def initialize_launch_message(
    name: str, symbol: str, initial_supply: int, curve_ratio: int
) -> Dict[str, Any]:
    return {
        "instruction": "initialize_launch",
        "name": name,
        "symbol": symbol,
        "initial_supply": initial_supply,
        "curve_ratio": curve_ratio,
    }


def buy_tokens_message(launch_id: str, amount: int) -> Dict[str, Any]:
    return {"instruction": "buy_tokens", "launch_id": launch_id, "amount": amount}


class MemeLauncher:
    """Программа bonding-curve token sale поверх набора коллабораторов."""

    def __init__(
        self,
        store: Optional[LaunchStore] = None,
        ledger: Optional[AssetLedger] = None,
        authenticator: Optional[Authenticator] = None,
        config: Optional[LauncherConfig] = None,
    ):
        self.config = config or LauncherConfig()
        if self.config.require_authentication and authenticator is None:
            raise ValueError("authenticator is required when require_authentication is set")

        self.store = store if store is not None else InMemoryLaunchStore()
        self.ledger = ledger if ledger is not None else InMemoryLedger()
        self.authenticator = authenticator

        self.initializer = LaunchInitializer(self.store, self.ledger, self.config)
        self.settlement = SettlementCoordinator(self.store, self.ledger, self.config)

    def _authenticate(self, call: SignedCall, message: Dict[str, Any]) -> None:
        if self.config.require_authentication:
            self.authenticator.verify(call, message)

    def initialize_launch(
        self,
        call: SignedCall,
        name: str,
        symbol: str,
        initial_supply: int,
        curve_ratio: int,
        mint: Optional[str] = None,
        launch_id: Optional[str] = None,
    ) -> InitializeLaunchResult:
        """Регистрация нового launch; вызывающий становится creator.

        Args:
            call: подписанный вызов создателя
            name, symbol: метаданные токена
            initial_supply: начальный выпуск создателю
            curve_ratio: коэффициент линейной кривой
            mint: identity нового актива (генерируется, если None)
            launch_id: identity записи Launch (генерируется, если None)
        """
        message = initialize_launch_message(name, symbol, initial_supply, curve_ratio)
        validate_initialize_launch({k: v for k, v in message.items() if k != "instruction"})
        self._authenticate(call, message)

        return self.initializer.initialize_launch(
            creator=call.caller,
            mint=new_identity() if mint is None else mint,
            name=name,
            symbol=symbol,
            initial_supply=initial_supply,
            curve_ratio=curve_ratio,
            launch_id=launch_id,
        )

    def buy_tokens(self, call: SignedCall, launch_id: str, amount: int) -> BuyResult:
        """Покупка amount единиц; вызывающий — buyer."""
        message = buy_tokens_message(launch_id, amount)
        validate_buy_tokens({k: v for k, v in message.items() if k != "instruction"})
        self._authenticate(call, message)

        return self.settlement.buy_tokens(launch_id, call.caller, amount)

    def get_launch(self, launch_id: str) -> Launch:
        return self.store.get(launch_id)

    def quote(self, launch_id: str, amount: int) -> PriceQuote:
        """Котировка покупки без изменения состояния."""
        return quote_buy(self.store.get(launch_id), amount)
