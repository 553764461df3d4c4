"""LaunchInitializer — создание Launch и начальный выпуск создателю.

Порядок (внутри одного TransactionScope):
1. Создание записи Launch (total_supply = initial_supply, is_active = True)
2. Вывод MintAuthority из identity Launch
3. Регистрация актива с этой authority
4. Provisioning holding account создателя
5. mint_to(initial_supply) на счёт создателя

Любая ошибка на любом шаге откатывает все шаги: записи Launch без
начального выпуска не бывает.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from meme_launcher.config import LauncherConfig
from meme_launcher.core.domain.authority import derive_mint_authority
from meme_launcher.core.domain.errors import InvalidInstruction, LaunchError
from meme_launcher.core.domain.launch import Launch
from meme_launcher.core.domain.units import base_units_to_ui
from meme_launcher.platform.auth import new_identity
from meme_launcher.platform.ledger import AssetLedger
from meme_launcher.platform.transaction import TransactionScope
from meme_launcher.registry.store import LaunchStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InitializeLaunchResult:
    """Результат initialize_launch."""

    launch: Launch
    creator_account: str
    mint_authority: str

    details: str


class LaunchInitializer:
    """Создание Launch и начальный выпуск актива создателю."""

    def __init__(
        self,
        store: LaunchStore,
        ledger: AssetLedger,
        config: Optional[LauncherConfig] = None,
    ):
        self.store = store
        self.ledger = ledger
        self.config = config or LauncherConfig()

    def initialize_launch(
        self,
        creator: str,
        mint: str,
        name: str,
        symbol: str,
        initial_supply: int,
        curve_ratio: int,
        launch_id: Optional[str] = None,
    ) -> InitializeLaunchResult:
        """Создание нового Launch.

        Args:
            creator: аутентифицированная identity создателя
            mint: identity нового актива (должна быть свободна)
            name: имя токена
            symbol: тикер токена
            initial_supply: начальный выпуск создателю (u64)
            curve_ratio: коэффициент линейной кривой (u64)
            launch_id: identity записи Launch (генерируется, если None)

        Returns:
            InitializeLaunchResult с созданной записью

        Raises:
            InvalidInstruction: невалидные параметры записи
            LaunchAlreadyExists: слот launch_id занят
            MintAlreadyExists: mint уже зарегистрирован
            LedgerError: отказ ledger при выпуске
        """
        if launch_id is None:
            launch_id = new_identity()

        try:
            launch = Launch(
                launch_id=launch_id,
                creator=creator,
                mint=mint,
                name=name,
                symbol=symbol,
                initial_supply=initial_supply,
                total_supply=initial_supply,
                curve_ratio=curve_ratio,
                is_active=True,
            )
        except ValidationError as e:
            raise InvalidInstruction(f"invalid launch parameters: {e}") from e

        try:
            with TransactionScope(self.store, self.ledger):
                self.store.create(launch)

                authority = derive_mint_authority(launch)
                self.ledger.create_mint(mint, authority.address, self.config.mint_decimals)

                creator_account = self.ledger.get_or_create_holding_account(mint, creator)
                self.ledger.mint_to(authority, mint, creator_account, initial_supply)
        except LaunchError as e:
            logger.warning("initialize_launch %s rejected: %s (%s)", launch_id, e.message, e.code)
            raise

        logger.info(
            "Launch %s initialized: %s (%s), initial_supply=%d, curve_ratio=%d",
            launch_id, name, symbol, initial_supply, curve_ratio,
        )

        return InitializeLaunchResult(
            launch=launch,
            creator_account=creator_account,
            mint_authority=authority.address,
            details=(
                f"Minted {base_units_to_ui(initial_supply, self.config.mint_decimals)} "
                f"{symbol} to creator {creator}"
            ),
        )
