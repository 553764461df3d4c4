"""SettlementCoordinator — покупка по bonding curve.

buy_tokens исполняет как одну атомарную единицу:
1. Проверка Launch.is_active → LaunchInactive
2. price = calculate_price(total_supply ДО покупки, amount, curve_ratio)
   и запись-преемник total_supply + amount (до любых платежей)
3. Перевод price lamports от покупателя создателю
4. Provisioning holding account покупателя и mint_to(amount)
5. Запись преемника (compare-and-swap по total_supply ДО покупки)

Собственной логики отката нет: TransactionScope восстанавливает хранилище
и ledger, первая ошибка пробрасывается вызывающему без изменений.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from meme_launcher.config import LauncherConfig
from meme_launcher.core.domain.authority import derive_mint_authority
from meme_launcher.core.domain.errors import LaunchError, LaunchInactive
from meme_launcher.core.domain.launch import Launch
from meme_launcher.core.domain.units import lamports_to_sol
from meme_launcher.core.math.bonding_curve import calculate_price
from meme_launcher.platform.ledger import AssetLedger
from meme_launcher.platform.transaction import TransactionScope
from meme_launcher.registry.store import LaunchStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuyResult:
    """Результат buy_tokens."""

    launch: Launch
    price: int
    amount: int
    supply_before: int
    buyer_account: str

    details: str


class SettlementCoordinator:
    """Оркестрация покупки: цена, оплата, выпуск, обновление supply."""

    def __init__(
        self,
        store: LaunchStore,
        ledger: AssetLedger,
        config: Optional[LauncherConfig] = None,
    ):
        self.store = store
        self.ledger = ledger
        self.config = config or LauncherConfig()

    def buy_tokens(self, launch_id: str, buyer: str, amount: int) -> BuyResult:
        """Покупка amount единиц актива Launch.

        Args:
            launch_id: identity записи Launch
            buyer: аутентифицированная identity покупателя
            amount: покупаемое количество (u64)

        Returns:
            BuyResult с обновлённой записью и уплаченной ценой

        Raises:
            LaunchNotFound: записи нет
            LaunchInactive: launch не активен
            InvalidPriceCalculation: переполнение при расчёте цены
            InvalidSupplyUpdate: total_supply + amount переполняет u64
            InsufficientFunds: у покупателя не хватает lamports
        """
        try:
            with TransactionScope(self.store, self.ledger):
                launch = self.store.get(launch_id)

                if not launch.is_active:
                    raise LaunchInactive(f"launch {launch_id} is not active")

                price = calculate_price(launch.total_supply, amount, launch.curve_ratio)
                updated = launch.with_purchase(amount)

                self.ledger.transfer(buyer, launch.creator, price)

                authority = derive_mint_authority(launch)
                buyer_account = self.ledger.get_or_create_holding_account(launch.mint, buyer)
                self.ledger.mint_to(authority, launch.mint, buyer_account, amount)

                self.store.update(updated, expected_supply=launch.total_supply)
        except LaunchError as e:
            logger.warning("buy_tokens on %s rejected: %s (%s)", launch_id, e.message, e.code)
            raise

        logger.info(
            "Launch %s: %s bought %d for %d lamports, total_supply=%d",
            launch_id, buyer, amount, price, updated.total_supply,
        )

        return BuyResult(
            launch=updated,
            price=price,
            amount=amount,
            supply_before=launch.total_supply,
            buyer_account=buyer_account,
            details=(
                f"Paid {lamports_to_sol(price)} {self.config.payment_currency} "
                f"at supply {launch.total_supply}"
            ),
        )
