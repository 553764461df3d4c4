"""
Ledger — платёжная валюта, выпущенные активы и holding accounts

AssetLedger описывает контракт внешнего fungible-asset ledger:
- transfer(source, destination, lamports): перевод платёжной валюты
- create_mint(mint, authority_address, decimals): регистрация актива
- get_or_create_holding_account(mint, owner): provisioning счёта
- mint_to(authority, mint, account, amount): выпуск, только с capability

InMemoryLedger: эталонная реализация для тестов и локального запуска.
"""

import copy
import hashlib
import logging
from dataclasses import dataclass
from typing import Any, Dict, Protocol

from meme_launcher.core.domain.authority import MintAuthority
from meme_launcher.core.domain.errors import (
    AccountNotFound,
    InsufficientFunds,
    LedgerError,
    MintAlreadyExists,
    MintNotFound,
    UnauthorizedMintAuthority,
)
from meme_launcher.core.domain.units import MINT_DECIMALS, lamports_to_sol
from meme_launcher.core.math.integer_safeguards import checked_add, validate_u64

logger = logging.getLogger(__name__)


# =============================================================================
# PROTOCOL
# =============================================================================


class AssetLedger(Protocol):
    def transfer(self, source: str, destination: str, lamports: int) -> None: ...

    def create_mint(self, mint: str, authority_address: str, decimals: int = MINT_DECIMALS) -> None: ...

    def get_or_create_holding_account(self, mint: str, owner: str) -> str: ...

    def mint_to(self, authority: MintAuthority, mint: str, account: str, amount: int) -> None: ...

    def snapshot(self) -> Any: ...

    def restore(self, snapshot: Any) -> None: ...


# =============================================================================
# RECORDS
# =============================================================================


@dataclass
class MintInfo:
    """Зарегистрированный актив."""

    authority_address: str
    decimals: int
    supply: int = 0


@dataclass
class HoldingAccount:
    """Счёт владельца для одного актива."""

    mint: str
    owner: str
    amount: int = 0


def holding_account_address(mint: str, owner: str) -> str:
    """Детерминированный адрес holding account для пары (mint, owner)."""
    return hashlib.sha256(f"{owner}:{mint}".encode("utf-8")).hexdigest()


# =============================================================================
# IN-MEMORY LEDGER
# =============================================================================


class InMemoryLedger:
    """In-memory ledger с поддержкой snapshot/restore для TransactionScope."""

    def __init__(self):
        self._lamports: Dict[str, int] = {}
        self._mints: Dict[str, MintInfo] = {}
        self._accounts: Dict[str, HoldingAccount] = {}

    # -------------------------------------------------------------------------
    # Платёжная валюта
    # -------------------------------------------------------------------------

    def fund(self, owner: str, lamports: int) -> None:
        """Зачисление lamports (airdrop) на счёт owner."""
        validate_u64(lamports, "lamports")
        new_balance = checked_add(self.lamports_balance(owner), lamports)
        if new_balance is None:
            raise LedgerError(f"balance of {owner} overflows u64")
        self._lamports[owner] = new_balance

    def lamports_balance(self, owner: str) -> int:
        return self._lamports.get(owner, 0)

    def transfer(self, source: str, destination: str, lamports: int) -> None:
        """
        Перевод платёжной валюты.

        Raises:
            InsufficientFunds: Если на source меньше lamports
            LedgerError: Если баланс destination переполняет u64
        """
        validate_u64(lamports, "lamports")

        source_balance = self.lamports_balance(source)
        if source_balance < lamports:
            raise InsufficientFunds(
                f"{source} has {source_balance} lamports, needs {lamports}"
            )

        if source == destination:
            return

        new_destination = checked_add(self.lamports_balance(destination), lamports)
        if new_destination is None:
            raise LedgerError(f"balance of {destination} overflows u64")

        self._lamports[source] = source_balance - lamports
        self._lamports[destination] = new_destination
        logger.debug(
            "Transferred %s SOL from %s to %s", lamports_to_sol(lamports), source, destination
        )

    # -------------------------------------------------------------------------
    # Активы
    # -------------------------------------------------------------------------

    def create_mint(self, mint: str, authority_address: str, decimals: int = MINT_DECIMALS) -> None:
        """
        Регистрация нового актива.

        Raises:
            MintAlreadyExists: Если mint уже зарегистрирован
        """
        if mint in self._mints:
            raise MintAlreadyExists(f"mint {mint} already in use")
        self._mints[mint] = MintInfo(authority_address=authority_address, decimals=decimals)

    def mint_info(self, mint: str) -> MintInfo:
        try:
            return self._mints[mint]
        except KeyError:
            raise MintNotFound(f"mint {mint} not found") from None

    def mint_supply(self, mint: str) -> int:
        return self.mint_info(mint).supply

    def get_or_create_holding_account(self, mint: str, owner: str) -> str:
        """
        Provisioning holding account при первом использовании.

        Returns:
            Адрес holding account

        Raises:
            MintNotFound: Если mint не зарегистрирован
        """
        self.mint_info(mint)
        address = holding_account_address(mint, owner)
        if address not in self._accounts:
            self._accounts[address] = HoldingAccount(mint=mint, owner=owner)
            logger.debug("Provisioned holding account %s for %s", address, owner)
        return address

    def token_balance(self, mint: str, owner: str) -> int:
        account = self._accounts.get(holding_account_address(mint, owner))
        return account.amount if account is not None else 0

    def mint_to(self, authority: MintAuthority, mint: str, account: str, amount: int) -> None:
        """
        Выпуск amount единиц актива на holding account.

        Raises:
            MintNotFound: Если mint не зарегистрирован
            UnauthorizedMintAuthority: Если capability не совпадает с authority mint
            AccountNotFound: Если счёт не существует или принадлежит другому mint
            LedgerError: Если supply или баланс переполняет u64
        """
        validate_u64(amount, "amount")
        info = self.mint_info(mint)

        if authority.address != info.authority_address:
            raise UnauthorizedMintAuthority(
                f"authority {authority.address} cannot mint {mint}"
            )

        holding = self._accounts.get(account)
        if holding is None or holding.mint != mint:
            raise AccountNotFound(f"holding account {account} not found for mint {mint}")

        new_supply = checked_add(info.supply, amount)
        new_amount = checked_add(holding.amount, amount)
        if new_supply is None or new_amount is None:
            raise LedgerError(f"minting {amount} overflows u64 for mint {mint}")

        info.supply = new_supply
        holding.amount = new_amount

    # -------------------------------------------------------------------------
    # TransactionParticipant
    # -------------------------------------------------------------------------

    def snapshot(self) -> Any:
        return copy.deepcopy((self._lamports, self._mints, self._accounts))

    def restore(self, snapshot: Any) -> None:
        lamports, mints, accounts = copy.deepcopy(snapshot)
        self._lamports = lamports
        self._mints = mints
        self._accounts = accounts
        logger.debug("Ledger restored from snapshot")
