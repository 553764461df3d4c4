"""
Errors — Таксономия ошибок meme-launcher

Все ошибки операций наследуются от LaunchError и несут стабильный code.
Любая ошибка терминальна для текущего вызова: состояние (Launch, балансы)
остаётся ровно таким, каким было до вызова.
"""


class LaunchError(Exception):
    """
    Базовая ошибка операций launch.

    Attributes:
        code: Стабильный машинно-читаемый код причины
        message: Человеко-читаемое описание
    """

    code: str = "launch_error"
    default_message: str = "Launch operation failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# =============================================================================
# ОШИБКИ ПРОГРАММЫ
# =============================================================================


class LaunchInactive(LaunchError):
    """Покупка в неактивном launch."""

    code = "launch_inactive"
    default_message = "Launch is not active"


class InvalidPriceCalculation(LaunchError):
    """Переполнение при расчёте цены или цена не помещается в u64."""

    code = "invalid_price_calculation"
    default_message = "Invalid price calculation"


class InvalidSupplyUpdate(LaunchError):
    """Инкремент total_supply выходит за пределы u64."""

    code = "invalid_supply_update"
    default_message = "Invalid supply update"


class InvalidInstruction(LaunchError):
    """Payload инструкции не соответствует контракту."""

    code = "invalid_instruction"
    default_message = "Invalid instruction payload"


# =============================================================================
# ОШИБКИ ХРАНИЛИЩА
# =============================================================================


class LaunchNotFound(LaunchError):
    code = "launch_not_found"
    default_message = "Launch not found"


class LaunchAlreadyExists(LaunchError):
    code = "launch_already_exists"
    default_message = "Launch account already in use"


class StorageConflict(LaunchError):
    """Конкурирующее изменение записи Launch."""

    code = "storage_conflict"
    default_message = "Launch record was modified concurrently"


# =============================================================================
# ОШИБКИ КОЛЛАБОРАТОРОВ
# =============================================================================


class AuthenticationError(LaunchError):
    code = "authentication_failed"
    default_message = "Caller signature verification failed"


class LedgerError(LaunchError):
    """Базовая ошибка ledger (платёжная валюта и выпущенные активы)."""

    code = "ledger_error"
    default_message = "Ledger operation rejected"


class InsufficientFunds(LedgerError):
    code = "insufficient_funds"
    default_message = "Insufficient funds"


class MintAlreadyExists(LedgerError):
    code = "mint_already_exists"
    default_message = "Mint account already in use"


class MintNotFound(LedgerError):
    code = "mint_not_found"
    default_message = "Mint not found"


class UnauthorizedMintAuthority(LedgerError):
    code = "unauthorized_mint_authority"
    default_message = "Mint authority does not match the mint"


class AccountNotFound(LedgerError):
    code = "account_not_found"
    default_message = "Holding account not found"
