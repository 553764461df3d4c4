"""Platform — внешние коллабораторы: authentication, ledger, транзакции.

Протоколы описывают контракт хост-платформы; in-memory реализации
используются в тестах и для локального запуска.
"""

from .auth import (
    Authenticator,
    KeyringAuthenticator,
    SignedCall,
    canonical_payload,
    new_identity,
)
from .ledger import (
    AssetLedger,
    HoldingAccount,
    InMemoryLedger,
    MintInfo,
    holding_account_address,
)
from .transaction import TransactionParticipant, TransactionScope

__all__ = [
    "Authenticator",
    "KeyringAuthenticator",
    "SignedCall",
    "canonical_payload",
    "new_identity",
    "AssetLedger",
    "HoldingAccount",
    "InMemoryLedger",
    "MintInfo",
    "holding_account_address",
    "TransactionParticipant",
    "TransactionScope",
]
