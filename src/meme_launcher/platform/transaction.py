"""
TransactionScope — all-or-nothing исполнение операции

Участники (хранилище Launch, ledger) реализуют snapshot()/restore().
При входе в scope снимаются снапшоты всех участников; если тело scope
завершается исключением, каждый участник восстанавливается из снапшота,
а исходное исключение пробрасывается без изменений.

Scope удерживает process-wide RLock: конфликтующие изменения одного
Launch исполняются строго последовательно (single-writer).
"""

import logging
import threading
from typing import Any, List, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class TransactionParticipant(Protocol):
    """Участник транзакции: умеет снять и восстановить своё состояние."""

    def snapshot(self) -> Any: ...

    def restore(self, snapshot: Any) -> None: ...


class TransactionScope:
    """
    Контекст атомарного исполнения.

    Usage:
        with TransactionScope(store, ledger):
            ...  # любое исключение откатывает store и ledger
    """

    # Общий lock для всех scope процесса (сериализация записей)
    _lock = threading.RLock()

    def __init__(self, *participants: TransactionParticipant):
        self._participants = participants
        self._snapshots: Optional[List[Any]] = None

    def __enter__(self) -> "TransactionScope":
        self._lock.acquire()
        try:
            self._snapshots = [p.snapshot() for p in self._participants]
        except BaseException:
            self._lock.release()
            raise
        logger.debug("Transaction opened with %d participants", len(self._participants))
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc_type is not None and self._snapshots is not None:
                # Откат в обратном порядке регистрации
                for participant, snapshot in reversed(
                    list(zip(self._participants, self._snapshots))
                ):
                    participant.restore(snapshot)
                logger.warning("Transaction rolled back after %s: %s", exc_type.__name__, exc)
            else:
                logger.debug("Transaction committed")
        finally:
            self._snapshots = None
            self._lock.release()
        return False
