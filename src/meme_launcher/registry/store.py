"""
LaunchStore — persistent keyed storage записей Launch

Контракт хранилища:
- create(launch): атомарное создание, слот должен быть свободен
- get(launch_id): чтение записи
- update(launch, expected_supply): compare-and-swap; write-once поля не
  меняются, хранимый total_supply равен expected_supply и не уменьшается

InMemoryLaunchStore хранит записи в сериализованном виде (dict, прошедший
JSON Schema валидацию launch.json) и поддерживает snapshot/restore.
"""

import logging
from typing import Any, Dict, List, Protocol

from meme_launcher.core.contracts import validate_launch_record
from meme_launcher.core.domain.errors import (
    LaunchAlreadyExists,
    LaunchNotFound,
    StorageConflict,
)
from meme_launcher.core.domain.launch import Launch

logger = logging.getLogger(__name__)


class LaunchStore(Protocol):
    def create(self, launch: Launch) -> None: ...

    def get(self, launch_id: str) -> Launch: ...

    def update(self, launch: Launch, expected_supply: int) -> None: ...

    def exists(self, launch_id: str) -> bool: ...

    def snapshot(self) -> Any: ...

    def restore(self, snapshot: Any) -> None: ...


class InMemoryLaunchStore:
    """In-memory хранилище записей Launch."""

    def __init__(self):
        self._records: Dict[str, Dict[str, Any]] = {}

    def create(self, launch: Launch) -> None:
        """
        Создание записи.

        Raises:
            LaunchAlreadyExists: Если слот launch_id занят
        """
        if launch.launch_id in self._records:
            raise LaunchAlreadyExists(f"launch {launch.launch_id} already in use")

        record = launch.model_dump()
        validate_launch_record(record)
        self._records[launch.launch_id] = record
        logger.debug("Created launch record %s", launch.launch_id)

    def get(self, launch_id: str) -> Launch:
        """
        Raises:
            LaunchNotFound: Если записи нет
        """
        record = self._records.get(launch_id)
        if record is None:
            raise LaunchNotFound(f"launch {launch_id} not found")
        return Launch.model_validate(record)

    def update(self, launch: Launch, expected_supply: int) -> None:
        """
        Замена записи преемником (compare-and-swap по total_supply).

        Args:
            launch: Запись-преемник
            expected_supply: total_supply записи, из которой построен преемник

        Raises:
            LaunchNotFound: Если записи нет
            StorageConflict: Если меняется write-once поле, supply уменьшается
                или хранимый total_supply не равен expected_supply
        """
        current = self.get(launch.launch_id)

        if not current.same_identity(launch):
            raise StorageConflict(f"immutable fields of launch {launch.launch_id} changed")

        if current.total_supply != expected_supply:
            raise StorageConflict(
                f"launch {launch.launch_id} changed concurrently "
                f"(expected total_supply {expected_supply}, found {current.total_supply})"
            )

        if launch.total_supply < current.total_supply:
            raise StorageConflict(
                f"total_supply of launch {launch.launch_id} would decrease "
                f"({current.total_supply} -> {launch.total_supply})"
            )

        record = launch.model_dump()
        validate_launch_record(record)
        self._records[launch.launch_id] = record

    def exists(self, launch_id: str) -> bool:
        return launch_id in self._records

    def list_launches(self) -> List[Launch]:
        return [Launch.model_validate(r) for r in self._records.values()]

    def snapshot(self) -> Any:
        return {k: dict(v) for k, v in self._records.items()}

    def restore(self, snapshot: Any) -> None:
        self._records = {k: dict(v) for k, v in snapshot.items()}
        logger.debug("Launch store restored from snapshot")
