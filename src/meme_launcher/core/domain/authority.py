"""
MintAuthority — Capability на выпуск актива, привязанная к одному Launch

Capability не хранится как секрет: её адрес детерминированно выводится из
идентификатора Launch (seed "mint_authority" + launch_id + bump). Получить
её можно только через derive_mint_authority(launch), то есть имея ссылку
на сам Launch.
"""

import hashlib
from dataclasses import dataclass
from typing import Final

from meme_launcher.core.domain.launch import Launch

# Seed-префикс для вывода адреса authority
MINT_AUTHORITY_SEED: Final[bytes] = b"mint_authority"

# Начальный bump (перебор идёт вниз, как у program-derived адресов)
MAX_BUMP: Final[int] = 255


@dataclass(frozen=True)
class MintAuthority:
    """Capability на mint_to для актива одного Launch."""

    launch_id: str
    address: str
    bump: int

    def authorizes(self, launch_id: str) -> bool:
        return self.launch_id == launch_id


def _derive_address(launch_id: str, bump: int) -> str:
    digest = hashlib.sha256(
        MINT_AUTHORITY_SEED + launch_id.encode("utf-8") + bytes([bump])
    ).hexdigest()
    return digest


def _is_valid_address(address: str) -> bool:
    # Аналог off-curve проверки: адреса с нулевым последним байтом отбрасываются
    return not address.endswith("00")


def derive_mint_authority(launch: Launch) -> MintAuthority:
    """
    Вывод capability для Launch.

    Перебирает bump от MAX_BUMP вниз до первого допустимого адреса.
    Результат детерминирован: одинаковый launch_id → одинаковая authority.

    Args:
        launch: Запись Launch

    Returns:
        MintAuthority, привязанная к launch.launch_id

    Raises:
        RuntimeError: Если ни один bump не дал допустимого адреса
    """
    for bump in range(MAX_BUMP, -1, -1):
        address = _derive_address(launch.launch_id, bump)
        if _is_valid_address(address):
            return MintAuthority(launch_id=launch.launch_id, address=address, bump=bump)

    raise RuntimeError(f"Unable to derive mint authority for launch {launch.launch_id}")
