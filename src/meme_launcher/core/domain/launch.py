"""
Launch — Модель записи token sale

Immutable Pydantic модель, представляющая одну продажу токена по bonding curve.
Любое изменение (покупка) создаёт новый экземпляр через with_purchase();
хранилище заменяет запись целиком.

ИНВАРИАНТЫ:
1. total_supply >= initial_supply
2. total_supply растёт только на amount успешной покупки
3. Все остальные поля write-once (задаются при создании)
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

from meme_launcher.core.domain.errors import InvalidSupplyUpdate
from meme_launcher.core.math.integer_safeguards import U64_MAX, checked_add

# Максимальная длина метаданных в байтах UTF-8 (фиксированное место записи)
NAME_MAX_BYTES: Final[int] = 32
SYMBOL_MAX_BYTES: Final[int] = 8

# Поля, которые никогда не меняются после создания
IMMUTABLE_FIELDS: Final[tuple[str, ...]] = (
    "launch_id",
    "creator",
    "mint",
    "name",
    "symbol",
    "initial_supply",
    "curve_ratio",
    "is_active",
)


# =============================================================================
# ENUMS
# =============================================================================


class LaunchState(str, Enum):
    """
    Состояние launch.

    Достижимо только ACTIVE: операции деактивации нет.
    INACTIVE существует для записей, засеянных извне.
    """

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


# =============================================================================
# LAUNCH MODEL
# =============================================================================


class Launch(BaseModel):
    """
    Запись одной продажи токена.

    Immutable модель (frozen=True). total_supply является единственным
    авторитетным входом для ценообразования; он никогда не пересчитывается
    из ledger, поэтому внешние переводы актива на цену не влияют.
    """

    # Идентификация
    launch_id: str = Field(..., min_length=1, description="Идентификатор записи Launch")
    creator: str = Field(..., min_length=1, description="Создатель launch (получатель оплаты)")
    mint: str = Field(..., min_length=1, description="Идентификатор выпускаемого актива")

    # Метаданные
    name: str = Field(..., min_length=1, description="Имя токена")
    symbol: str = Field(..., min_length=1, description="Тикер токена")

    # Supply и кривая
    initial_supply: int = Field(..., ge=0, le=U64_MAX, description="Начальный выпуск создателю")
    total_supply: int = Field(..., ge=0, le=U64_MAX, description="Текущий circulating supply")
    curve_ratio: int = Field(..., ge=0, le=U64_MAX, description="Коэффициент линейной кривой")

    is_active: bool = Field(default=True, description="Флаг активности (write-once true)")

    model_config = {"frozen": True, "strict": True}

    @field_validator("name")
    @classmethod
    def validate_name_bytes(cls, v: str) -> str:
        if len(v.encode("utf-8")) > NAME_MAX_BYTES:
            raise ValueError(f"name exceeds {NAME_MAX_BYTES} bytes")
        return v

    @field_validator("symbol")
    @classmethod
    def validate_symbol_bytes(cls, v: str) -> str:
        if len(v.encode("utf-8")) > SYMBOL_MAX_BYTES:
            raise ValueError(f"symbol exceeds {SYMBOL_MAX_BYTES} bytes")
        return v

    @model_validator(mode="after")
    def validate_supply_floor(self) -> "Launch":
        """total_supply никогда не опускается ниже initial_supply."""
        if self.total_supply < self.initial_supply:
            raise ValueError(
                f"total_supply {self.total_supply} below initial_supply {self.initial_supply}"
            )
        return self

    @property
    def state(self) -> LaunchState:
        return LaunchState.ACTIVE if self.is_active else LaunchState.INACTIVE

    @property
    def sold_supply(self) -> int:
        """Количество единиц, проданных через buy_tokens."""
        return self.total_supply - self.initial_supply

    def with_purchase(self, amount: int) -> "Launch":
        """
        Запись-преемник после успешной покупки.

        Args:
            amount: Купленное количество (u64)

        Returns:
            Новый Launch с total_supply + amount

        Raises:
            ValueError: Если amount отрицательный или не int
            InvalidSupplyUpdate: Если новый total_supply не помещается в u64
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise ValueError(f"amount must be a non-negative integer, got {amount!r}")

        if amount > U64_MAX:
            raise InvalidSupplyUpdate(f"amount {amount} exceeds u64 range")

        new_total = checked_add(self.total_supply, amount)
        if new_total is None:
            raise InvalidSupplyUpdate(
                f"total_supply {self.total_supply} + {amount} overflows u64"
            )

        return self.model_copy(update={"total_supply": new_total})

    def same_identity(self, other: "Launch") -> bool:
        """Совпадают ли все write-once поля двух записей."""
        return all(getattr(self, f) == getattr(other, f) for f in IMMUTABLE_FIELDS)
