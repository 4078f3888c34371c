"""
Bid — Модель ставки в аукционе

Pydantic модель ставки и правила её ранжирования относительно других ставок.

Ставка неизменяема, кроме единственного перехода ACTIVE → REMOVED (remove()).
Ранжирование зависит только от amount, made_at и активности ставки;
идентификаторы (id, auction_id, bidder_id) в сравнении не участвуют.

Сравнение вынесено в явные методы is_lower_bid_than / is_equivalent_bid_to /
is_higher_bid_than, а не в операторы < / == : "та же ставка" (identity)
и "эквивалентная по рангу ставка" это разные понятия.
"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import AwareDatetime, BaseModel, Field, field_validator

from .clock import SYSTEM_CLOCK, Clock

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class BidStatus(str, Enum):
    """Статус ставки. REMOVED является терминальным состоянием"""

    ACTIVE = "ACTIVE"
    REMOVED = "REMOVED"


# =============================================================================
# BID MODEL
# =============================================================================


class Bid(BaseModel):
    """
    Модель ставки.

    Все поля заморожены (Field(frozen=True)): присваивание вызывает
    ValidationError. removed_at выставляется только через remove(), поэтому
    снятую ставку нельзя вернуть в ACTIVE.

    Правило ранжирования:
    - обе активны или обе сняты → сравниваются amount, затем made_at
      (при равной сумме выигрывает более ранняя ставка);
    - ровно одна активна → активная всегда выше, независимо от суммы и времени.
    """

    # Идентификация
    auction_id: str = Field(..., frozen=True, description="Аукцион, к которому относится ставка")
    bidder_id: str = Field(..., frozen=True, description="Участник, сделавший ставку")
    id: int = Field(..., frozen=True, description="Идентификатор ставки внутри аукциона")

    # Предложение
    amount: int = Field(
        ..., frozen=True, description="Сумма в минимальных единицах валюты аукциона"
    )

    # Время
    made_at: AwareDatetime = Field(..., frozen=True, description="Время ставки (UTC)")
    removed_at: Optional[AwareDatetime] = Field(
        None, frozen=True, description="Время снятия ставки (UTC); None, пока ставка активна"
    )

    model_config = {"validate_assignment": True, "extra": "forbid"}

    @field_validator("made_at", "removed_at")
    @classmethod
    def normalize_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Приведение timestamps к UTC"""
        if v is None:
            return v
        return v.astimezone(timezone.utc)

    @classmethod
    def new(
        cls,
        auction_id: str,
        bidder_id: str,
        id: int,
        amount: int,
        clock: Optional[Clock] = None,
    ) -> "Bid":
        """
        Создание новой активной ставки.

        Сумма не валидируется: минимальный шаг, знак и т.п. проверяет аукцион
        до вызова.

        Args:
            auction_id: Идентификатор аукциона
            bidder_id: Идентификатор участника
            id: Идентификатор ставки
            amount: Сумма ставки
            clock: Источник времени (по умолчанию системные часы)

        Returns:
            Bid с made_at = clock.now() и removed_at = None
        """
        clock = clock or SYSTEM_CLOCK
        return cls(
            auction_id=auction_id,
            bidder_id=bidder_id,
            id=id,
            amount=amount,
            made_at=clock.now(),
            removed_at=None,
        )

    @property
    def status(self) -> BidStatus:
        return BidStatus.ACTIVE if self.is_active() else BidStatus.REMOVED

    def is_active(self) -> bool:
        """True если ставка не снята"""
        return self.removed_at is None

    def remove(self, clock: Optional[Clock] = None) -> None:
        """
        Снятие ставки (soft delete): removed_at = clock.now().

        Повторный вызов перезаписывает removed_at новым временем. Это
        поведение сохранено; повторное снятие логируется как WARNING,
        так как исходное время снятия при этом теряется.

        Args:
            clock: Источник времени (по умолчанию системные часы)
        """
        clock = clock or SYSTEM_CLOCK
        previous = self.removed_at
        removed_at = clock.now().astimezone(timezone.utc)

        # removed_at заморожен для внешнего присваивания
        object.__setattr__(self, "removed_at", removed_at)
        self.__pydantic_fields_set__.add("removed_at")

        if previous is not None:
            logger.warning(
                "Bid %s (auction=%s, bidder=%s) removed twice: removed_at %s overwritten by %s",
                self.id,
                self.auction_id,
                self.bidder_id,
                previous.isoformat(),
                self.removed_at.isoformat(),
            )
        else:
            logger.debug(
                "Bid %s (auction=%s, bidder=%s) removed at %s",
                self.id,
                self.auction_id,
                self.bidder_id,
                self.removed_at.isoformat(),
            )

    # -------------------------------------------------------------------------
    # Ranking predicates
    # -------------------------------------------------------------------------

    def _shares_activity_with(self, other: "Bid") -> bool:
        """Обе ставки активны или обе сняты"""
        return self.is_active() == other.is_active()

    def is_lower_bid_than(self, other: "Bid") -> bool:
        """
        Проверка, что ставка ниже other.

        Внутри одного класса (обе активны / обе сняты): меньшая сумма ниже;
        при равной сумме ниже более поздняя ставка.
        При разной активности: снятая ставка всегда ниже активной.

        Args:
            other: Ставка для сравнения

        Returns:
            True если self ранжируется ниже other
        """
        if self._shares_activity_with(other):
            is_lower_amount = self.amount < other.amount
            is_later_bid = self.amount == other.amount and other.made_at < self.made_at
            return is_lower_amount or is_later_bid

        return not self.is_active()

    def is_equivalent_bid_to(self, other: "Bid") -> bool:
        """
        Проверка эквивалентности по рангу.

        Равные amount и точно равные made_at, только внутри одного класса
        активности. Активная и снятая ставки никогда не эквивалентны.

        Args:
            other: Ставка для сравнения

        Returns:
            True если ставки эквивалентны по рангу
        """
        if self._shares_activity_with(other):
            return self.amount == other.amount and self.made_at == other.made_at

        return False

    def is_higher_bid_than(self, other: "Bid") -> bool:
        """
        Проверка, что ставка выше other.

        Выводится из двух других предикатов, поэтому для любой пары ровно
        один из трёх предикатов истинен.
        """
        return not self.is_lower_bid_than(other) and not self.is_equivalent_bid_to(other)
