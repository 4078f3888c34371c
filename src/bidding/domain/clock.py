"""
Clock — источник текущего времени (UTC)

Bid читает время при создании и при снятии ставки. Вместо неявного
глобального вызова datetime.now() время берётся из Clock, чтобы тесты
могли подставлять детерминированные timestamps.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Protocol


class Clock(Protocol):
    """Capability: текущее время (timezone-aware, UTC)"""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Системные часы (production default)"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass
class FixedClock:
    """
    Ручные часы для тестов и replay.

    Возвращает зафиксированное время; advance() сдвигает его вперёд.
    """

    current: datetime

    def __post_init__(self) -> None:
        if self.current.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self.current = self.current.astimezone(timezone.utc)

    def now(self) -> datetime:
        return self.current

    def advance(self, **delta) -> datetime:
        """
        Сдвиг часов вперёд.

        Args:
            **delta: Аргументы timedelta (seconds=..., milliseconds=..., ...)

        Returns:
            Новое текущее время
        """
        self.current = self.current + timedelta(**delta)
        return self.current


# Глобальный экземпляр системных часов
SYSTEM_CLOCK = SystemClock()
